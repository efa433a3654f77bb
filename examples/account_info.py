#!/usr/bin/env python3
"""
Example: Fetch and display account balances and withdrawal limits.

Prerequisites:
- Set MB_TAPI_ID and MB_TAPI_SECRET environment variables (or a .env file)
- Install mercado-client in development mode: pip install -e .

Usage:
    python examples/account_info.py
"""

import asyncio
import logging
from dataclasses import fields

from dotenv import load_dotenv

from mercado_client import ApiError, MercadoPrivateClient

load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


async def main():
    async with MercadoPrivateClient.from_env() as client:
        try:
            info = await client.get_account_info()
        except ApiError as e:
            logger.error(f"Account info request rejected: {e}")
            return

    print("\nBalances")
    for field in fields(info.balance):
        balance = getattr(info.balance, field.name)
        if balance.total:
            print(f"  {field.name.upper():>9}: {balance.available:>18,.8f} available / {balance.total:,.8f} total")

    print("\nWithdrawal limits")
    for field in fields(info.withdrawal_limits):
        limit = getattr(info.withdrawal_limits, field.name)
        print(f"  {field.name.upper():>9}: {limit.available:>18,.8f} of {limit.total:,.8f}")


if __name__ == "__main__":
    asyncio.run(main())
