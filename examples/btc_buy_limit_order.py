#!/usr/bin/env python3
"""
Example: Place a BTC limit buy order below the current best bid.

Prerequisites:
- Set MB_TAPI_ID and MB_TAPI_SECRET environment variables (or a .env file)

Usage:
    python examples/btc_buy_limit_order.py 0.001
"""

import asyncio
import logging
import sys

from mercado_client import ApiError, ApiStatus, MercadoClient

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

DISCOUNT = 0.02  # 2% below best bid


async def main(quantity: float):
    async with MercadoClient.from_env() as client:
        ticker = await client.ticker("BTC")
        price = ticker.buy * (1 - DISCOUNT)
        logger.info(f"Best bid {ticker.buy:,.2f}, placing buy of {quantity} BTC at {price:,.2f}")

        try:
            order = await client.place_buy_order(quantity, price, "BRLBTC")
        except ApiError as e:
            if e.status is ApiStatus.INSUFFICIENT_BRL_BALANCE:
                logger.error("Not enough BRL to place this order")
                return
            raise

    logger.info(
        f"Order {order.order_id} {order.status.name}: "
        f"{order.executed_quantity:.8f}/{order.quantity:.8f} filled, fee {order.fee:.8f}"
    )


if __name__ == "__main__":
    asyncio.run(main(float(sys.argv[1]) if len(sys.argv) > 1 else 0.001))
