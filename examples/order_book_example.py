"""
Order Book Example

This example demonstrates:
- Fetching the ticker and yesterday's summary from the public API
- Fetching the authenticated order book and highlighting own orders

Public data needs no keys; the order book needs MB_TAPI_ID and MB_TAPI_SECRET.
"""

import asyncio
import sys
from datetime import date, timedelta
from pathlib import Path

# Add parent directory to path to import mercado_client
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mercado_client import MercadoClient, MercadoPublicClient


async def display_market(currency: str):
    async with MercadoPublicClient() as client:
        ticker = await client.ticker(currency)
        summary = await client.day_summary(currency, date.today() - timedelta(days=1))

    print(f"\n📈 {currency} ticker at {ticker.date:%Y-%m-%d %H:%M:%S}")
    print(f"   Last: {ticker.last:,.2f}  Buy: {ticker.buy:,.2f}  Sell: {ticker.sell:,.2f}")
    print(f"   Spread: {ticker.sell - ticker.buy:,.2f}")
    print(f"\n📅 {summary.date}: open {summary.opening:,.2f} close {summary.closing:,.2f} "
          f"({summary.amount} trades)")


async def display_order_book(coin_pair: str):
    async with MercadoClient.from_env() as client:
        orderbook = await client.orderbook(coin_pair, full=False)

    print(f"\n📊 Order book for {coin_pair}")
    for label, side in (("Asks", orderbook.asks[:5]), ("Bids", orderbook.bids[:5])):
        print(f"   {label}:")
        for order in side:
            marker = " *" if order.is_owner else ""
            print(f"     {order.limit_price:>14,.5f} x {order.quantity:>12,.8f}{marker}")


async def main():
    await display_market("BTC")
    await display_order_book("BRLBTC")


if __name__ == "__main__":
    asyncio.run(main())
