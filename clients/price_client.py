"""
clients/price_client.py
-----------------------
Data access for the CoinGecko simple price endpoint.
"""

from typing import Any

from clients.http_client import ApiClient
from utils.errors import SchemaError


def parse_price_map(payload: Any) -> dict[str, dict[str, float]]:
    """
    Validate a `/simple/price` body: coin id -> {currency: value}.

    Raises:
        SchemaError: If the body is not a mapping of mappings of numbers.
    """
    if not isinstance(payload, dict):
        raise SchemaError(f"expected an object, got {type(payload).__name__}")

    prices: dict[str, dict[str, float]] = {}
    for coin_id, quotes in payload.items():
        if not isinstance(quotes, dict):
            raise SchemaError(f"quotes for '{coin_id}' must be an object")
        parsed = {}
        for currency, value in quotes.items():
            # bool is an int subclass
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise SchemaError(f"quote {coin_id}/{currency} is not a number")
            parsed[currency] = float(value)
        prices[coin_id] = parsed
    return prices


class PriceClient:
    """Endpoints of the CoinGecko v3 API used by the bot."""

    def __init__(self, api_client: ApiClient, base_url: str = "https://api.coingecko.com/api/v3"):
        self.api_client = api_client
        self.base_url = base_url.rstrip("/")

    async def simple_price(self, coin_id: str, vs_currency: str) -> dict[str, dict[str, float]]:
        """
        Fetch the price of one coin in one currency.

        Returns:
            The decoded mapping, e.g. ``{"tether-eurt": {"usd": 1.07}}``.
            The coin key is missing when CoinGecko has no quote for it.
        """
        payload = await self.api_client.get_json(
            f"{self.base_url}/simple/price",
            params={"ids": coin_id, "vs_currencies": vs_currency},
        )
        return parse_price_map(payload)
