"""
services/price_service.py
-------------------------
Business logic for the currency quote shown by /euro.
"""

import logging
from typing import Optional

from clients.price_client import PriceClient
from models.price import PriceQuote
from utils.logger import get_logger


def extract_price(prices: dict[str, dict[str, float]], key: str, currency: str = "usd") -> PriceQuote:
    """
    Look up one quote in a price map.

    Returns:
        The quote, or ``PriceQuote.absent()`` when the key (or the currency
        under it) is missing. Never raises for a missing key.
    """
    quotes = prices.get(key)
    if quotes is None or currency not in quotes:
        return PriceQuote.absent()
    return PriceQuote(amount=quotes[currency])


def format_price(quote: PriceQuote) -> str:
    """Render a quote as '$<value>' with no fixed precision."""
    return f"${quote.amount}"


class PriceService:
    """Fetches the configured coin/currency pair from the price feed."""

    def __init__(
        self,
        client: PriceClient,
        coin_id: str = "tether-eurt",
        vs_currency: str = "usd",
        logger: Optional[logging.Logger] = None,
    ):
        self.client = client
        self.coin_id = coin_id
        self.vs_currency = vs_currency
        self.logger = logger or get_logger(__name__)

    async def euro_quote(self) -> PriceQuote:
        """
        Get the current EUR quote.

        Raises:
            ApiError: On transport or schema failure.
        """
        prices = await self.client.simple_price(self.coin_id, self.vs_currency)
        quote = extract_price(prices, self.coin_id, self.vs_currency)
        if not quote.present:
            self.logger.debug(f"No '{self.coin_id}' quote in {sorted(prices)}")
        return quote
