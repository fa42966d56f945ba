"""
models/price.py
---------------
Domain model for a single currency quote from the price feed.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PriceQuote:
    """
    A quote for one asset pair.

    Attributes:
        amount: Quoted value (0.0 when absent).
        present: False when the requested key was missing from the feed.
    """
    amount: float
    present: bool = True

    @classmethod
    def absent(cls) -> "PriceQuote":
        """The "no quote" value."""
        return cls(amount=0.0, present=False)
