"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


# ── Telegram ──────────────────────────────────────────────
TELEGRAM_BOT_TOKEN: str = os.getenv("TELEGRAM_BOT_TOKEN", "")
SEND_TIMEOUT_SECONDS: float = float(os.getenv("SEND_TIMEOUT_SECONDS", "20"))

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

# ── Upstream APIs ─────────────────────────────────────────
HTTP_TIMEOUT_SECONDS: float = float(os.getenv("HTTP_TIMEOUT_SECONDS", "10"))
DOG_API_BASE_URL: str = os.getenv("DOG_API_BASE_URL", "https://dog.ceo/api").rstrip("/")
COINGECKO_API_BASE_URL: str = os.getenv(
    "COINGECKO_API_BASE_URL", "https://api.coingecko.com/api/v3"
).rstrip("/")

# ── Price feed ────────────────────────────────────────────
PRICE_COIN_ID: str = os.getenv("PRICE_COIN_ID", "tether-eurt")
PRICE_VS_CURRENCY: str = os.getenv("PRICE_VS_CURRENCY", "usd")
