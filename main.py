"""
main.py
-------
Entry point for the Doggo Telegram bot.

Responsibilities:
    - Configure logging.
    - Build the shared HTTP client, services and dispatcher on startup.
    - Configure and start the Telegram bot with all handlers.
    - Close the HTTP client on shutdown.
"""

import sys

from telegram import BotCommand
from telegram.ext import Application, CommandHandler

from config import (
    COINGECKO_API_BASE_URL,
    DOG_API_BASE_URL,
    HTTP_TIMEOUT_SECONDS,
    LOG_LEVEL,
    PRICE_COIN_ID,
    PRICE_VS_CURRENCY,
    SEND_TIMEOUT_SECONDS,
    TELEGRAM_BOT_TOKEN,
)
from clients.dog_client import DogApiClient
from clients.http_client import ApiClient
from clients.price_client import PriceClient
from handlers.command_handler import COMMAND_NAMES, handle_command
from handlers.dispatcher import ResponseDispatcher
from handlers.start_handler import help_command
from models.command import COMMAND_TYPES
from services.dog_service import DogService
from services.price_service import PriceService
from utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


def build_dispatcher(api_client: ApiClient) -> ResponseDispatcher:
    """Wire clients, services and the dispatcher around one HTTP client."""
    dog_service = DogService(
        DogApiClient(api_client, DOG_API_BASE_URL),
        logger=get_logger("services.dog_service"),
    )
    price_service = PriceService(
        PriceClient(api_client, COINGECKO_API_BASE_URL),
        coin_id=PRICE_COIN_ID,
        vs_currency=PRICE_VS_CURRENCY,
        logger=get_logger("services.price_service"),
    )
    return ResponseDispatcher(
        dog_service,
        price_service,
        logger=get_logger("handlers.dispatcher"),
    )


async def on_startup(application: Application) -> None:
    """Create the HTTP client and register the bot commands menu."""
    api_client = ApiClient(HTTP_TIMEOUT_SECONDS, logger=get_logger("clients.http_client"))
    application.bot_data["api_client"] = api_client
    application.bot_data["dispatcher"] = build_dispatcher(api_client)
    logger.info("HTTP client and dispatcher initialized.")

    commands = [BotCommand("help", "Show the supported commands")]
    commands += [BotCommand(c.name, c.description) for c in COMMAND_TYPES]
    await application.bot.set_my_commands(commands)
    logger.info("Bot commands menu registered successfully.")


async def on_shutdown(application: Application) -> None:
    """Close the HTTP client."""
    api_client = application.bot_data.pop("api_client", None)
    if api_client is not None:
        await api_client.aclose()


def main() -> None:
    """Initialize and run the bot."""
    setup_logging(LOG_LEVEL)

    if not TELEGRAM_BOT_TOKEN:
        logger.error("TELEGRAM_BOT_TOKEN is not set. Add it to the environment or .env file.")
        sys.exit(1)

    # ── 1. Build the Telegram application ─────────────────
    logger.info("Starting the bot...")
    app = (
        Application.builder()
        .token(TELEGRAM_BOT_TOKEN)
        .concurrent_updates(True)
        .connect_timeout(SEND_TIMEOUT_SECONDS)
        .read_timeout(SEND_TIMEOUT_SECONDS)
        .write_timeout(SEND_TIMEOUT_SECONDS)
        .post_init(on_startup)
        .post_shutdown(on_shutdown)
        .build()
    )

    # ── 2. Register command handlers ──────────────────────
    app.add_handler(CommandHandler(["start", "help"], help_command))
    app.add_handler(CommandHandler(COMMAND_NAMES, handle_command))

    # ── 3. Start polling ──────────────────────────────────
    logger.info("🐶 Doggo bot is running! Press Ctrl+C to stop.")
    app.run_polling(drop_pending_updates=True, allowed_updates=["message"])
    logger.info("Doggo bot stopped.")


if __name__ == "__main__":
    main()
