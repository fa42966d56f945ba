"""
handlers/dispatcher.py
----------------------
Runs a parsed Command and sends the result back to the chat.

Every command follows the same pipeline: fetch → branch on status → send → log.
Failures are logged here and never propagate to python-telegram-bot.
"""

import logging
from typing import Awaitable, Callable, Optional

from telegram import Bot
from telegram.constants import MessageLimit
from telegram.error import TelegramError

from models.command import (
    Command,
    ListCatalog,
    ShowImageForBreed,
    ShowPrice,
    ShowRandomImage,
)
from services.dog_service import DogService, format_catalog
from services.price_service import PriceService, format_price
from utils.logger import get_logger
from utils.errors import ApiError, UpstreamFailure


def split_message(text: str, limit: int = MessageLimit.MAX_TEXT_LENGTH) -> list[str]:
    """Split text on line boundaries into chunks no longer than `limit`."""
    chunks: list[str] = []
    current = ""
    for line in text.splitlines():
        while len(line) > limit:
            if current:
                chunks.append(current)
                current = ""
            chunks.append(line[:limit])
            line = line[limit:]
        candidate = f"{current}\n{line}" if current else line
        if len(candidate) > limit:
            chunks.append(current)
            current = line
        else:
            current = candidate
    if current:
        chunks.append(current)
    return chunks


class ResponseDispatcher:
    """Exhaustive Command → action table."""

    def __init__(
        self,
        dog_service: DogService,
        price_service: PriceService,
        logger: Optional[logging.Logger] = None,
    ):
        self.dog_service = dog_service
        self.price_service = price_service
        self.logger = logger or get_logger(__name__)
        self._routes: dict[type, Callable[[Bot, int, Command], Awaitable[None]]] = {
            ShowRandomImage: self._random_image,
            ShowImageForBreed: self._breed_image,
            ListCatalog: self._catalog,
            ShowPrice: self._price,
        }

    async def dispatch(self, bot: Bot, chat_id: int, command: Command) -> None:
        """Run `command` for `chat_id`. Never raises for fetch or send failures."""
        action = self._routes[type(command)]
        await action(bot, chat_id, command)

    # ── Actions ───────────────────────────────────────────

    async def _random_image(self, bot: Bot, chat_id: int, command: ShowRandomImage) -> None:
        self.logger.info("Fetching a random dog...")
        try:
            dog = await self.dog_service.random_image()
        except ApiError as e:
            self.logger.error(f"Could not find a dog: {e}")
            return
        await self._send_photo(bot, chat_id, dog.message)

    async def _breed_image(self, bot: Bot, chat_id: int, command: ShowImageForBreed) -> None:
        self.logger.info(f"Fetching a random dog of breed {command.breed}...")
        try:
            dog = await self.dog_service.image_for_breed(command.breed)
        except UpstreamFailure as e:
            self.logger.error(f"Could not find a dog of breed '{command.breed}': {e}")
            await self._send_text(bot, chat_id, f"Breed '{command.breed}' doesn't exist")
            return
        except ApiError as e:
            self.logger.error(f"Could not find a dog of breed '{command.breed}': {e}")
            return
        await self._send_photo(bot, chat_id, dog.message)

    async def _catalog(self, bot: Bot, chat_id: int, command: ListCatalog) -> None:
        self.logger.info("Fetching the list of breeds...")
        try:
            catalog = await self.dog_service.list_breeds()
        except ApiError as e:
            self.logger.error(f"Could not get the list of breeds: {e}")
            return
        for chunk in split_message(format_catalog(catalog)):
            if not await self._send_text(bot, chat_id, chunk):
                break

    async def _price(self, bot: Bot, chat_id: int, command: ShowPrice) -> None:
        self.logger.info("Fetching the value of Euro...")
        try:
            quote = await self.price_service.euro_quote()
        except ApiError as e:
            self.logger.error(f"Could not fetch the value of Euro -> {e}")
            return
        if not quote.present:
            self.logger.error(f"Could not fetch the value of Euro -> no '{self.price_service.coin_id}' quote")
            return
        await self._send_text(bot, chat_id, format_price(quote))

    # ── Sending ───────────────────────────────────────────

    async def _send_photo(self, bot: Bot, chat_id: int, url: str) -> bool:
        try:
            await bot.send_photo(chat_id=chat_id, photo=url)
        except TelegramError as e:
            self.logger.error(f"Error while sending photo to chat {chat_id}: {e!r}")
            return False
        self.logger.info(f"Photo sent to chat {chat_id}")
        return True

    async def _send_text(self, bot: Bot, chat_id: int, text: str) -> bool:
        try:
            await bot.send_message(chat_id=chat_id, text=text)
        except TelegramError as e:
            self.logger.error(f"Error while sending message to chat {chat_id}: {e!r}")
            return False
        self.logger.info(f"Message sent to chat {chat_id}")
        return True
