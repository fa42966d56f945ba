"""
handlers/command_handler.py
---------------------------
Routes /doggo, /breed, /breeds and /euro.
Parses the command into a Command variant and hands it to the
ResponseDispatcher stored in `bot_data`.
"""

from telegram import Update
from telegram.ext import ContextTypes

from models.command import COMMAND_TYPES, Command, ShowImageForBreed
from utils.logger import get_logger

logger = get_logger(__name__)

COMMAND_NAMES: list[str] = [command_type.name for command_type in COMMAND_TYPES]
_BY_NAME = {command_type.name: command_type for command_type in COMMAND_TYPES}


class UnknownCommand(ValueError):
    """The command name is not one the bot handles."""


class MissingArgument(ValueError):
    """The command needs an argument that was not supplied."""


def parse_command(name: str, args: list[str]) -> Command:
    """
    Map a command name and its arguments to exactly one Command variant.

    Args:
        name: Command token, with or without the leading '/' and '@botname'.
        args: Whitespace-separated words after the command.

    Raises:
        UnknownCommand: If the name is not a bot command.
        MissingArgument: If /breed is sent without a breed.
    """
    key = name.lstrip("/").split("@", 1)[0].lower()
    command_type = _BY_NAME.get(key)
    if command_type is None:
        raise UnknownCommand(key)

    if command_type is ShowImageForBreed:
        breed = " ".join(args)
        if not breed:
            raise MissingArgument(key)
        return ShowImageForBreed(breed=breed)
    return command_type()


async def handle_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle any of the four bot commands."""
    message = update.effective_message
    if message is None or not message.text:
        return

    token = message.text.split(maxsplit=1)[0]
    try:
        command = parse_command(token, context.args or [])
    except MissingArgument:
        await message.reply_text("⚠️ Usage: /breed <breed name>\nExample: /breed Blue Heeler")
        return
    except UnknownCommand as e:
        logger.warning(f"Ignoring unknown command '{e}'")
        return

    logger.info(f"Chat {message.chat_id} sent {command!r}")
    dispatcher = context.bot_data["dispatcher"]
    await dispatcher.dispatch(context.bot, message.chat_id, command)
