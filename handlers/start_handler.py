"""
handlers/start_handler.py
--------------------------
Handles /start and /help commands.
Shows the commands the bot supports.
"""

from telegram import Update
from telegram.ext import ContextTypes

from models.command import COMMAND_TYPES
from utils.logger import get_logger

logger = get_logger(__name__)


def build_help_text() -> str:
    """One line per command, in menu order."""
    lines = ["These commands are supported:"]
    for command_type in COMMAND_TYPES:
        lines.append(f"/{command_type.name} - {command_type.description}")
    return "\n".join(lines)


HELP_TEXT = build_help_text()


async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /start and /help - list all available commands."""
    user = update.effective_user
    if user:
        logger.info(f"User {user.id} ({user.first_name}) asked for help.")
    await update.effective_message.reply_text(HELP_TEXT)
