"""
handlers/ - Presentation Layer
================================
Telegram bot handlers. Each handler parses an update, hands the work to
the ResponseDispatcher, and the dispatcher sends the reply back to the chat.
No business logic lives here.
"""
