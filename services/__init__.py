"""
services/ - Business Logic Layer
================================
Transforms user input into upstream requests and upstream data into
chat-ready values. No Telegram code lives here.
"""
