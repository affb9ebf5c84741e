"""NiceGUI interface - thin visualization layer for chat interactions.

Responsibilities:
    - Conversation state and the per-turn streaming loop (conversation.py)
    - Chat message display that grows as reply chunks arrive (chat_page.py)

The page holds no business logic of its own; it renders a ChatSession and
forwards input to it.
"""
