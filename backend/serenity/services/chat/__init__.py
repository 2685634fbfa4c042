"""
Chat services package initialization.
"""

from serenity.services.chat.assembler import ConversationAssembler
from serenity.services.chat.conversation import send_message
from serenity.services.chat.session_store import (
    append_turn,
    create_session,
    delete_session,
    list_sessions,
    load_session,
)

__all__ = [
    "ConversationAssembler",
    "append_turn",
    "create_session",
    "delete_session",
    "list_sessions",
    "load_session",
    "send_message",
]
