from serenity.db.models.user import User
from serenity.db.models.chat_session import ChatSession
from serenity.db.models.post import Post

__all__ = [
    "User",
    "ChatSession",
    "Post",
]
