"""
Community services package initialization.
"""

from serenity.services.community.posts import (
    add_comment,
    create_post,
    get_post,
    like_post,
    list_posts,
    to_response,
)

__all__ = [
    "add_comment",
    "create_post",
    "get_post",
    "like_post",
    "list_posts",
    "to_response",
]
