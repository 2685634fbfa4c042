"""
Tests for database models.

This module tests the functionality of SQLAlchemy models.
"""

from sqlalchemy import text


def test_database_connection(db_session):
    """Test basic database connection."""
    result = db_session.execute(text("SELECT 1")).scalar()
    assert result == 1


def test_user_model(db_session, test_user):
    """Test User model creation and retrieval."""
    assert test_user.id is not None
    assert test_user.username == "testuser"
    assert test_user.email == "test@example.com"
    assert test_user.created_at is not None

    from serenity.db.models import User

    retrieved_user = db_session.query(User).filter(User.id == test_user.id).first()
    assert retrieved_user is not None
    assert retrieved_user.username == "testuser"


def test_chat_session_json_messages(db_session, test_user):
    """Messages round-trip through the JSON column in order."""
    from serenity.db.models import ChatSession

    session = ChatSession(
        user_id=test_user.id,
        messages=[{"role": "user", "content": "hi"}, {"role": "assistant", "content": "hello"}],
        message_count=2,
    )
    db_session.add(session)
    db_session.commit()
    db_session.refresh(session)

    assert session.title == "New Chat"
    assert [m["role"] for m in session.messages] == ["user", "assistant"]

    db_session.refresh(test_user)
    assert test_user.chat_sessions[0].id == session.id


def test_post_defaults(db_session, test_user):
    from serenity.db.models import Post

    post = Post(author_id=test_user.id, content="hello")
    db_session.add(post)
    db_session.commit()
    db_session.refresh(post)

    assert post.likes == 0
    assert post.comments == []
    assert post.is_anonymous is False
    assert post.author.username == "testuser"
