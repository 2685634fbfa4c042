"""Unit tests for chat session persistence."""

import uuid
from types import SimpleNamespace

import pytest

from serenity.core.exceptions import ConcurrencyConflictError, NotFoundError
from serenity.schemas.chat import ChatMessage, EmotionalContext
from serenity.services.chat import (
    append_turn,
    create_session,
    delete_session,
    list_sessions,
    load_session,
)
from serenity.services.chat.session_store import make_title
from serenity.utils.datetime_helper import utc_now


def pair(content="hello", reply="hi there"):
    user_message = ChatMessage(
        role="user",
        content=content,
        timestamp=utc_now(),
        emotional_context=EmotionalContext(
            text_sentiment="Happy", combined_emotion_score={"happy": 1.0}
        ),
    )
    assistant_message = ChatMessage(role="assistant", content=reply, timestamp=utc_now())
    return user_message, assistant_message


class TestMakeTitle:
    def test_short_message_kept(self):
        assert make_title("Feeling low today") == "Feeling low today"

    def test_exactly_thirty_characters_not_truncated(self):
        assert make_title("a" * 30) == "a" * 30

    def test_long_message_truncated(self):
        assert make_title("b" * 31) == "b" * 30 + "..."

    def test_empty_message_keeps_default(self):
        assert make_title("") == "New Chat"


class TestSessionLifecycle:
    def test_create_session_defaults(self, db_session, test_user):
        session = create_session(db_session, test_user.id)

        assert session.id is not None
        assert session.user_id == test_user.id
        assert session.title == "New Chat"
        assert session.messages == []
        assert session.message_count == 0

    def test_first_pair_sets_title(self, db_session, test_user):
        session = create_session(db_session, test_user.id)

        session = append_turn(
            db_session, session, *pair("I have been anxious about my exams lately")
        )

        assert session.message_count == 2
        assert len(session.messages) == 2
        assert session.title == "I have been anxious about my e..."
        assert session.messages[0]["role"] == "user"
        assert session.messages[0]["emotional_context"]["text_sentiment"] == "Happy"
        assert session.messages[1]["role"] == "assistant"
        assert session.messages[1]["emotional_context"] is None

    def test_later_pairs_keep_title(self, db_session, test_user):
        session = create_session(db_session, test_user.id)
        session = append_turn(db_session, session, *pair("first"))
        first_updated = session.updated_at

        session = append_turn(db_session, session, *pair("second message"))

        assert session.title == "first"
        assert session.message_count == 4
        assert [m["content"] for m in session.messages] == [
            "first",
            "hi there",
            "second message",
            "hi there",
        ]
        assert session.updated_at >= first_updated

    def test_stale_append_conflicts(self, db_session, test_user):
        session = create_session(db_session, test_user.id)
        stale = SimpleNamespace(id=session.id, message_count=0, messages=[])
        append_turn(db_session, session, *pair("first"))

        with pytest.raises(ConcurrencyConflictError):
            append_turn(db_session, stale, *pair("racing"))

        reloaded = load_session(db_session, session.id, test_user.id)
        assert reloaded.message_count == 2
        assert reloaded.title == "first"


class TestOwnership:
    def test_load_own_session(self, db_session, test_user):
        session = create_session(db_session, test_user.id)

        assert load_session(db_session, str(session.id), test_user.id).id == session.id

    def test_other_owner_is_not_found(self, db_session, test_user, other_user):
        session = create_session(db_session, test_user.id)

        with pytest.raises(NotFoundError):
            load_session(db_session, session.id, other_user.id)

    def test_malformed_id_is_not_found(self, db_session, test_user):
        with pytest.raises(NotFoundError):
            load_session(db_session, "not-a-uuid", test_user.id)

    def test_unknown_id_is_not_found(self, db_session, test_user):
        with pytest.raises(NotFoundError):
            load_session(db_session, uuid.uuid4(), test_user.id)

    def test_list_sessions_newest_first(self, db_session, test_user, other_user):
        older = create_session(db_session, test_user.id)
        newer = create_session(db_session, test_user.id)
        create_session(db_session, other_user.id)
        append_turn(db_session, older, *pair("bump"))

        sessions = list_sessions(db_session, test_user.id)

        assert [s.id for s in sessions] == [older.id, newer.id]

    def test_delete_twice_reports_not_found(self, db_session, test_user):
        session = create_session(db_session, test_user.id)
        session_id = session.id

        delete_session(db_session, session_id, test_user.id)

        with pytest.raises(NotFoundError):
            delete_session(db_session, session_id, test_user.id)

    def test_delete_other_owner_is_not_found(self, db_session, test_user, other_user):
        session = create_session(db_session, test_user.id)

        with pytest.raises(NotFoundError):
            delete_session(db_session, session.id, other_user.id)

        assert load_session(db_session, session.id, test_user.id) is not None
