"""Unit tests for discussion service."""
import pytest

from app.core.constants import UNKNOWN_USERNAME
from app.core.exceptions import InvalidArgumentError
from app.core.identifiers import new_id
from app.services.discussions import add_discussion, get_discussions_by_lecture


@pytest.mark.unit
class TestDiscussions:
    """Test posting and listing discussion messages."""

    def test_add_discussion(self, db_session):
        lecture_id, user_id = new_id(), new_id()

        message = add_discussion(db_session, lecture_id, user_id, "Is the recording online?")

        assert message["lecture_id"] == lecture_id
        assert message["user_id"] == user_id
        assert message["content"] == "Is the recording online?"
        assert message["created_at"] > 0

    def test_blank_content_rejected(self, db_session):
        with pytest.raises(InvalidArgumentError, match="Content cannot be empty"):
            add_discussion(db_session, new_id(), new_id(), "   ")

    def test_listed_oldest_first(self, db_session, make_user, monkeypatch):
        lecture_id = new_id()
        user = make_user(username="linus")
        times = iter([3000, 1000, 2000])
        monkeypatch.setattr("app.services.discussions.now_ms", lambda: next(times))

        add_discussion(db_session, lecture_id, user["id"], "third")
        add_discussion(db_session, lecture_id, user["id"], "first")
        add_discussion(db_session, lecture_id, user["id"], "second")

        messages = get_discussions_by_lecture(db_session, lecture_id)

        assert [m["content"] for m in messages] == ["first", "second", "third"]
        assert all(m["username"] == "linus" for m in messages)

    def test_unknown_author_placeholder(self, db_session):
        lecture_id = new_id()
        add_discussion(db_session, lecture_id, new_id(), "hello")

        messages = get_discussions_by_lecture(db_session, lecture_id)

        assert messages[0]["username"] == UNKNOWN_USERNAME
        assert messages[0]["avatar"] == ""

    def test_other_lectures_excluded(self, db_session):
        lecture_id = new_id()
        add_discussion(db_session, lecture_id, new_id(), "here")
        add_discussion(db_session, new_id(), new_id(), "elsewhere")

        assert [m["content"] for m in get_discussions_by_lecture(db_session, lecture_id)] == ["here"]
