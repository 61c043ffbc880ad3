"""Unit tests for attendance service."""
import pytest

from app.core.exceptions import ConflictError, InternalError, InvalidArgumentError, NotFoundError
from app.core.identifiers import new_id
from app.db.models import Attendance, User
from app.services.attendance import (
    add_attendance,
    join_lecture,
    upsert_presence,
    get_attendance_by_lecture,
    get_attendance_by_audience,
    get_lectures_by_user,
    get_present_users,
    delete_attendance,
    delete_attendance_by_lecture,
)


@pytest.mark.unit
class TestAddAttendance:
    """Test plain attendance inserts."""

    def test_add_attendance(self, db_session):
        lecture_id, audience_id = new_id(), new_id()

        record = add_attendance(db_session, lecture_id, audience_id, is_present=True, joined_at=1700000000000)

        assert record["lecture_id"] == lecture_id
        assert record["audience_id"] == audience_id
        assert record["is_present"] is True
        assert record["joined_at"] == 1700000000000

    def test_add_defaults_joined_at_to_now(self, db_session):
        record = add_attendance(db_session, new_id(), new_id())

        assert record["is_present"] is False
        assert record["joined_at"] > 1700000000000

    def test_duplicate_pair_conflicts(self, db_session):
        lecture_id, audience_id = new_id(), new_id()
        add_attendance(db_session, lecture_id, audience_id)

        with pytest.raises(ConflictError):
            add_attendance(db_session, lecture_id, audience_id)

        assert db_session.query(Attendance).count() == 1

    def test_join_lecture_starts_absent(self, db_session):
        record = join_lecture(db_session, new_id(), new_id())

        assert record["is_present"] is False

    def test_invalid_ids(self, db_session):
        with pytest.raises(InvalidArgumentError, match="Invalid audience_id"):
            add_attendance(db_session, new_id(), "bad")


@pytest.mark.unit
class TestUpsertPresence:
    """Test presence updates."""

    def test_creates_missing_record(self, db_session):
        lecture_id, audience_id = new_id(), new_id()

        result = upsert_presence(db_session, lecture_id, audience_id, True)

        assert result["created"] is True
        assert result["is_present"] is True
        records = get_attendance_by_lecture(db_session, lecture_id)
        assert len(records) == 1
        assert records[0]["id"] == result["id"]

    def test_updates_existing_record(self, db_session):
        """Second call updates in place and keeps a single record."""
        lecture_id, audience_id = new_id(), new_id()

        first = upsert_presence(db_session, lecture_id, audience_id, True)
        second = upsert_presence(db_session, lecture_id, audience_id, False)

        assert second["created"] is False
        assert second["id"] == first["id"]
        records = db_session.query(Attendance).filter(Attendance.lecture_id == lecture_id).all()
        assert len(records) == 1
        db_session.refresh(records[0])
        assert records[0].is_present is False

    def test_updates_record_created_by_join(self, db_session):
        lecture_id, audience_id = new_id(), new_id()
        joined = join_lecture(db_session, lecture_id, audience_id)

        result = upsert_presence(db_session, lecture_id, audience_id, True)

        assert result["created"] is False
        assert result["id"] == joined["id"]

    def test_refreshes_joined_at(self, db_session):
        lecture_id, audience_id = new_id(), new_id()
        add_attendance(db_session, lecture_id, audience_id, joined_at=1)

        result = upsert_presence(db_session, lecture_id, audience_id, True)

        assert result["joined_at"] > 1
        assert get_attendance_by_audience(db_session, audience_id)[0]["joined_at"] == result["joined_at"]

    def test_unsupported_backend_is_internal_error(self, db_session, monkeypatch):
        monkeypatch.setattr("app.db.upsert._INSERT_BY_DIALECT", {})

        with pytest.raises(InternalError, match="Upsert is not supported on sqlite"):
            upsert_presence(db_session, new_id(), new_id(), True)

        assert db_session.query(Attendance).count() == 0


@pytest.mark.unit
class TestAttendanceQueries:
    """Test attendance lookups."""

    def test_by_lecture_and_audience(self, db_session):
        lecture_id, audience_id = new_id(), new_id()
        add_attendance(db_session, lecture_id, audience_id)
        add_attendance(db_session, lecture_id, new_id())
        add_attendance(db_session, new_id(), audience_id)

        assert len(get_attendance_by_lecture(db_session, lecture_id)) == 2
        assert len(get_attendance_by_audience(db_session, audience_id)) == 2
        assert len(get_lectures_by_user(db_session, audience_id)) == 2

    def test_present_users(self, db_session, make_user):
        lecture_id = new_id()
        present = make_user()
        absent = make_user()
        upsert_presence(db_session, lecture_id, present["id"], True)
        upsert_presence(db_session, lecture_id, absent["id"], False)

        users = get_present_users(db_session, lecture_id)

        assert [user["id"] for user in users] == [present["id"]]
        assert "password" not in users[0]

    def test_present_users_skips_deleted_users(self, db_session, make_user):
        lecture_id = new_id()
        user = make_user()
        upsert_presence(db_session, lecture_id, user["id"], True)
        upsert_presence(db_session, lecture_id, new_id(), True)

        db_session.query(User).filter(User.id == user["id"]).delete()
        db_session.commit()

        assert get_present_users(db_session, lecture_id) == []

    def test_present_users_empty_lecture(self, db_session):
        assert get_present_users(db_session, new_id()) == []


@pytest.mark.unit
class TestAttendanceDeletion:
    """Test attendance deletes."""

    def test_delete_attendance(self, db_session):
        lecture_id, audience_id = new_id(), new_id()
        add_attendance(db_session, lecture_id, audience_id)

        delete_attendance(db_session, lecture_id, audience_id)

        assert get_attendance_by_lecture(db_session, lecture_id) == []

    def test_delete_missing_attendance(self, db_session):
        with pytest.raises(NotFoundError):
            delete_attendance(db_session, new_id(), new_id())

    def test_delete_by_lecture(self, db_session):
        lecture_id = new_id()
        add_attendance(db_session, lecture_id, new_id())
        add_attendance(db_session, lecture_id, new_id())
        add_attendance(db_session, new_id(), new_id())

        assert delete_attendance_by_lecture(db_session, lecture_id) == 2
        assert db_session.query(Attendance).count() == 1
