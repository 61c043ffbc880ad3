"""Attendance business logic."""
from typing import Dict, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.db.models import Attendance, User
from app.db.upsert import upsert
from app.core.exceptions import ConflictError, NotFoundError
from app.core.identifiers import parse_id
from app.core.logging_config import get_logger
from app.core.utils import now_ms
from app.services.utils import public_profile, storage_errors

logger = get_logger(__name__)


def serialize_attendance(record: Attendance) -> Dict:
    return {
        "id": record.id,
        "lecture_id": record.lecture_id,
        "audience_id": record.audience_id,
        "is_present": record.is_present,
        "joined_at": record.joined_at,
    }


def add_attendance(
    db: Session,
    lecture_id: str,
    audience_id: str,
    is_present: bool = False,
    joined_at: Optional[int] = None,
) -> Dict:
    """
    Insert an attendance record as given.

    Raises:
        ConflictError: A record for this lecture and audience member exists
    """
    lecture_id = parse_id(lecture_id, "lecture_id")
    audience_id = parse_id(audience_id, "audience_id")

    record = Attendance(
        lecture_id=lecture_id,
        audience_id=audience_id,
        is_present=is_present,
        joined_at=joined_at if joined_at is not None else now_ms(),
    )
    with storage_errors(db, "add attendance"):
        try:
            db.add(record)
            db.commit()
            db.refresh(record)
        except IntegrityError:
            db.rollback()
            raise ConflictError("Attendance record already exists")

    return serialize_attendance(record)


def join_lecture(db: Session, lecture_id: str, audience_id: str) -> Dict:
    """Register an audience member for a lecture, not yet present."""
    record = add_attendance(db, lecture_id, audience_id, is_present=False)
    logger.info("attendance_joined", lecture_id=record["lecture_id"], audience_id=record["audience_id"])
    return record


def upsert_presence(db: Session, lecture_id: str, audience_id: str, is_present: bool) -> Dict:
    """
    Set presence for (lecture, audience), creating the record if needed.

    Runs as a single INSERT ... ON CONFLICT DO UPDATE, so concurrent calls for
    the same key never produce two records. joined_at is refreshed on every
    call.

    Returns:
        Dict with created (False when an existing record was updated), id,
        is_present and joined_at
    """
    lecture_id = parse_id(lecture_id, "lecture_id")
    audience_id = parse_id(audience_id, "audience_id")
    joined_at = now_ms()

    with storage_errors(db, "update presence"):
        created, record_id = upsert(
            db,
            Attendance,
            ("lecture_id", "audience_id"),
            {
                "lecture_id": lecture_id,
                "audience_id": audience_id,
                "is_present": is_present,
                "joined_at": joined_at,
            },
        )

    logger.info(
        "attendance_presence_upserted",
        lecture_id=lecture_id,
        audience_id=audience_id,
        is_present=is_present,
        created=created,
    )
    return {"created": created, "id": record_id, "is_present": is_present, "joined_at": joined_at}


def get_attendance_by_lecture(db: Session, lecture_id: str) -> List[Dict]:
    lecture_id = parse_id(lecture_id, "lecture_id")
    with storage_errors(db, "list attendance"):
        records = db.query(Attendance).filter(Attendance.lecture_id == lecture_id).all()
    return [serialize_attendance(record) for record in records]


def get_attendance_by_audience(db: Session, audience_id: str) -> List[Dict]:
    audience_id = parse_id(audience_id, "audience_id")
    with storage_errors(db, "list attendance"):
        records = db.query(Attendance).filter(Attendance.audience_id == audience_id).all()
    return [serialize_attendance(record) for record in records]


def get_lectures_by_user(db: Session, user_id: str) -> List[Dict]:
    """Attendance records of one user, used to list the lectures they joined."""
    return get_attendance_by_audience(db, parse_id(user_id, "user_id"))


def get_present_users(db: Session, lecture_id: str) -> List[Dict]:
    """
    Profiles of users currently marked present at a lecture.

    Records whose user no longer exists are skipped.
    """
    lecture_id = parse_id(lecture_id, "lecture_id")

    with storage_errors(db, "list present users"):
        audience_ids = [
            audience_id
            for (audience_id,) in db.query(Attendance.audience_id).filter(
                Attendance.lecture_id == lecture_id,
                Attendance.is_present.is_(True),
            ).all()
        ]
        if not audience_ids:
            return []
        users = {user.id: user for user in db.query(User).filter(User.id.in_(audience_ids)).all()}

    return [public_profile(users[audience_id]) for audience_id in audience_ids if audience_id in users]


def delete_attendance(db: Session, lecture_id: str, audience_id: str) -> None:
    lecture_id = parse_id(lecture_id, "lecture_id")
    audience_id = parse_id(audience_id, "audience_id")

    with storage_errors(db, "delete attendance"):
        deleted = db.query(Attendance).filter(
            Attendance.lecture_id == lecture_id,
            Attendance.audience_id == audience_id,
        ).delete()
        db.commit()
    if not deleted:
        raise NotFoundError("Attendance", (lecture_id, audience_id))


def delete_attendance_by_lecture(db: Session, lecture_id: str) -> int:
    """Delete every attendance record for a lecture. Returns how many were removed."""
    lecture_id = parse_id(lecture_id, "lecture_id")

    with storage_errors(db, "delete attendance"):
        deleted = db.query(Attendance).filter(Attendance.lecture_id == lecture_id).delete()
        db.commit()

    logger.info("attendance_deleted_by_lecture", lecture_id=lecture_id, count=deleted)
    return deleted
