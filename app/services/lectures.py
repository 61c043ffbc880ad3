"""Lecture business logic."""
from typing import Dict, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.db.models import Lecture
from app.core.config import settings
from app.core.exceptions import CodeAllocationError, InternalError, InvalidArgumentError, NotFoundError
from app.core.identifiers import parse_id, parse_optional_id
from app.core.logging_config import get_logger
from app.core.utils import make_lecture_code, parse_iso_to_ms, coerce_timestamp_ms
from app.services.utils import storage_errors

logger = get_logger(__name__)

UPDATABLE_FIELDS = ("topic", "start_time", "duration", "description", "speaker_id", "organizer_id", "status")


def serialize_lecture(lecture: Lecture) -> Dict:
    return {
        "id": lecture.id,
        "topic": lecture.topic,
        "start_time": lecture.start_time,
        "duration": lecture.duration,
        "description": lecture.description,
        "speaker_id": lecture.speaker_id,
        "organizer_id": lecture.organizer_id,
        "lecturecode": lecture.lecturecode,
        "status": lecture.status,
    }


def lecture_code_exists(db: Session, code: int) -> bool:
    return db.query(Lecture.id).filter(Lecture.lecturecode == code).first() is not None


def _require_int(value, field: str, minimum: Optional[int] = None) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"Invalid {field}")
    if minimum is not None and value < minimum:
        raise InvalidArgumentError(f"Invalid {field}")
    return value


def create_lecture(
    db: Session,
    topic: str,
    start_time: str,
    duration: int,
    organizer_id: str,
    status: int = 0,
    description: Optional[str] = None,
    speaker_id: Optional[str] = None,
    max_attempts: Optional[int] = None,
) -> Dict:
    """
    Create a new lecture with a unique 6-digit code.

    Each attempt draws a random code, looks for an existing lecture holding
    it, and inserts on a miss. The lookup and the insert are separate
    statements, so a concurrent creator can take the same code in between;
    the unique constraint on lecturecode turns that race into an
    IntegrityError. The code is looked up again after such a failure: if it is
    now taken the attempt counts as a collision, otherwise the insert failed
    for another reason and InternalError is raised.

    Args:
        start_time: ISO-8601 timestamp, stored as epoch milliseconds
        speaker_id: Optional; blank means no speaker
        max_attempts: Code draws before giving up (defaults to settings)

    Raises:
        InvalidArgumentError: Bad organizer_id, speaker_id, start_time, topic,
            duration, status or max_attempts
        CodeAllocationError: Every draw collided
        InternalError: The insert failed for a reason other than a code clash
    """
    if not topic or not topic.strip():
        raise InvalidArgumentError("Topic cannot be empty")
    organizer_id = parse_id(organizer_id, "organizer_id")
    speaker_id = parse_optional_id(speaker_id, "speaker_id")
    start_ms = parse_iso_to_ms(start_time, "start_time")
    duration = _require_int(duration, "duration", minimum=0)
    status = _require_int(status, "status")

    attempts = settings.LECTURE_CODE_MAX_ATTEMPTS if max_attempts is None else max_attempts
    if attempts < 1:
        raise InvalidArgumentError("max_attempts must be at least 1")

    with storage_errors(db, "create lecture"):
        for attempt in range(1, attempts + 1):
            code = make_lecture_code()
            if lecture_code_exists(db, code):
                logger.info("lecture_code_collision", code=code, attempt=attempt)
                continue

            lecture = Lecture(
                topic=topic.strip(),
                start_time=start_ms,
                duration=duration,
                description=description or "",
                speaker_id=speaker_id,
                organizer_id=organizer_id,
                lecturecode=code,
                status=status,
            )
            try:
                db.add(lecture)
                db.commit()
                db.refresh(lecture)
            except IntegrityError as exc:
                db.rollback()
                if not lecture_code_exists(db, code):
                    logger.error("lecture_insert_failed", code=code, attempt=attempt, error=str(exc))
                    raise InternalError("Failed to create lecture") from exc
                logger.info("lecture_code_race", code=code, attempt=attempt)
                continue

            logger.info("lecture_created", lecture_id=lecture.id, lecturecode=code, attempts=attempt)
            return serialize_lecture(lecture)

    logger.error("lecture_code_exhausted", attempts=attempts)
    raise CodeAllocationError(attempts)


def get_lecture(db: Session, lecture_id: str) -> Dict:
    """Get a lecture by id."""
    lecture_id = parse_id(lecture_id, "lecture_id")

    with storage_errors(db, "load lecture"):
        lecture = db.query(Lecture).filter(Lecture.id == lecture_id).first()
    if not lecture:
        raise NotFoundError("Lecture", lecture_id)

    return serialize_lecture(lecture)


def get_lecture_by_code(db: Session, code: int) -> Dict:
    """Get a lecture by its shareable code."""
    with storage_errors(db, "load lecture"):
        lecture = db.query(Lecture).filter(Lecture.lecturecode == code).first()
    if not lecture:
        raise NotFoundError("Lecture", code)

    return serialize_lecture(lecture)


def get_all_lectures(db: Session) -> List[Dict]:
    with storage_errors(db, "list lectures"):
        lectures = db.query(Lecture).all()
    return [serialize_lecture(lecture) for lecture in lectures]


def get_lectures_by_organizer(db: Session, organizer_id: str) -> List[Dict]:
    organizer_id = parse_id(organizer_id, "organizer_id")
    with storage_errors(db, "list lectures"):
        lectures = db.query(Lecture).filter(Lecture.organizer_id == organizer_id).all()
    return [serialize_lecture(lecture) for lecture in lectures]


def get_lectures_by_speaker(db: Session, speaker_id: str) -> List[Dict]:
    speaker_id = parse_id(speaker_id, "speaker_id")
    with storage_errors(db, "list lectures"):
        lectures = db.query(Lecture).filter(Lecture.speaker_id == speaker_id).all()
    return [serialize_lecture(lecture) for lecture in lectures]


def _collect_changes(updates: Dict) -> Dict:
    """Validate a partial update and translate it into column values."""
    unknown = set(updates) - set(UPDATABLE_FIELDS)
    if unknown:
        raise InvalidArgumentError(f"Unknown lecture fields: {', '.join(sorted(unknown))}")

    changes = {}
    for field in ("topic", "description", "duration", "status"):
        if updates.get(field) is not None:
            changes[field] = updates[field]

    if "topic" in changes:
        changes["topic"] = str(changes["topic"]).strip()
        if not changes["topic"]:
            raise InvalidArgumentError("Topic cannot be empty")

    if updates.get("speaker_id") is not None:
        # Blank clears the speaker
        changes["speaker_id"] = parse_optional_id(updates["speaker_id"], "speaker_id")

    organizer_id = updates.get("organizer_id")
    if organizer_id is not None and str(organizer_id).strip():
        changes["organizer_id"] = parse_id(organizer_id, "organizer_id")

    if updates.get("start_time") is not None:
        changes["start_time"] = coerce_timestamp_ms(updates["start_time"], "start_time")

    return changes


def update_lecture(db: Session, lecture_id: str, updates: Dict) -> Dict:
    """
    Apply a partial update to a lecture.

    Only supplied (non-None) fields are written. start_time may be an
    ISO-8601 string or epoch milliseconds.

    Raises:
        InvalidArgumentError: Malformed field or nothing to update
        NotFoundError: No lecture with this id
    """
    lecture_id = parse_id(lecture_id, "lecture_id")
    changes = _collect_changes(updates)
    if not changes:
        raise InvalidArgumentError("No fields to update")

    with storage_errors(db, "update lecture"):
        matched = db.query(Lecture).filter(Lecture.id == lecture_id).update(changes)
        db.commit()
        if not matched:
            raise NotFoundError("Lecture", lecture_id)
        lecture = db.query(Lecture).filter(Lecture.id == lecture_id).first()

    logger.info("lecture_updated", lecture_id=lecture_id, fields=sorted(changes))
    return serialize_lecture(lecture)


def delete_lecture(db: Session, lecture_id: str) -> None:
    """
    Delete a lecture.

    Invitations, attendance, feedback and discussion rows that reference the
    lecture are left in place; callers remove them with the by-lecture bulk
    deletes.
    """
    lecture_id = parse_id(lecture_id, "lecture_id")

    with storage_errors(db, "delete lecture"):
        deleted = db.query(Lecture).filter(Lecture.id == lecture_id).delete()
        db.commit()
    if not deleted:
        raise NotFoundError("Lecture", lecture_id)

    logger.info("lecture_deleted", lecture_id=lecture_id)
