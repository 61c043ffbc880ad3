"""Feedback business logic."""
from typing import Dict, List

from sqlalchemy import case, func
from sqlalchemy.orm import Session

from app.db.models import Feedback
from app.db.upsert import upsert
from app.core.constants import FEEDBACK_FLAGS
from app.core.exceptions import NotFoundError
from app.core.identifiers import parse_id
from app.core.utils import now_ms
from app.services.utils import author_or_placeholder, get_author_map, storage_errors


def submit_feedback(
    db: Session,
    lecture_id: str,
    user_id: str,
    too_fast: bool = False,
    too_slow: bool = False,
    boring: bool = False,
    bad_question_quality: bool = False,
    other: str = "",
) -> Dict:
    """
    Store a user's feedback for a lecture, replacing any earlier submission.

    All four flags, the comment and created_at are overwritten on every call;
    nothing from a previous submission is kept.

    Returns:
        Dict with created (False when an earlier submission was replaced) and id
    """
    lecture_id = parse_id(lecture_id, "lecture_id")
    user_id = parse_id(user_id, "user_id")

    with storage_errors(db, "submit feedback"):
        created, record_id = upsert(
            db,
            Feedback,
            ("lecture_id", "user_id"),
            {
                "lecture_id": lecture_id,
                "user_id": user_id,
                "too_fast": bool(too_fast),
                "too_slow": bool(too_slow),
                "boring": bool(boring),
                "bad_question_quality": bool(bad_question_quality),
                "other": other or "",
                "created_at": now_ms(),
            },
        )

    return {"created": created, "id": record_id}


def get_feedback_summary(db: Session, lecture_id: str) -> Dict[str, int]:
    """
    Count how many submissions set each flag.

    Returns:
        Dict mapping flag name -> count (all flags present, zero when unset)
    """
    lecture_id = parse_id(lecture_id, "lecture_id")

    columns = [
        func.coalesce(func.sum(case((getattr(Feedback, flag).is_(True), 1), else_=0)), 0)
        for flag in FEEDBACK_FLAGS
    ]
    with storage_errors(db, "summarize feedback"):
        row = db.query(*columns).filter(Feedback.lecture_id == lecture_id).one()

    return {flag: int(count) for flag, count in zip(FEEDBACK_FLAGS, row)}


def get_user_feedback(db: Session, lecture_id: str, user_id: str) -> Dict:
    lecture_id = parse_id(lecture_id, "lecture_id")
    user_id = parse_id(user_id, "user_id")

    with storage_errors(db, "load feedback"):
        record = db.query(Feedback).filter(
            Feedback.lecture_id == lecture_id,
            Feedback.user_id == user_id,
        ).first()
    if not record:
        raise NotFoundError("Feedback", (lecture_id, user_id))

    result = {flag: getattr(record, flag) for flag in FEEDBACK_FLAGS}
    result["other"] = record.other
    return result


def get_feedback_comments(db: Session, lecture_id: str) -> List[Dict]:
    """
    Free-text comments for a lecture with the author's name and avatar.

    A comment whose author no longer exists is kept with placeholder values.
    """
    lecture_id = parse_id(lecture_id, "lecture_id")

    with storage_errors(db, "list feedback comments"):
        records = db.query(Feedback).filter(
            Feedback.lecture_id == lecture_id,
            Feedback.other != "",
        ).all()
        authors = get_author_map(db, (record.user_id for record in records))

    comments = []
    for record in records:
        username, avatar = author_or_placeholder(authors, record.user_id)
        comments.append({
            "user_id": record.user_id,
            "username": username,
            "avatar": avatar,
            "comment": record.other,
        })
    return comments
