"""Discussion business logic."""
from typing import Dict, List

from sqlalchemy.orm import Session

from app.db.models import Discussion
from app.core.exceptions import InvalidArgumentError
from app.core.identifiers import parse_id
from app.core.utils import now_ms
from app.services.utils import author_or_placeholder, get_author_map, storage_errors


def serialize_discussion(discussion: Discussion) -> Dict:
    return {
        "id": discussion.id,
        "lecture_id": discussion.lecture_id,
        "user_id": discussion.user_id,
        "content": discussion.content,
        "created_at": discussion.created_at,
    }


def add_discussion(db: Session, lecture_id: str, user_id: str, content: str) -> Dict:
    """Post a message to a lecture's discussion. Messages cannot be edited or removed."""
    lecture_id = parse_id(lecture_id, "lecture_id")
    user_id = parse_id(user_id, "user_id")
    if not content or not content.strip():
        raise InvalidArgumentError("Content cannot be empty")

    with storage_errors(db, "add discussion"):
        discussion = Discussion(
            lecture_id=lecture_id,
            user_id=user_id,
            content=content,
            created_at=now_ms(),
        )
        db.add(discussion)
        db.commit()
        db.refresh(discussion)

    return serialize_discussion(discussion)


def get_discussions_by_lecture(db: Session, lecture_id: str) -> List[Dict]:
    """
    Messages for a lecture, oldest first, with each poster's name and avatar.

    Messages from users that no longer exist get placeholder author values.
    """
    lecture_id = parse_id(lecture_id, "lecture_id")

    with storage_errors(db, "list discussions"):
        discussions = db.query(Discussion).filter(
            Discussion.lecture_id == lecture_id
        ).order_by(Discussion.created_at, Discussion.id).all()
        authors = get_author_map(db, (d.user_id for d in discussions))

    result = []
    for discussion in discussions:
        item = serialize_discussion(discussion)
        item["username"], item["avatar"] = author_or_placeholder(authors, discussion.user_id)
        result.append(item)
    return result
