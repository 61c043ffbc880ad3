"""Shared utilities for service layer."""
from contextlib import contextmanager
from typing import Dict, Iterable, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.db.models import User
from app.core.constants import UNKNOWN_USERNAME, UNKNOWN_AVATAR
from app.core.exceptions import InternalError
from app.core.logging_config import get_logger

logger = get_logger(__name__)


@contextmanager
def storage_errors(db: Session, action: str):
    """
    Roll back and translate unexpected storage failures.

    Domain exceptions raised inside the block pass through untouched; any
    SQLAlchemyError becomes an InternalError naming the failed action.
    """
    try:
        yield
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("storage_error", action=action, error=str(exc))
        raise InternalError(f"Failed to {action}") from exc


def public_profile(user: User) -> Dict:
    """User fields that are safe to return; the password hash is never included."""
    return {
        "id": user.id,
        "username": user.username,
        "email": user.email,
        "role": user.role,
        "avatar": user.avatar,
        "background": user.background,
        "gender": user.gender,
        "age": user.age,
        "motto": user.motto,
    }


def get_author_map(db: Session, user_ids: Iterable[str]) -> Dict[str, Tuple[str, str]]:
    """
    Resolve user ids to (username, avatar) with a single query.

    Ids with no matching user are simply absent from the result; callers
    decide whether to substitute a placeholder or drop the entry.
    """
    ids = set(user_ids)
    if not ids:
        return {}

    rows = db.query(User.id, User.username, User.avatar).filter(User.id.in_(ids)).all()
    return {user_id: (username, avatar or "") for user_id, username, avatar in rows}


def author_or_placeholder(author_map: Dict[str, Tuple[str, str]], user_id: str) -> Tuple[str, str]:
    return author_map.get(user_id, (UNKNOWN_USERNAME, UNKNOWN_AVATAR))
