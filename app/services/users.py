"""User directory business logic."""
import re
from typing import Dict, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.db.models import User
from app.core.config import settings
from app.core.constants import EMAIL_PATTERN
from app.core.exceptions import ConflictError, InvalidArgumentError, NotFoundError, UnauthorizedError
from app.core.identifiers import parse_id
from app.core.logging_config import get_logger
from app.core.security import get_password_hash, verify_password
from app.services.utils import public_profile, storage_errors

logger = get_logger(__name__)

_EMAIL_RE = re.compile(EMAIL_PATTERN)

PROFILE_FIELDS = ("username", "gender", "age", "motto", "avatar", "background")


def register_user(db: Session, username: str, email: str, password: str, role: int = 0) -> Dict:
    """
    Register a new user.

    Username and email must both be unused. The check runs up front for a
    clear message, and the unique constraints catch a concurrent duplicate.

    Raises:
        InvalidArgumentError: Bad email format, blank username or password
        ConflictError: Username or email already registered
    """
    if not email or not _EMAIL_RE.match(email):
        raise InvalidArgumentError("Invalid email format")
    if not username or not username.strip():
        raise InvalidArgumentError("Username cannot be empty")
    if not password:
        raise InvalidArgumentError("Password cannot be empty")

    username = username.strip()

    with storage_errors(db, "register user"):
        if db.query(User.id).filter(User.username == username).first():
            raise ConflictError("Username already taken")
        if db.query(User.id).filter(User.email == email).first():
            raise ConflictError("Email already registered")

        user = User(
            username=username,
            email=email,
            password=get_password_hash(password),
            role=role,
            avatar=settings.DEFAULT_AVATAR_URL,
            background=settings.DEFAULT_BACKGROUND_URL,
        )
        try:
            db.add(user)
            db.commit()
            db.refresh(user)
        except IntegrityError:
            db.rollback()
            raise ConflictError("Username or email already registered")

    logger.info("user_registered", user_id=user.id, role=role)
    return public_profile(user)


def authenticate_user(db: Session, email: str, password: str) -> Dict:
    """
    Verify credentials and return the user's public profile.

    Raises:
        UnauthorizedError: Unknown email or wrong password
    """
    with storage_errors(db, "load user"):
        user = db.query(User).filter(User.email == email).first()

    if not user or not verify_password(password, user.password):
        logger.info("login_failed", email=email)
        raise UnauthorizedError("Invalid credentials")

    return public_profile(user)


def get_user(db: Session, user_id: str) -> Dict:
    """Get a user's public profile."""
    user_id = parse_id(user_id, "user_id")

    with storage_errors(db, "load user"):
        user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFoundError("User", user_id)

    return public_profile(user)


def get_all_users(db: Session) -> List[Dict]:
    with storage_errors(db, "list users"):
        users = db.query(User).all()
    return [public_profile(user) for user in users]


def update_user_profile(db: Session, user_id: str, **fields: Optional[object]) -> List[str]:
    """
    Update the supplied profile fields of a user.

    Only keys in PROFILE_FIELDS with a non-None value are written. A blank
    motto is skipped rather than stored.

    Returns:
        Names of the fields that were written

    Raises:
        InvalidArgumentError: Blank username, unknown field, or nothing to update
        ConflictError: Username belongs to another user
        NotFoundError: No such user
    """
    user_id = parse_id(user_id, "user_id")

    unknown = set(fields) - set(PROFILE_FIELDS)
    if unknown:
        raise InvalidArgumentError(f"Unknown profile fields: {', '.join(sorted(unknown))}")

    changes = {name: value for name, value in fields.items() if value is not None}
    if "username" in changes:
        changes["username"] = str(changes["username"]).strip()
        if not changes["username"]:
            raise InvalidArgumentError("Username cannot be empty")
    if "motto" in changes and not str(changes["motto"]).strip():
        del changes["motto"]

    if not changes:
        raise InvalidArgumentError("No fields to update")

    with storage_errors(db, "update user"):
        user = db.query(User).filter(User.id == user_id).first()
        if not user:
            raise NotFoundError("User", user_id)

        new_username = changes.get("username")
        if new_username and new_username != user.username:
            taken = db.query(User.id).filter(User.username == new_username).first()
            if taken:
                raise ConflictError("Username already taken")

        for name, value in changes.items():
            setattr(user, name, value)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            raise ConflictError("Username already taken")

    return list(changes)
