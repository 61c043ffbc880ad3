"""Invitation business logic."""
from typing import Dict, List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.db.models import Invitation, Lecture
from app.core.constants import INVITATION_ACCEPTED, INVITATION_PENDING
from app.core.exceptions import InternalError, NotFoundError
from app.core.identifiers import parse_id
from app.core.logging_config import get_logger
from app.services.utils import storage_errors

logger = get_logger(__name__)


def serialize_invitation(invitation: Invitation) -> Dict:
    return {
        "id": invitation.id,
        "lecture_id": invitation.lecture_id,
        "speaker_id": invitation.speaker_id,
        "status": invitation.status,
    }


def create_invitation(db: Session, lecture_id: str, speaker_id: str, status: int = INVITATION_PENDING) -> Dict:
    """
    Create an invitation.

    No check is made for an existing invitation with the same lecture and
    speaker; duplicates are stored as separate rows.
    """
    lecture_id = parse_id(lecture_id, "lecture_id")
    speaker_id = parse_id(speaker_id, "speaker_id")

    with storage_errors(db, "create invitation"):
        invitation = Invitation(lecture_id=lecture_id, speaker_id=speaker_id, status=status)
        db.add(invitation)
        db.commit()
        db.refresh(invitation)

    logger.info("invitation_created", invitation_id=invitation.id, lecture_id=lecture_id, speaker_id=speaker_id)
    return serialize_invitation(invitation)


def get_invitation(db: Session, invitation_id: str) -> Dict:
    invitation_id = parse_id(invitation_id, "invitation_id")

    with storage_errors(db, "load invitation"):
        invitation = db.query(Invitation).filter(Invitation.id == invitation_id).first()
    if not invitation:
        raise NotFoundError("Invitation", invitation_id)

    return serialize_invitation(invitation)


def get_all_invitations(db: Session) -> List[Dict]:
    with storage_errors(db, "list invitations"):
        invitations = db.query(Invitation).all()
    return [serialize_invitation(invitation) for invitation in invitations]


def get_invitations_by_speaker(db: Session, speaker_id: str) -> List[Dict]:
    speaker_id = parse_id(speaker_id, "speaker_id")
    with storage_errors(db, "list invitations"):
        invitations = db.query(Invitation).filter(Invitation.speaker_id == speaker_id).all()
    return [serialize_invitation(invitation) for invitation in invitations]


def update_invitation(db: Session, invitation_id: str, lecture_id: str, speaker_id: str, status: int) -> Dict:
    """Replace every field of an invitation."""
    invitation_id = parse_id(invitation_id, "invitation_id")
    lecture_id = parse_id(lecture_id, "lecture_id")
    speaker_id = parse_id(speaker_id, "speaker_id")

    with storage_errors(db, "update invitation"):
        matched = db.query(Invitation).filter(Invitation.id == invitation_id).update(
            {"lecture_id": lecture_id, "speaker_id": speaker_id, "status": status}
        )
        db.commit()
    if not matched:
        raise NotFoundError("Invitation", invitation_id)

    return {"id": invitation_id, "lecture_id": lecture_id, "speaker_id": speaker_id, "status": status}


def accept_invitation(db: Session, invitation_id: str) -> Dict:
    """
    Accept an invitation and make its speaker the lecture's speaker.

    Two single-row writes, each committed on its own:

    1. invitation.status = Accepted
    2. lecture.speaker_id = invitation.speaker_id

    Both writes set absolute values, so running the whole operation again
    after any failure converges to the same state. If the second write
    fails, the first stays committed and InternalError is raised so the
    caller knows to retry.

    Raises:
        NotFoundError: No invitation with this id
        InternalError: A storage write failed
    """
    invitation_id = parse_id(invitation_id, "invitation_id")

    with storage_errors(db, "load invitation"):
        invitation = db.query(Invitation).filter(Invitation.id == invitation_id).first()
    if not invitation:
        raise NotFoundError("Invitation", invitation_id)

    lecture_id = invitation.lecture_id
    speaker_id = invitation.speaker_id

    with storage_errors(db, "accept invitation"):
        db.query(Invitation).filter(Invitation.id == invitation_id).update({"status": INVITATION_ACCEPTED})
        db.commit()

    try:
        matched = db.query(Lecture).filter(Lecture.id == lecture_id).update({"speaker_id": speaker_id})
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error(
            "invitation_accept_partial",
            invitation_id=invitation_id,
            lecture_id=lecture_id,
            error=str(exc),
        )
        raise InternalError(
            "Invitation was accepted but the lecture speaker could not be updated; retry the accept"
        ) from exc

    if not matched:
        logger.warning("invitation_lecture_missing", invitation_id=invitation_id, lecture_id=lecture_id)

    logger.info("invitation_accepted", invitation_id=invitation_id, lecture_id=lecture_id, speaker_id=speaker_id)
    return {
        "id": invitation_id,
        "lecture_id": lecture_id,
        "speaker_id": speaker_id,
        "status": INVITATION_ACCEPTED,
    }


def delete_invitation(db: Session, invitation_id: str) -> None:
    invitation_id = parse_id(invitation_id, "invitation_id")

    with storage_errors(db, "delete invitation"):
        deleted = db.query(Invitation).filter(Invitation.id == invitation_id).delete()
        db.commit()
    if not deleted:
        raise NotFoundError("Invitation", invitation_id)


def delete_invitations_by_lecture(db: Session, lecture_id: str) -> int:
    """Delete every invitation for a lecture. Returns how many were removed."""
    lecture_id = parse_id(lecture_id, "lecture_id")

    with storage_errors(db, "delete invitations"):
        deleted = db.query(Invitation).filter(Invitation.lecture_id == lecture_id).delete()
        db.commit()

    logger.info("invitations_deleted_by_lecture", lecture_id=lecture_id, count=deleted)
    return deleted
