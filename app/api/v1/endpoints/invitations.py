"""Invitation endpoints."""
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_db
from app.schemas import InvitationCreate, InvitationResponse, SuccessResponse, DeleteCountResponse
from app.services.invitations import (
    create_invitation,
    get_all_invitations,
    get_invitation,
    get_invitations_by_speaker,
    update_invitation,
    accept_invitation,
    delete_invitation,
    delete_invitations_by_lecture,
)

router = APIRouter()


@router.post("", response_model=InvitationResponse, status_code=201)
def create_invitation_endpoint(payload: InvitationCreate, db: Session = Depends(get_db)):
    return create_invitation(db, payload.lecture_id, payload.speaker_id, payload.status)


@router.get("", response_model=List[InvitationResponse])
def list_invitations_endpoint(db: Session = Depends(get_db)):
    return get_all_invitations(db)


@router.get("/by-speaker/{speaker_id}", response_model=List[InvitationResponse])
def list_by_speaker_endpoint(speaker_id: str, db: Session = Depends(get_db)):
    return get_invitations_by_speaker(db, speaker_id)


@router.delete("/by-lecture/{lecture_id}", response_model=DeleteCountResponse)
def delete_by_lecture_endpoint(lecture_id: str, db: Session = Depends(get_db)):
    """Remove all invitations of a lecture, typically after deleting the lecture."""
    deleted = delete_invitations_by_lecture(db, lecture_id)
    return DeleteCountResponse(message=f"Invitations for lecture {lecture_id} deleted", deleted=deleted)


@router.get("/{invitation_id}", response_model=InvitationResponse)
def get_invitation_endpoint(invitation_id: str, db: Session = Depends(get_db)):
    return get_invitation(db, invitation_id)


@router.put("/{invitation_id}", response_model=InvitationResponse)
def update_invitation_endpoint(invitation_id: str, payload: InvitationCreate, db: Session = Depends(get_db)):
    """Replace an invitation's lecture, speaker and status."""
    return update_invitation(db, invitation_id, payload.lecture_id, payload.speaker_id, payload.status)


@router.put("/{invitation_id}/accept", response_model=InvitationResponse)
def accept_invitation_endpoint(invitation_id: str, db: Session = Depends(get_db)):
    """
    Accept an invitation and assign its speaker to the lecture.

    The invitation status and the lecture's speaker_id are written as two
    separate updates. If the second one fails the response is 500 while the
    invitation already shows as accepted; calling this endpoint again is safe
    and completes the assignment.

    Example:
        Request:
            PUT /api/v1/invitations/65a1f0d9c0ffee0011223344/accept

        Response (200):
            {
                "id": "65a1f0d9c0ffee0011223344",
                "lecture_id": "65a1f0c2e4b0a1b2c3d4e5f6",
                "speaker_id": "65a1f0aa00112233445566ff",
                "status": 1
            }
    """
    return accept_invitation(db, invitation_id)


@router.delete("/{invitation_id}", response_model=SuccessResponse)
def delete_invitation_endpoint(invitation_id: str, db: Session = Depends(get_db)):
    delete_invitation(db, invitation_id)
    return SuccessResponse(message=f"Invitation {invitation_id} deleted")
