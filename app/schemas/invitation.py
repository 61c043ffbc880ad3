"""Invitation schemas."""
from pydantic import BaseModel, Field

from app.core.constants import INVITATION_PENDING, INVITATION_ACCEPTED


class InvitationCreate(BaseModel):
    lecture_id: str
    speaker_id: str
    status: int = Field(INVITATION_PENDING, ge=INVITATION_PENDING, le=INVITATION_ACCEPTED)


class InvitationResponse(BaseModel):
    id: str
    lecture_id: str
    speaker_id: str
    status: int
