"""Invitation model."""
from sqlalchemy import Column, Integer, String

from app.db.base import Base
from app.core.constants import INVITATION_PENDING
from app.core.identifiers import new_id


class Invitation(Base):
    __tablename__ = "invitations"

    id = Column(String(24), primary_key=True, default=new_id)
    # Plain references, no foreign keys: lectures may be deleted independently
    lecture_id = Column(String(24), nullable=False, index=True)
    speaker_id = Column(String(24), nullable=False, index=True)
    status = Column(Integer, nullable=False, default=INVITATION_PENDING)
