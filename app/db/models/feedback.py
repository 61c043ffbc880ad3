"""Feedback model."""
from sqlalchemy import BigInteger, Boolean, Column, Index, String, Text, UniqueConstraint

from app.db.base import Base
from app.core.identifiers import new_id


class Feedback(Base):
    __tablename__ = "feedback"

    id = Column(String(24), primary_key=True, default=new_id)
    lecture_id = Column(String(24), nullable=False)
    user_id = Column(String(24), nullable=False)
    too_fast = Column(Boolean, nullable=False, default=False)
    too_slow = Column(Boolean, nullable=False, default=False)
    boring = Column(Boolean, nullable=False, default=False)
    bad_question_quality = Column(Boolean, nullable=False, default=False)
    other = Column(Text, nullable=False, default="")
    created_at = Column(BigInteger, nullable=False)  # epoch milliseconds

    __table_args__ = (
        UniqueConstraint("lecture_id", "user_id", name="uq_feedback_lecture_user"),
        Index("idx_feedback_lecture", "lecture_id"),
    )
