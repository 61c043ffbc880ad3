"""Attendance model."""
from sqlalchemy import BigInteger, Boolean, Column, Index, String, UniqueConstraint

from app.db.base import Base
from app.core.identifiers import new_id


class Attendance(Base):
    __tablename__ = "attendances"

    id = Column(String(24), primary_key=True, default=new_id)
    lecture_id = Column(String(24), nullable=False)
    audience_id = Column(String(24), nullable=False)
    is_present = Column(Boolean, nullable=False, default=False)
    joined_at = Column(BigInteger, nullable=False)  # epoch milliseconds

    __table_args__ = (
        UniqueConstraint("lecture_id", "audience_id", name="uq_attendance_lecture_audience"),
        Index("idx_attendances_audience", "audience_id"),
    )
