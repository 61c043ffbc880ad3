"""Lecture model."""
from sqlalchemy import BigInteger, Column, Integer, String, Text

from app.db.base import Base
from app.core.identifiers import new_id


class Lecture(Base):
    __tablename__ = "lectures"

    id = Column(String(24), primary_key=True, default=new_id)
    topic = Column(String(200), nullable=False)
    start_time = Column(BigInteger, nullable=False)  # epoch milliseconds
    duration = Column(Integer, nullable=False)
    description = Column(Text, nullable=False, default="")
    speaker_id = Column(String(24), nullable=True, index=True)
    organizer_id = Column(String(24), nullable=False, index=True)
    lecturecode = Column(Integer, unique=True, nullable=False, index=True)
    status = Column(Integer, nullable=False, default=0)
