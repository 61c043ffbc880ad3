"""Discussion model."""
from sqlalchemy import BigInteger, Column, Index, String, Text

from app.db.base import Base
from app.core.identifiers import new_id


class Discussion(Base):
    __tablename__ = "discussions"

    id = Column(String(24), primary_key=True, default=new_id)
    lecture_id = Column(String(24), nullable=False)
    user_id = Column(String(24), nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(BigInteger, nullable=False)  # epoch milliseconds

    __table_args__ = (Index("idx_discussions_lecture", "lecture_id", "created_at"),)
