"""User model."""
from sqlalchemy import Column, Integer, String

from app.db.base import Base
from app.core.identifiers import new_id


class User(Base):
    __tablename__ = "users"

    id = Column(String(24), primary_key=True, default=new_id)
    username = Column(String(50), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)  # Argon2 hash, never returned
    role = Column(Integer, nullable=False, default=0)
    avatar = Column(String(500), nullable=False, default="")
    background = Column(String(500), nullable=False, default="")
    gender = Column(Integer, nullable=True)
    age = Column(Integer, nullable=True)
    motto = Column(String(500), nullable=True)
