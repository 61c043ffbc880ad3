"""Attendance schemas."""
from typing import Optional
from pydantic import BaseModel


class AttendanceAdd(BaseModel):
    lecture_id: str
    audience_id: str
    is_present: bool = False
    joined_at: Optional[int] = None  # epoch milliseconds, defaults to now


class AttendanceJoin(BaseModel):
    lecture_id: str
    audience_id: str


class PresenceUpdate(BaseModel):
    lecture_id: str
    audience_id: str
    is_present: bool


class AttendanceRecord(BaseModel):
    id: str
    lecture_id: str
    audience_id: str
    is_present: bool
    joined_at: int


class PresenceResponse(BaseModel):
    message: str
    created: bool
    id: str
    is_present: bool
    joined_at: int
