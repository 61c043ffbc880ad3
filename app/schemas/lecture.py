"""Lecture schemas."""
from typing import Optional, Union
from pydantic import BaseModel, Field, field_validator

from app.core.sanitization import sanitize_topic


class LectureCreate(BaseModel):
    topic: str = Field(..., min_length=1, max_length=200)
    start_time: str  # ISO 8601, e.g. "2025-01-01T10:00:00.000Z"
    duration: int = Field(..., ge=0)
    description: Optional[str] = None
    speaker_id: Optional[str] = None
    organizer_id: str
    status: int = 0

    @field_validator('topic')
    @classmethod
    def sanitize_topic_field(cls, v: str) -> str:
        """Sanitize and validate lecture topic."""
        return sanitize_topic(v)


class LectureUpdate(BaseModel):
    topic: Optional[str] = Field(None, max_length=200)
    start_time: Optional[Union[int, str]] = None  # ISO 8601 or epoch milliseconds
    duration: Optional[int] = Field(None, ge=0)
    description: Optional[str] = None
    speaker_id: Optional[str] = None
    organizer_id: Optional[str] = None
    status: Optional[int] = None


class LectureResponse(BaseModel):
    id: str
    topic: str
    start_time: int
    duration: int
    description: str
    speaker_id: Optional[str] = None
    organizer_id: str
    lecturecode: int
    status: int
