"""Feedback schemas."""
from pydantic import BaseModel, Field, field_validator

from app.core.sanitization import sanitize_message


class FeedbackSubmit(BaseModel):
    lecture_id: str
    user_id: str
    too_fast: bool = False
    too_slow: bool = False
    boring: bool = False
    bad_question_quality: bool = False
    other: str = Field("", max_length=2000)

    @field_validator('other', mode='before')
    @classmethod
    def sanitize_other_field(cls, v):
        if v is None:
            return ""
        return sanitize_message(v)


class FeedbackSubmitResponse(BaseModel):
    message: str = "Feedback submitted"
    created: bool
    id: str


class FeedbackSummary(BaseModel):
    too_fast: int
    too_slow: int
    boring: int
    bad_question_quality: int


class UserFeedback(BaseModel):
    too_fast: bool
    too_slow: bool
    boring: bool
    bad_question_quality: bool
    other: str


class FeedbackComment(BaseModel):
    user_id: str
    username: str
    avatar: str
    comment: str
