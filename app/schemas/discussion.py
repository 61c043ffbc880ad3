"""Discussion schemas."""
from pydantic import BaseModel, field_validator

from app.core.sanitization import sanitize_message


class DiscussionCreate(BaseModel):
    lecture_id: str
    user_id: str
    content: str

    @field_validator('content')
    @classmethod
    def sanitize_content_field(cls, v: str) -> str:
        # Blank content is rejected by the service with a 400
        return sanitize_message(v)


class DiscussionResponse(BaseModel):
    id: str
    lecture_id: str
    user_id: str
    content: str
    created_at: int


class DiscussionWithAuthor(DiscussionResponse):
    username: str
    avatar: str
