"""User schemas."""
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator

from app.core.sanitization import sanitize_username, MAX_URL_LENGTH


class UserRegister(BaseModel):
    username: str = Field(..., min_length=1, max_length=50)
    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=1)
    role: int = 0

    @field_validator('username')
    @classmethod
    def sanitize_username_field(cls, v: str) -> str:
        return sanitize_username(v)


class UserLogin(BaseModel):
    email: str
    password: str


class UserProfile(BaseModel):
    id: str
    username: str
    email: str
    role: int
    avatar: str
    background: str
    gender: Optional[int] = None
    age: Optional[int] = None
    motto: Optional[str] = None


class LoginResponse(BaseModel):
    message: str = "Login successful"
    user: UserProfile


class UserUpdate(BaseModel):
    username: Optional[str] = Field(None, max_length=50)
    gender: Optional[int] = None
    age: Optional[int] = Field(None, ge=0, le=150)
    motto: Optional[str] = Field(None, max_length=500)
    avatar: Optional[str] = Field(None, max_length=MAX_URL_LENGTH)
    background: Optional[str] = Field(None, max_length=MAX_URL_LENGTH)


class UserUpdateResponse(BaseModel):
    message: str = "Profile updated"
    updated_fields: List[str]
