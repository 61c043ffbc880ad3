"""Pydantic schemas for request/response validation."""
from app.schemas.user import (
    UserRegister,
    UserLogin,
    UserProfile,
    LoginResponse,
    UserUpdate,
    UserUpdateResponse,
)
from app.schemas.lecture import LectureCreate, LectureUpdate, LectureResponse
from app.schemas.invitation import InvitationCreate, InvitationResponse
from app.schemas.attendance import (
    AttendanceAdd,
    AttendanceJoin,
    PresenceUpdate,
    AttendanceRecord,
    PresenceResponse,
)
from app.schemas.feedback import (
    FeedbackSubmit,
    FeedbackSubmitResponse,
    FeedbackSummary,
    UserFeedback,
    FeedbackComment,
)
from app.schemas.discussion import DiscussionCreate, DiscussionResponse, DiscussionWithAuthor
from app.schemas.common import SuccessResponse, DeleteCountResponse, ErrorResponse, ErrorDetail

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserProfile",
    "LoginResponse",
    "UserUpdate",
    "UserUpdateResponse",
    "LectureCreate",
    "LectureUpdate",
    "LectureResponse",
    "InvitationCreate",
    "InvitationResponse",
    "AttendanceAdd",
    "AttendanceJoin",
    "PresenceUpdate",
    "AttendanceRecord",
    "PresenceResponse",
    "FeedbackSubmit",
    "FeedbackSubmitResponse",
    "FeedbackSummary",
    "UserFeedback",
    "FeedbackComment",
    "DiscussionCreate",
    "DiscussionResponse",
    "DiscussionWithAuthor",
    "SuccessResponse",
    "DeleteCountResponse",
    "ErrorResponse",
    "ErrorDetail",
]
