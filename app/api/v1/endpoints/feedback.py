"""Feedback endpoints."""
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_db
from app.schemas import (
    FeedbackSubmit,
    FeedbackSubmitResponse,
    FeedbackSummary,
    UserFeedback,
    FeedbackComment,
)
from app.services.feedback import (
    submit_feedback,
    get_feedback_summary,
    get_user_feedback,
    get_feedback_comments,
)

router = APIRouter()


@router.post("", response_model=FeedbackSubmitResponse)
def submit_feedback_endpoint(payload: FeedbackSubmit, db: Session = Depends(get_db)):
    """
    Submit feedback for a lecture.

    Each user holds at most one feedback record per lecture. A repeated
    submission replaces every flag and the comment of the earlier one.

    Example:
        Request:
            POST /api/v1/feedback
            {
                "lecture_id": "65a1f0c2e4b0a1b2c3d4e5f6",
                "user_id": "65a1f0aa00112233445566ff",
                "too_fast": true,
                "other": "Slides were hard to read"
            }

        Response (200):
            {"message": "Feedback submitted", "created": true, "id": "65a1f0d9c0ffee0011223344"}
    """
    result = submit_feedback(
        db,
        payload.lecture_id,
        payload.user_id,
        too_fast=payload.too_fast,
        too_slow=payload.too_slow,
        boring=payload.boring,
        bad_question_quality=payload.bad_question_quality,
        other=payload.other,
    )
    message = "Feedback submitted" if result["created"] else "Feedback updated"
    return FeedbackSubmitResponse(message=message, **result)


@router.get("/lectures/{lecture_id}/summary", response_model=FeedbackSummary)
def feedback_summary_endpoint(lecture_id: str, db: Session = Depends(get_db)):
    """Per-flag counts; a lecture without feedback reports all zeros."""
    return get_feedback_summary(db, lecture_id)


@router.get("/lectures/{lecture_id}/users/{user_id}", response_model=UserFeedback)
def user_feedback_endpoint(lecture_id: str, user_id: str, db: Session = Depends(get_db)):
    return get_user_feedback(db, lecture_id, user_id)


@router.get("/lectures/{lecture_id}/comments", response_model=List[FeedbackComment])
def feedback_comments_endpoint(lecture_id: str, db: Session = Depends(get_db)):
    return get_feedback_comments(db, lecture_id)
