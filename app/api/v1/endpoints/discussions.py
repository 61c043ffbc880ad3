"""Discussion endpoints."""
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_db
from app.schemas import DiscussionCreate, DiscussionResponse, DiscussionWithAuthor
from app.services.discussions import add_discussion, get_discussions_by_lecture

router = APIRouter()


@router.post("", response_model=DiscussionResponse, status_code=201)
def add_discussion_endpoint(payload: DiscussionCreate, db: Session = Depends(get_db)):
    return add_discussion(db, payload.lecture_id, payload.user_id, payload.content)


@router.get("/lectures/{lecture_id}", response_model=List[DiscussionWithAuthor])
def list_discussions_endpoint(lecture_id: str, db: Session = Depends(get_db)):
    """
    Discussion thread of a lecture, oldest message first.

    Each message carries the poster's username and avatar. Messages from
    deleted users show "Unknown user" and an empty avatar.
    """
    return get_discussions_by_lecture(db, lecture_id)
