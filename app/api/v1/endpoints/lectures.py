"""Lecture endpoints."""
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_db
from app.schemas import LectureCreate, LectureUpdate, LectureResponse, SuccessResponse
from app.services.lectures import (
    create_lecture,
    get_all_lectures,
    get_lecture,
    get_lecture_by_code,
    get_lectures_by_organizer,
    get_lectures_by_speaker,
    update_lecture,
    delete_lecture,
)

router = APIRouter()


@router.post("", response_model=LectureResponse, status_code=201)
def create_lecture_endpoint(payload: LectureCreate, db: Session = Depends(get_db)):
    """
    Create a lecture with an automatically allocated 6-digit code.

    Args:
        payload: LectureCreate with topic, start_time (ISO 8601), duration,
                 organizer_id and optional description/speaker_id/status
        db: Database session (injected)

    Returns:
        LectureResponse with start_time in epoch milliseconds and the new
        lecturecode

    Raises:
        400 if organizer_id, speaker_id or start_time is malformed
        503 if no free lecture code was found within the attempt budget

    Example:
        Request:
            POST /api/v1/lectures
            {
                "topic": "Consensus protocols",
                "start_time": "2025-01-01T10:00:00.000Z",
                "duration": 90,
                "organizer_id": "65a1f0c2e4b0a1b2c3d4e5f6",
                "speaker_id": "",
                "status": 0
            }

        Response (201):
            {
                "id": "65a1f0d9c0ffee0011223344",
                "topic": "Consensus protocols",
                "start_time": 1735725600000,
                "duration": 90,
                "description": "",
                "speaker_id": null,
                "organizer_id": "65a1f0c2e4b0a1b2c3d4e5f6",
                "lecturecode": 482913,
                "status": 0
            }
    """
    return create_lecture(
        db,
        topic=payload.topic,
        start_time=payload.start_time,
        duration=payload.duration,
        organizer_id=payload.organizer_id,
        status=payload.status,
        description=payload.description,
        speaker_id=payload.speaker_id,
    )


@router.get("", response_model=List[LectureResponse])
def list_lectures_endpoint(db: Session = Depends(get_db)):
    return get_all_lectures(db)


@router.get("/by-organizer/{organizer_id}", response_model=List[LectureResponse])
def list_by_organizer_endpoint(organizer_id: str, db: Session = Depends(get_db)):
    return get_lectures_by_organizer(db, organizer_id)


@router.get("/by-speaker/{speaker_id}", response_model=List[LectureResponse])
def list_by_speaker_endpoint(speaker_id: str, db: Session = Depends(get_db)):
    return get_lectures_by_speaker(db, speaker_id)


@router.get("/by-code/{code}", response_model=LectureResponse)
def get_by_code_endpoint(code: int, db: Session = Depends(get_db)):
    """Look up a lecture by the code shared with its audience."""
    return get_lecture_by_code(db, code)


@router.get("/{lecture_id}", response_model=LectureResponse)
def get_lecture_endpoint(lecture_id: str, db: Session = Depends(get_db)):
    return get_lecture(db, lecture_id)


@router.put("/{lecture_id}", response_model=LectureResponse)
def update_lecture_endpoint(lecture_id: str, payload: LectureUpdate, db: Session = Depends(get_db)):
    """
    Partially update a lecture.

    Only fields present in the body are written. start_time accepts an
    ISO 8601 string or epoch milliseconds. A blank speaker_id clears the
    speaker. An empty body is rejected with 400.
    """
    return update_lecture(db, lecture_id, payload.model_dump(exclude_none=True))


@router.delete("/{lecture_id}", response_model=SuccessResponse)
def delete_lecture_endpoint(lecture_id: str, db: Session = Depends(get_db)):
    """
    Delete a lecture.

    Dependent invitations, attendance, feedback and discussion records are
    not removed; use the by-lecture delete endpoints for cleanup.
    """
    delete_lecture(db, lecture_id)
    return SuccessResponse(message=f"Lecture {lecture_id} deleted")
