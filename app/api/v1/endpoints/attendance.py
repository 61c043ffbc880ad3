"""Attendance endpoints."""
from typing import List
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.api.deps import get_db
from app.schemas import (
    AttendanceAdd,
    AttendanceJoin,
    PresenceUpdate,
    AttendanceRecord,
    PresenceResponse,
    UserProfile,
    SuccessResponse,
    DeleteCountResponse,
)
from app.services.attendance import (
    add_attendance,
    join_lecture,
    upsert_presence,
    get_attendance_by_lecture,
    get_attendance_by_audience,
    get_present_users,
    get_lectures_by_user,
    delete_attendance,
    delete_attendance_by_lecture,
)

router = APIRouter()


@router.post("/add", response_model=AttendanceRecord, status_code=201)
def add_attendance_endpoint(payload: AttendanceAdd, db: Session = Depends(get_db)):
    """Insert an attendance record as given; 409 if one exists for the pair."""
    return add_attendance(db, payload.lecture_id, payload.audience_id, payload.is_present, payload.joined_at)


@router.post("/join", response_model=AttendanceRecord, status_code=201)
def join_lecture_endpoint(payload: AttendanceJoin, db: Session = Depends(get_db)):
    """Join a lecture as audience; presence starts as false."""
    return join_lecture(db, payload.lecture_id, payload.audience_id)


@router.post("/presence", response_model=PresenceResponse)
def update_presence_endpoint(payload: PresenceUpdate, db: Session = Depends(get_db)):
    """
    Set an audience member's presence, creating the record when missing.

    The match-or-insert happens in one statement, so repeated or concurrent
    calls for the same lecture and audience member always leave exactly one
    record. joined_at is refreshed on every call.

    Example:
        Request:
            POST /api/v1/attendance/presence
            {
                "lecture_id": "65a1f0c2e4b0a1b2c3d4e5f6",
                "audience_id": "65a1f0aa00112233445566ff",
                "is_present": true
            }

        Response (200):
            {
                "message": "Record created",
                "created": true,
                "id": "65a1f0d9c0ffee0011223344",
                "is_present": true,
                "joined_at": 1735725600000
            }
    """
    result = upsert_presence(db, payload.lecture_id, payload.audience_id, payload.is_present)
    message = "Record created" if result["created"] else "Presence updated"
    return PresenceResponse(message=message, **result)


@router.get("/by-lecture", response_model=List[AttendanceRecord])
def list_by_lecture_endpoint(lecture_id: str = Query(...), db: Session = Depends(get_db)):
    return get_attendance_by_lecture(db, lecture_id)


@router.get("/by-audience", response_model=List[AttendanceRecord])
def list_by_audience_endpoint(audience_id: str = Query(...), db: Session = Depends(get_db)):
    return get_attendance_by_audience(db, audience_id)


@router.get("/present", response_model=List[UserProfile])
def list_present_users_endpoint(lecture_id: str = Query(...), db: Session = Depends(get_db)):
    """Profiles of audience members currently present; deleted users are skipped."""
    return get_present_users(db, lecture_id)


@router.get("/by-user/{user_id}", response_model=List[AttendanceRecord])
def list_by_user_endpoint(user_id: str, db: Session = Depends(get_db)):
    return get_lectures_by_user(db, user_id)


@router.delete("", response_model=SuccessResponse)
def delete_attendance_endpoint(
    lecture_id: str = Query(...),
    audience_id: str = Query(...),
    db: Session = Depends(get_db)
):
    delete_attendance(db, lecture_id, audience_id)
    return SuccessResponse(message="Attendance deleted")


@router.delete("/by-lecture/{lecture_id}", response_model=DeleteCountResponse)
def delete_by_lecture_endpoint(lecture_id: str, db: Session = Depends(get_db)):
    deleted = delete_attendance_by_lecture(db, lecture_id)
    return DeleteCountResponse(message=f"Attendance for lecture {lecture_id} deleted", deleted=deleted)
