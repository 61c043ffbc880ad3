"""Main API router for v1."""
from fastapi import APIRouter

from app.api.v1.endpoints import users, lectures, invitations, attendance, feedback, discussions

api_router = APIRouter(prefix="/api/v1")

# Include all endpoint routers
api_router.include_router(users.router, prefix="/users", tags=["Users"])
api_router.include_router(lectures.router, prefix="/lectures", tags=["Lectures"])
api_router.include_router(invitations.router, prefix="/invitations", tags=["Invitations"])
api_router.include_router(attendance.router, prefix="/attendance", tags=["Attendance"])
api_router.include_router(feedback.router, prefix="/feedback", tags=["Feedback"])
api_router.include_router(discussions.router, prefix="/discussions", tags=["Discussions"])
