"""Database models."""
from app.db.models.user import User
from app.db.models.lecture import Lecture
from app.db.models.invitation import Invitation
from app.db.models.attendance import Attendance
from app.db.models.feedback import Feedback
from app.db.models.discussion import Discussion

__all__ = ["User", "Lecture", "Invitation", "Attendance", "Feedback", "Discussion"]
