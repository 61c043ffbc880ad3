from .attendance import (
    add_attendance,
    delete_attendance,
    delete_attendance_by_lecture,
    get_attendance_by_audience,
    get_attendance_by_lecture,
    get_lectures_by_user,
    get_present_users,
    join_lecture,
    upsert_presence,
)
from .discussions import add_discussion, get_discussions_by_lecture
from .feedback import (
    get_feedback_comments,
    get_feedback_summary,
    get_user_feedback,
    submit_feedback,
)
from .invitations import (
    accept_invitation,
    create_invitation,
    delete_invitation,
    delete_invitations_by_lecture,
    get_all_invitations,
    get_invitation,
    get_invitations_by_speaker,
    update_invitation,
)
from .lectures import (
    create_lecture,
    delete_lecture,
    get_all_lectures,
    get_lecture,
    get_lecture_by_code,
    get_lectures_by_organizer,
    get_lectures_by_speaker,
    update_lecture,
)
from .users import (
    authenticate_user,
    get_all_users,
    get_user,
    register_user,
    update_user_profile,
)

__all__ = [
    # attendance
    "add_attendance",
    "delete_attendance",
    "delete_attendance_by_lecture",
    "get_attendance_by_audience",
    "get_attendance_by_lecture",
    "get_lectures_by_user",
    "get_present_users",
    "join_lecture",
    "upsert_presence",
    # discussions
    "add_discussion",
    "get_discussions_by_lecture",
    # feedback
    "get_feedback_comments",
    "get_feedback_summary",
    "get_user_feedback",
    "submit_feedback",
    # invitations
    "accept_invitation",
    "create_invitation",
    "delete_invitation",
    "delete_invitations_by_lecture",
    "get_all_invitations",
    "get_invitation",
    "get_invitations_by_speaker",
    "update_invitation",
    # lectures
    "create_lecture",
    "delete_lecture",
    "get_all_lectures",
    "get_lecture",
    "get_lecture_by_code",
    "get_lectures_by_organizer",
    "get_lectures_by_speaker",
    "update_lecture",
    # users
    "authenticate_user",
    "get_all_users",
    "get_user",
    "register_user",
    "update_user_profile",
]
