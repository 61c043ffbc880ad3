"""Application constants.

This module contains magic strings and numbers used throughout the application.
Centralizing these values makes them easier to maintain and modify.
"""

# Identifiers
# Entity ids are 12 bytes rendered as 24 lowercase hex characters
ID_HEX_LENGTH = 24

# Lecture Code Configuration
# Lecture codes are 6-digit integers shared verbally with the audience
LECTURE_CODE_MIN = 100000
LECTURE_CODE_MAX = 999999
LECTURE_CODE_MAX_ATTEMPTS = 20

# Invitation states
INVITATION_PENDING = 0
INVITATION_ACCEPTED = 1

# Feedback flags, in display order
FEEDBACK_FLAGS = ("too_fast", "too_slow", "boring", "bad_question_quality")

# Placeholders used when a referenced user no longer exists
UNKNOWN_USERNAME = "Unknown user"
UNKNOWN_AVATAR = ""

# Email format accepted at registration
EMAIL_PATTERN = r"^[a-zA-Z0-9_.+-]+@[a-zA-Z0-9-]+\.[a-zA-Z0-9-.]+$"
