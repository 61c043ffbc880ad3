"""Domain exceptions raised by the service layer.

Each class carries the HTTP status and a stable error code so the API layer
can render every failure through a single handler.
"""


class LectureHubError(Exception):
    """Base exception for all service-layer errors."""

    status_code = 500
    code = "internal_error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidArgumentError(LectureHubError, ValueError):
    """Malformed identifier or timestamp, missing field, or empty update."""

    status_code = 400
    code = "invalid_argument"


class UnauthorizedError(LectureHubError):
    """Credentials did not match."""

    status_code = 401
    code = "unauthorized"


class NotFoundError(LectureHubError):
    """Referenced entity does not exist."""

    status_code = 404
    code = "not_found"

    def __init__(self, entity: str, key=None):
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} not found")


class ConflictError(LectureHubError):
    """A uniqueness rule would be violated."""

    status_code = 409
    code = "conflict"


class InternalError(LectureHubError):
    """Unexpected storage failure."""


class CodeAllocationError(InternalError):
    """No free lecture code was found within the attempt budget."""

    status_code = 503
    code = "code_allocation_exhausted"

    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(f"Failed to allocate a unique lecture code after {attempts} attempts")
