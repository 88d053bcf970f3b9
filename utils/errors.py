"""
Exception hierarchy for the Workout Tracker API.

Services turn these into failed ``ServiceResult`` objects; anything that
escapes to FastAPI is rendered by the handlers registered in ``main.py``.
"""


class WorkoutTrackerError(Exception):
    """
    Base exception for the application.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code used when the error reaches the API.
    """

    def __init__(self, message: str = "An error occurred", status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class EntryNullError(WorkoutTrackerError):
    """Raised when a required entry is missing from the request."""

    def __init__(self, entry: str):
        super().__init__(message=f"{entry} entry is null.", status_code=400)


class ArgumentNullOrEmptyError(WorkoutTrackerError):
    def __init__(self, argument: str):
        super().__init__(message=f"{argument} cannot be null or empty.", status_code=400)


class InvalidIDError(WorkoutTrackerError):
    def __init__(self, entry: str):
        super().__init__(message=f"Invalid {entry} ID.", status_code=400)


class ValidationError(WorkoutTrackerError):
    """Raised when input data fails a business rule."""

    def __init__(self, message: str = "Validation failed"):
        super().__init__(message=message, status_code=400)


class NotFoundError(WorkoutTrackerError):
    """Raised when a requested entry does not exist."""

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message=message, status_code=404)

    @classmethod
    def by_id(cls, entry: str, entry_id) -> "NotFoundError":
        return cls(f"{entry} with ID {entry_id} not found.")

    @classmethod
    def by_name(cls, entry: str, name: str) -> "NotFoundError":
        return cls(f"{entry} with name '{name}' not found.")


class PermissionDeniedError(WorkoutTrackerError):
    def __init__(self, message: str = "Permission denied"):
        super().__init__(message=message, status_code=403)


class AuthenticationError(WorkoutTrackerError):
    """
    Raised for authentication failures.

    Used when credentials are wrong, a token is missing or expired, or the
    token subject no longer exists.
    """

    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message=message, status_code=401)
