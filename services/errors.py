"""Domain errors raised by the services and mapped to HTTP responses in api.main."""


class ExerciseTrackerError(Exception):
    """Base error carrying a message that is safe to show to clients."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ExerciseTrackerError):
    """Client input is missing or malformed."""

    status_code = 400


class NotFoundError(ExerciseTrackerError):
    """The referenced user does not exist."""

    status_code = 404

    def __init__(self, message: str = "User not found"):
        super().__init__(message)


class PersistenceError(ExerciseTrackerError):
    """The record store failed unexpectedly; details are logged, not returned."""

    status_code = 500
