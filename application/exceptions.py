"""
Application-layer exceptions.

These exceptions are raised by use cases and infrastructure and translated to
HTTP responses by the handlers registered in ``backend.main.create_app``:

- ValidationError -> 400
- ForbiddenError -> 403
- NotFoundError -> 404
- RepositoryError -> 500 (message hidden from clients, logged server-side)
"""


class TrainingLogError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TrainingLogError):
    """Missing or malformed input."""

    status_code = 400


class ForbiddenError(TrainingLogError):
    """The requester may not perform the operation."""

    status_code = 403


class NotFoundError(TrainingLogError):
    """A referenced day, block or user does not exist."""

    status_code = 404


class RepositoryError(TrainingLogError):
    """Error reading from or writing to the persistence layer.

    Raised by infrastructure adapters wrapping client/database failures.
    Never retried.
    """

    status_code = 500


class DayCompletionError(RepositoryError):
    """Error during the atomic day-completion commit.

    Raised when the block write and the progress writes could not be
    committed together. Neither side is applied.
    """
