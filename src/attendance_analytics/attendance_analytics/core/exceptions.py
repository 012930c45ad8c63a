class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class StudentNotFoundError(DomainError):
    """Raised when the requested student does not exist."""

    def __init__(self, student_id: int):
        super().__init__(f"Student {student_id} not found")
        self.student_id = student_id


class EventStoreUnavailableError(DomainError):
    """Raised when attendance data cannot be read (transient failure)."""
