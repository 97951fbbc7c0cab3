"""Profile-related domain exceptions."""

from .base import DomainException


class InvalidProfileException(DomainException):
    """Raised when a financial profile violates its invariants."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INVALID_PROFILE",
        )


class ProfileNotFoundException(DomainException):
    """Raised when no profile has been stored for the active session."""

    def __init__(self, storage_key: str):
        super().__init__(
            message=f"Profile not found: {storage_key}",
            code="PROFILE_NOT_FOUND",
        )
        self.storage_key = storage_key


class ProfileStorageException(DomainException):
    """Raised when the profile store cannot be read or written."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="PROFILE_STORAGE_ERROR",
        )
