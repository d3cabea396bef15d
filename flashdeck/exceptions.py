"""Custom exception hierarchy for flashdeck."""


class FlashdeckError(Exception):
    """Base exception for all errors rendered by the HTTP layer."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class ValidationError(FlashdeckError):
    """Validation error."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        """Initialize with message and 400 status code."""
        super().__init__(message, status_code=status_code)
