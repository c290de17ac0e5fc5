class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class InvalidArgumentError(DomainError):
    """Raised when a request argument cannot be interpreted (e.g. a malformed date)."""

    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class MissingFieldError(DomainError):
    """Raised by the HTTP layer when a required request field is absent or blank."""

    def __init__(self, message: str) -> None:
        super().__init__(message, 400)
