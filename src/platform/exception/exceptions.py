from typing import Any


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io

    ``context`` carries the identifiers involved in the failure (reservation id,
    book external id, ...) so callers can react without parsing the message.
    """

    def __init__(self, message: str, status_code: int, **context: Any) -> None:
        self.message = message
        self.status_code = status_code
        self.context = context
        super().__init__(message)

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ', '.join(f'{key}={value}' for key, value in self.context.items())
        return f'{self.message} ({details})'


class NotFoundError(CustomBaseError):
    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message, 404, **context)


class InvalidStateError(CustomBaseError):
    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message, 409, **context)


class InvalidInputError(CustomBaseError):
    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message, 400, **context)
