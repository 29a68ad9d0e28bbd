"""Protocol errors raised by reference construction and coordinate lookup."""

from typing import Any


class WebDriverError(Exception):
    """Base exception for all protocol errors.

    ``status`` is the WebDriver error code sent back to the remote end.
    """

    status: str = "unknown error"

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        if self.message:
            return f"{self.__class__.__name__}: {self.message}"
        return self.__class__.__name__

    def to_json(self) -> dict[str, Any]:
        return {
            "error": self.status,
            "message": self.message,
            "stacktrace": "",
        }


class InvalidArgumentError(WebDriverError):
    """Raised when an argument is not a recognised node, context or reference payload."""

    status = "invalid argument"


class NullInputError(WebDriverError, ValueError):
    """Raised when a required node is missing."""

    status = "invalid argument"


class TypeMismatchError(WebDriverError, TypeError):
    """Raised when an argument has the wrong type."""

    status = "invalid argument"
