"""Error codes and exceptions raised by the generator."""
from enum import Enum

from pydantic import BaseModel


class ErrorCode(str, Enum):
    """Error codes surfaced to callers."""

    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    MISSING_BUFFER = "MISSING_BUFFER"


# Every failure is a programming error at the call site, never transient.
ERROR_RECOVERABLE: dict[ErrorCode, bool] = {
    ErrorCode.INVALID_ARGUMENT: False,
    ErrorCode.MISSING_BUFFER: False,
}


class ErrorBody(BaseModel):
    """Structured error shape for reports and logs."""

    code: str
    message: str
    recoverable: bool


class RandomError(Exception):
    """Base error for all generator failures."""

    def __init__(self, code: ErrorCode, message: str | None = None):
        self.code = code
        self.message = message or f"Error: {code.value}"
        self.recoverable = ERROR_RECOVERABLE[code]
        super().__init__(self.message)

    def to_body(self) -> ErrorBody:
        """Convert to a serializable ErrorBody."""
        return ErrorBody(
            code=self.code.value,
            message=self.message,
            recoverable=self.recoverable,
        )


class InvalidArgumentError(RandomError, ValueError):
    """An argument is outside the range the operation accepts."""

    def __init__(self, param: str, message: str | None = None):
        self.param = param
        super().__init__(
            ErrorCode.INVALID_ARGUMENT,
            message or f"Invalid value for argument '{param}'.",
        )


class MissingBufferError(RandomError, TypeError):
    """next_bytes was called without a buffer."""

    def __init__(self, param: str = "buffer"):
        self.param = param
        super().__init__(
            ErrorCode.MISSING_BUFFER,
            f"Argument '{param}' must be a writable buffer, got None.",
        )
