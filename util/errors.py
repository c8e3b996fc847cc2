# util/errors.py
from fastapi import HTTPException, status
from util.enums import ErrorMessage


class AppError(HTTPException):
    # Flow: raise AppError to short-circuit with a typed status & message.
    def __init__(
        self, message: str, http_status: int = status.HTTP_400_BAD_REQUEST
    ) -> None:
        super().__init__(status_code=http_status, detail=message)


class VestingError(AppError):
    """
    Program error with a stable code.

    Every VestingError aborts the whole operation; nothing has been written
    when it is raised.
    """

    def __init__(self, error: ErrorMessage, message: str | None = None) -> None:
        self.error = error
        self.code = error.value.code
        self.message = message or error.value.message
        super().__init__(self.message, error.value.http_status)

    def envelope(self) -> dict:
        return {"ok": False, "error": self.code, "message": self.message}
