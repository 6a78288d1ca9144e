from __future__ import annotations

from fastapi import HTTPException, Request
from starlette.responses import JSONResponse

from student_records.core.logging import get_logger


class ApiError(HTTPException):
    """HTTP error raised from handlers and services; rendered as {"detail": message}."""

    def __init__(self, status_code: int, message: str):
        super().__init__(status_code=status_code, detail=message)
        self.message = message


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    get_logger().bind(path=request.url.path, method=request.method).exception(
        "request.unhandled", error=str(exc)
    )
    return JSONResponse({"detail": "Internal Server Error"}, status_code=500)
