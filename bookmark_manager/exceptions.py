from fastapi import Request
from fastapi.responses import JSONResponse


class BookmarkManagerError(Exception):
    """Base class for all application errors."""


class EmailAlreadyRegisteredError(BookmarkManagerError):
    """Raised when the database rejects a second account for the same email."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Email already registered: {email}")


async def email_already_registered_handler(request: Request, exc: EmailAlreadyRegisteredError):
    return JSONResponse(
        status_code=409,
        content={
            "error": "Conflict",
            "message": "Email already registered.",
            "field": "email",
        },
    )
