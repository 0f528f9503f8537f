"""
HTTP error taxonomy shared by routes, handlers and auth dependencies
"""
from fastapi import HTTPException


class InvalidInputError(HTTPException):
    def __init__(self, detail: str = "Invalid input"):
        super().__init__(status_code=400, detail=detail)


class ConflictError(HTTPException):
    def __init__(self, detail: str = "User already exists"):
        super().__init__(status_code=400, detail=detail)


class InvalidCredentialsError(HTTPException):
    # Same message for unknown email and wrong password
    def __init__(self):
        super().__init__(status_code=400, detail="Invalid credentials")


class UnauthenticatedError(HTTPException):
    def __init__(self, detail: str = "Not authenticated"):
        super().__init__(
            status_code=401,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class NotFoundError(HTTPException):
    def __init__(self, detail: str = "Not found"):
        super().__init__(status_code=404, detail=detail)
