"""
Error conditions raised by the service layer.

Every class is an ``HTTPException`` so a service error reaches the client
with the right status code without any translation in the routers, while
service-level tests can still assert on the specific class.
"""
from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404: the requested resource does not exist."""

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class UserNotFoundError(NotFoundError):
    def __init__(self, username: str | int | None = None) -> None:
        detail = "User not found" if username is None else f"User not found: {username}"
        super().__init__(detail)


class BoardNotFoundError(NotFoundError):
    def __init__(self, board_id: int | None = None) -> None:
        detail = "Board not found" if board_id is None else f"Board not found: {board_id}"
        super().__init__(detail)


class KindBoardNotFoundError(NotFoundError):
    def __init__(self, key: str | int | None = None) -> None:
        detail = "Kind board not found" if key in (None, "") else f"Kind board not found: {key}"
        super().__init__(detail)


class BadRequestError(HTTPException):
    """400: the request is well-formed but violates a business rule."""

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class InvalidArgumentError(BadRequestError):
    """
    Raised for arguments the service cannot act on, e.g. a full-replace
    update missing a required field or an unknown update method.
    """


class DuplicateError(HTTPException):
    """409: creating the resource would violate a uniqueness constraint."""

    def __init__(self, detail: str = "Resource already exists") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class ForbiddenError(HTTPException):
    """403: the acting user may not perform this operation."""

    def __init__(self, detail: str = "Insufficient permissions") -> None:
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)
