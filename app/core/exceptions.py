"""
Domain errors and their HTTP translation.

Services raise the errors defined here; the handlers registered by
``register_exception_handlers`` turn them into the structured error body
``{timestamp, status, error, message, path}``.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Union

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from app.core.logging import logger


class ErrorCategory:
    NOT_FOUND = "Resource Not Found"
    INVALID_INPUT = "Invalid Input"
    VALIDATION_FAILED = "Validation Failed"
    CONFLICT = "Conflict"
    INTERNAL_SERVER_ERROR = "Internal Server Error"


class StaffManagementError(Exception):
    """Base class for every error raised by the service layer."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    category: str = ErrorCategory.INVALID_INPUT

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class StaffNotFoundError(StaffManagementError):
    status_code = status.HTTP_404_NOT_FOUND
    category = ErrorCategory.NOT_FOUND

    def __init__(self, staff_id: int):
        super().__init__(f"Staff not found with id: {staff_id}")
        self.staff_id = staff_id


class NoStaffError(StaffManagementError):
    """Raised when an aggregate needs at least one staff record."""

    status_code = status.HTTP_404_NOT_FOUND
    category = ErrorCategory.NOT_FOUND

    def __init__(self):
        super().__init__("No staff records exist")


class DepartmentNotFoundError(StaffManagementError):
    status_code = status.HTTP_404_NOT_FOUND
    category = ErrorCategory.NOT_FOUND

    def __init__(self, department_id: int):
        super().__init__(f"Department not found with id: {department_id}")
        self.department_id = department_id


class DepartmentReferenceError(StaffManagementError):
    """A staff payload points at a department that does not exist."""

    def __init__(self, department_id: int):
        super().__init__(f"Department not found with id: {department_id}")
        self.department_id = department_id


class DuplicateDepartmentError(StaffManagementError):
    status_code = status.HTTP_409_CONFLICT
    category = ErrorCategory.CONFLICT

    def __init__(self, name: str):
        super().__init__(f"Department already exists with name: {name}")
        self.name = name


class DepartmentInUseError(StaffManagementError):
    status_code = status.HTTP_409_CONFLICT
    category = ErrorCategory.CONFLICT

    def __init__(self, department_id: int, staff_count: int):
        super().__init__(
            f"Department {department_id} still has {staff_count} staff member(s) assigned"
        )
        self.department_id = department_id
        self.staff_count = staff_count


class InvalidInputError(StaffManagementError):
    pass


def error_body(
    request: Request,
    status_code: int,
    category: str,
    message: Union[str, Dict[str, str]],
) -> Dict[str, Any]:
    """Build the error payload returned for every failed request."""
    return {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "status": status_code,
        "error": category,
        "message": message,
        "path": request.url.path,
    }


async def staff_management_error_handler(
    request: Request, exc: StaffManagementError
) -> JSONResponse:
    logger.warning(f"{exc.category} on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(request, exc.status_code, exc.category, exc.message),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handle Pydantic validation errors.

    FastAPI answers these with 422 by default; here they become a 400 whose
    message maps each offending field to its first error.
    """
    field_errors: Dict[str, str] = {}
    for error in exc.errors():
        loc = error.get("loc", ())
        if error.get("type") == "json_invalid":
            # loc carries the character offset of the syntax error
            field = "body"
        else:
            field = ".".join(
                str(part) for part in loc if part not in ("body", "query", "path")
            ) or "request"
        message = error.get("msg", "Invalid value")
        # ValueError raised inside our own validators is prefixed by pydantic
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        field_errors.setdefault(field, message)

    logger.info(f"Validation failed on {request.method} {request.url.path}: {field_errors}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(
            request,
            status.HTTP_400_BAD_REQUEST,
            ErrorCategory.VALIDATION_FAILED,
            field_errors,
        ),
    )


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """Keep raw constraint violations from leaking to the client."""
    logger.warning(f"IntegrityError on {request.method} {request.url.path}: {exc.orig}")
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content=error_body(
            request,
            status.HTTP_409_CONFLICT,
            ErrorCategory.CONFLICT,
            "The request conflicts with existing data",
        ),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.opt(exception=exc).error(
        f"Unhandled exception on {request.method} {request.url.path}"
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(
            request,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorCategory.INTERNAL_SERVER_ERROR,
            "An unexpected error occurred",
        ),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StaffManagementError, staff_management_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
