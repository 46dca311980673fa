from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from wealth_id.models.constants import VALID_COUNTRIES

logger = logging.getLogger("wealth_id.errors")

NOT_FOUND_MESSAGE = "Endpoint not found"
INTERNAL_ERROR_MESSAGE = "Internal server error"


class ConversionError(ValueError):
    """Client input rejected by conversion request validation."""

    code = "ConversionError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingFieldsError(ConversionError):
    code = "MissingFields"

    def __init__(self) -> None:
        super().__init__("Missing required fields: countryFrom, countryTo, score")


class InvalidCountryFromError(ConversionError):
    code = "InvalidCountryFrom"

    def __init__(self) -> None:
        super().__init__(
            f"Invalid countryFrom. Must be one of: {', '.join(VALID_COUNTRIES)}"
        )


class InvalidCountryToError(ConversionError):
    code = "InvalidCountryTo"

    def __init__(self) -> None:
        super().__init__(
            f"Invalid countryTo. Must be one of: {', '.join(VALID_COUNTRIES)}"
        )


class ScoreOutOfRangeError(ConversionError):
    code = "ScoreOutOfRange"

    def __init__(self, score_min: float = 0, score_max: float = 1000) -> None:
        super().__init__(
            f"Score must be between {score_min:.15g} and {score_max:.15g}"
        )


def conversion_error_handler(request: Request, exc: ConversionError):  # type: ignore
    # Client mistakes are not faults
    logger.info("conversion request rejected", extra={"code": exc.code})
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": exc.message},
    )


def validation_error_handler(request: Request, exc: RequestValidationError):  # type: ignore
    logger.info("request body rejected", extra={"code": MissingFieldsError.code})
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": MissingFieldsError().message},
    )


def http_error_handler(request: Request, exc: StarletteHTTPException):  # type: ignore
    if exc.status_code in (
        status.HTTP_404_NOT_FOUND,
        status.HTTP_405_METHOD_NOT_ALLOWED,
    ):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": NOT_FOUND_MESSAGE},
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def server_error_handler(request: Request, exc: Exception):  # type: ignore
    logger.error(
        "unhandled exception on %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": INTERNAL_ERROR_MESSAGE},
    )
