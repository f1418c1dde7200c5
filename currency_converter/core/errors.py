import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException

from currency_converter.core.logging import REQUEST_ID_HEADER
from currency_converter.services.rates.errors import NoConversionPathError

logger = logging.getLogger("currency_converter.errors")

_ERROR_CODES = {
    status.HTTP_400_BAD_REQUEST: "bad_request",
    status.HTTP_403_FORBIDDEN: "forbidden",
    status.HTTP_404_NOT_FOUND: "not_found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "method_not_allowed",
}


def http_error_handler(request: Request, exc: StarletteHTTPException):  # type: ignore
    detail = exc.detail
    if exc.status_code == status.HTTP_404_NOT_FOUND and detail == "Not Found":
        detail = f"No route for {request.method} {request.url.path}"
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": _ERROR_CODES.get(exc.status_code, "http_error"),
            "detail": detail,
        },
        headers=getattr(exc, "headers", None),
    )


def validation_error_handler(request: Request, exc: RequestValidationError):  # type: ignore
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "validation_error",
            "detail": jsonable_errors(exc),
        },
    )


def jsonable_errors(exc: RequestValidationError) -> list:
    # pydantic v2 puts the raised exception object under ctx["error"]
    errors = []
    for err in exc.errors():
        err = dict(err)
        ctx = err.get("ctx")
        if ctx:
            err["ctx"] = {k: str(v) for k, v in ctx.items()}
        errors.append(err)
    return errors


def no_conversion_path_handler(request: Request, exc: NoConversionPathError):  # type: ignore
    logger.info(
        "no conversion path %s -> %s", exc.from_currency, exc.to_currency
    )
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={
            "error": "no_conversion_path",
            "detail": str(exc),
        },
    )


def server_error_handler(request: Request, exc: Exception):  # type: ignore
    logger.exception("unhandled exception")
    rid = getattr(request.state, "request_id", None)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "internal_error",
            "detail": "An unexpected error occurred.",
        },
        headers={REQUEST_ID_HEADER: rid} if rid else None,
    )
