"""Translate service exceptions into JSON error responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from blogsum.agents.translator import translate_with_dictionary
from blogsum.constants.urdu import URDU_UI_MESSAGES
from blogsum.exceptions import BlogSummarizerError, PipelineError, ValidationError

logger = logging.getLogger(__name__)


def wants_urdu(request: Request) -> bool:
    """True when the client's preferred language is Urdu."""
    accept = request.headers.get("accept-language", "")
    preferred = accept.split(",")[0].split(";")[0].strip().lower()
    return preferred == "ur" or preferred.startswith("ur-")


def localize(request: Request, message: str) -> str:
    if wants_urdu(request):
        return translate_with_dictionary(message, URDU_UI_MESSAGES)
    return message


def error_payload(request: Request, exc: BlogSummarizerError) -> dict:
    """Build ``{message, error}`` for a failed request."""
    if isinstance(exc, ValidationError):
        return {"message": localize(request, exc.message)}

    if isinstance(exc, PipelineError):
        payload = {"message": localize(request, exc.message), "error": exc.cause.message}
    else:
        payload = {"message": localize(request, "Request failed."), "error": exc.message}

    upstream_status = getattr(exc, "upstream_status", None)
    if upstream_status is not None:
        payload["upstreamStatus"] = upstream_status
    return payload


async def handle_service_error(request: Request, exc: BlogSummarizerError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=exc.status_code, content=error_payload(request, exc))


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = "; ".join(str(error.get("msg", "")) for error in exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": localize(request, "Invalid request."), "error": errors},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BlogSummarizerError, handle_service_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
