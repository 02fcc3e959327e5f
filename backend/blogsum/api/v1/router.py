"""API v1 main router - aggregates all endpoint routers."""

from typing import Any

from fastapi import APIRouter

from blogsum.api.v1 import generate, pipeline, scrape, storage
from blogsum.schemas.summary import ErrorResponse

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Missing or invalid input"},
    500: {"model": ErrorResponse, "description": "Upstream or storage failure"},
}

api_router = APIRouter(responses=ERROR_RESPONSES)

api_router.include_router(pipeline.router, tags=["pipeline"])
api_router.include_router(scrape.router, tags=["scrape"])
api_router.include_router(generate.router, tags=["generate"])
api_router.include_router(storage.router, tags=["storage"])
