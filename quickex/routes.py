"""
HTTP routes for the QuickEx backend.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request, status

from quickex.errors import BadRequestError
from quickex.schemas import CreateUsernameRequest, CreateUsernameResponse, HealthResponse
from quickex.usernames import UsernameRejected, validate_username_payload

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
    description=(
        "Returns the health status of the API. Use this endpoint to verify "
        "the service is running."
    ),
)
def health() -> HealthResponse:
    return HealthResponse(status="ok")


@router.post(
    "/username",
    response_model=CreateUsernameResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["usernames"],
    summary="Register a username",
    responses={400: {"description": "Payload failed validation"}},
    openapi_extra={
        "requestBody": {
            "content": {
                "application/json": {"schema": CreateUsernameRequest.model_json_schema()}
            },
            "required": True,
        }
    },
)
async def create_username(request: Request) -> CreateUsernameResponse:
    """
    Validate a candidate username and acknowledge it. Nothing is stored yet.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.split(";")[0].strip().lower() != "application/json":
        raise BadRequestError("Content-Type must be application/json")

    try:
        payload = await request.json()
    except ValueError:
        raise BadRequestError("Request body must be valid JSON")

    result = validate_username_payload(payload)
    if isinstance(result, UsernameRejected):
        logger.debug("Rejected username payload: %s", result.errors)
        raise BadRequestError("Invalid username payload", result.errors)

    return CreateUsernameResponse(ok=True)
