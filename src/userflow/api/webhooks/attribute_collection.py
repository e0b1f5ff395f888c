"""Entra External ID custom authentication extension webhooks.

OnAttributeCollectionStart fires before the attribute collection page renders;
OnAttributeCollectionSubmit fires after the user submits the page.
"""
import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from userflow.core.security import require_basic_auth
from userflow.encoders import user_flow
from userflow.protocol.request_body import get_path, read_json_body

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/external-id",
    tags=["external-id"],
    dependencies=[Depends(require_basic_auth)],
)

SUBMIT_ERROR_MESSAGE = "Please fix the below errors to proceed."
CITY_ERROR_MESSAGE = "City cannot contain any numbers"


async def _read_payload(request: Request) -> dict[str, Any] | None:
    try:
        payload, _ = read_json_body(await request.body())
    except ValueError as e:
        logger.warning("Invalid JSON payload", extra={"error": str(e)})
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid JSON payload",
        )
    return payload


@router.post("/attribute-collection-start")
async def attribute_collection_start(request: Request) -> Response:
    """Let the attribute collection page render with default behavior."""
    payload = await _read_payload(request)
    logger.info(
        "OnAttributeCollectionStart received",
        extra={"event_type": get_path(payload, "type")},
    )
    return user_flow.start_continue().to_response()


@router.post("/attribute-collection-submit")
async def attribute_collection_submit(request: Request) -> Response:
    """
    Validate submitted attributes.

    The ``city`` attribute, when present, must not contain digits.
    """
    payload = await _read_payload(request)
    city = get_path(payload, "data", "userSignUpInfo", "attributes", "city", "value")

    if isinstance(city, str) and any(ch.isdigit() for ch in city):
        logger.info("Submitted attributes failed validation", extra={"attribute": "city"})
        return user_flow.submit_show_validation_error(
            SUBMIT_ERROR_MESSAGE,
            {"city": CITY_ERROR_MESSAGE},
        ).to_response()

    return user_flow.submit_continue().to_response()
