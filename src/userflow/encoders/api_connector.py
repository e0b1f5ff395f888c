"""Encoders for Azure AD B2C API connector responses.

Produces the exact wire format B2C expects: Continue / ShowBlockPage (HTTP 200)
and ValidationError (HTTP 400 plus ``"status": 400`` in the body).
Reference: https://learn.microsoft.com/azure/active-directory-b2c/add-api-connector
"""
import logging
from collections.abc import Mapping
from typing import Any

from userflow.protocol.constants import ApiConnector
from userflow.protocol.http import EncodedResponse
from userflow.schemas.api_connector import ApiConnectorResponse

logger = logging.getLogger(__name__)


def _write(body: ApiConnectorResponse, status_code: int) -> EncodedResponse:
    logger.debug(
        "Encoded API connector response",
        extra={"action": body.action, "status_code": status_code},
    )
    return EncodedResponse(status_code=status_code, body=body.to_json())


def continue_(claims: Mapping[str, Any] | None = None) -> EncodedResponse:
    """
    Return a 200 Continue response.

    Args:
        claims: Optional claims to prefill or override values. They are merged
            at the top level after ``version`` and ``action``.

    Returns:
        ``{"version": "1.0.0", "action": "Continue", ...claims}`` with HTTP 200
    """
    body = ApiConnectorResponse(action=ApiConnector.CONTINUE, claims=dict(claims or {}))
    return _write(body, 200)


def show_block_page(user_message: str) -> EncodedResponse:
    """
    Return a 200 block page response showing ``user_message`` to the end user.

    Raises:
        InvalidArgumentError: If ``user_message`` is empty
    """
    body = ApiConnectorResponse(action=ApiConnector.SHOW_BLOCK_PAGE, user_message=user_message)
    return _write(body, 200)


def validation_error(user_message: str) -> EncodedResponse:
    """
    Return a 400 validation error that keeps the attribute page displayed.

    B2C requires both the HTTP status code 400 and ``"status": 400`` in the body.

    Raises:
        InvalidArgumentError: If ``user_message`` is empty
    """
    body = ApiConnectorResponse(
        action=ApiConnector.VALIDATION_ERROR,
        status=ApiConnector.VALIDATION_ERROR_STATUS,
        user_message=user_message,
    )
    return _write(body, ApiConnector.VALIDATION_ERROR_STATUS)
