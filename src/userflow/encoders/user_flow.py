"""Encoders for Microsoft Entra External ID custom authentication extensions.

Produces the exact response envelope documented by Microsoft:
``{ "data": { "@odata.type": "...ResponseData", "actions": [ { "@odata.type": "...", ... } ] } }``
with HTTP 200 and ``Content-Type: application/json``.

Refs:
  - https://learn.microsoft.com/entra/identity-platform/custom-extension-onattributecollectionstart-retrieve-return-data
  - https://learn.microsoft.com/entra/identity-platform/custom-extension-onattributecollectionsubmit-retrieve-return-data
"""
import logging
from collections.abc import Mapping
from typing import Any

from userflow.core.errors import ProgrammerMisuseError
from userflow.protocol.http import EncodedResponse
from userflow.schemas.actions import (
    START_ACTION_TYPES,
    SUBMIT_ACTION_TYPES,
    ModifyAttributeValuesAction,
    SetPrefillValuesAction,
    ShowValidationErrorAction,
    StartContinueAction,
    StartShowBlockPageAction,
    SubmitContinueAction,
    SubmitShowBlockPageAction,
)
from userflow.schemas.envelope import (
    StartResponse,
    StartResponseData,
    SubmitResponse,
    SubmitResponseData,
)

logger = logging.getLogger(__name__)


def _check_actions(actions: tuple[Any, ...], allowed: tuple[type, ...], event: str) -> None:
    if not actions:
        raise ProgrammerMisuseError(f"{event} response needs at least one action")
    for action in actions:
        if not isinstance(action, allowed):
            raise ProgrammerMisuseError(
                f"{type(action).__name__} is not a valid {event} action"
            )


def encode_start(*actions: Any) -> StartResponse:
    """Wrap Start actions in the Start envelope.

    Raises:
        ProgrammerMisuseError: If an action is not one of the Start variants
    """
    _check_actions(actions, START_ACTION_TYPES, "Start")
    return StartResponse(data=StartResponseData(actions=list(actions)))


def encode_submit(*actions: Any) -> SubmitResponse:
    """Wrap Submit actions in the Submit envelope.

    Raises:
        ProgrammerMisuseError: If an action is not one of the Submit variants
    """
    _check_actions(actions, SUBMIT_ACTION_TYPES, "Submit")
    return SubmitResponse(data=SubmitResponseData(actions=list(actions)))


def write(envelope: StartResponse | SubmitResponse) -> EncodedResponse:
    """Serialize an envelope into a 200 JSON response."""
    body = envelope.to_json()
    logger.debug(
        "Encoded user flow response",
        extra={
            "event_type": envelope.data.odata_type,
            "actions": [action.odata_type for action in envelope.data.actions],
        },
    )
    return EncodedResponse(status_code=200, body=body)


# Start

def start_continue() -> EncodedResponse:
    """Continue with default behavior (Start event)."""
    return write(encode_start(StartContinueAction()))


def start_set_prefill_values(inputs: Mapping[str, Any]) -> EncodedResponse:
    """Prefill input values before the attribute page renders."""
    return write(encode_start(SetPrefillValuesAction(inputs=dict(inputs))))


def start_show_block_page(message: str, title: str | None = None) -> EncodedResponse:
    """Show a block page at Start with an optional title."""
    return write(encode_start(StartShowBlockPageAction(message=message, title=title)))


# Submit

def submit_continue() -> EncodedResponse:
    """Continue with default behavior after submission."""
    return write(encode_submit(SubmitContinueAction()))


def submit_modify_attributes(attributes: Mapping[str, Any]) -> EncodedResponse:
    """Override submitted attributes (e.g. normalize casing) and continue."""
    return write(encode_submit(ModifyAttributeValuesAction(attributes=dict(attributes))))


def submit_show_validation_error(
    message: str,
    attribute_errors: Mapping[str, str] | None = None,
) -> EncodedResponse:
    """Show field-level validation messages and keep the page displayed."""
    action = ShowValidationErrorAction(
        message=message,
        attribute_errors=dict(attribute_errors or {}),
    )
    return write(encode_submit(action))


def submit_show_block_page(message: str, title: str | None = None) -> EncodedResponse:
    """Show a block page at Submit with an optional title."""
    return write(encode_submit(SubmitShowBlockPageAction(message=message, title=title)))
