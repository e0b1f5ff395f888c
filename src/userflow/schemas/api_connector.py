"""Azure AD B2C API connector response body.

Reference: https://learn.microsoft.com/azure/active-directory-b2c/add-api-connector
"""
from typing import Any, ClassVar, Literal

from pydantic import Field, model_validator

from userflow.protocol.constants import ApiConnector
from userflow.schemas.base import WireModel, require_text

ApiConnectorAction = Literal["Continue", "ShowBlockPage", "ValidationError"]


class ApiConnectorResponse(WireModel):
    """Flat API connector body.

    ``status`` and ``userMessage`` are omitted when absent. Claims are merged at
    the top level after the contract keys, so a claim named ``version`` or
    ``action`` replaces the contract value.
    """

    version: Literal["1.0.0"] = ApiConnector.VERSION
    status: int | None = None
    action: ApiConnectorAction
    user_message: str | None = Field(default=None, alias=ApiConnector.KEY_USER_MESSAGE)
    claims: dict[str, Any] = Field(default_factory=dict, exclude=True)

    omit_when_absent: ClassVar[frozenset[str]] = frozenset({"status", "user_message"})

    @model_validator(mode="after")
    def message_required_unless_continue(self) -> "ApiConnectorResponse":
        if self.action != ApiConnector.CONTINUE:
            require_text(self.user_message, "user_message")
        return self

    def wire_overlay(self) -> dict[str, Any]:
        # TODO: reject claims that shadow "version"/"action" once callers relying on the overlay are gone
        return dict(self.claims)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)
