"""The ``{"data": {...}}`` envelope wrapping Start/Submit actions."""
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from userflow.protocol.constants import Json, ODataData
from userflow.schemas.actions import StartAction, SubmitAction


class StartResponseData(BaseModel):
    """``data`` payload for Start events."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    odata_type: Literal[ODataData.START] = Field(default=ODataData.START, alias=Json.ODATA_TYPE)
    actions: list[StartAction] = Field(..., alias=Json.ACTIONS)


class SubmitResponseData(BaseModel):
    """``data`` payload for Submit events."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    odata_type: Literal[ODataData.SUBMIT] = Field(default=ODataData.SUBMIT, alias=Json.ODATA_TYPE)
    actions: list[SubmitAction] = Field(..., alias=Json.ACTIONS)


class StartResponse(BaseModel):
    """Complete response body for OnAttributeCollectionStart."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    data: StartResponseData

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


class SubmitResponse(BaseModel):
    """Complete response body for OnAttributeCollectionSubmit."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    data: SubmitResponseData

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)
