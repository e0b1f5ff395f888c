"""Action objects returned to the attribute collection Start/Submit events.

Every action carries its ``@odata.type`` discriminator as a ``Literal`` field
with a fixed default: it is bound when the model is created, any other value
is rejected, and the frozen model cannot be changed afterwards.

Start accepts continue / setPrefillValues / showBlockPage.
Submit accepts continue / modifyAttributeValues / showValidationError / showBlockPage.
"""
from typing import Annotated, Any, ClassVar, Literal, Union

from pydantic import Field, field_validator

from userflow.protocol.constants import Json, ODataActions
from userflow.schemas.base import WireModel, require_text


# Start

class StartContinueAction(WireModel):
    """Continue with default behavior (Start)."""

    odata_type: Literal[ODataActions.START_CONTINUE] = Field(
        default=ODataActions.START_CONTINUE, alias=Json.ODATA_TYPE
    )


class SetPrefillValuesAction(WireModel):
    """Prefill input values before the attribute page renders (Start only)."""

    odata_type: Literal[ODataActions.START_PREFILL] = Field(
        default=ODataActions.START_PREFILL, alias=Json.ODATA_TYPE
    )
    inputs: dict[str, Any] = Field(..., alias=Json.INPUTS)


class StartShowBlockPageAction(WireModel):
    """Show a block page at Start with an optional title."""

    odata_type: Literal[ODataActions.START_BLOCK] = Field(
        default=ODataActions.START_BLOCK, alias=Json.ODATA_TYPE
    )
    message: str = Field(..., alias=Json.MESSAGE, description="Message to display on the block page")
    title: str | None = Field(default=None, alias=Json.TITLE, description="Optional page title")

    omit_when_absent: ClassVar[frozenset[str]] = frozenset({"title"})

    @field_validator("message", mode="before")
    @classmethod
    def message_not_blank(cls, value: Any) -> str:
        return require_text(value, "message")


# Submit

class SubmitContinueAction(WireModel):
    """Continue with default behavior (Submit)."""

    odata_type: Literal[ODataActions.SUBMIT_CONTINUE] = Field(
        default=ODataActions.SUBMIT_CONTINUE, alias=Json.ODATA_TYPE
    )


class ModifyAttributeValuesAction(WireModel):
    """Override submitted attribute values and continue (Submit only)."""

    odata_type: Literal[ODataActions.SUBMIT_MODIFY] = Field(
        default=ODataActions.SUBMIT_MODIFY, alias=Json.ODATA_TYPE
    )
    attributes: dict[str, Any] = Field(..., alias=Json.ATTRIBUTES)


class ShowValidationErrorAction(WireModel):
    """Keep the page displayed with a top-level message and per-field errors (Submit only)."""

    odata_type: Literal[ODataActions.SUBMIT_VALIDATE] = Field(
        default=ODataActions.SUBMIT_VALIDATE, alias=Json.ODATA_TYPE
    )
    message: str = Field(..., alias=Json.MESSAGE)
    attribute_errors: dict[str, str] = Field(default_factory=dict, alias=Json.ATTRIBUTE_ERRORS)

    @field_validator("message", mode="before")
    @classmethod
    def message_not_blank(cls, value: Any) -> str:
        return require_text(value, "message")


class SubmitShowBlockPageAction(WireModel):
    """Show a block page at Submit with an optional title."""

    odata_type: Literal[ODataActions.SUBMIT_BLOCK] = Field(
        default=ODataActions.SUBMIT_BLOCK, alias=Json.ODATA_TYPE
    )
    message: str = Field(..., alias=Json.MESSAGE)
    title: str | None = Field(default=None, alias=Json.TITLE)

    omit_when_absent: ClassVar[frozenset[str]] = frozenset({"title"})

    @field_validator("message", mode="before")
    @classmethod
    def message_not_blank(cls, value: Any) -> str:
        return require_text(value, "message")


START_ACTION_TYPES = (StartContinueAction, SetPrefillValuesAction, StartShowBlockPageAction)
SUBMIT_ACTION_TYPES = (
    SubmitContinueAction,
    ModifyAttributeValuesAction,
    ShowValidationErrorAction,
    SubmitShowBlockPageAction,
)

StartAction = Annotated[
    Union[StartContinueAction, SetPrefillValuesAction, StartShowBlockPageAction],
    Field(discriminator="odata_type"),
]

SubmitAction = Annotated[
    Union[
        SubmitContinueAction,
        ModifyAttributeValuesAction,
        ShowValidationErrorAction,
        SubmitShowBlockPageAction,
    ],
    Field(discriminator="odata_type"),
]
