"""Unit tests for the Start/Submit action models."""

import json

import pytest
from pydantic import TypeAdapter, ValidationError
from userflow.core.errors import InvalidArgumentError
from userflow.protocol.constants import ODataActions
from userflow.schemas.actions import (
    ModifyAttributeValuesAction,
    SetPrefillValuesAction,
    ShowValidationErrorAction,
    StartAction,
    StartContinueAction,
    StartShowBlockPageAction,
    SubmitAction,
    SubmitContinueAction,
    SubmitShowBlockPageAction,
)


def _wire(action) -> dict:
    return json.loads(action.model_dump_json(by_alias=True))


class TestDiscriminators:
    """Each variant binds its own @odata.type."""

    @pytest.mark.parametrize(
        ("action", "expected"),
        [
            (StartContinueAction(), ODataActions.START_CONTINUE),
            (SetPrefillValuesAction(inputs={}), ODataActions.START_PREFILL),
            (StartShowBlockPageAction(message="m"), ODataActions.START_BLOCK),
            (SubmitContinueAction(), ODataActions.SUBMIT_CONTINUE),
            (ModifyAttributeValuesAction(attributes={}), ODataActions.SUBMIT_MODIFY),
            (ShowValidationErrorAction(message="m"), ODataActions.SUBMIT_VALIDATE),
            (SubmitShowBlockPageAction(message="m"), ODataActions.SUBMIT_BLOCK),
        ],
    )
    def test_discriminator_is_bound_at_construction(self, action, expected: str) -> None:
        """The serialized @odata.type matches the documented constant."""
        assert action.odata_type == expected
        assert _wire(action)["@odata.type"] == expected

    def test_discriminator_cannot_be_supplied(self) -> None:
        """A foreign discriminator is rejected."""
        with pytest.raises(ValidationError):
            StartContinueAction(odata_type=ODataActions.SUBMIT_CONTINUE)

    def test_discriminator_cannot_be_mutated(self) -> None:
        """Actions are frozen."""
        action = StartContinueAction()
        with pytest.raises(ValidationError):
            action.odata_type = ODataActions.START_BLOCK

    def test_documented_strings(self) -> None:
        """Spot-check the exact, case-sensitive wire strings."""
        assert ODataActions.START_PREFILL == "microsoft.graph.attributeCollectionStart.setPrefillValues"
        assert ODataActions.SUBMIT_VALIDATE == "microsoft.graph.attributeCollectionSubmit.showValidationError"


class TestBlockPage:
    """Block page message and title rules."""

    @pytest.mark.parametrize("cls", [StartShowBlockPageAction, SubmitShowBlockPageAction])
    @pytest.mark.parametrize("message", ["", "   ", None])
    def test_blank_message_rejected(self, cls, message) -> None:
        """Blank messages raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError, match="cannot be empty"):
            cls(message=message)

    def test_absent_title_is_omitted(self) -> None:
        """No title means no title key, not null."""
        wire = _wire(StartShowBlockPageAction(message="blocked"))
        assert "title" not in wire
        assert wire["message"] == "blocked"

    @pytest.mark.parametrize("cls", [StartShowBlockPageAction, SubmitShowBlockPageAction])
    @pytest.mark.parametrize("title", ["", "   "])
    def test_blank_title_is_omitted(self, cls, title) -> None:
        """A blank title is treated like a missing one."""
        wire = _wire(cls(message="blocked", title=title))
        assert "title" not in wire

    def test_title_present_when_given(self) -> None:
        """A title is emitted next to the message."""
        wire = _wire(SubmitShowBlockPageAction(message="blocked", title="please wait"))
        assert wire == {
            "@odata.type": ODataActions.SUBMIT_BLOCK,
            "message": "blocked",
            "title": "please wait",
        }


class TestPayloadActions:
    """Prefill, modify and validation error payloads."""

    def test_prefill_inputs_keep_order_and_nulls(self) -> None:
        """Input values are emitted as given, including null values."""
        wire = _wire(SetPrefillValuesAction(inputs={"city": "Oslo", "postalCode": None}))
        assert list(wire["inputs"]) == ["city", "postalCode"]
        assert wire["inputs"]["postalCode"] is None

    def test_prefill_omits_message_and_title(self) -> None:
        """Only the discriminator and inputs are present."""
        wire = _wire(SetPrefillValuesAction(inputs={"city": "Oslo"}))
        assert set(wire) == {"@odata.type", "inputs"}

    def test_modify_attributes_uses_attributes_key(self) -> None:
        """Attribute overrides go under 'attributes'."""
        wire = _wire(ModifyAttributeValuesAction(attributes={"email": "user@contoso.test"}))
        assert wire["attributes"] == {"email": "user@contoso.test"}

    def test_validation_error_camel_case_keys(self) -> None:
        """attributeErrors is emitted in camelCase and defaults to empty."""
        wire = _wire(ShowValidationErrorAction(message="Please fix the below errors to proceed."))
        assert wire["attributeErrors"] == {}
        assert wire["message"] == "Please fix the below errors to proceed."

    def test_validation_error_blank_message_rejected(self) -> None:
        """A validation error needs a message."""
        with pytest.raises(InvalidArgumentError):
            ShowValidationErrorAction(message=" ", attribute_errors={"city": "bad"})


class TestParsing:
    """Actions read back through the discriminated unions."""

    def test_start_union_selects_variant(self) -> None:
        """The @odata.type picks the Start model."""
        action = TypeAdapter(StartAction).validate_python(
            {"@odata.type": ODataActions.START_PREFILL, "inputs": {"city": "Oslo"}}
        )
        assert isinstance(action, SetPrefillValuesAction)
        assert action.inputs == {"city": "Oslo"}

    def test_submit_union_rejects_start_action(self) -> None:
        """A Start discriminator is not a Submit action."""
        with pytest.raises(ValidationError):
            TypeAdapter(SubmitAction).validate_python({"@odata.type": ODataActions.START_CONTINUE})
