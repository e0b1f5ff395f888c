"""Well-known JSON property names and ``@odata.type`` discriminators.

Refs:
  - OnAttributeCollectionStart: https://learn.microsoft.com/entra/identity-platform/custom-extension-onattributecollectionstart-retrieve-return-data
  - OnAttributeCollectionSubmit: https://learn.microsoft.com/entra/identity-platform/custom-extension-onattributecollectionsubmit-retrieve-return-data
  - API connectors: https://learn.microsoft.com/azure/active-directory-b2c/add-api-connector
"""
from typing import Final

JSON_CONTENT_TYPE: Final = "application/json"


class Json:
    """Property names used in Start/Submit payloads."""

    ODATA_TYPE: Final = "@odata.type"
    DATA: Final = "data"
    ACTIONS: Final = "actions"
    INPUTS: Final = "inputs"
    ATTRIBUTES: Final = "attributes"
    TITLE: Final = "title"
    MESSAGE: Final = "message"
    ATTRIBUTE_ERRORS: Final = "attributeErrors"


class ODataData:
    """``@odata.type`` values for the ``data`` envelope."""

    START: Final = "microsoft.graph.onAttributeCollectionStartResponseData"
    SUBMIT: Final = "microsoft.graph.onAttributeCollectionSubmitResponseData"


class ODataActions:
    """``@odata.type`` values for action objects."""

    START_CONTINUE: Final = "microsoft.graph.attributeCollectionStart.continueWithDefaultBehavior"
    START_PREFILL: Final = "microsoft.graph.attributeCollectionStart.setPrefillValues"
    START_BLOCK: Final = "microsoft.graph.attributeCollectionStart.showBlockPage"

    SUBMIT_CONTINUE: Final = "microsoft.graph.attributeCollectionSubmit.continueWithDefaultBehavior"
    SUBMIT_MODIFY: Final = "microsoft.graph.attributeCollectionSubmit.modifyAttributeValues"
    SUBMIT_VALIDATE: Final = "microsoft.graph.attributeCollectionSubmit.showValidationError"
    SUBMIT_BLOCK: Final = "microsoft.graph.attributeCollectionSubmit.showBlockPage"


class ApiConnector:
    """API connector contract values."""

    VERSION: Final = "1.0.0"

    # Body keys
    KEY_VERSION: Final = "version"
    KEY_ACTION: Final = "action"
    KEY_STATUS: Final = "status"
    KEY_USER_MESSAGE: Final = "userMessage"

    # Actions
    CONTINUE: Final = "Continue"
    SHOW_BLOCK_PAGE: Final = "ShowBlockPage"
    VALIDATION_ERROR: Final = "ValidationError"

    VALIDATION_ERROR_STATUS: Final = 400
