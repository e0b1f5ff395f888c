"""Directory-extension claim keys.

Custom attributes created in a B2C / External ID tenant are stored on the
``b2c-extensions-app`` application and exchanged as claims named
``extension_{appIdWithoutHyphens}_{attributeName}``.

How to find the extensions app ID: Azure portal -> App registrations ->
``b2c-extensions-app. Do not modify...`` -> Application (client) ID.
"""
import re
import uuid

from userflow.core.errors import InvalidArgumentError

# Start with a letter; letters, digits and underscore thereafter.
ATTRIBUTE_NAME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9_]*$")

_HEX32 = r"[0-9A-Fa-f]{32}"
_HYPHENATED = r"[0-9A-Fa-f]{8}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{12}"
# "N", "D", "B" and "P" textual forms
GUID_PATTERN = re.compile(
    rf"^(?:{_HEX32}|{_HYPHENATED}|\{{{_HYPHENATED}\}}|\({_HYPHENATED}\))$"
)


def extension_key(app_id_no_dashes: str, attribute_name: str) -> str:
    """Format a claim key from an already-normalized app id. No validation."""
    return f"extension_{app_id_no_dashes}_{attribute_name}"


def _normalize_app_id(app_id: str) -> str | None:
    candidate = app_id.strip() if app_id else ""
    if not GUID_PATTERN.fullmatch(candidate):
        return None
    return uuid.UUID(candidate.strip("{}()")).hex


def _validate_attribute_name(attribute_name: str) -> str | None:
    """Return an error message for an unusable attribute name, else None."""
    if not attribute_name or not attribute_name.strip():
        return "Attribute name cannot be empty."
    if not ATTRIBUTE_NAME_PATTERN.fullmatch(attribute_name):
        return "Attribute name should start with a letter and contain letters, digits, or underscore only."
    return None


def build_claim_key(app_id: str, attribute_name: str) -> str:
    """
    Validate the extensions app id and attribute name and build the claim key.

    Args:
        app_id: Application (client) ID of the extensions app, any standard GUID form
        attribute_name: Custom attribute name, e.g. ``loyaltyId``

    Returns:
        ``extension_{32 lowercase hex digits}_{attribute_name}``

    Raises:
        InvalidArgumentError: If the id is not a GUID or the name is empty or malformed
    """
    normalized = _normalize_app_id(app_id)
    if normalized is None:
        raise InvalidArgumentError(
            "Expected a GUID (Application/Client ID of b2c-extensions-app).",
            argument="app_id",
        )

    problem = _validate_attribute_name(attribute_name)
    if problem:
        raise InvalidArgumentError(problem, argument="attribute_name")

    return extension_key(normalized, attribute_name)


def try_build_claim_key(app_id: str, attribute_name: str) -> tuple[bool, str | None]:
    """Non-raising variant of :func:`build_claim_key`.

    Returns ``(True, key)`` on success and ``(False, None)`` otherwise.
    """
    normalized = _normalize_app_id(app_id)
    if normalized is None or _validate_attribute_name(attribute_name):
        return False, None
    return True, extension_key(normalized, attribute_name)
