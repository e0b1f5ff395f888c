"""Basic authentication for the identity platform webhooks.

Both Azure AD B2C API connectors and Entra External ID custom extensions can
be configured to send a static username/password pair with every call.
Reference: https://learn.microsoft.com/azure/active-directory-b2c/secure-rest-api
"""
import base64
import binascii
import hmac
import logging
from typing import Annotated

from fastapi import Depends, Header, HTTPException, status

from userflow.config import Settings, get_settings

logger = logging.getLogger(__name__)

BASIC_SCHEME = "basic "
BASIC_REALM = 'Basic realm="B2C"'


class BasicAuthError(Exception):
    """Raised when basic credential verification fails."""

    pass


def verify_basic_credentials(
    authorization_header: str | None,
    expected_username: str,
    expected_password: str,
) -> bool:
    """
    Verify an ``Authorization: Basic ...`` header against the configured pair.

    Args:
        authorization_header: Raw Authorization header value
        expected_username: Configured username
        expected_password: Configured password

    Returns:
        True if the credentials match

    Raises:
        BasicAuthError: If the header is missing, malformed, or does not match
    """
    if not expected_username or not expected_password:
        raise BasicAuthError("Basic credentials are not configured")

    if not authorization_header:
        raise BasicAuthError("Missing Authorization header")

    if not authorization_header.lower().startswith(BASIC_SCHEME):
        raise BasicAuthError("Invalid authorization scheme")

    encoded = authorization_header[len(BASIC_SCHEME):].strip()
    try:
        decoded = base64.b64decode(encoded, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        raise BasicAuthError("Invalid credential encoding")

    username, separator, password = decoded.partition(":")
    if not separator:
        raise BasicAuthError("Invalid credential format")

    # Evaluate both comparisons so timing does not reveal which half failed
    user_ok = hmac.compare_digest(username.encode("utf-8"), expected_username.encode("utf-8"))
    password_ok = hmac.compare_digest(password.encode("utf-8"), expected_password.encode("utf-8"))
    if not (user_ok and password_ok):
        raise BasicAuthError("Credential mismatch")

    return True


async def require_basic_auth(
    authorization: Annotated[str | None, Header()] = None,
    settings: Settings = Depends(get_settings),
) -> None:
    """
    FastAPI dependency guarding the webhook routes.

    Raises:
        HTTPException 401: If the request does not carry the configured credentials
    """
    if not settings.basic_auth_configured:
        logger.error("Basic credentials not configured; rejecting webhook call")

    try:
        verify_basic_credentials(
            authorization,
            settings.basic_auth_username,
            settings.basic_auth_password,
        )
    except BasicAuthError as e:
        logger.warning("Webhook authentication failed", extra={"error": str(e)})
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": BASIC_REALM},
        )
