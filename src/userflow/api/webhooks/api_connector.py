"""Azure AD B2C API connector webhook.

Called by the sign-up user flow before the account is created. Reads the
claims B2C posts, validates them and answers with Continue, ShowBlockPage or
ValidationError.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from userflow.core.security import require_basic_auth
from userflow.encoders import api_connector
from userflow.protocol.request_body import get_string, read_json_body

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/b2c",
    tags=["b2c"],
    dependencies=[Depends(require_basic_auth)],
)


@router.post("/signup-before-create")
async def signup_before_create(request: Request) -> Response:
    """
    Validate the sign-up email before the account is created.

    Returns:
        - 200: Continue with the lower-cased email as a claim
        - 400: ValidationError when the email is missing or malformed
    """
    try:
        payload, _ = read_json_body(await request.body())
    except ValueError as e:
        logger.warning("Invalid JSON payload", extra={"error": str(e)})
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid JSON payload",
        )

    email = get_string(payload, "email")

    if not email or not email.strip() or "@" not in email:
        logger.info("Rejecting sign-up: email missing or malformed")
        return api_connector.validation_error("Email address is missing or malformed.").to_response()

    logger.info("Sign-up accepted")
    return api_connector.continue_({"email": email.lower()}).to_response()
