import logging
from fastapi import Depends, Request
from fastapi.security import APIKeyHeader
from storefront.core.config import settings
from storefront.core.exceptions import AuthenticationRequiredError, InvalidTokenError
from storefront.core.security import decode_access_token

logger = logging.getLogger(__name__)

# Token travels raw in a single header; auto_error=False so a missing
# header is reported with our own 401 envelope
token_header = APIKeyHeader(name=settings.TOKEN_HEADER, auto_error=False)


async def get_current_user_id(
    request: Request,
    token: str | None = Depends(token_header),
) -> int:
    """
    Resolve the authenticated user id from the request token.

    Used as a dependency on every protected route. A missing token raises
    AuthenticationRequiredError (401), a token that fails verification raises
    InvalidTokenError (403). The id is also stored on ``request.state``.
    """
    if token is not None:
        scheme, _, rest = token.strip().partition(" ")
        # "Bearer" with nothing after it carries no token
        if scheme.lower() == "bearer":
            token = rest.strip()
        else:
            token = token.strip()
    if not token:
        raise AuthenticationRequiredError()

    payload = decode_access_token(token)
    if payload is None:
        logger.warning(f"Rejected token on {request.url.path}")
        raise InvalidTokenError()

    # Tokens are issued with an integer "id" claim
    user_id = payload.get("id")
    if isinstance(user_id, bool) or not isinstance(user_id, int):
        raise InvalidTokenError("token has no user id")

    request.state.user_id = user_id
    return user_id
