from fastapi import Depends, Header

from fitstore.core.errors import AuthError, ForbiddenError
from fitstore.core.security import Claims, read_claims


async def get_claims(
    authorization: str | None = Header(default=None),
) -> Claims:
    """
    FastAPI dependency returning the decoded claims of the bearer token.

    The token is read from `Authorization: Bearer <token>` and verified on
    every request; there is no session cache.

    Raises:
        AuthError (401): "Missing token" if no bearer token is supplied
        AuthError (401): "Invalid token" if the signature is bad, the token
            expired, or the payload is neither a user nor an admin claim set
    """
    token = None
    if authorization and authorization.lower().startswith("bearer "):
        token = authorization.split(" ", 1)[1].strip()
    if not token:
        raise AuthError("Missing token")

    try:
        return read_claims(token)
    except Exception:
        raise AuthError("Invalid token") from None


def require_role(role: str):
    """
    Build a dependency that admits only claims of the given role.

    Usage:
        router = APIRouter(dependencies=[Depends(require_role("admin"))])
    """

    async def _gate(claims: Claims = Depends(get_claims)) -> Claims:
        if claims.role != role:
            raise ForbiddenError("forbidden")
        return claims

    return _gate


require_admin = require_role("admin")
