# fitstore/api/routers/auth.py
from fastapi import APIRouter

from fitstore.schemas.auth import AuthResponse, LoginRequest, SignupRequest
from fitstore.services.auth_service import auth_service

router = APIRouter(tags=["auth"])


@router.post("/signup", response_model=AuthResponse, response_model_exclude_none=True)
async def signup(body: SignupRequest):
    """
    Register a new user account.

    Creates a user with no profile, records a `signup` activity and returns
    a token bound to the new identity.

    Returns:
        dict: {success, user: {id, name, email}, token}

    Errors:
        - 400 VALIDATION_ERROR: name < 2 chars, invalid email, password < 6 chars
        - 400 CONFLICT: email already registered (case-insensitive)
    """
    result = await auth_service.signup(body.name, body.email, body.password)
    return {"success": True, "user": result.user.public_dict(), "token": result.token}


@router.post("/login", response_model=AuthResponse, response_model_exclude_none=True)
async def login(payload: LoginRequest):
    """
    Authenticate and issue a 12-hour access token.

    Returns:
        dict: {success, user, token} for a stored user, or
              {success, admin: true, email, token} for the administrator

    Errors:
        - 401 AUTH_ERROR "Invalid credentials": unknown email or wrong
          password (the two cases are indistinguishable)
    """
    result = await auth_service.login(payload.email, payload.password)
    if result.is_admin:
        return {"success": True, "admin": True, "email": result.claims.email, "token": result.token}
    return {"success": True, "user": result.user.public_dict(), "token": result.token}
