# fitstore/api/routers/profile.py
from fastapi import APIRouter, Depends

from fitstore.api.deps import get_claims
from fitstore.core.security import Claims
from fitstore.schemas.profile import ProfileIn, ProfileResponse
from fitstore.services.profile import ProfileInput, save_profile

router = APIRouter(tags=["profile"])


@router.post("/profile", response_model=ProfileResponse, response_model_exclude_none=True)
async def update_profile(body: ProfileIn, claims: Claims = Depends(get_claims)):
    """
    Save the caller's body metrics and recompute BMI / fitness age.

    When `email` differs from the current one, the response carries a new
    token bound to it; the client must drop its old token.

    Errors:
        - 400 VALIDATION_ERROR: out-of-range metrics, unknown gender, short name
        - 400 CONFLICT: the new email is used by another account
        - 401 AUTH_ERROR: missing or invalid token
        - 404 NOT_FOUND: the token does not belong to a stored user
    """
    result = await save_profile(claims, ProfileInput(
        name=body.name,
        gender=body.gender,
        age=body.age,
        height_cm=body.heightCm,
        weight_kg=body.weightKg,
        email=body.email,
    ))
    response = {"success": True, "profile": result.profile}
    if result.token:
        response["token"] = result.token
    return response
