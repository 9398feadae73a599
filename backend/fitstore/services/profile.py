"""
Profile calculator and profile save.

`compute_bmi` and `compute_fitness_age` are pure. `save_profile` recomputes
both from the submitted metrics on every save; stored values are never
reused.
"""
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from tortoise.exceptions import IntegrityError

from fitstore.core.errors import ConflictError, NotFoundError
from fitstore.core.security import AdminClaims, Claims, create_access_token
from fitstore.core.store import normalize_email, write_gate
from fitstore.models.activity import ActivityType
from fitstore.models.user import User
from fitstore.services import activity_log
from fitstore.services.auth_service import user_claims


def compute_bmi(weight_kg: float, height_cm: float) -> float:
    """Body mass index, weight / height(m)^2, rounded half-up to one decimal."""
    height_m = Decimal(str(height_cm)) / 100
    bmi = Decimal(str(weight_kg)) / (height_m * height_m)
    return float(bmi.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def compute_fitness_age(bmi: float, age: int) -> int:
    """Chronological age shifted by the BMI band offset."""
    if bmi < 18.5:
        return age + 1
    if bmi < 25:
        return age
    if bmi < 30:
        return age + 5
    return age + 10


@dataclass
class ProfileInput:
    name: str
    gender: str
    age: int
    height_cm: float
    weight_kg: float
    email: Optional[str] = None


@dataclass
class ProfileResult:
    profile: dict
    token: Optional[str] = None  # Only set when the email changed


def build_profile(data: ProfileInput, now: dt.datetime | None = None) -> dict:
    bmi = compute_bmi(data.weight_kg, data.height_cm)
    now = now or dt.datetime.now(dt.timezone.utc)
    return {
        "name": data.name,
        "gender": data.gender,
        "age": data.age,
        "heightCm": data.height_cm,
        "weightKg": data.weight_kg,
        "bmi": bmi,
        "fitness_age": compute_fitness_age(bmi, data.age),
        "updatedAt": now.isoformat(),
    }


async def save_profile(claims: Claims, data: ProfileInput) -> ProfileResult:
    """
    Persist name, profile and (optionally) a new email as one record update.

    Raises:
        NotFoundError: The token does not belong to a stored user
        ConflictError: The new email is taken by another user
    """
    if isinstance(claims, AdminClaims):
        raise NotFoundError("User not found")

    async with write_gate.exclusive():
        user = await User.get_or_none(id=claims.id)
        if user is None:
            raise NotFoundError("User not found")

        previous_email = user.email
        new_email = normalize_email(data.email) if data.email else previous_email
        email_changed = new_email != previous_email
        if email_changed and await User.filter(email=new_email).exclude(id=user.id).exists():
            raise ConflictError("Email already in use")

        profile = build_profile(ProfileInput(
            name=data.name,
            gender=data.gender,
            age=data.age,
            height_cm=data.height_cm,
            weight_kg=data.weight_kg,
        ))
        user.name = data.name
        user.email = new_email
        user.profile = profile
        try:
            await user.save(update_fields=["name", "email", "profile"])
        except IntegrityError as exc:
            raise ConflictError("Email already in use") from exc

        details = {"bmi": profile["bmi"], "fitness_age": profile["fitness_age"]}
        if email_changed:
            details["previousEmail"] = previous_email
        await activity_log.record(ActivityType.PROFILE_UPDATE, user.email, details)

    token = create_access_token(user_claims(user)) if email_changed else None
    return ProfileResult(profile=profile, token=token)
