"""
Activity log: append-only audit trail of domain events.

Callers that mutate user state append their record while still holding
the write gate, right after the mutation, so one logical action yields
exactly one record.
"""
import json
from typing import Any, Mapping, Optional

from fitstore.models.activity import Activity, ActivityType


async def record(kind: ActivityType, email: str, details: Optional[Mapping[str, Any]] = None) -> Activity:
    """Append one activity record and return it."""
    return await Activity.create(type=kind, email=email, details=dict(details or {}))


def _matches(item: dict, needle: str) -> bool:
    return (
        needle in (item["type"] or "").lower()
        or needle in (item["email"] or "").lower()
        or needle in json.dumps(item["details"], ensure_ascii=False, separators=(",", ":")).lower()
    )


async def list_activities(q: str | None = None) -> list[dict]:
    """
    All records, most recent first, optionally filtered.

    `q` is a case-insensitive substring matched against the type, the
    actor email, or the JSON form of the details.
    """
    rows = await Activity.all().order_by("-id")
    items = [a.to_dict() for a in rows]
    needle = (q or "").strip().lower()
    if needle:
        items = [item for item in items if _matches(item, needle)]
    return items


async def export_activities() -> list[dict]:
    """The full, unfiltered log in creation order."""
    rows = await Activity.all().order_by("id")
    return [a.to_dict() for a in rows]
