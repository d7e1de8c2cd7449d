"""Shared service-layer helper functions."""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from staffbook.domain.anniversary import Anniversary
    from staffbook.domain.employee import Employee


def employee_data(employee: Employee, today: datetime.date | None = None) -> dict[str, Any]:
    """Flatten an employee into the dict shape used in result payloads."""
    next_date = employee.get_next_upcoming_date(today)
    return {
        "id": str(employee.employee_id),
        "name": employee.name,
        "phone": employee.phone,
        "email": employee.email,
        "job_position": employee.job_position,
        "tags": sorted(employee.tags),
        "anniversaries": len(employee.anniversaries),
        "next_upcoming": next_date.isoformat() if next_date else None,
    }


def anniversary_data(
    anniversary: Anniversary, index: int, today: datetime.date | None = None
) -> dict[str, Any]:
    """Flatten an anniversary; *index* is the one-based position shown to users."""
    return {
        "index": index,
        "name": anniversary.name,
        "type": anniversary.type.label,
        "kind": anniversary.type.kind,
        "date": anniversary.date.isoformat(),
        "next": anniversary.next_occurrence(today).isoformat(),
        "description": anniversary.description,
    }
