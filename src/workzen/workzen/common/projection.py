"""Role-based projection of computed payloads.

Services always build the full payload; this module is the single place that
decides which fields a caller may see. Redaction is keyed by resource name and
the caller's role, and an owner (a user looking at their own record) is only
subject to the fields hidden from everyone.
"""

from __future__ import annotations

from typing import Iterable, Mapping

from ..core.enums import Role

SALARY_FIELDS = frozenset({"basic_salary", "hra", "other_earnings"})
LEAVE_BALANCE_FIELDS = frozenset({"annual_leave", "sick_leave"})

_ALWAYS_HIDDEN: dict[str, frozenset[str]] = {
    "employee": frozenset({"password_hash"}),
}

_HIDDEN_BY_ROLE: dict[tuple[str, Role], frozenset[str]] = {
    ("employee", Role.EMPLOYEE): SALARY_FIELDS | LEAVE_BALANCE_FIELDS,
}


def hidden_fields(resource: str, role: Role, *, owner: bool = False) -> frozenset[str]:
    hidden = _ALWAYS_HIDDEN.get(resource, frozenset())
    if owner:
        return hidden
    return hidden | _HIDDEN_BY_ROLE.get((resource, Role(role)), frozenset())


def project(resource: str, payload: Mapping, role: Role, *, owner: bool = False) -> dict:
    hidden = hidden_fields(resource, role, owner=owner)
    return {k: v for k, v in payload.items() if k not in hidden}


def project_many(
    resource: str,
    payloads: Iterable[Mapping],
    role: Role,
    *,
    owner_id: int | None = None,
    id_field: str = "user_id",
) -> list[dict]:
    return [
        project(resource, p, role, owner=owner_id is not None and p.get(id_field) == owner_id)
        for p in payloads
    ]
