from __future__ import annotations

import pytest

from src.workzen.workzen.core.enums import ProfileEntryKind, Role
from src.workzen.workzen.core.exceptions import AuthorizationError, NotFoundError, ValidationError


def _add(container, kind, owner, *, by=None, name="Python"):
    by = by or owner
    return container.profile_service.add_entry(
        kind,
        current_role=by.role,
        current_user_id=by.user_id,
        user_id=owner.user_id,
        name=name,
    )


@pytest.mark.parametrize("kind", list(ProfileEntryKind))
def test_employee_adds_and_lists_own_entries(container, users_repo, kind):
    me = users_repo.add()
    _add(container, kind, me, name="  Python ")
    _add(container, kind, me, name="SQL")

    entries = container.profile_service.list_entries(kind, me.user_id)

    assert [e.name for e in entries] == ["Python", "SQL"]
    assert entries[0].to_dict()[f"{kind.value}_name"] == "Python"


def test_skills_and_certifications_are_kept_apart(container, users_repo):
    me = users_repo.add()
    _add(container, ProfileEntryKind.SKILL, me, name="Go")
    _add(container, ProfileEntryKind.CERTIFICATION, me, name="AWS Architect")

    skills = container.profile_service.list_entries(ProfileEntryKind.SKILL, me.user_id)
    certs = container.profile_service.list_entries(ProfileEntryKind.CERTIFICATION, me.user_id)

    assert [s.name for s in skills] == ["Go"]
    assert [c.name for c in certs] == ["AWS Architect"]


def test_admin_adds_for_others_but_hr_cannot(container, users_repo):
    owner = users_repo.add()
    admin = users_repo.add(role=Role.ADMIN)
    hr = users_repo.add(role=Role.HR)

    entry = _add(container, ProfileEntryKind.SKILL, owner, by=admin)
    assert entry.user_id == owner.user_id

    with pytest.raises(AuthorizationError):
        _add(container, ProfileEntryKind.SKILL, owner, by=hr)


def test_add_rejects_blank_name_and_unknown_user(container, users_repo):
    me = users_repo.add()
    with pytest.raises(ValidationError, match="Skill name is required"):
        _add(container, ProfileEntryKind.SKILL, me, name="   ")
    with pytest.raises(NotFoundError, match="User not found"):
        container.profile_service.list_entries(ProfileEntryKind.SKILL, 999)


def test_delete_by_owner(container, users_repo, profile_repo):
    me = users_repo.add()
    entry = _add(container, ProfileEntryKind.CERTIFICATION, me)

    container.profile_service.delete_entry(
        ProfileEntryKind.CERTIFICATION,
        current_role=me.role,
        current_user_id=me.user_id,
        entry_id=entry.entry_id,
    )

    assert profile_repo.entries == {}


def test_delete_rules(container, users_repo):
    owner = users_repo.add()
    other = users_repo.add()
    entry = _add(container, ProfileEntryKind.SKILL, owner)

    with pytest.raises(AuthorizationError):
        container.profile_service.delete_entry(
            ProfileEntryKind.SKILL,
            current_role=other.role,
            current_user_id=other.user_id,
            entry_id=entry.entry_id,
        )
    with pytest.raises(NotFoundError, match="Certification not found"):
        container.profile_service.delete_entry(
            ProfileEntryKind.CERTIFICATION,
            current_role=owner.role,
            current_user_id=owner.user_id,
            entry_id=entry.entry_id,
        )
    with pytest.raises(NotFoundError, match="Skill not found"):
        container.profile_service.delete_entry(
            ProfileEntryKind.SKILL,
            current_role=Role.ADMIN,
            current_user_id=owner.user_id,
            entry_id=404,
        )
