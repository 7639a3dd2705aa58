from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Any, Mapping, Optional

import pytest
from werkzeug.security import generate_password_hash

from src.workzen.workzen.attendance.model import AttendanceRecord
from src.workzen.workzen.container import wire_services
from src.workzen.workzen.core.enums import AttendanceStatus, LeaveStatus, LeaveType, ProfileEntryKind, Role
from src.workzen.workzen.leaves.model import LeaveRequest
from src.workzen.workzen.payroll.model import PayrunBatch
from src.workzen.workzen.permissions.model import UserPermission
from src.workzen.workzen.profile.model import ProfileEntry
from src.workzen.workzen.salary_components.model import SalaryStructure
from src.workzen.workzen.settings.model import PayrollSettings
from src.workzen.workzen.users.model import User

PASSWORD = "secret123"


class InMemoryUsers:
    def __init__(self):
        self.users_by_id: dict[int, User] = {}
        self._id = 0

    def add(self, **fields) -> User:
        self._id += 1
        defaults: dict[str, Any] = dict(
            user_id=self._id,
            login_id=f"WZXX2024{self._id:04d}",
            name=f"User {self._id}",
            email=f"user{self._id}@workzen.local",
            password_hash=generate_password_hash(PASSWORD),
            role=Role.EMPLOYEE,
            department="Engineering",
            year_of_joining=2024,
        )
        defaults.update(fields)
        user = User(**defaults)
        self.users_by_id[user.user_id] = user
        return user

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.users_by_id.get(int(user_id))

    def get_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self.users_by_id.values() if u.email == email), None)

    def get_by_login_id(self, login_id: str) -> Optional[User]:
        return next((u for u in self.users_by_id.values() if u.login_id == login_id), None)

    def list_all(self):
        return [self.users_by_id[k] for k in sorted(self.users_by_id)]

    def count_joined_in(self, year: int) -> int:
        return sum(1 for u in self.users_by_id.values() if u.year_of_joining == int(year))

    def create_user(self, *, fields: Mapping[str, Any]) -> int:
        return self.add(**dict(fields)).user_id

    def update_user(self, user_id: int, changes: Mapping[str, Any]) -> bool:
        user = self.users_by_id.get(int(user_id))
        if not user:
            return False
        self.users_by_id[user.user_id] = replace(user, **dict(changes))
        return True

    def delete_by_id(self, user_id: int) -> bool:
        return self.users_by_id.pop(int(user_id), None) is not None


class InMemoryAttendance:
    def __init__(self):
        self._by_user_date: dict[tuple[int, date], AttendanceRecord] = {}
        self._id = 0

    def add(self, user_id: int, work_date: date, status: AttendanceStatus = AttendanceStatus.PRESENT) -> AttendanceRecord:
        self._id += 1
        rec = AttendanceRecord(
            attendance_id=self._id,
            user_id=user_id,
            work_date=work_date,
            in_time="09:00",
            out_time="18:00",
            status=status,
        )
        self._by_user_date[(user_id, work_date)] = rec
        return rec

    def get_for_user_and_date(self, user_id: int, work_date: date) -> Optional[AttendanceRecord]:
        return self._by_user_date.get((user_id, work_date))

    def list_for_user(self, user_id: int, *, start_date=None, end_date=None):
        items = [
            r
            for r in self._by_user_date.values()
            if r.user_id == user_id
            and (start_date is None or r.work_date >= start_date)
            and (end_date is None or r.work_date <= end_date)
        ]
        return sorted(items, key=lambda r: r.work_date, reverse=True)

    def list_all(self):
        return sorted(self._by_user_date.values(), key=lambda r: (r.work_date, r.user_id), reverse=True)

    def create_clock_in(self, *, user_id: int, work_date: date, in_time: str, status: AttendanceStatus) -> int:
        self._id += 1
        self._by_user_date[(user_id, work_date)] = AttendanceRecord(
            attendance_id=self._id,
            user_id=user_id,
            work_date=work_date,
            in_time=in_time,
            out_time=None,
            status=status,
        )
        return self._id

    def update_clock_out(self, *, attendance_id: int, out_time: str) -> bool:
        for key, rec in self._by_user_date.items():
            if rec.attendance_id == attendance_id and rec.out_time is None:
                self._by_user_date[key] = replace(rec, out_time=out_time)
                return True
        return False


class InMemoryLeaves:
    def __init__(self):
        self.leaves: dict[int, LeaveRequest] = {}
        self._id = 0

    def add(
        self,
        user_id: int,
        start_date: date,
        end_date: date,
        status: LeaveStatus = LeaveStatus.APPROVED,
        leave_type: LeaveType = LeaveType.ANNUAL,
    ) -> LeaveRequest:
        leave_id = self.create_leave(
            user_id=user_id,
            leave_type=leave_type,
            start_date=start_date,
            end_date=end_date,
            reason="test",
        )
        self.update_status(leave_id=leave_id, status=status)
        return self.leaves[leave_id]

    def create_leave(self, *, user_id, leave_type, start_date, end_date, reason) -> int:
        self._id += 1
        self.leaves[self._id] = LeaveRequest(
            leave_id=self._id,
            user_id=int(user_id),
            leave_type=leave_type,
            start_date=start_date,
            end_date=end_date,
            reason=reason,
            status=LeaveStatus.PENDING,
            created_at=datetime(2025, 1, 1, 9, 0),
        )
        return self._id

    def get_leave(self, *, leave_id: int) -> Optional[LeaveRequest]:
        return self.leaves.get(int(leave_id))

    def list_leaves(self, *, user_id=None, status=None):
        return [
            lv
            for lv in self.leaves.values()
            if (user_id is None or lv.user_id == user_id) and (status is None or lv.status == status)
        ]

    def list_overlapping(self, *, user_id, start_date, end_date, status=LeaveStatus.APPROVED):
        return [
            lv
            for lv in self.leaves.values()
            if lv.user_id == user_id
            and lv.status == status
            and lv.start_date <= end_date
            and lv.end_date >= start_date
        ]

    def update_status(self, *, leave_id: int, status: LeaveStatus) -> bool:
        leave = self.leaves.get(int(leave_id))
        if not leave:
            return False
        self.leaves[leave.leave_id] = replace(leave, status=status)
        return True


class InMemorySettings:
    def __init__(self, settings: Optional[PayrollSettings] = None):
        self.current = settings

    def get(self) -> Optional[PayrollSettings]:
        return self.current

    def save(self, settings: PayrollSettings) -> PayrollSettings:
        self.current = replace(settings, updated_at=datetime(2025, 1, 1, 9, 0))
        return self.current


class InMemoryPermissions:
    def __init__(self):
        self.by_user: dict[int, UserPermission] = {}

    def get_for_user(self, user_id: int) -> Optional[UserPermission]:
        return self.by_user.get(int(user_id))

    def upsert(self, permission: UserPermission) -> None:
        self.by_user[permission.user_id] = permission


class InMemoryPayruns:
    def __init__(self):
        self.batches: list[PayrunBatch] = []

    def create(self, batch: PayrunBatch) -> int:
        payrun_id = len(self.batches) + 1
        self.batches.append(replace(batch, payrun_id=payrun_id, created_at=datetime(2025, 1, 31, 12, 0)))
        return payrun_id

    def list_all(self):
        return list(reversed(self.batches))


class InMemoryProfile:
    def __init__(self):
        self.entries: dict[tuple[ProfileEntryKind, int], ProfileEntry] = {}
        self._id = 0

    def list_entries(self, kind: ProfileEntryKind, user_id: int):
        items = [e for (k, _), e in self.entries.items() if k == kind and e.user_id == int(user_id)]
        return sorted(items, key=lambda e: e.entry_id)

    def get_entry(self, kind: ProfileEntryKind, entry_id: int) -> Optional[ProfileEntry]:
        return self.entries.get((kind, int(entry_id)))

    def add_entry(self, kind: ProfileEntryKind, *, user_id: int, name: str) -> int:
        self._id += 1
        self.entries[(kind, self._id)] = ProfileEntry(
            entry_id=self._id,
            user_id=int(user_id),
            kind=kind,
            name=name,
            created_at=datetime(2025, 1, 1, 9, 0),
        )
        return self._id

    def delete_entry(self, kind: ProfileEntryKind, entry_id: int) -> bool:
        return self.entries.pop((kind, int(entry_id)), None) is not None


class InMemorySalaryStructures:
    def __init__(self):
        self.by_user: dict[int, SalaryStructure] = {}

    def get_for_user(self, user_id: int) -> Optional[SalaryStructure]:
        return self.by_user.get(int(user_id))

    def upsert(self, structure: SalaryStructure) -> SalaryStructure:
        self.by_user[structure.user_id] = structure
        return structure


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 1, 15, 9, 5, 0)


@pytest.fixture
def users_repo() -> InMemoryUsers:
    return InMemoryUsers()


@pytest.fixture
def attendance_repo() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def leaves_repo() -> InMemoryLeaves:
    return InMemoryLeaves()


@pytest.fixture
def settings_repo() -> InMemorySettings:
    return InMemorySettings(PayrollSettings())


@pytest.fixture
def permissions_repo() -> InMemoryPermissions:
    return InMemoryPermissions()


@pytest.fixture
def payruns_repo() -> InMemoryPayruns:
    return InMemoryPayruns()


@pytest.fixture
def profile_repo() -> InMemoryProfile:
    return InMemoryProfile()


@pytest.fixture
def salary_structures_repo() -> InMemorySalaryStructures:
    return InMemorySalaryStructures()


@pytest.fixture
def container(
    users_repo,
    attendance_repo,
    leaves_repo,
    settings_repo,
    permissions_repo,
    payruns_repo,
    profile_repo,
    salary_structures_repo,
):
    return wire_services(
        users_repo=users_repo,
        attendance_repo=attendance_repo,
        leaves_repo=leaves_repo,
        settings_repo=settings_repo,
        permissions_repo=permissions_repo,
        payruns_repo=payruns_repo,
        profile_repo=profile_repo,
        salary_structures_repo=salary_structures_repo,
    )


@pytest.fixture
def app(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.workzen.workzen.main import create_app

    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def login(client):
    def _login(user: User, password: str = PASSWORD):
        resp = client.post("/api/auth/login", json={"email": user.email, "password": password})
        assert resp.status_code == 200, resp.get_json()
        return resp

    return _login
