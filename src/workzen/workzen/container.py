from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .leaves.mysql_leave_repository import MySQLLeaveRepository
from .leaves.repository import LeaveRepository
from .leaves.service import LeaveService
from .payroll.mysql_payrun_repository import MySQLPayrunRepository
from .payroll.report_service import SalaryStatementService
from .payroll.repository import PayrunRepository
from .payroll.service import PayrollService
from .permissions.mysql_permission_repository import MySQLPermissionRepository
from .permissions.repository import PermissionRepository
from .permissions.service import PermissionService
from .profile.mysql_profile_repository import MySQLProfileRepository
from .profile.repository import ProfileRepository
from .profile.service import ProfileService
from .salary_components.mysql_salary_structure_repository import MySQLSalaryStructureRepository
from .salary_components.repository import SalaryStructureRepository
from .salary_components.service import SalaryStructureService
from .settings.mysql_settings_repository import MySQLSettingsRepository
from .settings.repository import SettingsRepository
from .settings.service import SettingsService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    attendance_repo: AttendanceRepository
    leaves_repo: LeaveRepository
    settings_repo: SettingsRepository
    permissions_repo: PermissionRepository
    payruns_repo: PayrunRepository
    profile_repo: ProfileRepository
    salary_structures_repo: SalaryStructureRepository

    auth_service: AuthService
    user_service: UserService
    attendance_service: AttendanceService
    leave_service: LeaveService
    settings_service: SettingsService
    permission_service: PermissionService
    payroll_service: PayrollService
    salary_statement_service: SalaryStatementService
    profile_service: ProfileService
    salary_structure_service: SalaryStructureService

    conn: Optional[DatabaseConnection] = None


def wire_services(
    *,
    users_repo: UserRepository,
    attendance_repo: AttendanceRepository,
    leaves_repo: LeaveRepository,
    settings_repo: SettingsRepository,
    permissions_repo: PermissionRepository,
    payruns_repo: PayrunRepository,
    profile_repo: ProfileRepository,
    salary_structures_repo: SalaryStructureRepository,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Build every service on top of the given repositories."""

    settings_service = SettingsService(settings_repo)

    return Container(
        conn=conn,
        users_repo=users_repo,
        attendance_repo=attendance_repo,
        leaves_repo=leaves_repo,
        settings_repo=settings_repo,
        permissions_repo=permissions_repo,
        payruns_repo=payruns_repo,
        profile_repo=profile_repo,
        salary_structures_repo=salary_structures_repo,
        auth_service=AuthService(users_repo),
        user_service=UserService(users_repo),
        attendance_service=AttendanceService(attendance_repo, users_repo),
        leave_service=LeaveService(leaves_repo),
        settings_service=settings_service,
        permission_service=PermissionService(permissions_repo, users_repo),
        payroll_service=PayrollService(
            users_repo,
            attendance_repo,
            leaves_repo,
            settings_service,
            payruns_repo,
        ),
        salary_statement_service=SalaryStatementService(
            users_repo,
            attendance_repo,
            leaves_repo,
            settings_service,
        ),
        profile_service=ProfileService(profile_repo, users_repo),
        salary_structure_service=SalaryStructureService(salary_structures_repo, users_repo),
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return wire_services(
        conn=conn,
        users_repo=MySQLUserRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        leaves_repo=MySQLLeaveRepository(conn),
        settings_repo=MySQLSettingsRepository(conn),
        permissions_repo=MySQLPermissionRepository(conn),
        payruns_repo=MySQLPayrunRepository(conn),
        profile_repo=MySQLProfileRepository(conn),
        salary_structures_repo=MySQLSalaryStructureRepository(conn),
    )
