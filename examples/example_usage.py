"""Example: call the service layer directly (no Flask).

Controllers are thin; payroll logic lives in the services.
"""

import importlib
import json

from dotenv import load_dotenv

from config import get_settings_module

from src.workzen.workzen.container import build_container
from src.workzen.workzen.core.enums import Role


def main():
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    payslip = container.payroll_service.payslip_for_month(
        current_role=Role.ADMIN,
        current_user_id=1,
        employee_id=1,
        month="2025-01",
    )
    print(json.dumps(payslip.to_dict(), indent=2))


if __name__ == "__main__":
    main()
