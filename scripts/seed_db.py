from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.workzen.workzen.database.bootstrap import DEMO_ACCOUNTS, ensure_demo_users


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    ensure_demo_users(db_config)

    print(f"OK: seeded {db_config.get('database')} with demo accounts:")
    for account in DEMO_ACCOUNTS:
        print(f"  {account.role.value:<9} {account.email} / {account.password}")


if __name__ == "__main__":
    main()
