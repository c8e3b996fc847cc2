# repository/namespaces.py
from typing import Final

ROOT: Final[str] = "vesting"

REGISTRIES: Final[str] = f"{ROOT}:registries"
SCHEDULES: Final[str] = f"{ROOT}:schedules"
TOKEN: Final[str] = f"{ROOT}:token"
TOKEN_ACCOUNTS: Final[str] = f"{TOKEN}:accounts"
MINTS: Final[str] = f"{TOKEN}:mints"
