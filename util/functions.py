# util/functions.py
from typing import Mapping, Optional


def short_key(address: str) -> str:
    """
    - Shorten a base58 address for log lines: 'AbCdEfGh...wxyz'.
    """
    if len(address) <= 12:
        return address
    return f"{address[:8]}...{address[-4:]}"


def hash_str(h: Mapping, key: str, default: Optional[str] = None) -> Optional[str]:
    # Redis hashes come back with bytes keys and values (decode_responses=False).
    v = h.get(key.encode("utf-8"), h.get(key))
    if v is None:
        return default
    return v.decode("utf-8") if isinstance(v, (bytes, bytearray)) else str(v)


def hash_int(h: Mapping, key: str, default: int = 0) -> int:
    return int(hash_str(h, key, str(default)) or default)
