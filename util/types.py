# util/types.py
from typing import Annotated
from pydantic import AfterValidator, Field
from solders.pubkey import Pubkey
from util.constants import I64_MAX, I64_MIN, U64_MAX


def _check_address(value: str) -> str:
    try:
        Pubkey.from_string(value)
    except Exception as e:
        raise ValueError(f"not a valid base58 public key: {type(e).__name__}")
    return value


# Flow: narrow wire types; persisted integers mirror the on-chain widths.
Address = Annotated[str, AfterValidator(_check_address)]
U64 = Annotated[int, Field(ge=0, le=U64_MAX)]
UnixTimestamp = Annotated[int, Field(ge=I64_MIN, le=I64_MAX)]
