# core/derivation.py
"""
Deterministic account addresses.

All derivations go through Pubkey.find_program_address, so an address computed
here matches the one a deployed program would compute from the same seeds.
"""
from functools import lru_cache
from solders.pubkey import Pubkey
from config.settings import settings
from core.entities import DerivedAddress
from util.constants import MAX_SEED_BYTES, ProgramIds, Seeds
from util.enums import ErrorMessage
from util.errors import VestingError


@lru_cache(maxsize=1)
def program_id() -> Pubkey:
    return Pubkey.from_string(settings.PROGRAM_ID)


def name_seed(name: str) -> bytes:
    seed = name.encode("utf-8")
    if not seed or len(seed) > MAX_SEED_BYTES:
        raise VestingError(ErrorMessage.INVALID_COMPANY_NAME)
    # The name is also a single URL path segment.
    if "/" in name:
        raise VestingError(ErrorMessage.INVALID_COMPANY_NAME, "Company name must not contain '/'")
    return seed


def _find(seeds: list[bytes], owner: Pubkey) -> DerivedAddress:
    address, bump = Pubkey.find_program_address(seeds, owner)
    return DerivedAddress(address=address, bump=bump)


def registry_address(name: str, program: Pubkey | None = None) -> DerivedAddress:
    return _find([name_seed(name)], program or program_id())


def custodian_seeds(name: str) -> tuple[bytes, ...]:
    return (Seeds.TREASURY, name_seed(name))


def custodian_address(name: str, program: Pubkey | None = None) -> DerivedAddress:
    return _find(list(custodian_seeds(name)), program or program_id())


def schedule_address(
    beneficiary: Pubkey, registry: Pubkey, program: Pubkey | None = None
) -> DerivedAddress:
    return _find(
        [Seeds.EMPLOYEE, bytes(beneficiary), bytes(registry)], program or program_id()
    )


def associated_token_address(owner: Pubkey, mint: Pubkey) -> DerivedAddress:
    # Same layout as the SPL associated-token program: [owner, token program, mint].
    return _find(
        [
            bytes(owner),
            bytes(Pubkey.from_string(ProgramIds.TOKEN_PROGRAM)),
            bytes(mint),
        ],
        Pubkey.from_string(ProgramIds.ASSOCIATED_TOKEN_PROGRAM),
    )
