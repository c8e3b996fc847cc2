# core/authority.py
import logging
from solders.pubkey import Pubkey
from core import derivation
from core.entities import ProgramSigner
from model.accounts import VestingRegistry
from util.enums import ErrorMessage
from util.errors import VestingError

logger = logging.getLogger(__name__)


def custodian_signer(registry: VestingRegistry) -> ProgramSigner:
    """
    Rebuild the custodian's authority proof from the registry name.

    The re-derived address and bump must match what was stored at registry
    creation; a reference that was merely passed in is never trusted.
    """
    derived = derivation.custodian_address(registry.name)
    if str(derived.address) != registry.custodian or derived.bump != registry.custodianBump:
        logger.warning("authority.custodian.mismatch registry=%s", registry.name)
        raise VestingError(ErrorMessage.UNAUTHORIZED, "Custodian derivation mismatch")
    return ProgramSigner(
        program_id=derivation.program_id(),
        seeds=derivation.custodian_seeds(registry.name),
        bump=derived.bump,
    )


def verify_program_authority(signer: ProgramSigner, owner: str) -> None:
    """
    Token-ledger side of the check: a debit out of a program-owned account is
    allowed only when the proof re-derives exactly the account's owner.
    """
    try:
        address = signer.address()
    except Exception:
        # create_program_address rejects on-curve results and bad seeds
        raise VestingError(ErrorMessage.UNAUTHORIZED, "Invalid authority proof")
    if address != Pubkey.from_string(owner):
        raise VestingError(ErrorMessage.UNAUTHORIZED, "Authority proof does not match owner")
