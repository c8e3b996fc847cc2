# service/claim_service.py
import logging
from solders.pubkey import Pubkey
from core import derivation, vesting
from core.authority import custodian_signer
from core.clock import Clock
from core.entities import ClaimResult
from model.accounts import TokenAccount
from repository.claim_repository import ClaimRepository
from repository.registry_repository import RegistryRepository
from repository.schedule_repository import ScheduleRepository
from util.enums import ErrorMessage
from util.errors import VestingError
from util.functions import short_key
from util.timing import timed

logger = logging.getLogger(__name__)


class ClaimService:
    """
    Releases vested tokens from a company's custodian to a beneficiary.

    `now` always comes from the injected clock, never from the caller.
    """

    def __init__(
        self,
        registries: RegistryRepository,
        schedules: ScheduleRepository,
        claims: ClaimRepository,
        clock: Clock,
    ) -> None:
        self._registries = registries
        self._schedules = schedules
        self._claims = claims
        self._clock = clock

    async def claim_tokens(self, *, beneficiary: Pubkey, name: str) -> ClaimResult:
        registry_addr = derivation.registry_address(name)
        registry = await self._registries.get(str(registry_addr))
        if registry is None:
            raise VestingError(ErrorMessage.ACCOUNT_NOT_FOUND, "Vesting account not found")

        schedule_addr = derivation.schedule_address(beneficiary, registry_addr.address)
        schedule = await self._schedules.get(str(schedule_addr))
        if schedule is None:
            raise VestingError(ErrorMessage.ACCOUNT_NOT_FOUND, "Employee account not found")
        if schedule.beneficiary != str(beneficiary) or schedule.registry != str(registry_addr):
            raise VestingError(ErrorMessage.UNAUTHORIZED, "Schedule does not belong to signer")

        authority = custodian_signer(registry)
        ata = derivation.associated_token_address(beneficiary, Pubkey.from_string(registry.mint))
        destination = TokenAccount(
            address=str(ata), mint=registry.mint, owner=str(beneficiary), amount=0
        )

        now = self._clock.now()
        with timed(
            logger,
            "claim.settle",
            company=name,
            beneficiary=short_key(str(beneficiary)),
        ):
            amount, updated = await self._claims.settle(
                schedule_address=str(schedule_addr),
                custodian_address=registry.custodian,
                destination=destination,
                authority=authority,
                plan=lambda s: vesting.release_amount(s, now),
            )

        logger.info(
            "claim.ok name=%s beneficiary=%s amount=%d withdrawn=%d total=%d",
            name,
            short_key(str(beneficiary)),
            amount,
            updated.totalWithdrawn,
            updated.totalAmount,
        )
        return ClaimResult(
            amount=amount,
            total_withdrawn=updated.totalWithdrawn,
            destination=destination.address,
            state=vesting.schedule_state(updated, now),
        )
