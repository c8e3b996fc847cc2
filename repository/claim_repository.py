# repository/claim_repository.py
import logging
from typing import Callable
from redis.asyncio import Redis
from redis.exceptions import WatchError
from config.cache import get_redis
from core.authority import verify_program_authority
from core.entities import ProgramSigner
from model.accounts import EmployeeSchedule, TokenAccount
from repository.schedule_repository import ScheduleRepository
from repository.token_ledger_repository import TokenLedgerRepository
from util.constants import U64_MAX
from util.enums import ErrorMessage
from util.errors import VestingError

logger = logging.getLogger(__name__)

# Given the freshly watched schedule, return the amount to release (or raise).
ReleasePlan = Callable[[EmployeeSchedule], int]


class ClaimRepository:
    """
    Atomic claim settlement.

    Flow:
    - WATCH schedule, custodian and destination.
    - Re-read all three and let `plan` decide the amount from the watched
      schedule, so a concurrent claim can never be double counted.
    - MULTI: custodian -= amount, destination += amount (created if absent),
      schedule.totalWithdrawn += amount. EXEC applies all of it or none.
    - On WatchError start over, up to `max_retries` times.
    """

    def __init__(
        self,
        schedules: ScheduleRepository,
        ledger: TokenLedgerRepository,
        max_retries: int = 5,
    ) -> None:
        self._schedules = schedules
        self._ledger = ledger
        self._max_retries = max_retries

    @staticmethod
    async def _client() -> Redis:
        return await get_redis()

    async def settle(
        self,
        *,
        schedule_address: str,
        custodian_address: str,
        destination: TokenAccount,
        authority: ProgramSigner,
        plan: ReleasePlan,
    ) -> tuple[int, EmployeeSchedule]:
        r = await self._client()
        schedule_key = self._schedules.key(schedule_address)
        custodian_key = self._ledger.account_key(custodian_address)
        destination_key = self._ledger.account_key(destination.address)

        async with r.pipeline(transaction=True) as pipe:
            for attempt in range(1, self._max_retries + 1):
                try:
                    await pipe.watch(schedule_key, custodian_key, destination_key)

                    raw = await pipe.get(schedule_key)
                    if raw is None:
                        raise VestingError(ErrorMessage.ACCOUNT_NOT_FOUND, "Employee account not found")
                    schedule = EmployeeSchedule.model_validate_json(raw)

                    custodian = self._ledger.parse_account(await pipe.hgetall(custodian_key))
                    if custodian is None:
                        raise VestingError(ErrorMessage.ACCOUNT_NOT_FOUND, "Custodian account not found")
                    verify_program_authority(authority, custodian.owner)

                    current = self._ledger.parse_account(await pipe.hgetall(destination_key))
                    target = current or destination
                    if target.mint != custodian.mint:
                        raise VestingError(ErrorMessage.MINT_MISMATCH)
                    if target.owner != destination.owner:
                        raise VestingError(ErrorMessage.UNAUTHORIZED, "Destination owner mismatch")

                    amount = plan(schedule)
                    if custodian.amount < amount:
                        raise VestingError(ErrorMessage.INSUFFICIENT_FUNDS)
                    if target.amount + amount > U64_MAX:
                        raise VestingError(ErrorMessage.INVALID_AMOUNT, "Destination balance would overflow")

                    schedule.totalWithdrawn += amount
                    target.amount += amount
                    custodian.amount -= amount

                    pipe.multi()
                    pipe.hset(custodian_key, mapping={"amount": str(custodian.amount)})
                    self._ledger.queue_account(pipe, target)
                    pipe.set(schedule_key, schedule.model_dump_json().encode("utf-8"))
                    await pipe.execute()
                    return amount, schedule
                except WatchError:
                    logger.info("claim.settle.retry attempt=%d", attempt)
                    continue

        raise VestingError(ErrorMessage.CONCURRENT_MODIFICATION)
