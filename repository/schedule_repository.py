# repository/schedule_repository.py
from typing import Final, Optional
from redis.asyncio import Redis
from config.cache import get_redis
from model.accounts import EmployeeSchedule
from repository.namespaces import SCHEDULES
from util.enums import ErrorMessage
from util.errors import VestingError

KEY_PREFIX: Final[str] = SCHEDULES


class ScheduleRepository:
    """
    Employee schedules as JSON keyed by their derived address.
    totalWithdrawn is only ever rewritten by ClaimRepository.settle.
    """

    @staticmethod
    async def _client() -> Redis:
        return await get_redis()

    @staticmethod
    def key(address: str) -> str:
        return f"{KEY_PREFIX}:{address}"

    async def insert(self, address: str, schedule: EmployeeSchedule) -> None:
        r = await self._client()
        payload = schedule.model_dump_json().encode("utf-8")
        created = await r.set(self.key(address), payload, nx=True)
        if not created:
            raise VestingError(ErrorMessage.DUPLICATE_SCHEDULE)

    async def get(self, address: str) -> Optional[EmployeeSchedule]:
        r = await self._client()
        raw = await r.get(self.key(address))
        if raw is None:
            return None
        return EmployeeSchedule.model_validate_json(raw)
