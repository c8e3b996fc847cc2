# repository/registry_repository.py
from typing import Final, Optional
from redis.asyncio import Redis
from redis.exceptions import WatchError
from config.cache import get_redis
from model.accounts import TokenAccount, VestingRegistry
from repository.namespaces import REGISTRIES
from repository.token_ledger_repository import TokenLedgerRepository
from util.enums import ErrorMessage
from util.errors import VestingError

KEY_PREFIX: Final[str] = REGISTRIES


class RegistryRepository:
    """
    Flow:
    - One JSON record per registry address; never updated after insert.
    - Registry and custodian token account are written in one MULTI so a
      registry never exists without its custodian, or the other way round.
    """

    def __init__(self, ledger: TokenLedgerRepository) -> None:
        self._ledger = ledger

    @staticmethod
    async def _client() -> Redis:
        return await get_redis()

    @staticmethod
    def _key(address: str) -> str:
        return f"{KEY_PREFIX}:{address}"

    async def insert(self, address: str, registry: VestingRegistry, custodian: TokenAccount) -> None:
        r = await self._client()
        registry_key = self._key(address)
        custodian_key = self._ledger.account_key(custodian.address)
        async with r.pipeline(transaction=True) as pipe:
            await pipe.watch(registry_key, custodian_key)
            # Either address being taken is a collision on the company name.
            if await pipe.exists(registry_key, custodian_key):
                raise VestingError(ErrorMessage.DUPLICATE_COMPANY)
            pipe.multi()
            pipe.set(registry_key, registry.model_dump_json().encode("utf-8"))
            self._ledger.queue_account(pipe, custodian)
            try:
                await pipe.execute()
            except WatchError:
                # Someone else created one of the two accounts in between
                raise VestingError(ErrorMessage.DUPLICATE_COMPANY)

    async def get(self, address: str) -> Optional[VestingRegistry]:
        r = await self._client()
        raw = await r.get(self._key(address))
        if raw is None:
            return None
        return VestingRegistry.model_validate_json(raw)
