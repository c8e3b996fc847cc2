# repository/token_ledger_repository.py
from typing import Final, Optional
from redis.asyncio import Redis
from redis.asyncio.client import Pipeline
from redis.exceptions import WatchError
from config.cache import get_redis
from model.accounts import Mint, TokenAccount
from repository.namespaces import MINTS, TOKEN_ACCOUNTS
from util.constants import U64_MAX
from util.enums import ErrorMessage
from util.errors import VestingError
from util.functions import hash_int, hash_str

ACCOUNT_PREFIX: Final[str] = TOKEN_ACCOUNTS
MINT_PREFIX: Final[str] = MINTS


class TokenLedgerRepository:
    """
    Redis-backed token ledger: mints and token accounts, one hash each.

    Flow:
    - Accounts are created insert-if-absent.
    - mint_to is the deposit path; it credits an account and grows supply
      in one WATCH/MULTI transaction.
    - Debits out of an account only happen in ClaimRepository.settle.
    """

    def __init__(self, max_retries: int = 5) -> None:
        self._max_retries = max_retries

    @staticmethod
    async def _client() -> Redis:
        return await get_redis()

    @staticmethod
    def account_key(address: str) -> str:
        return f"{ACCOUNT_PREFIX}:{address}"

    @staticmethod
    def mint_key(address: str) -> str:
        return f"{MINT_PREFIX}:{address}"

    @staticmethod
    def account_mapping(account: TokenAccount) -> dict:
        return {
            "address": account.address,
            "mint": account.mint,
            "owner": account.owner,
            "amount": str(account.amount),
        }

    @staticmethod
    def mint_mapping(mint: Mint) -> dict:
        return {
            "address": mint.address,
            "authority": mint.authority,
            "decimals": str(mint.decimals),
            "supply": str(mint.supply),
        }

    @staticmethod
    def parse_account(h: dict) -> Optional[TokenAccount]:
        if not h:
            return None
        return TokenAccount(
            address=hash_str(h, "address"),
            mint=hash_str(h, "mint"),
            owner=hash_str(h, "owner"),
            amount=hash_int(h, "amount"),
        )

    @staticmethod
    def parse_mint(h: dict) -> Optional[Mint]:
        if not h:
            return None
        return Mint(
            address=hash_str(h, "address"),
            authority=hash_str(h, "authority"),
            decimals=hash_int(h, "decimals"),
            supply=hash_int(h, "supply"),
        )

    # ---------------- Reads ----------------

    async def get_account(self, address: str) -> Optional[TokenAccount]:
        r = await self._client()
        return self.parse_account(await r.hgetall(self.account_key(address)))

    async def get_mint(self, address: str) -> Optional[Mint]:
        r = await self._client()
        return self.parse_mint(await r.hgetall(self.mint_key(address)))

    async def balance(self, address: str) -> int:
        r = await self._client()
        v = await r.hget(self.account_key(address), "amount")
        return int(v) if v is not None else 0

    # ---------------- Writes ----------------

    async def create_mint(self, mint: Mint) -> None:
        r = await self._client()
        async with r.pipeline(transaction=True) as pipe:
            await pipe.watch(self.mint_key(mint.address))
            if await pipe.exists(self.mint_key(mint.address)):
                raise VestingError(ErrorMessage.DUPLICATE_ACCOUNT)
            pipe.multi()
            pipe.hset(self.mint_key(mint.address), mapping=self.mint_mapping(mint))
            try:
                await pipe.execute()
            except WatchError:
                raise VestingError(ErrorMessage.DUPLICATE_ACCOUNT)

    async def create_account(self, account: TokenAccount) -> None:
        r = await self._client()
        async with r.pipeline(transaction=True) as pipe:
            await pipe.watch(self.account_key(account.address))
            if await pipe.exists(self.account_key(account.address)):
                raise VestingError(ErrorMessage.DUPLICATE_ACCOUNT)
            pipe.multi()
            self.queue_account(pipe, account)
            try:
                await pipe.execute()
            except WatchError:
                raise VestingError(ErrorMessage.DUPLICATE_ACCOUNT)

    def queue_account(self, pipe: Pipeline, account: TokenAccount) -> None:
        """Queue an account write on a pipeline already in MULTI mode."""
        pipe.hset(self.account_key(account.address), mapping=self.account_mapping(account))

    async def mint_to(self, mint: str, destination: str, amount: int, authority: str) -> TokenAccount:
        if amount <= 0:
            raise VestingError(ErrorMessage.INVALID_AMOUNT)
        r = await self._client()
        mint_key, account_key = self.mint_key(mint), self.account_key(destination)
        async with r.pipeline(transaction=True) as pipe:
            for _ in range(self._max_retries):
                try:
                    await pipe.watch(mint_key, account_key)
                    m = self.parse_mint(await pipe.hgetall(mint_key))
                    acct = self.parse_account(await pipe.hgetall(account_key))
                    if m is None or acct is None:
                        raise VestingError(ErrorMessage.ACCOUNT_NOT_FOUND)
                    if m.authority != authority:
                        raise VestingError(ErrorMessage.UNAUTHORIZED, "Signer is not the mint authority")
                    if acct.mint != m.address:
                        raise VestingError(ErrorMessage.MINT_MISMATCH)
                    if m.supply + amount > U64_MAX:
                        raise VestingError(ErrorMessage.INVALID_AMOUNT, "Mint supply would overflow")

                    acct.amount += amount
                    pipe.multi()
                    pipe.hset(mint_key, mapping={"supply": str(m.supply + amount)})
                    pipe.hset(account_key, mapping={"amount": str(acct.amount)})
                    await pipe.execute()
                    return acct
                except WatchError:
                    continue
        raise VestingError(ErrorMessage.CONCURRENT_MODIFICATION)
