# service/token_ledger_service.py
import logging
from solders.keypair import Keypair
from solders.pubkey import Pubkey
from model.accounts import Mint, TokenAccount
from repository.token_ledger_repository import TokenLedgerRepository
from util.enums import ErrorMessage
from util.errors import VestingError
from util.functions import short_key

logger = logging.getLogger(__name__)


class TokenLedgerService:
    """
    Minimal token-ledger collaborator: mint creation and deposits.
    """

    def __init__(self, ledger: TokenLedgerRepository) -> None:
        self._ledger = ledger

    async def create_mint(self, *, authority: Pubkey, decimals: int) -> Mint:
        # Fresh address, as a client would do with a throwaway keypair.
        mint = Mint(
            address=str(Keypair().pubkey()),
            authority=str(authority),
            decimals=decimals,
            supply=0,
        )
        await self._ledger.create_mint(mint)
        logger.info(
            "mint.created mint=%s authority=%s decimals=%d",
            short_key(mint.address),
            short_key(mint.authority),
            decimals,
        )
        return mint

    async def mint_to(
        self, *, authority: Pubkey, mint: str, destination: str, amount: int
    ) -> TokenAccount:
        account = await self._ledger.mint_to(mint, destination, amount, str(authority))
        logger.info(
            "mint.to mint=%s destination=%s amount=%d balance=%d",
            short_key(mint),
            short_key(destination),
            amount,
            account.amount,
        )
        return account

    async def get_account(self, address: str) -> TokenAccount:
        account = await self._ledger.get_account(address)
        if account is None:
            raise VestingError(ErrorMessage.ACCOUNT_NOT_FOUND, "Token account not found")
        return account
