# service/vesting_service.py
import logging
from solders.pubkey import Pubkey
from core import derivation, vesting
from core.clock import Clock
from core.entities import VestingSnapshot
from model.accounts import EmployeeSchedule, TokenAccount, VestingRegistry
from repository.registry_repository import RegistryRepository
from repository.schedule_repository import ScheduleRepository
from repository.token_ledger_repository import TokenLedgerRepository
from util.enums import ErrorMessage
from util.errors import VestingError
from util.functions import short_key

logger = logging.getLogger(__name__)


class VestingService:
    def __init__(
        self,
        registries: RegistryRepository,
        schedules: ScheduleRepository,
        ledger: TokenLedgerRepository,
        clock: Clock,
    ) -> None:
        self._registries = registries
        self._schedules = schedules
        self._ledger = ledger
        self._clock = clock

    async def create_vesting_account(
        self, *, operator: Pubkey, name: str, mint: str
    ) -> tuple[str, VestingRegistry]:
        """
        Create the company registry and its custodian token account together.
        Logs: registry address and owner (shortened).
        """
        registry_addr = derivation.registry_address(name)
        custodian_addr = derivation.custodian_address(name)

        if await self._ledger.get_mint(mint) is None:
            raise VestingError(ErrorMessage.ACCOUNT_NOT_FOUND, "Mint not found")

        registry = VestingRegistry(
            owner=str(operator),
            mint=mint,
            custodian=str(custodian_addr),
            name=name,
            bump=registry_addr.bump,
            custodianBump=custodian_addr.bump,
        )
        # The custodian owns itself: only its own derivation proof can debit it.
        custodian = TokenAccount(
            address=str(custodian_addr),
            mint=mint,
            owner=str(custodian_addr),
            amount=0,
        )
        await self._registries.insert(str(registry_addr), registry, custodian)
        logger.info(
            "registry.created name=%s address=%s owner=%s",
            name,
            short_key(str(registry_addr)),
            short_key(str(operator)),
        )
        return str(registry_addr), registry

    async def get_vesting_account(self, name: str) -> tuple[str, VestingRegistry]:
        address = str(derivation.registry_address(name))
        registry = await self._registries.get(address)
        if registry is None:
            raise VestingError(ErrorMessage.ACCOUNT_NOT_FOUND, "Vesting account not found")
        return address, registry

    async def custodian_balance(self, registry: VestingRegistry) -> int:
        return await self._ledger.balance(registry.custodian)

    async def create_employee_account(
        self,
        *,
        operator: Pubkey,
        name: str,
        beneficiary: Pubkey,
        start_time: int,
        end_time: int,
        total_amount: int,
        cliff_time: int,
    ) -> tuple[str, EmployeeSchedule]:
        """
        Validate terms, check the operator owns the registry, then insert the
        schedule at its derived address. Nothing is written on any failure.
        """
        vesting.validate_terms(start_time, end_time, cliff_time, total_amount)

        registry_addr, registry = await self.get_vesting_account(name)
        if registry.owner != str(operator):
            logger.warning(
                "schedule.create.unauthorized name=%s operator=%s",
                name,
                short_key(str(operator)),
            )
            raise VestingError(ErrorMessage.UNAUTHORIZED, "Signer does not own this vesting account")

        derived = derivation.schedule_address(beneficiary, Pubkey.from_string(registry_addr))
        schedule = EmployeeSchedule(
            beneficiary=str(beneficiary),
            registry=registry_addr,
            startTime=start_time,
            endTime=end_time,
            cliffTime=cliff_time,
            totalAmount=total_amount,
            totalWithdrawn=0,
            bump=derived.bump,
        )
        await self._schedules.insert(str(derived), schedule)
        logger.info(
            "schedule.created name=%s beneficiary=%s amount=%d start=%d cliff=%d end=%d",
            name,
            short_key(str(beneficiary)),
            total_amount,
            start_time,
            cliff_time,
            end_time,
        )
        return str(derived), schedule

    async def get_employee_account(
        self, *, name: str, beneficiary: Pubkey
    ) -> tuple[str, EmployeeSchedule, VestingSnapshot]:
        registry_addr, _ = await self.get_vesting_account(name)
        address = str(derivation.schedule_address(beneficiary, Pubkey.from_string(registry_addr)))
        schedule = await self._schedules.get(address)
        if schedule is None:
            raise VestingError(ErrorMessage.ACCOUNT_NOT_FOUND, "Employee account not found")
        return address, schedule, vesting.snapshot(schedule, self._clock.now())
