# controller/controller_dependencies.py
from fastapi import Depends
from fastapi_limiter.depends import RateLimiter
from config.settings import settings
from core.clock import Clock, SystemClock
from repository.claim_repository import ClaimRepository
from repository.registry_repository import RegistryRepository
from repository.schedule_repository import ScheduleRepository
from repository.token_ledger_repository import TokenLedgerRepository
from service.claim_service import ClaimService
from service.token_ledger_service import TokenLedgerService
from service.vesting_service import VestingService


def rate_limited() -> list:
    """Router-level dependencies; empty when rate limiting is switched off."""
    if not settings.RATE_LIMIT_ENABLED:
        return []
    return [
        Depends(
            RateLimiter(
                times=settings.RATE_LIMIT_TIMES, seconds=settings.RATE_LIMIT_SECONDS
            )
        )
    ]


def get_clock() -> Clock:
    return SystemClock()


def get_vesting_service(clock: Clock = Depends(get_clock)) -> VestingService:
    _ledger = TokenLedgerRepository(max_retries=settings.LEDGER_MAX_RETRIES)
    _registries = RegistryRepository(_ledger)
    _schedules = ScheduleRepository()
    return VestingService(_registries, _schedules, _ledger, clock)


def get_claim_service(clock: Clock = Depends(get_clock)) -> ClaimService:
    _ledger = TokenLedgerRepository(max_retries=settings.LEDGER_MAX_RETRIES)
    _registries = RegistryRepository(_ledger)
    _schedules = ScheduleRepository()
    _claims = ClaimRepository(_schedules, _ledger, max_retries=settings.CLAIM_MAX_RETRIES)
    return ClaimService(_registries, _schedules, _claims, clock)


def get_token_ledger_service() -> TokenLedgerService:
    return TokenLedgerService(TokenLedgerRepository(max_retries=settings.LEDGER_MAX_RETRIES))
