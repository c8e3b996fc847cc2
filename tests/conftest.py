"""
Shared fixtures: in-process Redis, a fixed clock, services wired the same
way controller_dependencies wires them, and signing helpers.
"""

import os

# Settings are read at import time; configure before any project import.
os.environ["APP_ENV"] = "test"
os.environ["REDIS_URL"] = "redis://localhost:6379/15"
os.environ["PROGRAM_ID"] = "Fg6PaFpoGXkYsidMpWTK6W2BeZ7FEfcYkg476zPFsLnS"
os.environ["ALLOWED_ORIGIN"] = "http://localhost:3000"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["RATE_LIMIT_TIMES"] = "100"
os.environ["RATE_LIMIT_SECONDS"] = "60"
os.environ["TRUST_PROXY"] = "false"

from dataclasses import dataclass

import fakeredis
import pytest
from solders.keypair import Keypair

from config.cache import set_redis
from core.clock import FixedClock
from core.signatures import signing_message
from repository.claim_repository import ClaimRepository
from repository.registry_repository import RegistryRepository
from repository.schedule_repository import ScheduleRepository
from repository.token_ledger_repository import TokenLedgerRepository
from service.claim_service import ClaimService
from service.token_ledger_service import TokenLedgerService
from service.vesting_service import VestingService

NOW = 1_750_000_000
DAY = 24 * 60 * 60
YEAR = 365 * DAY
CLIFF = 90 * DAY
TOKENS = 1000 * 10**9
COMPANY = "TestCompany"


def sign(keypair: Keypair, op: str, **fields) -> str:
    return str(keypair.sign_message(signing_message(op, **fields)))


@pytest.fixture
async def redis():
    client = fakeredis.FakeAsyncRedis(server=fakeredis.FakeServer())
    set_redis(client)
    yield client
    set_redis(None)
    await client.flushall()
    await client.aclose()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(NOW)


@pytest.fixture
def ledger(redis) -> TokenLedgerRepository:
    return TokenLedgerRepository()


@pytest.fixture
def registries(ledger) -> RegistryRepository:
    return RegistryRepository(ledger)


@pytest.fixture
def schedules(redis) -> ScheduleRepository:
    return ScheduleRepository()


@pytest.fixture
def vesting_service(registries, schedules, ledger, clock) -> VestingService:
    return VestingService(registries, schedules, ledger, clock)


@pytest.fixture
def claim_service(registries, schedules, ledger, clock) -> ClaimService:
    claims = ClaimRepository(schedules, ledger)
    return ClaimService(registries, schedules, claims, clock)


@pytest.fixture
def token_service(ledger) -> TokenLedgerService:
    return TokenLedgerService(ledger)


@pytest.fixture
def company_owner() -> Keypair:
    return Keypair()


@pytest.fixture
def beneficiary() -> Keypair:
    return Keypair()


@dataclass
class Company:
    owner: Keypair
    mint: str
    address: str
    custodian: str
    name: str = COMPANY


@pytest.fixture
async def company(token_service, vesting_service, company_owner) -> Company:
    """A registry for COMPANY whose custodian holds TOKENS."""
    mint = await token_service.create_mint(authority=company_owner.pubkey(), decimals=9)
    address, registry = await vesting_service.create_vesting_account(
        operator=company_owner.pubkey(), name=COMPANY, mint=mint.address
    )
    await token_service.mint_to(
        authority=company_owner.pubkey(),
        mint=mint.address,
        destination=registry.custodian,
        amount=TOKENS,
    )
    return Company(
        owner=company_owner, mint=mint.address, address=address, custodian=registry.custodian
    )
