# model/accounts.py
from pydantic import BaseModel
from util.types import U64, Address, UnixTimestamp


class VestingRegistry(BaseModel):
    """One company's vesting program. Immutable once created."""

    owner: Address
    mint: Address
    custodian: Address
    name: str
    bump: int
    custodianBump: int


class EmployeeSchedule(BaseModel):
    beneficiary: Address
    registry: Address
    startTime: UnixTimestamp
    endTime: UnixTimestamp
    cliffTime: UnixTimestamp
    totalAmount: U64
    totalWithdrawn: U64 = 0
    bump: int


class TokenAccount(BaseModel):
    address: Address
    mint: Address
    owner: Address
    amount: U64 = 0


class Mint(BaseModel):
    address: Address
    authority: Address
    decimals: int
    supply: U64 = 0
