# model/api.py
from pydantic import BaseModel, Field
from model.accounts import EmployeeSchedule, Mint, TokenAccount, VestingRegistry
from util.enums import ScheduleState
from util.types import U64, Address, UnixTimestamp


class SignedRequest(BaseModel):
    # signature: base58 Ed25519 signature over core.signatures.signing_message(...)
    signer: Address
    signature: str = Field(min_length=1)


class CreateVestingAccountRequest(SignedRequest):
    name: str = Field(min_length=1)
    mint: Address


class CreateEmployeeAccountRequest(SignedRequest):
    beneficiary: Address
    startTime: UnixTimestamp
    endTime: UnixTimestamp
    totalAmount: U64
    cliffTime: UnixTimestamp


class ClaimTokensRequest(SignedRequest):
    pass


class CreateMintRequest(SignedRequest):
    decimals: int = Field(default=9, ge=0, le=255)


class MintToRequest(SignedRequest):
    destination: Address
    amount: U64


class VestingAccountResponse(BaseModel):
    address: str
    account: VestingRegistry
    custodianBalance: int


class VestingSnapshotPayload(BaseModel):
    state: ScheduleState
    now: int
    vested: int
    claimable: int


class EmployeeAccountResponse(BaseModel):
    address: str
    account: EmployeeSchedule
    status: VestingSnapshotPayload | None = None


class ClaimTokensResponse(BaseModel):
    ok: bool = True
    amount: int
    totalWithdrawn: int
    destination: str
    state: ScheduleState


class MintResponse(BaseModel):
    mint: Mint


class TokenAccountResponse(BaseModel):
    account: TokenAccount
