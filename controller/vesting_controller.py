# controller/vesting_controller.py
from fastapi import APIRouter, Depends, status
from solders.pubkey import Pubkey
from core.signatures import signing_message, verify_signer
from model.api import (
    CreateEmployeeAccountRequest,
    CreateVestingAccountRequest,
    EmployeeAccountResponse,
    VestingAccountResponse,
    VestingSnapshotPayload,
)
from service.vesting_service import VestingService
from util.constants import InternalURIs
from util.types import Address
from controller.controller_dependencies import get_vesting_service, rate_limited

vesting_router = APIRouter(dependencies=rate_limited())


@vesting_router.post(
    InternalURIs.VESTING_ACCOUNTS,
    response_model=VestingAccountResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_vesting_account(
    payload: CreateVestingAccountRequest,
    service: VestingService = Depends(get_vesting_service),
) -> VestingAccountResponse:
    message = signing_message(
        "createVestingAccount", name=payload.name, mint=payload.mint, signer=payload.signer
    )
    operator = verify_signer(payload.signer, payload.signature, message)
    address, registry = await service.create_vesting_account(
        operator=operator, name=payload.name, mint=payload.mint
    )
    return VestingAccountResponse(address=address, account=registry, custodianBalance=0)


@vesting_router.get(InternalURIs.VESTING_ACCOUNT, response_model=VestingAccountResponse)
async def get_vesting_account(
    name: str,
    service: VestingService = Depends(get_vesting_service),
) -> VestingAccountResponse:
    address, registry = await service.get_vesting_account(name)
    balance = await service.custodian_balance(registry)
    return VestingAccountResponse(address=address, account=registry, custodianBalance=balance)


@vesting_router.post(
    InternalURIs.EMPLOYEE_ACCOUNTS,
    response_model=EmployeeAccountResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_employee_account(
    name: str,
    payload: CreateEmployeeAccountRequest,
    service: VestingService = Depends(get_vesting_service),
) -> EmployeeAccountResponse:
    message = signing_message(
        "createEmployeeAccount",
        name=name,
        beneficiary=payload.beneficiary,
        startTime=payload.startTime,
        endTime=payload.endTime,
        totalAmount=payload.totalAmount,
        cliffTime=payload.cliffTime,
        signer=payload.signer,
    )
    operator = verify_signer(payload.signer, payload.signature, message)
    address, schedule = await service.create_employee_account(
        operator=operator,
        name=name,
        beneficiary=Pubkey.from_string(payload.beneficiary),
        start_time=payload.startTime,
        end_time=payload.endTime,
        total_amount=payload.totalAmount,
        cliff_time=payload.cliffTime,
    )
    return EmployeeAccountResponse(address=address, account=schedule)


@vesting_router.get(InternalURIs.EMPLOYEE_ACCOUNT, response_model=EmployeeAccountResponse)
async def get_employee_account(
    name: str,
    beneficiary: Address,
    service: VestingService = Depends(get_vesting_service),
) -> EmployeeAccountResponse:
    address, schedule, snap = await service.get_employee_account(
        name=name, beneficiary=Pubkey.from_string(beneficiary)
    )
    return EmployeeAccountResponse(
        address=address,
        account=schedule,
        status=VestingSnapshotPayload(
            state=snap.state, now=snap.now, vested=snap.vested, claimable=snap.claimable
        ),
    )
