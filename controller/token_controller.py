# controller/token_controller.py
from fastapi import APIRouter, Depends, status
from core.signatures import signing_message, verify_signer
from model.api import CreateMintRequest, MintResponse, MintToRequest, TokenAccountResponse
from service.token_ledger_service import TokenLedgerService
from util.constants import InternalURIs
from util.types import Address
from controller.controller_dependencies import get_token_ledger_service, rate_limited

token_router = APIRouter(dependencies=rate_limited())


@token_router.post(
    InternalURIs.MINTS, response_model=MintResponse, status_code=status.HTTP_201_CREATED
)
async def create_mint(
    payload: CreateMintRequest,
    service: TokenLedgerService = Depends(get_token_ledger_service),
) -> MintResponse:
    message = signing_message("createMint", decimals=payload.decimals, signer=payload.signer)
    authority = verify_signer(payload.signer, payload.signature, message)
    mint = await service.create_mint(authority=authority, decimals=payload.decimals)
    return MintResponse(mint=mint)


@token_router.post(InternalURIs.MINT_TO, response_model=TokenAccountResponse)
async def mint_to(
    mint: Address,
    payload: MintToRequest,
    service: TokenLedgerService = Depends(get_token_ledger_service),
) -> TokenAccountResponse:
    message = signing_message(
        "mintTo",
        mint=mint,
        destination=payload.destination,
        amount=payload.amount,
        signer=payload.signer,
    )
    authority = verify_signer(payload.signer, payload.signature, message)
    account = await service.mint_to(
        authority=authority, mint=mint, destination=payload.destination, amount=payload.amount
    )
    return TokenAccountResponse(account=account)


@token_router.get(InternalURIs.TOKEN_ACCOUNT, response_model=TokenAccountResponse)
async def get_token_account(
    address: Address,
    service: TokenLedgerService = Depends(get_token_ledger_service),
) -> TokenAccountResponse:
    return TokenAccountResponse(account=await service.get_account(address))
