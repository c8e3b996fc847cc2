# controller/claim_controller.py
from fastapi import APIRouter, Depends
from core.signatures import signing_message, verify_signer
from model.api import ClaimTokensRequest, ClaimTokensResponse
from service.claim_service import ClaimService
from util.constants import InternalURIs
from controller.controller_dependencies import get_claim_service, rate_limited

claim_router = APIRouter(dependencies=rate_limited())


@claim_router.post(InternalURIs.CLAIM_TOKENS, response_model=ClaimTokensResponse)
async def claim_tokens(
    name: str,
    payload: ClaimTokensRequest,
    service: ClaimService = Depends(get_claim_service),
) -> ClaimTokensResponse:
    message = signing_message("claimTokens", name=name, signer=payload.signer)
    beneficiary = verify_signer(payload.signer, payload.signature, message)
    result = await service.claim_tokens(beneficiary=beneficiary, name=name)
    return ClaimTokensResponse(
        amount=result.amount,
        totalWithdrawn=result.total_withdrawn,
        destination=result.destination,
        state=result.state,
    )
