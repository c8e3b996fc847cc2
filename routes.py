# routes.py
from fastapi import FastAPI
from controller.claim_controller import claim_router
from controller.token_controller import token_router
from controller.vesting_controller import vesting_router


def register_routes(app: FastAPI) -> None:
    """Register & Access control controllers here."""
    app.include_router(vesting_router)
    app.include_router(claim_router)
    app.include_router(token_router)
