"""
Account API routes - registration and login
"""

import logging
from fastapi import APIRouter, HTTPException, Depends

from api.dependencies import get_accounts_service
from models.account import Account, AccountRequest
from models.enums import ErrorType
from services.accounts_service import AccountsService

router = APIRouter()
logger = logging.getLogger(__name__)

@router.post("/register", response_model=Account)
async def register(
    request: AccountRequest,
    accounts_service: AccountsService = Depends(get_accounts_service)
):
    """Register a new account. 409 on a taken username, 400 on any other invalid input."""
    result = await accounts_service.register(request.username, request.password)

    if not result.success:
        logger.info(f"Registration rejected: {result.error}")
        if result.error_type == ErrorType.DUPLICATE_ERROR:
            raise HTTPException(status_code=409, detail="Username already exists")
        raise HTTPException(status_code=400, detail=result.error)

    return result.data

@router.post("/login", response_model=Account)
async def login(
    request: AccountRequest,
    accounts_service: AccountsService = Depends(get_accounts_service)
):
    """Log in with username and password"""
    result = await accounts_service.login(request.username, request.password)

    if not result.success:
        # Every auth failure looks the same to the client
        logger.info(f"Login rejected: {result.error}")
        raise HTTPException(status_code=401, detail="Invalid username or password")

    return result.data
