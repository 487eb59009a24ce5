"""Account Routes — POST /register and POST /login.

Invariants:
    - Both endpoints answer 200 with the account body on success
    - Failures are raised by AccountService and mapped by the global handlers
"""

from fastapi import APIRouter, Depends, status

from socialmedia.api.dependencies import get_account_service
from socialmedia.schemas.account import AccountCredentials, AccountResponse
from socialmedia.services.account_service import AccountService

router = APIRouter(tags=["accounts"])


@router.post(
    "/register", response_model=AccountResponse, status_code=status.HTTP_200_OK,
)
async def register(
    body: AccountCredentials,
    service: AccountService = Depends(get_account_service),
):
    """Register a new account."""
    account = await service.register_account(body.username, body.password)
    return AccountResponse.model_validate(account)


@router.post("/login", response_model=AccountResponse)
async def login(
    body: AccountCredentials,
    service: AccountService = Depends(get_account_service),
):
    """Check credentials and return the matching account."""
    account = await service.login(body.username, body.password)
    return AccountResponse.model_validate(account)
