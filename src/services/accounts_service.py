"""
Accounts service - registration and login rules
"""

import logging
from typing import Optional

from config.settings import PASSWORD_MIN_LENGTH
from database.repositories import AccountRepository, DuplicateKeyError
from models.enums import ErrorType
from services.base_service import ServiceResult, fail, ok

logger = logging.getLogger(__name__)

def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class AccountsService:
    """Service for account registration and login"""

    def __init__(self, accounts: AccountRepository):
        self.accounts = accounts

    async def register(self, username: Optional[str], password: Optional[str]) -> ServiceResult:
        """
        Register a new account

        Args:
            username: Requested username, must not be blank
            password: Plaintext password, at least PASSWORD_MIN_LENGTH characters

        Returns:
            ServiceResult with the stored Account, or a VALIDATION_ERROR /
            DUPLICATE_ERROR failure
        """
        if is_blank(username):
            return fail(ErrorType.VALIDATION_ERROR, "blank username")
        if password is None or len(password) < PASSWORD_MIN_LENGTH:
            return fail(ErrorType.VALIDATION_ERROR, "short password")

        if await self.accounts.find_by_username(username) is not None:
            return fail(ErrorType.DUPLICATE_ERROR, f"username already exists: {username}")

        try:
            account = await self.accounts.save(username, password)
        except DuplicateKeyError:
            # Lost the race against a concurrent registration
            return fail(ErrorType.DUPLICATE_ERROR, f"username already exists: {username}")

        logger.info(f"Registered account {account.account_id} for username: {username}")
        return ok(account, count=1)

    async def login(self, username: Optional[str], password: Optional[str]) -> ServiceResult:
        """
        Verify credentials against the stored account

        The three failure messages are kept distinct for diagnostics; callers
        should treat every AUTH_ERROR the same way.
        """
        if is_blank(username) or password is None:
            return fail(ErrorType.AUTH_ERROR, "invalid input")

        account = await self.accounts.find_by_username(username)
        if account is None:
            return fail(ErrorType.AUTH_ERROR, "not found")
        if account.password != password:
            return fail(ErrorType.AUTH_ERROR, "mismatch")

        return ok(account, count=1)
