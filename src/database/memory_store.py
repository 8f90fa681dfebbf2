"""
In-process store used for local development and the test suite

Selected with DATABASE_URL=memory://. Mirrors the PostgreSQL schema rules:
serial ids starting at 1, a unique username and a foreign key from
message.posted_by to account.account_id.
"""

import asyncio
import itertools
from typing import Dict, List, Optional

from database.repositories import (
    AccountRepository,
    DuplicateKeyError,
    MessageRepository,
    MissingReferenceError,
    Store,
)
from models.account import Account
from models.message import Message


class MemoryAccountRepository(AccountRepository):

    def __init__(self, lock: asyncio.Lock):
        self._lock = lock
        self._rows: Dict[int, Account] = {}
        self._ids = itertools.count(1)

    async def find_by_id(self, account_id: int) -> Optional[Account]:
        account = self._rows.get(account_id)
        return account.model_copy() if account else None

    async def find_by_username(self, username: str) -> Optional[Account]:
        for account in self._rows.values():
            if account.username == username:
                return account.model_copy()
        return None

    async def save(self, username: str, password: str) -> Account:
        async with self._lock:
            if any(account.username == username for account in self._rows.values()):
                raise DuplicateKeyError(f"Username already exists: {username}")
            account = Account(account_id=next(self._ids), username=username, password=password)
            self._rows[account.account_id] = account
        return account.model_copy()


class MemoryMessageRepository(MessageRepository):

    def __init__(self, lock: asyncio.Lock, accounts: MemoryAccountRepository):
        self._lock = lock
        self._accounts = accounts
        self._rows: Dict[int, Message] = {}
        self._ids = itertools.count(1)

    async def save(self, posted_by: int, message_text: str, time_posted_epoch: Optional[int]) -> Message:
        async with self._lock:
            if await self._accounts.find_by_id(posted_by) is None:
                raise MissingReferenceError(f"Account not found: {posted_by}")
            message = Message(
                message_id=next(self._ids),
                posted_by=posted_by,
                message_text=message_text,
                time_posted_epoch=time_posted_epoch,
            )
            self._rows[message.message_id] = message
        return message.model_copy()

    async def find_all(self) -> List[Message]:
        return [self._rows[key].model_copy() for key in sorted(self._rows)]

    async def find_by_id(self, message_id: int) -> Optional[Message]:
        message = self._rows.get(message_id)
        return message.model_copy() if message else None

    async def find_by_posted_by(self, posted_by: int) -> List[Message]:
        return [
            self._rows[key].model_copy()
            for key in sorted(self._rows)
            if self._rows[key].posted_by == posted_by
        ]

    async def update_text(self, message_id: int, message_text: str) -> int:
        async with self._lock:
            message = self._rows.get(message_id)
            if message is None:
                return 0
            self._rows[message_id] = message.model_copy(update={"message_text": message_text})
        return 1

    async def delete_by_id(self, message_id: int) -> int:
        async with self._lock:
            return 1 if self._rows.pop(message_id, None) is not None else 0


class MemoryStore(Store):

    def __init__(self):
        lock = asyncio.Lock()
        self.accounts = MemoryAccountRepository(lock)
        self.messages = MemoryMessageRepository(lock, self.accounts)

    async def ping(self) -> bool:
        return True
