"""
Data-access interface for accounts and messages

Services receive these repositories at construction and never touch the
connection pool directly. Integrity violations detected by the store are
raised as DuplicateKeyError / MissingReferenceError so the service layer can
translate them into typed results.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from models.account import Account
from models.message import Message


class StoreError(RuntimeError):
    """Base class for store-level failures"""


class DuplicateKeyError(StoreError):
    """A unique constraint rejected the write"""


class MissingReferenceError(StoreError):
    """A foreign key constraint rejected the write"""


class AccountRepository(ABC):

    @abstractmethod
    async def find_by_id(self, account_id: int) -> Optional[Account]:
        ...

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[Account]:
        ...

    @abstractmethod
    async def save(self, username: str, password: str) -> Account:
        """Insert a new account and return it with its assigned id"""


class MessageRepository(ABC):

    @abstractmethod
    async def save(self, posted_by: int, message_text: str, time_posted_epoch: Optional[int]) -> Message:
        """Insert a new message and return it with its assigned id"""

    @abstractmethod
    async def find_all(self) -> List[Message]:
        ...

    @abstractmethod
    async def find_by_id(self, message_id: int) -> Optional[Message]:
        ...

    @abstractmethod
    async def find_by_posted_by(self, posted_by: int) -> List[Message]:
        ...

    @abstractmethod
    async def update_text(self, message_id: int, message_text: str) -> int:
        """Replace the text of one message, returning the number of rows updated"""

    @abstractmethod
    async def delete_by_id(self, message_id: int) -> int:
        """Delete one message, returning the number of rows removed"""


class Store(ABC):
    """Process-wide persistence collaborator bundling both repositories"""

    accounts: AccountRepository
    messages: MessageRepository

    @abstractmethod
    async def ping(self) -> bool:
        """Check connectivity"""

    async def close(self) -> None:
        pass

