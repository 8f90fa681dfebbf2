"""
Messages service - business logic for the message lifecycle
"""

import logging
from typing import Optional

from config.settings import MESSAGE_TEXT_MAX_LENGTH
from database.repositories import AccountRepository, MessageRepository, MissingReferenceError
from models.enums import ErrorType
from services.accounts_service import is_blank
from services.base_service import ServiceResult, fail, ok

logger = logging.getLogger(__name__)

def validate_message_text(message_text: Optional[str]) -> Optional[ServiceResult]:
    """Return a VALIDATION_ERROR result for unusable text, None when the text is acceptable"""
    if is_blank(message_text):
        return fail(ErrorType.VALIDATION_ERROR, "blank text")
    if len(message_text) > MESSAGE_TEXT_MAX_LENGTH:
        return fail(ErrorType.VALIDATION_ERROR, "too long")
    return None


class MessagesService:
    """Service for message create/read/update/delete operations"""

    def __init__(self, messages: MessageRepository, accounts: AccountRepository):
        self.messages = messages
        self.accounts = accounts

    async def create_message(
        self,
        posted_by: Optional[int],
        message_text: Optional[str],
        time_posted_epoch: Optional[int] = None
    ) -> ServiceResult:
        """
        Create a new message

        Args:
            posted_by: Account id of the author, must reference an existing account
            message_text: 1-255 characters, not blank
            time_posted_epoch: Stored as given

        Returns:
            ServiceResult with the stored Message
        """
        invalid = validate_message_text(message_text)
        if invalid:
            return invalid

        if posted_by is None or await self.accounts.find_by_id(posted_by) is None:
            return fail(ErrorType.REFERENCE_ERROR, "unknown author")

        try:
            message = await self.messages.save(posted_by, message_text, time_posted_epoch)
        except MissingReferenceError:
            return fail(ErrorType.REFERENCE_ERROR, "unknown author")

        logger.info(f"Created message {message.message_id} for account {posted_by}")
        return ok(message, count=1)

    async def get_all_messages(self) -> ServiceResult:
        messages = await self.messages.find_all()
        return ok(messages, count=len(messages))

    async def get_message_by_id(self, message_id: int) -> ServiceResult:
        """Get a message by its ID. A missing message is a successful result with no data."""
        message = await self.messages.find_by_id(message_id)
        return ok(message, count=1 if message else 0)

    async def delete_message(self, message_id: int) -> ServiceResult:
        """Delete a message. Deleting an absent message succeeds with count 0."""
        deleted = await self.messages.delete_by_id(message_id)
        if deleted:
            logger.info(f"Deleted message {message_id}")
        return ok(count=deleted)

    async def update_message_text(self, message_id: int, message_text: Optional[str]) -> ServiceResult:
        """
        Replace the text of an existing message

        The author and id are left unchanged. Returns count 1 on success,
        VALIDATION_ERROR for unusable text, NOT_FOUND_ERROR when the message
        does not exist.
        """
        invalid = validate_message_text(message_text)
        if invalid:
            return invalid

        updated = await self.messages.update_text(message_id, message_text)
        if not updated:
            return fail(ErrorType.NOT_FOUND_ERROR, f"message not found: {message_id}")

        logger.info(f"Updated text of message {message_id}")
        return ok(count=updated)

    async def get_messages_by_account(self, account_id: int) -> ServiceResult:
        messages = await self.messages.find_by_posted_by(account_id)
        return ok(messages, count=len(messages))
