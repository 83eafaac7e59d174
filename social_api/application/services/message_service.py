"""Message rules: text length, author existence, update and delete flows."""
import logging
from typing import Optional, List

from social_api.domain.entities.message import Message
from social_api.domain.interfaces.account_repository import IAccountRepository
from social_api.domain.interfaces.message_repository import IMessageRepository
from social_api.middleware.monitoring import track_message_created
from social_api.utils.validators import FieldValidator


logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 255


def is_valid_message_text(message_text) -> bool:
    """Return True for a non-blank, UTF-8 encodable string of at most 255 characters."""
    return (
        FieldValidator.is_encodable_text(message_text)
        and bool(message_text.strip())
        and len(message_text) <= MAX_MESSAGE_LENGTH
    )


class MessageService:
    """Service enforcing message rules before delegating to the repositories."""

    def __init__(
        self,
        message_repository: IMessageRepository,
        account_repository: IAccountRepository
    ):
        """
        Initialize message service.

        Args:
            message_repository: Message repository (Dependency Injection)
            account_repository: Account repository used for author checks
        """
        self.message_repository = message_repository
        self.account_repository = account_repository

    def create_message(self, candidate: Optional[Message]) -> Optional[Message]:
        """
        Create a message for an existing account.

        Args:
            candidate: Message with posted_by, message_text and time_posted_epoch

        Returns:
            The stored message including its message_id, or None if the
            candidate was rejected or could not be stored
        """
        if candidate is None or not is_valid_message_text(candidate.message_text):
            logger.info("Message rejected: text missing, blank or too long")
            return None

        # The timestamp is not checked for plausibility, only for storability
        epoch = candidate.time_posted_epoch
        if epoch is not None and not FieldValidator.is_store_integer(epoch):
            logger.info(f"Message rejected: time_posted_epoch {epoch!r} cannot be stored")
            return None

        if not self._author_exists(candidate.posted_by):
            logger.info(f"Message rejected: account {candidate.posted_by!r} does not exist")
            return None

        message = self.message_repository.create_message(candidate)
        if message is not None:
            track_message_created()
        return message

    def _author_exists(self, posted_by) -> bool:
        if not FieldValidator.is_store_integer(posted_by):
            return False
        return self.account_repository.get_account_by_id(posted_by) is not None

    def get_all_messages(self) -> List[Message]:
        return self.message_repository.get_all_messages()

    def get_message_by_id(self, message_id: int) -> Optional[Message]:
        if not FieldValidator.is_store_integer(message_id):
            return None
        return self.message_repository.get_message_by_id(message_id)

    def delete_message_by_id(self, message_id: int) -> Optional[Message]:
        """
        Delete a message and return what was deleted.

        The lookup and the delete are separate statements; a concurrent
        delete in between still reports the snapshot read here.

        Args:
            message_id: Message identifier

        Returns:
            The message as it was before deletion, or None if it did not exist
        """
        message = self.get_message_by_id(message_id)
        if message is None:
            return None

        if not self.message_repository.delete_message_by_id(message_id):
            return None

        logger.info(f"Deleted message {message_id}")
        return message

    def update_message_by_id(self, message_id: int, message_text) -> Optional[Message]:
        """
        Replace the text of an existing message.

        Args:
            message_id: Message identifier
            message_text: New text

        Returns:
            The updated message re-read from the store, or None if the text is
            invalid or no row was changed
        """
        if not is_valid_message_text(message_text):
            logger.info(f"Update of message {message_id} rejected: invalid text")
            return None

        if not FieldValidator.is_store_integer(message_id):
            return None

        if not self.message_repository.update_message_text(message_id, message_text):
            return None

        return self.message_repository.get_message_by_id(message_id)

    def get_all_messages_by_account_id(self, account_id: int) -> List[Message]:
        if not FieldValidator.is_store_integer(account_id):
            return []
        return self.message_repository.get_messages_by_account_id(account_id)
