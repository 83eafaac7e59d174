"""Interface for message repository (Repository Pattern)."""
from abc import ABC, abstractmethod
from typing import Optional, List

from social_api.domain.entities.message import Message


class IMessageRepository(ABC):
    """
    Interface for message storage following Repository Pattern.

    Implementations convert storage errors into None / empty / False
    results; they never raise them to the caller.
    """

    @abstractmethod
    def create_message(self, message: Message) -> Optional[Message]:
        """
        Insert a new message.

        Args:
            message: Message with posted_by, message_text and time_posted_epoch

        Returns:
            The message with its assigned message_id, or None on failure
        """
        pass

    @abstractmethod
    def get_all_messages(self) -> List[Message]:
        """Retrieve every message ordered by id."""
        pass

    @abstractmethod
    def get_message_by_id(self, message_id: int) -> Optional[Message]:
        """
        Retrieve a message by id.

        Args:
            message_id: Message identifier

        Returns:
            Message if exists, None otherwise
        """
        pass

    @abstractmethod
    def delete_message_by_id(self, message_id: int) -> bool:
        """
        Delete a message by id.

        Args:
            message_id: Message identifier

        Returns:
            True if the statement executed, False on failure
        """
        pass

    @abstractmethod
    def update_message_text(self, message_id: int, message_text: str) -> bool:
        """
        Replace the text of a message.

        Args:
            message_id: Message identifier
            message_text: New text

        Returns:
            True if a row changed, False otherwise
        """
        pass

    @abstractmethod
    def get_messages_by_account_id(self, account_id: int) -> List[Message]:
        """Retrieve every message posted by an account, ordered by id."""
        pass
