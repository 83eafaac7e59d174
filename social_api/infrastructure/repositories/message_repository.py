"""Repository for messages backed by a relational database (Repository Pattern)."""
import logging
from typing import Optional, List

from sqlalchemy import insert, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from social_api.domain.entities.message import Message
from social_api.domain.interfaces.message_repository import IMessageRepository
from social_api.infrastructure.database import message_table
from social_api.middleware.monitoring import track_store_error


_COLUMNS = "message_id, posted_by, message_text, time_posted_epoch"

_SELECT_ALL = text(f"SELECT {_COLUMNS} FROM message ORDER BY message_id")
_SELECT_BY_ID = text(f"SELECT {_COLUMNS} FROM message WHERE message_id = :message_id")
_SELECT_BY_ACCOUNT = text(
    f"SELECT {_COLUMNS} FROM message WHERE posted_by = :posted_by ORDER BY message_id"
)
_DELETE_BY_ID = text("DELETE FROM message WHERE message_id = :message_id")
_UPDATE_TEXT = text(
    "UPDATE message SET message_text = :message_text WHERE message_id = :message_id"
)


class SqlMessageRepository(IMessageRepository):
    """
    Message repository using SQLAlchemy Core and plain SQL.

    Every method runs a single parameterized statement. Database errors are
    logged, counted and converted to None, an empty list or False.
    """

    def __init__(self, engine: Engine):
        """
        Initialize the message repository.

        Args:
            engine: SQLAlchemy engine (Dependency Injection)
        """
        self.engine = engine
        self._logger = logging.getLogger(__name__)

    @staticmethod
    def _to_message(row) -> Message:
        """Map a result row to a Message."""
        return Message(
            message_id=row.message_id,
            posted_by=row.posted_by,
            message_text=row.message_text,
            time_posted_epoch=row.time_posted_epoch,
        )

    def _store_failure(self, operation: str, error: Exception) -> None:
        self._logger.error(f"Database error in {operation}: {error}")
        track_store_error(operation)

    def create_message(self, message: Message) -> Optional[Message]:
        try:
            with self.engine.begin() as connection:
                result = connection.execute(
                    insert(message_table).values(
                        posted_by=message.posted_by,
                        message_text=message.message_text,
                        time_posted_epoch=message.time_posted_epoch,
                    )
                )
                message_id = result.inserted_primary_key[0]
        except SQLAlchemyError as e:
            self._store_failure("create_message", e)
            return None

        self._logger.debug(f"Created message {message_id} for account {message.posted_by}")
        return Message(
            message_id=message_id,
            posted_by=message.posted_by,
            message_text=message.message_text,
            time_posted_epoch=message.time_posted_epoch,
        )

    def get_all_messages(self) -> List[Message]:
        try:
            with self.engine.connect() as connection:
                rows = connection.execute(_SELECT_ALL).all()
        except SQLAlchemyError as e:
            self._store_failure("get_all_messages", e)
            return []

        return [self._to_message(row) for row in rows]

    def get_message_by_id(self, message_id: int) -> Optional[Message]:
        try:
            with self.engine.connect() as connection:
                row = connection.execute(
                    _SELECT_BY_ID, {"message_id": message_id}
                ).first()
        except SQLAlchemyError as e:
            self._store_failure("get_message_by_id", e)
            return None

        return self._to_message(row) if row else None

    def delete_message_by_id(self, message_id: int) -> bool:
        try:
            with self.engine.begin() as connection:
                result = connection.execute(_DELETE_BY_ID, {"message_id": message_id})
        except SQLAlchemyError as e:
            self._store_failure("delete_message_by_id", e)
            return False

        if result.rowcount == 0:
            self._logger.debug(f"Delete of message {message_id} affected no rows")
        return True

    def update_message_text(self, message_id: int, message_text: str) -> bool:
        try:
            with self.engine.begin() as connection:
                result = connection.execute(
                    _UPDATE_TEXT,
                    {"message_id": message_id, "message_text": message_text},
                )
        except SQLAlchemyError as e:
            self._store_failure("update_message_text", e)
            return False

        return result.rowcount > 0

    def get_messages_by_account_id(self, account_id: int) -> List[Message]:
        try:
            with self.engine.connect() as connection:
                rows = connection.execute(
                    _SELECT_BY_ACCOUNT, {"posted_by": account_id}
                ).all()
        except SQLAlchemyError as e:
            self._store_failure("get_messages_by_account_id", e)
            return []

        return [self._to_message(row) for row in rows]
