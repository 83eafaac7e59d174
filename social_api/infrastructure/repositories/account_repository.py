"""Repository for accounts backed by a relational database (Repository Pattern)."""
import logging
from typing import Optional

from sqlalchemy import insert, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from social_api.domain.entities.account import Account
from social_api.domain.interfaces.account_repository import IAccountRepository
from social_api.infrastructure.database import account_table
from social_api.middleware.monitoring import track_store_error


_SELECT_BY_USERNAME = text(
    "SELECT account_id, username, password FROM account WHERE username = :username"
)
_SELECT_BY_CREDENTIALS = text(
    "SELECT account_id, username, password FROM account "
    "WHERE username = :username AND password = :password"
)
_SELECT_BY_ID = text(
    "SELECT account_id, username, password FROM account WHERE account_id = :account_id"
)


class SqlAccountRepository(IAccountRepository):
    """
    Account repository using SQLAlchemy Core and plain SQL.

    Every method runs a single parameterized statement. Database errors are
    logged, counted and converted to None.
    """

    def __init__(self, engine: Engine):
        """
        Initialize the account repository.

        Args:
            engine: SQLAlchemy engine (Dependency Injection)
        """
        self.engine = engine
        self._logger = logging.getLogger(__name__)

    @staticmethod
    def _to_account(row) -> Account:
        """Map a result row to an Account."""
        return Account(
            account_id=row.account_id,
            username=row.username,
            password=row.password,
        )

    def _store_failure(self, operation: str, error: Exception) -> None:
        self._logger.error(f"Database error in {operation}: {error}")
        track_store_error(operation)

    def create_account(self, account: Account) -> Optional[Account]:
        try:
            with self.engine.begin() as connection:
                result = connection.execute(
                    insert(account_table).values(
                        username=account.username, password=account.password
                    )
                )
                account_id = result.inserted_primary_key[0]
        except IntegrityError:
            # Lost a registration race: the unique index rejected the username
            self._logger.info(f"Username {account.username!r} already taken")
            return None
        except SQLAlchemyError as e:
            self._store_failure("create_account", e)
            return None

        self._logger.info(f"Created account {account_id} for {account.username!r}")
        return Account(
            account_id=account_id,
            username=account.username,
            password=account.password,
        )

    def get_account_by_username(self, username: str) -> Optional[Account]:
        try:
            with self.engine.connect() as connection:
                row = connection.execute(
                    _SELECT_BY_USERNAME, {"username": username}
                ).first()
        except SQLAlchemyError as e:
            self._store_failure("get_account_by_username", e)
            return None

        return self._to_account(row) if row else None

    def get_account_by_credentials(self, username: str, password: str) -> Optional[Account]:
        try:
            with self.engine.connect() as connection:
                row = connection.execute(
                    _SELECT_BY_CREDENTIALS,
                    {"username": username, "password": password},
                ).first()
        except SQLAlchemyError as e:
            self._store_failure("get_account_by_credentials", e)
            return None

        return self._to_account(row) if row else None

    def get_account_by_id(self, account_id: int) -> Optional[Account]:
        try:
            with self.engine.connect() as connection:
                row = connection.execute(
                    _SELECT_BY_ID, {"account_id": account_id}
                ).first()
        except SQLAlchemyError as e:
            self._store_failure("get_account_by_id", e)
            return None

        return self._to_account(row) if row else None
