"""Service container for dependency injection (IoC Container Pattern)."""
import logging
from typing import Optional

from flask import current_app
from sqlalchemy.engine import Engine

from social_api.application.services.account_service import AccountService
from social_api.application.services.message_service import MessageService
from social_api.domain.interfaces.account_repository import IAccountRepository
from social_api.domain.interfaces.message_repository import IMessageRepository
from social_api.infrastructure.repositories.account_repository import SqlAccountRepository
from social_api.infrastructure.repositories.message_repository import SqlMessageRepository


class ServiceContainer:
    """
    Service container implementing Dependency Injection pattern.

    One container per Flask application. It owns the database engine and
    creates repositories and services lazily on first use.
    """

    def __init__(self, engine: Engine):
        """
        Initialize service container.

        Args:
            engine: SQLAlchemy engine shared by all repositories
        """
        self.engine = engine
        self._logger = logging.getLogger(__name__)
        self._account_repository: Optional[IAccountRepository] = None
        self._message_repository: Optional[IMessageRepository] = None
        self._account_service: Optional[AccountService] = None
        self._message_service: Optional[MessageService] = None

    def get_account_repository(self) -> IAccountRepository:
        """Get or create account repository instance."""
        if self._account_repository is None:
            self._account_repository = SqlAccountRepository(self.engine)
            self._logger.debug("SqlAccountRepository created")
        return self._account_repository

    def get_message_repository(self) -> IMessageRepository:
        """Get or create message repository instance."""
        if self._message_repository is None:
            self._message_repository = SqlMessageRepository(self.engine)
            self._logger.debug("SqlMessageRepository created")
        return self._message_repository

    def get_account_service(self) -> AccountService:
        """Get or create account service instance."""
        if self._account_service is None:
            self._account_service = AccountService(
                account_repository=self.get_account_repository()
            )
            self._logger.debug("AccountService created")
        return self._account_service

    def get_message_service(self) -> MessageService:
        """Get or create message service instance."""
        if self._message_service is None:
            self._message_service = MessageService(
                message_repository=self.get_message_repository(),
                account_repository=self.get_account_repository()
            )
            self._logger.debug("MessageService created")
        return self._message_service

    def shutdown(self) -> None:
        """Release pooled database connections."""
        self.engine.dispose()
        self._logger.info("Database engine disposed")


def get_service_container() -> ServiceContainer:
    """
    Return the container stored on the current Flask application.

    Raises:
        RuntimeError: If the application was created without a container
    """
    container = current_app.config.get('service_container')
    if container is None:
        raise RuntimeError("Service container not available in app.config")
    return container
