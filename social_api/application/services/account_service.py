"""Account registration and login rules."""
import logging
from typing import Optional

from social_api.domain.entities.account import Account
from social_api.domain.interfaces.account_repository import IAccountRepository
from social_api.middleware.monitoring import track_account_registered
from social_api.utils.validators import FieldValidator


logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 4


class AccountService:
    """
    Service enforcing account rules before delegating to the repository.

    Registration requires a non-empty username, a password of at least
    four characters and a username that is not already taken.
    """

    def __init__(self, account_repository: IAccountRepository):
        """
        Initialize account service.

        Args:
            account_repository: Account repository (Dependency Injection)
        """
        self.account_repository = account_repository

    def create_account(self, candidate: Optional[Account]) -> Optional[Account]:
        """
        Register a new account.

        Args:
            candidate: Account with username and password

        Returns:
            The stored account including its account_id, or None if the
            candidate was rejected or could not be stored
        """
        if candidate is None:
            return None

        username = candidate.username
        password = candidate.password

        if not FieldValidator.is_encodable_text(username) or not username:
            logger.info("Registration rejected: username is empty or not valid text")
            return None

        if not FieldValidator.is_encodable_text(password) or len(password) < MIN_PASSWORD_LENGTH:
            logger.info(f"Registration rejected for {username!r}: password too short or not valid text")
            return None

        # Not atomic with the insert; the unique index settles races
        if self.account_repository.get_account_by_username(username) is not None:
            logger.info(f"Registration rejected: username {username!r} already exists")
            return None

        account = self.account_repository.create_account(
            Account(username=username, password=password)
        )
        if account is not None:
            track_account_registered()
        return account

    def authenticate(self, credentials: Optional[Account]) -> Optional[Account]:
        """
        Look up an account by exact username and password.

        Args:
            credentials: Account carrying username and password

        Returns:
            The matching account, or None if no row matches
        """
        if credentials is None:
            return None

        if not (
            FieldValidator.is_encodable_text(credentials.username)
            and FieldValidator.is_encodable_text(credentials.password)
        ):
            return None

        account = self.account_repository.get_account_by_credentials(
            credentials.username, credentials.password
        )
        if account is None:
            logger.info(f"Login failed for {credentials.username!r}")
        return account
