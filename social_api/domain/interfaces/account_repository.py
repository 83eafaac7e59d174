"""Interface for account repository (Repository Pattern)."""
from abc import ABC, abstractmethod
from typing import Optional

from social_api.domain.entities.account import Account


class IAccountRepository(ABC):
    """
    Interface for account storage following Repository Pattern.

    Implementations convert storage errors into None results; they never
    raise them to the caller.
    """

    @abstractmethod
    def create_account(self, account: Account) -> Optional[Account]:
        """
        Insert a new account.

        Args:
            account: Account with username and password

        Returns:
            The account with its assigned account_id, or None on failure
            (including a username uniqueness violation)
        """
        pass

    @abstractmethod
    def get_account_by_username(self, username: str) -> Optional[Account]:
        """
        Retrieve an account by username.

        Args:
            username: Exact username

        Returns:
            Account if exists, None otherwise
        """
        pass

    @abstractmethod
    def get_account_by_credentials(self, username: str, password: str) -> Optional[Account]:
        """
        Retrieve the first account matching username and password exactly.

        Args:
            username: Exact username
            password: Plaintext password

        Returns:
            Account if a row matches, None otherwise
        """
        pass

    @abstractmethod
    def get_account_by_id(self, account_id: int) -> Optional[Account]:
        """
        Retrieve an account by id.

        Args:
            account_id: Account identifier

        Returns:
            Account if exists, None otherwise
        """
        pass
