"""Domain interfaces following Dependency Inversion Principle."""

from social_api.domain.interfaces.account_repository import IAccountRepository
from social_api.domain.interfaces.message_repository import IMessageRepository

__all__ = [
    "IAccountRepository",
    "IMessageRepository",
]
