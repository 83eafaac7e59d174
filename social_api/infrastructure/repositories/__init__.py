"""Repository implementations (Infrastructure Layer).

These implement domain interfaces defined in social_api.domain.interfaces.
"""
from social_api.infrastructure.repositories.account_repository import SqlAccountRepository
from social_api.infrastructure.repositories.message_repository import SqlMessageRepository

__all__ = [
    "SqlAccountRepository",
    "SqlMessageRepository",
]
