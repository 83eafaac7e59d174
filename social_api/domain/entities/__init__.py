"""Domain entities - core business objects."""
from social_api.domain.entities.account import Account
from social_api.domain.entities.message import Message

__all__ = [
    "Account",
    "Message",
]
