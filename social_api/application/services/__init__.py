"""Application services module.

Business rules that sit between the HTTP handlers and the repositories.
"""
from social_api.application.services.account_service import AccountService
from social_api.application.services.message_service import MessageService

__all__ = [
    "AccountService",
    "MessageService",
]
