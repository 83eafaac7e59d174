"""API endpoints module.

This module contains all HTTP API endpoints organized by resource.
"""

from social_api.api.accounts import accounts_blueprint
from social_api.api.messages import messages_blueprint
from social_api.api.health import health_blueprint

__all__ = [
    "accounts_blueprint",
    "messages_blueprint",
    "health_blueprint",
]
