"""Account endpoints: registration and login."""
import logging

from flask import Blueprint, request, jsonify

from social_api.domain.entities.account import Account
from social_api.infrastructure.service_container import get_service_container
from social_api.middleware.monitoring import track_request


accounts_blueprint = Blueprint("accounts", __name__)
_logger = logging.getLogger(__name__)


@accounts_blueprint.route("/register", methods=["POST"])
@track_request("register")
def register():
    """
    Register a new account.

    Expected payload:
    {
        "username": "bob",
        "password": "1234"
    }

    Returns:
        200 with the created account (including account_id), or 400 with an
        empty body if the account was rejected
    """
    candidate = Account.from_dict(request.get_json(force=True, silent=True))
    account = get_service_container().get_account_service().create_account(candidate)

    if account is None:
        _logger.debug("Registration rejected")
        return "", 400
    return jsonify(account.to_dict()), 200


@accounts_blueprint.route("/login", methods=["POST"])
@track_request("login")
def login():
    """
    Log in with a username and password.

    Returns:
        200 with the matching account, or 401 with an empty body
    """
    credentials = Account.from_dict(request.get_json(force=True, silent=True))
    account = get_service_container().get_account_service().authenticate(credentials)

    if account is None:
        return "", 401
    return jsonify(account.to_dict()), 200
