"""Tests for registration and login rules."""
from unittest.mock import MagicMock

import pytest

from social_api.application.services.account_service import AccountService
from social_api.domain.entities.account import Account
from social_api.domain.interfaces.account_repository import IAccountRepository


def test_create_account_assigns_id(account_service):
    account = account_service.create_account(Account(username="bob", password="1234"))

    assert account is not None
    assert account.username == "bob"
    assert account.password == "1234"
    assert account.account_id > 0


def test_create_account_ignores_client_supplied_id(account_service):
    candidate = Account(username="bob", password="1234", account_id=999)
    account = account_service.create_account(candidate)

    assert account.account_id != 999


@pytest.mark.parametrize("password", ["", "a", "ab", "abc"])
def test_create_account_rejects_short_password(account_service, password):
    assert account_service.create_account(Account(username="bob", password=password)) is None


@pytest.mark.parametrize("username", [None, ""])
def test_create_account_rejects_empty_username(account_service, username):
    assert account_service.create_account(Account(username=username, password="1234")) is None


def test_create_account_rejects_missing_password(account_service):
    assert account_service.create_account(Account(username="bob")) is None


def test_create_account_rejects_absent_candidate(account_service):
    assert account_service.create_account(None) is None


@pytest.mark.parametrize("password", ["1234", "a-much-longer-password", "ab"])
def test_create_account_rejects_existing_username(account_service, registered_account, password):
    duplicate = Account(username=registered_account.username, password=password)

    assert account_service.create_account(duplicate) is None


def test_invalid_candidate_never_reaches_repository():
    repository = MagicMock(spec=IAccountRepository)
    service = AccountService(account_repository=repository)

    service.create_account(Account(username="", password="1234"))
    service.create_account(Account(username="bob", password="123"))

    repository.get_account_by_username.assert_not_called()
    repository.create_account.assert_not_called()


def test_create_account_returns_none_on_store_failure():
    repository = MagicMock(spec=IAccountRepository)
    repository.get_account_by_username.return_value = None
    repository.create_account.return_value = None
    service = AccountService(account_repository=repository)

    assert service.create_account(Account(username="bob", password="1234")) is None
    repository.create_account.assert_called_once()


def test_authenticate_returns_stored_account(account_service, registered_account):
    account = account_service.authenticate(Account(username="testuser1", password="password"))

    assert account == registered_account


@pytest.mark.parametrize(
    "username, password",
    [
        ("testuser1", "wrong"),
        ("nobody", "password"),
        ("TESTUSER1", "password"),
        ("testuser1", "PASSWORD"),
    ],
)
def test_authenticate_requires_exact_match(account_service, registered_account, username, password):
    assert account_service.authenticate(Account(username=username, password=password)) is None


def test_authenticate_rejects_absent_credentials(account_service):
    assert account_service.authenticate(None) is None
    assert account_service.authenticate(Account(username="testuser1")) is None


def test_unencodable_text_never_reaches_repository():
    repository = MagicMock(spec=IAccountRepository)
    service = AccountService(account_repository=repository)

    assert service.create_account(Account(username="\ud800", password="1234")) is None
    assert service.create_account(Account(username="bob", password="12\udfff4")) is None
    assert service.authenticate(Account(username="\ud800", password="abcd")) is None

    repository.get_account_by_username.assert_not_called()
    repository.create_account.assert_not_called()
    repository.get_account_by_credentials.assert_not_called()
