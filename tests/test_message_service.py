"""Tests for message rules."""
from unittest.mock import MagicMock

import pytest

from social_api.application.services.message_service import MessageService, is_valid_message_text
from social_api.domain.entities.account import Account
from social_api.domain.entities.message import Message
from social_api.domain.interfaces.account_repository import IAccountRepository
from social_api.domain.interfaces.message_repository import IMessageRepository

EPOCH = 1669947792000


@pytest.fixture()
def posted(message_service, registered_account):
    return message_service.create_message(
        Message(posted_by=registered_account.account_id, message_text="first post", time_posted_epoch=EPOCH)
    )


@pytest.mark.parametrize("text", ["a", "hello world", "x" * 255])
def test_create_message_for_valid_text(message_service, registered_account, text):
    candidate = Message(posted_by=registered_account.account_id, message_text=text, time_posted_epoch=EPOCH)
    message = message_service.create_message(candidate)

    assert message.message_id > 0
    assert message.message_text == text
    assert message.posted_by == registered_account.account_id
    assert message.time_posted_epoch == EPOCH


def test_first_message_of_new_account_is_accepted(message_service, account_service):
    account = account_service.create_account(Account(username="newcomer", password="secret"))

    assert message_service.get_all_messages_by_account_id(account.account_id) == []
    message = message_service.create_message(
        Message(posted_by=account.account_id, message_text="hi", time_posted_epoch=EPOCH)
    )

    assert message is not None


@pytest.mark.parametrize("text", [None, "", "   ", "\n\t", "x" * 256, 42])
def test_create_message_rejects_invalid_text(message_service, registered_account, text):
    candidate = Message(posted_by=registered_account.account_id, message_text=text, time_posted_epoch=EPOCH)

    assert message_service.create_message(candidate) is None


@pytest.mark.parametrize("posted_by", [9999, None, "1", True])
def test_create_message_rejects_unknown_author(message_service, registered_account, posted_by):
    candidate = Message(posted_by=posted_by, message_text="hello", time_posted_epoch=EPOCH)

    assert message_service.create_message(candidate) is None


def test_create_message_rejects_absent_candidate(message_service):
    assert message_service.create_message(None) is None


def test_get_all_messages(message_service, posted):
    assert message_service.get_all_messages() == [posted]


def test_get_all_messages_empty(message_service):
    assert message_service.get_all_messages() == []


def test_get_message_by_id(message_service, posted):
    assert message_service.get_message_by_id(posted.message_id) == posted
    assert message_service.get_message_by_id(posted.message_id + 1) is None


def test_delete_then_get_returns_nothing(message_service, posted):
    assert message_service.delete_message_by_id(posted.message_id) == posted
    assert message_service.get_message_by_id(posted.message_id) is None
    assert message_service.delete_message_by_id(posted.message_id) is None


def test_delete_absent_message_does_not_issue_delete():
    messages = MagicMock(spec=IMessageRepository)
    messages.get_message_by_id.return_value = None
    service = MessageService(message_repository=messages, account_repository=MagicMock(spec=IAccountRepository))

    assert service.delete_message_by_id(7) is None
    messages.delete_message_by_id.assert_not_called()


def test_delete_returns_none_when_statement_fails():
    snapshot = Message(message_id=7, posted_by=1, message_text="x", time_posted_epoch=EPOCH)
    messages = MagicMock(spec=IMessageRepository)
    messages.get_message_by_id.return_value = snapshot
    messages.delete_message_by_id.return_value = False
    service = MessageService(message_repository=messages, account_repository=MagicMock(spec=IAccountRepository))

    assert service.delete_message_by_id(7) is None


def test_update_message_changes_only_text(message_service, posted):
    updated = message_service.update_message_by_id(posted.message_id, "edited")

    assert updated.message_text == "edited"
    assert updated.message_id == posted.message_id
    assert updated.posted_by == posted.posted_by
    assert updated.time_posted_epoch == posted.time_posted_epoch
    assert message_service.get_message_by_id(posted.message_id) == updated


def test_update_message_with_same_text(message_service, posted):
    assert message_service.update_message_by_id(posted.message_id, posted.message_text) == posted


def test_update_absent_message(message_service, posted):
    assert message_service.update_message_by_id(posted.message_id + 100, "edited") is None


@pytest.mark.parametrize("text", [None, "", "  ", "y" * 256])
def test_update_message_rejects_invalid_text(message_service, posted, text):
    assert message_service.update_message_by_id(posted.message_id, text) is None
    assert message_service.get_message_by_id(posted.message_id) == posted


def test_get_all_messages_by_account_id(message_service, account_service, posted, registered_account):
    other = account_service.create_account(Account(username="other", password="secret"))
    message_service.create_message(
        Message(posted_by=other.account_id, message_text="not mine", time_posted_epoch=EPOCH)
    )

    assert message_service.get_all_messages_by_account_id(registered_account.account_id) == [posted]


def test_get_all_messages_by_account_without_messages(message_service, registered_account):
    assert message_service.get_all_messages_by_account_id(registered_account.account_id) == []
    assert message_service.get_all_messages_by_account_id(12345) == []


def test_is_valid_message_text_boundaries():
    assert is_valid_message_text("x" * 255)
    assert not is_valid_message_text("x" * 256)
    assert not is_valid_message_text(" ")


@pytest.mark.parametrize("posted_by", [2 ** 63, 2 ** 70, -(2 ** 63) - 1])
def test_out_of_range_author_is_not_looked_up(posted_by):
    accounts = MagicMock(spec=IAccountRepository)
    messages = MagicMock(spec=IMessageRepository)
    service = MessageService(message_repository=messages, account_repository=accounts)

    candidate = Message(posted_by=posted_by, message_text="hello", time_posted_epoch=EPOCH)

    assert service.create_message(candidate) is None
    accounts.get_account_by_id.assert_not_called()
    messages.create_message.assert_not_called()


def test_out_of_range_epoch_is_rejected(message_service, registered_account):
    candidate = Message(posted_by=registered_account.account_id, message_text="hello", time_posted_epoch=2 ** 64)

    assert message_service.create_message(candidate) is None
    assert message_service.get_all_messages() == []


def test_out_of_range_ids_never_reach_repository():
    messages = MagicMock(spec=IMessageRepository)
    service = MessageService(message_repository=messages, account_repository=MagicMock(spec=IAccountRepository))
    huge = 2 ** 70

    assert service.get_message_by_id(huge) is None
    assert service.delete_message_by_id(huge) is None
    assert service.update_message_by_id(huge, "new text") is None
    assert service.get_all_messages_by_account_id(huge) == []

    messages.get_message_by_id.assert_not_called()
    messages.delete_message_by_id.assert_not_called()
    messages.update_message_text.assert_not_called()
    messages.get_messages_by_account_id.assert_not_called()


def test_unencodable_text_is_rejected(message_service, posted):
    assert not is_valid_message_text("\ud800")
    assert message_service.create_message(
        Message(posted_by=posted.posted_by, message_text="\ud800", time_posted_epoch=EPOCH)
    ) is None
    assert message_service.update_message_by_id(posted.message_id, "x\udfff") is None
    assert message_service.get_message_by_id(posted.message_id) == posted
