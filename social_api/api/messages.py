"""Message endpoints.

Absent messages on GET/DELETE answer 200 with an empty body, while rejected
POST/PATCH payloads answer 400.
"""
import logging

from flask import Blueprint, request, jsonify

from social_api.domain.entities.message import Message
from social_api.infrastructure.service_container import get_service_container
from social_api.middleware.monitoring import track_request


messages_blueprint = Blueprint("messages", __name__)
_logger = logging.getLogger(__name__)


def _message_service():
    return get_service_container().get_message_service()


@messages_blueprint.route("/messages", methods=["POST"])
@track_request("create_message")
def create_message():
    """
    Create a message.

    Expected payload:
    {
        "posted_by": 1,
        "message_text": "Hello",
        "time_posted_epoch": 1669947792
    }
    """
    candidate = Message.from_dict(request.get_json(force=True, silent=True))
    message = _message_service().create_message(candidate)

    if message is None:
        return "", 400
    return jsonify(message.to_dict()), 200


@messages_blueprint.route("/messages", methods=["GET"])
@track_request("list_messages")
def list_messages():
    messages = _message_service().get_all_messages()
    return jsonify([message.to_dict() for message in messages]), 200


@messages_blueprint.route("/messages/<int:message_id>", methods=["GET"])
@track_request("get_message")
def get_message(message_id: int):
    message = _message_service().get_message_by_id(message_id)

    if message is None:
        return "", 200
    return jsonify(message.to_dict()), 200


@messages_blueprint.route("/messages/<int:message_id>", methods=["DELETE"])
@track_request("delete_message")
def delete_message(message_id: int):
    message = _message_service().delete_message_by_id(message_id)

    if message is None:
        return "", 200
    return jsonify(message.to_dict()), 200


@messages_blueprint.route("/messages/<int:message_id>", methods=["PATCH"])
@track_request("update_message")
def update_message(message_id: int):
    """
    Replace the text of a message.

    Expected payload:
    {
        "message_text": "new text"
    }
    """
    body = request.get_json(force=True, silent=True)
    if not isinstance(body, dict):
        _logger.info(f"Update of message {message_id} rejected: body is not a JSON object")
        return "", 400

    message = _message_service().update_message_by_id(message_id, body.get("message_text"))

    if message is None:
        return "", 400
    return jsonify(message.to_dict()), 200


@messages_blueprint.route("/accounts/<int:account_id>/messages", methods=["GET"])
@track_request("list_account_messages")
def list_account_messages(account_id: int):
    messages = _message_service().get_all_messages_by_account_id(account_id)
    return jsonify([message.to_dict() for message in messages]), 200
