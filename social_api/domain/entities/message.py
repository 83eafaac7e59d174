"""Message domain entity."""
from dataclasses import dataclass
from typing import Optional, Dict, Any


@dataclass
class Message:
    """Domain entity representing a text post authored by an account."""

    posted_by: Optional[int] = None
    message_text: Optional[str] = None
    time_posted_epoch: Optional[int] = None  # epoch milliseconds, client-supplied
    message_id: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional["Message"]:
        """
        Build a message from a request payload.

        Any client-supplied message_id is ignored.

        Args:
            data: Decoded JSON object

        Returns:
            Message, or None if data is not a JSON object
        """
        if not isinstance(data, dict):
            return None
        return cls(
            posted_by=data.get("posted_by"),
            message_text=data.get("message_text"),
            time_posted_epoch=data.get("time_posted_epoch"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the JSON body returned by the API."""
        return {
            "message_id": self.message_id,
            "posted_by": self.posted_by,
            "message_text": self.message_text,
            "time_posted_epoch": self.time_posted_epoch,
        }
