"""Account domain entity."""
from dataclasses import dataclass
from typing import Optional, Dict, Any


@dataclass
class Account:
    """Domain entity representing a registered user."""

    username: Optional[str] = None
    password: Optional[str] = None
    account_id: Optional[int] = None  # assigned by the store on insert

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional["Account"]:
        """
        Build an account from a request payload.

        Any client-supplied account_id is ignored.

        Args:
            data: Decoded JSON object

        Returns:
            Account, or None if data is not a JSON object
        """
        if not isinstance(data, dict):
            return None
        return cls(username=data.get("username"), password=data.get("password"))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the JSON body returned by the API."""
        return {
            "account_id": self.account_id,
            "username": self.username,
            "password": self.password,
        }
