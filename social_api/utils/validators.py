"""Validation of request values before they are bound to SQL parameters."""

# Signed 64-bit range of BIGINT / SQLite INTEGER
MIN_STORE_INTEGER = -(2 ** 63)
MAX_STORE_INTEGER = 2 ** 63 - 1


class FieldValidator:
    """Utility class for values the database driver can bind."""

    @staticmethod
    def is_store_integer(value) -> bool:
        """
        Check that a value is an integer the database can store.

        Args:
            value: Value to check

        Returns:
            True for an int (not bool) within the signed 64-bit range
        """
        if not isinstance(value, int) or isinstance(value, bool):
            return False
        return MIN_STORE_INTEGER <= value <= MAX_STORE_INTEGER

    @staticmethod
    def is_encodable_text(value) -> bool:
        """
        Check that a value is a string that can be encoded as UTF-8.

        JSON allows lone surrogate escapes such as "\\ud800", which decode to
        strings the driver cannot encode.

        Args:
            value: Value to check

        Returns:
            True for a UTF-8 encodable str, False otherwise
        """
        if not isinstance(value, str):
            return False
        try:
            value.encode("utf-8")
        except UnicodeEncodeError:
            return False
        return True
