from __future__ import annotations


class DictionaryError(Exception):
    """Base class for misuse of the memoization table."""

    def __init__(self, key: str, message: str) -> None:
        super().__init__(message)
        self.key = key


class DuplicateKeyError(DictionaryError):
    def __init__(self, key: str) -> None:
        super().__init__(key, f"Configuration already stored: {key!r}")


class NotFoundError(DictionaryError):
    def __init__(self, key: str) -> None:
        super().__init__(key, f"Configuration not stored: {key!r}")
