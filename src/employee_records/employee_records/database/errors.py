class StoreError(Exception):
    """Low-level failure raised by a repository implementation."""


class DuplicateKeyError(StoreError):
    """A unique index rejected the write."""

    def __init__(self, message: str, *, key: str = ""):
        super().__init__(message)
        self.key = key


class StoreConnectionError(StoreError):
    """The store could not be reached or the connection dropped."""
