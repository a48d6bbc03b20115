"""Exception hierarchy for pagestate."""


class PageStateError(Exception):
    """Base exception for all pagestate errors."""
    pass


class StoreError(PageStateError):
    """Key-value store rejected a read or write."""
    pass


class StoreQuotaExceededError(StoreError):
    """Write would exceed the store's size quota."""

    def __init__(self, key: str, size: int, quota: int):
        self.key = key
        self.size = size
        self.quota = quota
        super().__init__(f"Quota exceeded writing {key!r}: {size} > {quota} bytes")


class PersistenceError(PageStateError):
    """Gateway could not read or write the stored document."""
    pass


class DeserializationError(PageStateError):
    """Stored document is not a valid snapshot."""

    def __init__(self, storage_key: str, reason: str):
        self.storage_key = storage_key
        self.reason = reason
        super().__init__(f"Invalid stored document for {storage_key!r}: {reason}")
