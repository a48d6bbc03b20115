import abc
from typing import Optional


class KeyValueStore(abc.ABC):
    """Synchronous string key-value store. Failures raise ``StoreError``."""

    @abc.abstractmethod
    def get(self, key: str) -> Optional[str]: ...
    @abc.abstractmethod
    def set(self, key: str, value: str) -> None: ...
    @abc.abstractmethod
    def delete(self, key: str) -> None: ...
