"""DocSearch Storage Backend - Key-Value Store Interface.

Filter selections outlive a single search; they are kept in a key-value
store supplied by the host (a cookie jar in a browser, a file or a dict
elsewhere).

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional

class KeyValueStore(ABC):
    """Abstract string key-value store."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    def delete(self, key: str) -> bool:
        pass

    def exists(self, key: str) -> bool:
        return self.get(key) is not None

__all__ = ["KeyValueStore"]
