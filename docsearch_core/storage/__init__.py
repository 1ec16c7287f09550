"""DocSearch Storage Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from docsearch_core.storage.backend import KeyValueStore
from docsearch_core.storage.memory import MemoryStorage

__all__ = ["KeyValueStore", "MemoryStorage"]
