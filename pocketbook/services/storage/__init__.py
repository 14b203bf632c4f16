"""
Storage Services Package

Provides abstract interfaces and concrete implementations for data storage.
Currently implements a JSON file as the backend, but designed to be swappable.
"""

from pocketbook.services.storage.interface import (
    AuditStorageInterface,
    CorruptSnapshotError,
    PersistenceError,
    SnapshotStorageInterface,
    StorageError,
)
from pocketbook.services.storage.json_file import (
    JsonLinesAuditStorage,
    JsonSnapshotStorage,
)
from pocketbook.services.storage.memory import (
    InMemoryAuditStorage,
    InMemorySnapshotStorage,
)

__all__ = [
    # Interfaces
    "AuditStorageInterface",
    "SnapshotStorageInterface",
    # Exceptions
    "CorruptSnapshotError",
    "PersistenceError",
    "StorageError",
    # JSON file implementation
    "JsonLinesAuditStorage",
    "JsonSnapshotStorage",
    # In-memory implementation
    "InMemoryAuditStorage",
    "InMemorySnapshotStorage",
]
