"""
Abstract Storage Interface

DESIGN DECISION: We define an abstract interface for storage operations.
This allows us to:
1. Swap the JSON file for a real database later
2. Use in-memory storage for testing
3. Keep accounting logic decoupled from the on-disk encoding

The snapshot contract is deliberately small: load the whole directory,
save the whole directory. Nothing is written piecemeal.
"""

from abc import ABC, abstractmethod
from typing import Optional

from pocketbook.errors import AccountingError
from pocketbook.models.audit import AuditEvent
from pocketbook.models.snapshot import DirectorySnapshot


class SnapshotStorageInterface(ABC):
    """
    Abstract interface for whole-directory snapshot storage.

    Any storage implementation must implement these methods.
    """

    @abstractmethod
    def load(self) -> Optional[DirectorySnapshot]:
        """
        Load the last saved snapshot.

        Returns:
            The snapshot, or None when nothing has been saved yet

        Raises:
            PersistenceError: If the stored data cannot be read
            CorruptSnapshotError: If the stored data cannot be decoded
        """
        pass

    @abstractmethod
    def save(self, snapshot: DirectorySnapshot) -> None:
        """
        Replace the stored snapshot as one unit.

        Args:
            snapshot: The complete directory to persist

        Raises:
            PersistenceError: If the write fails
        """
        pass


class AuditStorageInterface(ABC):
    """
    Abstract interface for audit log storage.

    Audit logs are append-only - we never delete or modify them.
    """

    @abstractmethod
    def append_event(self, event: AuditEvent) -> bool:
        """
        Append an audit event to the log.

        Returns:
            True if logged successfully
        """
        pass

    @abstractmethod
    def get_events_by_entity(
        self,
        entity_type: str,
        entity_id: str,
    ) -> list[AuditEvent]:
        """
        Get all events for a specific entity.

        Returns:
            List of events in chronological order
        """
        pass

    @abstractmethod
    def get_recent_events(
        self,
        limit: int = 100,
    ) -> list[AuditEvent]:
        """
        Get the most recent audit events.

        Returns:
            List of recent events (newest first)
        """
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class PersistenceError(StorageError, AccountingError):
    """Snapshot could not be read or written."""
    pass


class CorruptSnapshotError(StorageError):
    """Stored snapshot exists but cannot be decoded."""
    pass
