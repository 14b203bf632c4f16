"""
In-Memory Storage Implementation

Used in tests and by embedders that do their own persistence.
Snapshots are kept in their serialized JSON form so a load always
returns a fresh, independent object graph, just like the file backend.
"""

from typing import Optional

from pocketbook.models.audit import AuditEvent
from pocketbook.models.snapshot import DirectorySnapshot
from pocketbook.services.storage.interface import (
    AuditStorageInterface,
    SnapshotStorageInterface,
)


class InMemorySnapshotStorage(SnapshotStorageInterface):
    """Snapshot storage that lives as long as the object does."""

    def __init__(self, snapshot: Optional[DirectorySnapshot] = None):
        self._payload: Optional[str] = None
        self.save_count = 0
        if snapshot is not None:
            self._payload = snapshot.model_dump_json()

    def load(self) -> Optional[DirectorySnapshot]:
        if self._payload is None:
            return None
        return DirectorySnapshot.model_validate_json(self._payload)

    def save(self, snapshot: DirectorySnapshot) -> None:
        self._payload = snapshot.model_dump_json()
        self.save_count += 1


class InMemoryAuditStorage(AuditStorageInterface):
    """Audit storage backed by a list."""

    def __init__(self):
        self._events: list[AuditEvent] = []

    @property
    def events(self) -> list[AuditEvent]:
        """All events in append order."""
        return list(self._events)

    def append_event(self, event: AuditEvent) -> bool:
        self._events.append(event)
        return True

    def get_events_by_entity(
        self,
        entity_type: str,
        entity_id: str,
    ) -> list[AuditEvent]:
        events = [
            event for event in self._events
            if event.entity_type == entity_type and event.entity_id == entity_id
        ]
        events.sort(key=lambda e: e.timestamp)
        return events

    def get_recent_events(
        self,
        limit: int = 100,
    ) -> list[AuditEvent]:
        indexed = sorted(
            enumerate(self._events),
            key=lambda pair: (pair[1].timestamp, pair[0]),
            reverse=True,
        )
        return [event for _, event in indexed[:limit]]
