"""
JSON File Storage Implementation

DESIGN DECISION: A single JSON file holds the whole account directory
because:
1. The data set is one person's (or one household's) ledger
2. A human can open and read it
3. Writing the whole file at once keeps every snapshot consistent

TRADEOFFS:
- Every save rewrites the file (fine at this scale)
- No partial recovery from a corrupt file: we start empty instead

Writes go to a temporary sibling file which is then renamed over the
target, so a crash mid-write never leaves a half-written snapshot.
"""

import json
import os
from pathlib import Path
from typing import Optional, Union

import structlog
from pydantic import ValidationError
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from pocketbook.models.audit import AuditEvent
from pocketbook.models.snapshot import DirectorySnapshot
from pocketbook.services.storage.interface import (
    AuditStorageInterface,
    CorruptSnapshotError,
    PersistenceError,
    SnapshotStorageInterface,
    StorageError,
)


logger = structlog.get_logger(__name__)


class JsonSnapshotStorage(SnapshotStorageInterface):
    """
    Snapshot storage in one UTF-8 JSON file.

    Transient OS errors during a write are retried with exponential
    backoff before the save is reported as failed.
    """

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Optional[DirectorySnapshot]:
        """Load the snapshot. A missing file means nothing saved yet."""
        if not self._path.exists():
            logger.info("snapshot_missing", path=str(self._path))
            return None

        try:
            raw = self._path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            logger.warning("snapshot_corrupt", path=str(self._path), error="not UTF-8")
            raise CorruptSnapshotError(f"Snapshot {self._path} is not UTF-8") from e
        except OSError as e:
            logger.error("snapshot_load_failed", path=str(self._path), error=str(e))
            raise PersistenceError(f"Failed to read snapshot {self._path}: {e}") from e

        try:
            return DirectorySnapshot.model_validate_json(raw)
        except ValidationError as e:
            logger.warning(
                "snapshot_corrupt",
                path=str(self._path),
                errors=e.error_count(),
            )
            raise CorruptSnapshotError(
                f"Snapshot {self._path} is corrupt: {e.error_count()} errors"
            ) from e

    def save(self, snapshot: DirectorySnapshot) -> None:
        """Write the snapshot atomically."""
        payload = snapshot.model_dump_json(indent=2)
        try:
            self._write(payload)
        except OSError as e:
            logger.error("snapshot_save_failed", path=str(self._path), error=str(e))
            raise PersistenceError(f"Failed to save snapshot {self._path}: {e}") from e
        logger.debug("snapshot_saved", path=str(self._path), users=len(snapshot.users))

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=8),
        retry=retry_if_exception_type(OSError),
        reraise=True,
    )
    def _write(self, payload: str) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self._path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise


class JsonLinesAuditStorage(AuditStorageInterface):
    """
    Audit log as one JSON object per line.

    Audit events are append-only.
    """

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)

    def append_event(self, event: AuditEvent) -> bool:
        """Append an audit event."""
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._path, "a", encoding="utf-8") as f:
                f.write(event.model_dump_json() + "\n")
            return True
        except OSError as e:
            # Don't raise - audit logging should not break the main flow
            logger.warning(
                "audit_write_failed",
                path=str(self._path),
                event_id=str(event.event_id),
                error=str(e),
            )
            return False

    def _read_events(self) -> list[AuditEvent]:
        if not self._path.exists():
            return []
        try:
            lines = self._path.read_text(encoding="utf-8").splitlines()
        except OSError as e:
            raise StorageError(f"Failed to read audit log {self._path}: {e}") from e

        events = []
        for line in lines:
            if not line.strip():
                continue
            try:
                events.append(AuditEvent.model_validate_json(line))
            except (ValidationError, json.JSONDecodeError):
                logger.warning("audit_line_skipped", path=str(self._path))
                continue
        return events

    def get_events_by_entity(
        self,
        entity_type: str,
        entity_id: str,
    ) -> list[AuditEvent]:
        """Get events by entity."""
        events = [
            event for event in self._read_events()
            if event.entity_type == entity_type and event.entity_id == entity_id
        ]
        events.sort(key=lambda e: e.timestamp)
        return events

    def get_recent_events(
        self,
        limit: int = 100,
    ) -> list[AuditEvent]:
        """Get recent events."""
        events = self._read_events()
        # Sort newest first
        events.sort(key=lambda e: e.timestamp, reverse=True)
        return events[:limit]
