"""
Shared fixtures.

Every service here runs against in-memory storage unless a test asks
for a file under tmp_path. No test touches the real data file.
"""

import pytest

from pocketbook.audit import AuditLogger
from pocketbook.config import LedgerSettings
from pocketbook.orchestrator import AccountingService
from pocketbook.services.storage import (
    InMemoryAuditStorage,
    InMemorySnapshotStorage,
)


@pytest.fixture
def settings(tmp_path):
    return LedgerSettings(
        data_file=tmp_path / "finance_data.json",
        audit_file=None,
    )


@pytest.fixture
def storage():
    return InMemorySnapshotStorage()


@pytest.fixture
def audit_storage():
    return InMemoryAuditStorage()


@pytest.fixture
def service(storage, audit_storage, settings):
    return AccountingService(
        storage=storage,
        audit_logger=AuditLogger(audit_storage),
        settings=settings,
    )


@pytest.fixture
def alice(service):
    """alice and bob registered, alice logged in."""
    service.register("alice", "p1")
    service.register("bob", "p2")
    return service.login("alice", "p1")
