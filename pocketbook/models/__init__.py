"""
Data Models Package

This package contains all Pydantic models used in Pocketbook.
Ledger records, alert results, snapshots and audit events all conform
to these schemas.
"""

from pocketbook.models.transaction import (
    TransactionKind,
    TransactionRecord,
    new_transaction_id,
)
from pocketbook.models.budget import (
    AlertLevel,
    BalanceAlert,
    BalanceAlertLevel,
    BudgetAlert,
)
from pocketbook.models.results import (
    MutationResult,
    StatisticsReport,
    TransferResult,
)
from pocketbook.models.snapshot import (
    SNAPSHOT_VERSION,
    DirectorySnapshot,
    UserSnapshot,
)
from pocketbook.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Ledger models
    "TransactionKind",
    "TransactionRecord",
    "new_transaction_id",
    # Alert models
    "AlertLevel",
    "BalanceAlert",
    "BalanceAlertLevel",
    "BudgetAlert",
    # Results
    "MutationResult",
    "StatisticsReport",
    "TransferResult",
    # Snapshots
    "SNAPSHOT_VERSION",
    "DirectorySnapshot",
    "UserSnapshot",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
