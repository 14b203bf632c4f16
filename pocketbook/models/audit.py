"""
Audit Models for Pocketbook

Every significant action in the system is logged for audit purposes.
This provides:
1. Traceability of every balance change
2. Debugging information when things go wrong
3. A record of rejected transfers and failed saves

DESIGN DECISION: Audit logs are append-only. We never delete or modify them.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """
    Types of events we audit.
    """
    # Accounts
    USER_REGISTERED = "user_registered"
    LOGIN_SUCCEEDED = "login_succeeded"
    LOGIN_FAILED = "login_failed"
    LOGOUT = "logout"

    # Ledger
    TRANSACTION_RECORDED = "transaction_recorded"
    BUDGET_SET = "budget_set"
    BUDGET_REMOVED = "budget_removed"

    # Alerts
    BUDGET_ALERT = "budget_alert"
    BALANCE_ALERT = "balance_alert"

    # Transfers
    TRANSFER_COMPLETED = "transfer_completed"
    TRANSFER_REJECTED = "transfer_rejected"
    TRANSFER_ROLLED_BACK = "transfer_rolled_back"

    # Persistence
    SNAPSHOT_SAVED = "snapshot_saved"
    SNAPSHOT_LOADED = "snapshot_loaded"
    SAVE_FAILED = "save_failed"
    LOAD_FAILED = "load_failed"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of our audit trail.
    Every significant action creates one of these.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=datetime.now,
        description="When the event occurred"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Context - what entity is this about?
    entity_type: Optional[str] = Field(
        default=None,
        description="Type of entity (e.g., 'user', 'transaction', 'snapshot')"
    )
    entity_id: Optional[str] = Field(
        default=None,
        description="Login or transaction id this event relates to"
    )

    # Correlation - all events of one session share an id
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="Session id of the caller, when there is one"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    error_message: Optional[str] = None

    is_user_action: bool = Field(
        default=False,
        description="Was this triggered by a user action?"
    )

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_type": self.entity_type,
            "entity_id": self.entity_id,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
            "is_user_action": self.is_user_action,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.user_registered("alice")
        event = AuditEventBuilder.transfer_completed("alice", "bob", 500.0, ...)
    """

    @staticmethod
    def user_registered(login: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.USER_REGISTERED,
            entity_type="user",
            entity_id=login,
            description=f"User registered: {login}",
            is_user_action=True,
        )

    @staticmethod
    def login_succeeded(login: str, correlation_id: UUID) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LOGIN_SUCCEEDED,
            entity_type="user",
            entity_id=login,
            correlation_id=correlation_id,
            description=f"User logged in: {login}",
            is_user_action=True,
        )

    @staticmethod
    def login_failed(login: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LOGIN_FAILED,
            severity=AuditSeverity.WARNING,
            entity_type="user",
            entity_id=login,
            description=f"Login failed for: {login}",
            is_user_action=True,
        )

    @staticmethod
    def logout(login: str, correlation_id: UUID) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LOGOUT,
            entity_type="user",
            entity_id=login,
            correlation_id=correlation_id,
            description=f"User logged out: {login}",
            is_user_action=True,
        )

    @staticmethod
    def transaction_recorded(
        login: str,
        transaction_id: str,
        kind: str,
        category: str,
        amount: float,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSACTION_RECORDED,
            entity_type="transaction",
            entity_id=transaction_id,
            correlation_id=correlation_id,
            description=f"{kind.capitalize()} recorded for {login}: {category} {amount:.2f}",
            details={
                "login": login,
                "kind": kind,
                "category": category,
                "amount": amount,
            },
            is_user_action=True,
        )

    @staticmethod
    def budget_set(
        login: str,
        category: str,
        cap: float,
        correlation_id: UUID,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.BUDGET_SET,
            entity_type="user",
            entity_id=login,
            correlation_id=correlation_id,
            description=f"Budget set for {category}: {cap:.2f}",
            details={
                "category": category,
                "cap": cap,
            },
            is_user_action=True,
        )

    @staticmethod
    def budget_removed(
        login: str,
        category: str,
        correlation_id: UUID,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.BUDGET_REMOVED,
            entity_type="user",
            entity_id=login,
            correlation_id=correlation_id,
            description=f"Budget removed for {category}",
            details={"category": category},
            is_user_action=True,
        )

    @staticmethod
    def budget_alert(
        login: str,
        category: str,
        level: str,
        cap: float,
        spent: float,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.BUDGET_ALERT,
            severity=AuditSeverity.WARNING,
            entity_type="user",
            entity_id=login,
            correlation_id=correlation_id,
            description=f"Budget {level} for {category}: spent {spent:.2f} of {cap:.2f}",
            details={
                "category": category,
                "level": level,
                "cap": cap,
                "spent": spent,
            },
        )

    @staticmethod
    def balance_alert(
        login: str,
        level: str,
        balance: float,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.BALANCE_ALERT,
            severity=AuditSeverity.WARNING,
            entity_type="user",
            entity_id=login,
            correlation_id=correlation_id,
            description=f"Balance {level} for {login}: {balance:.2f}",
            details={
                "level": level,
                "balance": balance,
            },
        )

    @staticmethod
    def transfer_completed(
        sender: str,
        recipient: str,
        amount: float,
        debit_id: str,
        credit_id: str,
        correlation_id: UUID,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSFER_COMPLETED,
            entity_type="transaction",
            entity_id=debit_id,
            correlation_id=correlation_id,
            description=f"Transfer {sender} -> {recipient}: {amount:.2f}",
            details={
                "sender": sender,
                "recipient": recipient,
                "amount": amount,
                "debit_id": debit_id,
                "credit_id": credit_id,
            },
            is_user_action=True,
        )

    @staticmethod
    def transfer_rejected(
        sender: str,
        recipient: str,
        amount: float,
        reason: str,
        correlation_id: UUID,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSFER_REJECTED,
            severity=AuditSeverity.WARNING,
            entity_type="user",
            entity_id=sender,
            correlation_id=correlation_id,
            description=f"Transfer {sender} -> {recipient} rejected: {reason}",
            details={
                "recipient": recipient,
                "amount": amount,
                "reason": reason,
            },
            is_user_action=True,
        )

    @staticmethod
    def transfer_rolled_back(
        sender: str,
        recipient: str,
        amount: float,
        error_message: str,
        correlation_id: UUID,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSFER_ROLLED_BACK,
            severity=AuditSeverity.ERROR,
            entity_type="user",
            entity_id=sender,
            correlation_id=correlation_id,
            description=f"Transfer {sender} -> {recipient} rolled back",
            error_message=error_message,
            details={
                "recipient": recipient,
                "amount": amount,
            },
        )

    @staticmethod
    def snapshot_saved(user_count: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SNAPSHOT_SAVED,
            severity=AuditSeverity.DEBUG,
            entity_type="snapshot",
            description=f"Snapshot saved with {user_count} users",
            details={"user_count": user_count},
        )

    @staticmethod
    def snapshot_loaded(user_count: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SNAPSHOT_LOADED,
            entity_type="snapshot",
            description=f"Snapshot loaded with {user_count} users",
            details={"user_count": user_count},
        )

    @staticmethod
    def save_failed(error_message: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SAVE_FAILED,
            severity=AuditSeverity.ERROR,
            entity_type="snapshot",
            description="Snapshot save failed",
            error_message=error_message,
        )

    @staticmethod
    def load_failed(error_message: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LOAD_FAILED,
            severity=AuditSeverity.ERROR,
            entity_type="snapshot",
            description="Snapshot could not be loaded, starting empty",
            error_message=error_message,
        )
