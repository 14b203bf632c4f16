"""
Main Orchestrator for Pocketbook

This module ties together all the components and defines the
end-to-end flows for:
1. Accounts (register -> login -> logout)
2. Ledger mutations (income, expense, budget caps)
3. Transfers between two users' wallets
4. Statistics

DESIGN DECISION: The AccountingService is the ONLY mutator of wallets.
It enforces the boundaries:
- Nothing changes without an active session
- Nothing changes before its input is validated
- Alerts are re-evaluated after every mutation
- A transfer is all-or-nothing, including its save

Sessions are explicit: login() returns a Session and every call takes
it back. There is no hidden "current user".
"""

from typing import NamedTuple, Optional

from pocketbook.accounts import AccountDirectory, Session, User
from pocketbook.audit import AuditLogger
from pocketbook.config import LedgerSettings, get_settings
from pocketbook.errors import (
    AccountingError,
    AuthenticationFailedError,
    InsufficientFundsError,
    NotAuthenticatedError,
    UserNotFoundError,
)
from pocketbook.models.audit import AuditEvent, AuditEventBuilder
from pocketbook.models.budget import BalanceAlert, BudgetAlert
from pocketbook.models.results import (
    MutationResult,
    StatisticsReport,
    TransferResult,
)
from pocketbook.models.transaction import TransactionKind, TransactionRecord
from pocketbook.queries import StatisticsQuery
from pocketbook.services.storage import (
    AuditStorageInterface,
    JsonLinesAuditStorage,
    JsonSnapshotStorage,
    PersistenceError,
    SnapshotStorageInterface,
    StorageError,
)
from pocketbook.validation import (
    validate_amount,
    validate_category,
    validate_login,
    validate_secret,
)


class _Evaluation(NamedTuple):
    """Alert state of one wallet after a mutation."""
    alerts: list[BudgetAlert]
    balance_alert: BalanceAlert


class AccountingService:
    """
    Orchestrates every accounting operation.

    Save points (whole-directory snapshot):
    - successful registration
    - logout
    - successful transfer
    - explicit save()

    Income, expense and budget changes are held in memory until the
    next save point.
    """

    def __init__(
        self,
        storage: SnapshotStorageInterface,
        audit_logger: Optional[AuditLogger] = None,
        settings: Optional[LedgerSettings] = None,
    ):
        self._storage = storage
        self._audit_logger = audit_logger
        self._settings = settings or get_settings().ledger
        self._statistics = StatisticsQuery(self._settings.near_budget_ratio)
        self._directory = self._load_directory()

    @property
    def directory(self) -> AccountDirectory:
        return self._directory

    @property
    def settings(self) -> LedgerSettings:
        return self._settings

    # =========================================================================
    # ACCOUNTS
    # =========================================================================

    def register(self, login: str, secret: str) -> None:
        """
        Register a new user with an empty wallet and save.

        If the save fails the registration is undone and the error raised.

        Raises:
            InvalidLoginError, InvalidSecretError, DuplicateLoginError,
            PersistenceError
        """
        login = validate_login(login, self._settings.min_login_length)
        secret = validate_secret(secret)

        self._directory.register(login, secret)
        try:
            self._flush()
        except PersistenceError:
            self._directory.unregister(login)
            raise

        self._audit(AuditEventBuilder.user_registered(login))

    def login(self, login: str, secret: str) -> Session:
        """
        Authenticate and open a session.

        Raises:
            AuthenticationFailedError: Unknown login or wrong secret
        """
        try:
            user = self._directory.authenticate(login, secret)
        except AuthenticationFailedError:
            self._audit(AuditEventBuilder.login_failed(login))
            raise

        session = Session(user.login)
        self._audit(AuditEventBuilder.login_succeeded(user.login, session.session_id))
        return session

    def logout(self, session: Optional[Session]) -> None:
        """
        Save everything, then close the session.

        If the save fails the session stays open so the caller can retry.
        """
        user = self._require_user(session)
        self._flush()
        session.close()
        self._audit(AuditEventBuilder.logout(user.login, session.session_id))

    def save(self) -> None:
        """Explicit save point, e.g. at process exit."""
        self._flush()

    # =========================================================================
    # LEDGER MUTATIONS
    # =========================================================================

    def add_income(
        self,
        session: Optional[Session],
        category: str,
        amount: float,
        description: str = "",
    ) -> MutationResult:
        return self._record(session, TransactionKind.INCOME, category, amount, description)

    def add_expense(
        self,
        session: Optional[Session],
        category: str,
        amount: float,
        description: str = "",
    ) -> MutationResult:
        return self._record(session, TransactionKind.EXPENSE, category, amount, description)

    def set_budget(
        self,
        session: Optional[Session],
        category: str,
        amount: float,
    ) -> list[BudgetAlert]:
        """
        Set or overwrite the cap for a category.

        Returns:
            Status of every capped category after the change
        """
        user = self._require_user(session)
        amount = validate_amount(amount)
        category = validate_category(category)

        user.wallet.set_budget(category, amount)
        self._audit(AuditEventBuilder.budget_set(
            user.login, category, amount, session.session_id
        ))

        return self._evaluate(user, session).alerts

    def remove_budget(self, session: Optional[Session], category: str) -> bool:
        """Remove a category cap. Returns whether one existed."""
        user = self._require_user(session)
        removed = user.wallet.remove_budget(category)
        if removed:
            self._audit(AuditEventBuilder.budget_removed(
                user.login, category, session.session_id
            ))
        return removed

    # =========================================================================
    # TRANSFERS
    # =========================================================================

    def transfer(
        self,
        session: Optional[Session],
        to_login: str,
        amount: float,
        description: str = "",
    ) -> TransferResult:
        """
        Move funds from the session's user to another user.

        Each check is a hard precondition for the next:
        1. Active session
        2. Amount > 0
        3. Recipient exists
        4. Sender balance >= amount
        Then the debit, the credit and the save happen together.
        If anything after the debit fails, every applied leg is removed
        again and the error raised: either both wallets change and the
        snapshot is on disk, or nothing changes.

        Transferring to yourself is allowed and nets to zero.

        Raises:
            NotAuthenticatedError, InvalidAmountError, UserNotFoundError,
            InsufficientFundsError, PersistenceError
        """
        sender = self._require_user(session)
        amount = validate_amount(amount)

        try:
            recipient = self._directory.resolve(to_login)
        except UserNotFoundError:
            self._audit(AuditEventBuilder.transfer_rejected(
                sender.login, to_login, amount, "recipient not found", session.session_id
            ))
            raise

        balance = sender.wallet.balance()
        if balance < amount:
            self._audit(AuditEventBuilder.transfer_rejected(
                sender.login, to_login, amount, "insufficient funds", session.session_id
            ))
            raise InsufficientFundsError(
                f"Insufficient funds: balance {balance:.2f}, requested {amount:.2f}"
            )

        category = self._settings.transfer_category
        debit = TransactionRecord(
            kind=TransactionKind.EXPENSE,
            category=category,
            amount=amount,
            description=_transfer_note("Transfer to", recipient.login, description),
        )
        credit = TransactionRecord(
            kind=TransactionKind.INCOME,
            category=category,
            amount=amount,
            description=_transfer_note("Transfer from", sender.login, description),
        )

        sender.wallet.add_transaction(debit)
        try:
            recipient.wallet.add_transaction(credit)
        except Exception:
            sender.wallet.remove_transaction(debit)
            raise

        try:
            self._flush()
        except PersistenceError as e:
            recipient.wallet.remove_transaction(credit)
            sender.wallet.remove_transaction(debit)
            self._audit(AuditEventBuilder.transfer_rolled_back(
                sender.login, recipient.login, amount, str(e), session.session_id
            ))
            raise

        self._audit(AuditEventBuilder.transfer_completed(
            sender.login, recipient.login, amount, debit.id, credit.id, session.session_id
        ))

        evaluation = self._evaluate(sender, session)
        return TransferResult(
            debit=debit,
            credit=credit,
            recipient=recipient.login,
            sender_balance=sender.wallet.balance(),
            alerts=evaluation.alerts,
            balance_alert=evaluation.balance_alert,
        )

    # =========================================================================
    # QUERIES
    # =========================================================================

    def query_statistics(self, session: Optional[Session]) -> StatisticsReport:
        """Totals, category breakdowns and budget status of the session's user."""
        user = self._require_user(session)
        return self._statistics.execute(user)

    def balance(self, session: Optional[Session]) -> float:
        return self._require_user(session).wallet.balance()

    def recent_transactions(
        self,
        session: Optional[Session],
        count: Optional[int] = None,
    ) -> list[TransactionRecord]:
        """Newest records first; defaults to the configured count."""
        user = self._require_user(session)
        if count is None:
            count = self._settings.recent_transactions_default
        return user.wallet.recent(count)

    def budget_alerts(self, session: Optional[Session]) -> list[BudgetAlert]:
        user = self._require_user(session)
        return user.wallet.evaluate_alerts(self._settings.near_budget_ratio)

    # =========================================================================
    # INTERNALS
    # =========================================================================

    def _require_user(self, session: Optional[Session]) -> User:
        if session is None or not session.is_active:
            raise NotAuthenticatedError("You must be logged in")
        try:
            return self._directory.resolve(session.login)
        except UserNotFoundError as e:
            raise NotAuthenticatedError("Session user no longer exists") from e

    def _record(
        self,
        session: Optional[Session],
        kind: TransactionKind,
        category: str,
        amount: float,
        description: str,
    ) -> MutationResult:
        user = self._require_user(session)
        amount = validate_amount(amount)
        category = validate_category(category)

        record = TransactionRecord(
            kind=kind,
            category=category,
            amount=amount,
            description=description or "",
        )
        user.wallet.add_transaction(record)
        self._audit(AuditEventBuilder.transaction_recorded(
            user.login, record.id, kind.value, category, amount, session.session_id
        ))

        evaluation = self._evaluate(user, session)
        return MutationResult(
            record=record,
            alerts=evaluation.alerts,
            balance_alert=evaluation.balance_alert,
        )

    def _evaluate(self, user: User, session: Session) -> _Evaluation:
        """Re-compute budget and balance alerts, auditing the triggered ones."""
        alerts = user.wallet.evaluate_alerts(self._settings.near_budget_ratio)
        balance_alert = user.wallet.balance_alert(self._settings.low_balance_threshold)

        for alert in alerts:
            if alert.is_triggered:
                self._audit(AuditEventBuilder.budget_alert(
                    user.login,
                    alert.category,
                    alert.level.value,
                    alert.cap,
                    alert.spent,
                    session.session_id,
                ))
        if balance_alert.is_triggered:
            self._audit(AuditEventBuilder.balance_alert(
                user.login,
                balance_alert.level.value,
                balance_alert.balance,
                session.session_id,
            ))

        return _Evaluation(alerts, balance_alert)

    def _load_directory(self) -> AccountDirectory:
        """
        Load the persisted directory.

        Missing snapshot: start empty.
        Unreadable or corrupt snapshot: report it, start empty.
        """
        try:
            snapshot = self._storage.load()
        except StorageError as e:
            self._audit(AuditEventBuilder.load_failed(str(e)))
            return AccountDirectory()

        if snapshot is None:
            return AccountDirectory()

        # Schema-valid data can still break a wallet rule (e.g. a cap <= 0)
        try:
            directory = AccountDirectory.from_snapshot(snapshot)
        except (AccountingError, ValueError) as e:
            self._audit(AuditEventBuilder.load_failed(str(e)))
            return AccountDirectory()

        self._audit(AuditEventBuilder.snapshot_loaded(len(directory)))
        return directory

    def _flush(self) -> None:
        snapshot = self._directory.to_snapshot()
        try:
            self._storage.save(snapshot)
        except StorageError as e:
            self._audit(AuditEventBuilder.save_failed(str(e)))
            if isinstance(e, PersistenceError):
                raise
            raise PersistenceError(str(e)) from e

        self._audit(AuditEventBuilder.snapshot_saved(len(snapshot.users)))

    def _audit(self, event: AuditEvent) -> None:
        if self._audit_logger:
            self._audit_logger.log(event)


def _transfer_note(prefix: str, login: str, note: str) -> str:
    if note:
        return f"{prefix} {login}: {note}"
    return f"{prefix} {login}"


def create_accounting_service(
    settings: Optional[LedgerSettings] = None,
    storage: Optional[SnapshotStorageInterface] = None,
    audit_storage: Optional[AuditStorageInterface] = None,
) -> AccountingService:
    """
    Factory function to create a ready accounting service.

    Args:
        settings: Ledger settings; loaded from the environment if None.
        storage: Snapshot backend; a JSON file at settings.data_file if None.
        audit_storage: Audit backend; a JSON-lines file at settings.audit_file
                       if None and one is configured, otherwise log-only.

    Returns:
        AccountingService with the persisted directory loaded
    """
    settings = settings or get_settings().ledger

    if storage is None:
        storage = JsonSnapshotStorage(settings.data_file)
    if audit_storage is None and settings.audit_file is not None:
        audit_storage = JsonLinesAuditStorage(settings.audit_file)

    return AccountingService(
        storage=storage,
        audit_logger=AuditLogger(audit_storage),
        settings=settings,
    )
