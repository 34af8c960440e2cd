"""In-memory ledger store with referential and balance integrity."""

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from bank_ledger.config import ValidationConfig
from bank_ledger.exceptions import (
    EntityNotFoundError,
    InsufficientBalanceError,
    InvalidAmountError,
    LedgerError,
    ValidationError,
)
from bank_ledger.models import (
    Account,
    AccountSummary,
    AccountType,
    Customer,
    Deposit,
    Event,
    LedgerAggregates,
    Transaction,
    TransactionType,
    Transfer,
    Withdrawal,
)
from bank_ledger.money import (
    ZERO,
    add_money,
    money_average,
    money_sum,
    subtract_money,
    to_money,
)
from bank_ledger.sinks.serialization import record_to_dict
from bank_ledger.validation import (
    parse_account_type,
    parse_transaction_type,
    sanitize_contact,
    sanitize_email,
    sanitize_name,
    validate_amount,
    validate_customer,
    validate_initial_balance,
)

logger = logging.getLogger(__name__)

Listener = Callable[[Event], None]


@dataclass
class LedgerStore:
    """In-memory store owning customers, accounts and the transaction log.

    Every public operation runs under one re-entrant lock and performs all
    of its checks before touching any collection, so an operation either
    commits completely or raises with the store unchanged.

    Parameters
    ----------
    config : ValidationConfig
        Validation rules. Amount positivity is always enforced; customer
        field rules only in strict mode.
    clock : Callable[[], datetime]
        Source of "now" for timestamps (``datetime.now`` by default).
    """

    config: ValidationConfig = field(default_factory=ValidationConfig)
    clock: Callable[[], datetime] = field(default=datetime.now, repr=False)

    # Primary collections (insertion ordered)
    customers: dict[int, Customer] = field(default_factory=dict)
    accounts: dict[int, Account] = field(default_factory=dict)

    # Append-only log, oldest first
    transactions: list[Transaction] = field(default_factory=list)

    # Relationship indexes
    _customer_accounts: dict[int, list[int]] = field(default_factory=dict)
    _account_transactions: dict[int, list[int]] = field(default_factory=dict)
    _transaction_positions: dict[int, int] = field(default_factory=dict)

    # Monotonic id counters; never reset, so ids are not reused
    _next_ids: dict[str, int] = field(default_factory=lambda: {
        "customer": 1,
        "account": 1,
        "transaction": 1,
        "event": 1,
    })

    _listeners: list[Listener] = field(default_factory=list, repr=False)
    _lock: threading.RLock = field(
        default_factory=threading.RLock, repr=False, compare=False
    )

    # Customers
    def create_customer(self, name: str, age: int, email: str, contact: str) -> Customer:
        """Register a new customer.

        In strict mode the fields are validated, sanitized and the e-mail
        address must not belong to another customer.

        Raises
        ------
        ValidationError
            Strict mode only, when any rule fails.
        """
        with self._lock:
            if self.config.strict:
                self._check_customer(name, age, email, contact)
                name = sanitize_name(name)
                email = sanitize_email(email)
                contact = sanitize_contact(contact)
                self._check_unique_email(email)

            customer = Customer(
                customer_id=self._next_id("customer"),
                name=name,
                age=age,
                email=email,
                contact=contact,
            )
            self.customers[customer.customer_id] = customer
            self._customer_accounts[customer.customer_id] = []

            logger.info("Created customer %d", customer.customer_id)
            self._emit("customer.created", customer.customer_id, record_to_dict(customer))
            return customer

    def update_customer(
        self,
        customer_id: int,
        *,
        name: str | None = None,
        age: int | None = None,
        email: str | None = None,
        contact: str | None = None,
    ) -> Customer:
        """Edit a customer's details.

        Only the given fields change. A new name is copied onto the
        customer's accounts so account searches keep matching.

        Raises
        ------
        EntityNotFoundError
            If the customer does not exist.
        ValidationError
            Strict mode only, when the edited record breaks a rule.
        """
        with self._lock:
            customer = self._require_customer(customer_id)

            new_name = customer.name if name is None else name
            new_age = customer.age if age is None else age
            new_email = customer.email if email is None else email
            new_contact = customer.contact if contact is None else contact

            if self.config.strict:
                self._check_customer(new_name, new_age, new_email, new_contact)
                new_name = sanitize_name(new_name)
                new_email = sanitize_email(new_email)
                new_contact = sanitize_contact(new_contact)
                self._check_unique_email(new_email, exclude=customer_id)

            renamed = new_name != customer.name
            customer.name = new_name
            customer.age = new_age
            customer.email = new_email
            customer.contact = new_contact
            customer.updated_at = self.clock()

            if renamed:
                for account_id in self._customer_accounts.get(customer_id, []):
                    self.accounts[account_id].customer_name = new_name

            logger.info("Updated customer %d", customer_id)
            self._emit("customer.updated", customer_id, record_to_dict(customer))
            return customer

    def delete_customer(self, customer_id: int) -> list[Account]:
        """Remove a customer and every account they own.

        Transactions that reference the removed accounts are kept.

        Returns
        -------
        list[Account]
            The accounts removed with the customer.
        """
        with self._lock:
            self._require_customer(customer_id)

            removed = []
            for account_id in self._customer_accounts.pop(customer_id, []):
                removed.append(self.accounts.pop(account_id))
                self._account_transactions.pop(account_id, None)
            del self.customers[customer_id]

            logger.info(
                "Deleted customer %d and %d account(s)", customer_id, len(removed)
            )
            self._emit(
                "customer.deleted",
                customer_id,
                {"account_ids": [a.account_id for a in removed]},
            )
            return removed

    def get_customer(self, customer_id: int) -> Customer:
        with self._lock:
            customer = self.customers.get(customer_id)
            if customer is None:
                raise EntityNotFoundError(f"Customer {customer_id} not found")
            return customer

    def find_customer_by_email(self, email: str) -> Customer | None:
        """First customer whose e-mail matches, ignoring case and surrounding spaces."""
        wanted = email.strip().lower()
        with self._lock:
            for customer in self.customers.values():
                if customer.email.strip().lower() == wanted:
                    return customer
            return None

    def list_customers(self) -> list[Customer]:
        with self._lock:
            return list(self.customers.values())

    def search_customers(self, term: str) -> list[Customer]:
        """Case-insensitive substring match on name or e-mail, insertion order."""
        needle = term.lower()
        with self._lock:
            return [
                c for c in self.customers.values()
                if needle in c.name.lower() or needle in c.email.lower()
            ]

    # Accounts
    def create_account(
        self,
        customer_id: int,
        account_type: AccountType | str,
        initial_balance: Decimal | int | float | str = ZERO,
    ) -> Account:
        """Open an account for an existing customer.

        Raises
        ------
        ValidationError
            If the account type is unknown.
        InvalidAmountError
            If the initial balance is negative or not a number.
        EntityNotFoundError
            If the customer does not exist.
        """
        with self._lock:
            try:
                kind = parse_account_type(account_type)
                balance = validate_initial_balance(initial_balance, self.config)
            except ValidationError as exc:
                raise self._reject(exc)
            customer = self._require_customer(customer_id)

            account = Account(
                account_id=self._next_id("account"),
                customer_id=customer_id,
                customer_name=customer.name,
                account_type=kind,
                balance=balance,
                created_at=self.clock().date(),
            )
            self.accounts[account.account_id] = account
            self._customer_accounts[customer_id].append(account.account_id)
            self._account_transactions[account.account_id] = []

            logger.info(
                "Opened %s account %d for customer %d",
                kind.value,
                account.account_id,
                customer_id,
            )
            self._emit("account.created", account.account_id, record_to_dict(account))
            return account

    def delete_account(self, account_id: int) -> Account:
        """Remove one account. Its transactions stay in the log."""
        with self._lock:
            account = self._require_account(account_id)

            del self.accounts[account_id]
            self._account_transactions.pop(account_id, None)
            owned = self._customer_accounts.get(account.customer_id)
            if owned is not None and account_id in owned:
                owned.remove(account_id)

            logger.info("Deleted account %d", account_id)
            self._emit("account.deleted", account_id, {"customer_id": account.customer_id})
            return account

    def get_account(self, account_id: int) -> Account:
        with self._lock:
            account = self.accounts.get(account_id)
            if account is None:
                raise EntityNotFoundError(f"Account {account_id} not found")
            return account

    def list_accounts(self) -> list[Account]:
        with self._lock:
            return list(self.accounts.values())

    def get_customer_accounts(self, customer_id: int) -> list[Account]:
        """Get all accounts for a customer (empty for unknown customers)."""
        with self._lock:
            account_ids = self._customer_accounts.get(customer_id, [])
            return [self.accounts[aid] for aid in account_ids]

    def get_accounts_by_type(self, account_type: AccountType | str) -> list[Account]:
        kind = parse_account_type(account_type)
        with self._lock:
            return [a for a in self.accounts.values() if a.account_type == kind]

    def search_accounts(self, term: str) -> list[Account]:
        """Case-insensitive substring match on the owner's display name."""
        needle = term.lower()
        with self._lock:
            return [a for a in self.accounts.values() if needle in a.customer_name.lower()]

    # Money movement
    def deposit(self, account_id: int, amount: Decimal | int | float | str) -> Deposit:
        """Credit an account and record a DEPOSIT.

        Raises
        ------
        InvalidAmountError
            If the amount is not positive, or the new balance would need
            more significant digits than money carries.
        """
        with self._lock:
            value = self._amount(amount)
            account = self._require_account(account_id)
            new_balance = self._checked(add_money, account.balance, value)

            txn = Deposit(
                transaction_id=self._next_id("transaction"),
                amount=value,
                timestamp=self.clock(),
                to_account=account_id,
            )
            account.balance = new_balance
            self._record(txn)

            logger.info(
                "Deposited %s to account %d", value, account_id,
                extra={"ledger": record_to_dict(txn)},
            )
            return txn

    def withdraw(self, account_id: int, amount: Decimal | int | float | str) -> Withdrawal:
        """Debit an account and record a WITHDRAW.

        Raises
        ------
        InsufficientBalanceError
            If the balance is lower than the amount; nothing changes.
        """
        with self._lock:
            value = self._amount(amount)
            account = self._require_account(account_id)
            if not account.has_sufficient_balance(value):
                raise self._reject(InsufficientBalanceError(
                    f"Insufficient balance in account {account_id}: "
                    f"balance {account.balance}, requested {value}"
                ))
            new_balance = self._checked(subtract_money, account.balance, value)

            txn = Withdrawal(
                transaction_id=self._next_id("transaction"),
                amount=value,
                timestamp=self.clock(),
                from_account=account_id,
            )
            account.balance = new_balance
            self._record(txn)

            logger.info(
                "Withdrew %s from account %d", value, account_id,
                extra={"ledger": record_to_dict(txn)},
            )
            return txn

    def transfer(
        self,
        from_account_id: int,
        to_account_id: int,
        amount: Decimal | int | float | str,
    ) -> Transfer:
        """Move money between two accounts and record one TRANSFER.

        Both balance changes and the log entry happen under the store lock,
        after every check has passed.

        Raises
        ------
        EntityNotFoundError
            If either account does not exist.
        ValidationError
            If source and destination are the same account.
        InsufficientBalanceError
            If the source balance is lower than the amount.
        """
        with self._lock:
            value = self._amount(amount)
            source = self._require_account(from_account_id)
            destination = self._require_account(to_account_id)
            if from_account_id == to_account_id:
                raise self._reject(ValidationError(
                    "Source and destination accounts cannot be the same"
                ))
            if not source.has_sufficient_balance(value):
                raise self._reject(InsufficientBalanceError(
                    f"Insufficient balance in source account {from_account_id}: "
                    f"balance {source.balance}, requested {value}"
                ))
            new_source = self._checked(subtract_money, source.balance, value)
            new_destination = self._checked(add_money, destination.balance, value)

            txn = Transfer(
                transaction_id=self._next_id("transaction"),
                amount=value,
                timestamp=self.clock(),
                from_account=from_account_id,
                to_account=to_account_id,
            )
            source.balance = new_source
            destination.balance = new_destination
            self._record(txn)

            logger.info(
                "Transferred %s from account %d to account %d",
                value,
                from_account_id,
                to_account_id,
                extra={"ledger": record_to_dict(txn)},
            )
            return txn

    # Transactions
    def get_transaction(self, transaction_id: int) -> Transaction:
        with self._lock:
            position = self._transaction_positions.get(transaction_id)
            if position is None:
                raise EntityNotFoundError(f"Transaction {transaction_id} not found")
            return self.transactions[position]

    def list_transactions(self) -> list[Transaction]:
        with self._lock:
            return list(self.transactions)

    def list_recent_transactions(self, n: int) -> list[Transaction]:
        """Return the ``n`` newest transactions, newest first."""
        if n <= 0:
            return []
        with self._lock:
            return list(reversed(self.transactions[-n:]))

    def get_transactions_by_type(
        self, transaction_type: TransactionType | str
    ) -> list[Transaction]:
        """Transactions of one type, newest first."""
        kind = parse_transaction_type(transaction_type)
        with self._lock:
            return [t for t in reversed(self.transactions) if t.transaction_type == kind]

    def get_transactions_between(self, start: datetime, end: datetime) -> list[Transaction]:
        """Transactions timestamped within ``[start, end]``, newest first.

        An inverted range matches nothing.
        """
        with self._lock:
            return [t for t in reversed(self.transactions) if start <= t.timestamp <= end]

    def get_transactions_above(
        self, amount: Decimal | int | float | str
    ) -> list[Transaction]:
        """Transactions strictly larger than ``amount``, largest first.

        Equal amounts keep newest-first order.

        Raises
        ------
        InvalidAmountError
            If ``amount`` is not a number.
        """
        threshold = to_money(amount)
        with self._lock:
            matches = [t for t in reversed(self.transactions) if t.amount > threshold]
        return sorted(matches, key=lambda t: t.amount, reverse=True)

    def account_history(self, account_id: int) -> list[Transaction]:
        """Every transaction touching the account, oldest first."""
        with self._lock:
            self.get_account(account_id)
            positions = self._account_transactions.get(account_id, [])
            return [self.transactions[i] for i in positions]

    def account_summary(self, account_id: int) -> AccountSummary:
        """Totals of deposits, withdrawals and transfers for one account."""
        with self._lock:
            history = self.account_history(account_id)

        def total(matches: Callable[[Transaction], bool]) -> Decimal:
            return money_sum(t.amount for t in history if matches(t))

        return AccountSummary(
            account_id=account_id,
            total_transactions=len(history),
            total_deposits=total(lambda t: isinstance(t, Deposit)),
            total_withdrawals=total(lambda t: isinstance(t, Withdrawal)),
            total_sent=total(lambda t: isinstance(t, Transfer) and t.from_account == account_id),
            total_received=total(lambda t: isinstance(t, Transfer) and t.to_account == account_id),
        )

    # Reporting
    def compute_aggregates(self) -> LedgerAggregates:
        """System-wide balance and flow totals."""
        with self._lock:
            total_balance = money_sum(a.balance for a in self.accounts.values())
            average = money_average(total_balance, len(self.accounts))

            by_type = {kind.value: 0 for kind in AccountType}
            for account in self.accounts.values():
                by_type[account.account_type.value] += 1

            return LedgerAggregates(
                total_balance=total_balance,
                average_balance=average,
                total_deposits=self._total(Deposit),
                total_withdrawals=self._total(Withdrawal),
                total_transfers=self._total(Transfer),
                counts=self.summary(),
                accounts_by_type=by_type,
            )

    def summary(self) -> dict[str, int]:
        """Return summary counts of all entities."""
        with self._lock:
            return {
                "customers": len(self.customers),
                "accounts": len(self.accounts),
                "transactions": len(self.transactions),
            }

    def clear_all(self) -> None:
        """Empty every collection. Id counters keep counting."""
        with self._lock:
            self.customers.clear()
            self.accounts.clear()
            self.transactions.clear()
            self._customer_accounts.clear()
            self._account_transactions.clear()
            self._transaction_positions.clear()

            logger.warning("Cleared all ledger data")
            self._emit("ledger.cleared", None, {})

    # Subscriptions
    def subscribe(self, listener: Listener) -> None:
        """Register a callable that receives an ``Event`` after each committed change."""
        with self._lock:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    # Internals
    def _next_id(self, kind: str) -> int:
        value = self._next_ids[kind]
        self._next_ids[kind] = value + 1
        return value

    def _amount(self, amount: Decimal | int | float | str) -> Decimal:
        try:
            return validate_amount(amount, self.config)
        except ValidationError as exc:
            raise self._reject(exc)

    def _check_customer(self, name: str, age: int, email: str, contact: str) -> None:
        try:
            validate_customer(name, age, email, contact, self.config)
        except ValidationError as exc:
            raise self._reject(exc)

    def _check_unique_email(self, email: str, exclude: int | None = None) -> None:
        existing = self.find_customer_by_email(email)
        if existing is not None and existing.customer_id != exclude:
            raise self._reject(ValidationError(
                f"Customer with email {email} already exists"
            ))

    def _require_customer(self, customer_id: int) -> Customer:
        try:
            return self.get_customer(customer_id)
        except EntityNotFoundError as exc:
            raise self._reject(exc)

    def _require_account(self, account_id: int) -> Account:
        try:
            return self.get_account(account_id)
        except EntityNotFoundError as exc:
            raise self._reject(exc)

    def _checked(
        self,
        operation: Callable[[Decimal, Decimal], Decimal],
        balance: Decimal,
        amount: Decimal,
    ) -> Decimal:
        try:
            return operation(balance, amount)
        except InvalidAmountError as exc:
            raise self._reject(exc)

    def _record(self, txn: Transaction) -> None:
        position = len(self.transactions)
        self.transactions.append(txn)
        self._transaction_positions[txn.transaction_id] = position
        for account_id in (txn.from_account, txn.to_account):
            if account_id is not None:
                self._account_transactions.setdefault(account_id, []).append(position)
        self._emit("transaction.created", txn.transaction_id, record_to_dict(txn))

    def _total(self, variant: type) -> Decimal:
        return money_sum(t.amount for t in self.transactions if isinstance(t, variant))

    def _reject(self, exc: LedgerError) -> LedgerError:
        logger.warning("Rejected: %s", exc)
        return exc

    def _emit(self, event_type: str, subject: int | None, data: dict) -> None:
        if not self._listeners:
            return
        event = Event(
            event_id=self._next_id("event"),
            event_type=event_type,
            event_time=self.clock(),
            subject=subject,
            data=data,
        )
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Listener %r failed on %s", listener, event_type)
