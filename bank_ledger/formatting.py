"""Plain-text display helpers for presentation layers."""

from decimal import Decimal

from bank_ledger.models import Deposit, Transaction, Transfer, Withdrawal

PLACEHOLDER = "-"


def format_amount(amount: Decimal) -> str:
    """Render money with two decimals, e.g. ``$1234.50``."""
    return f"${amount:.2f}"


def format_reference(account_id: int | None) -> str:
    """Render an account reference, using a neutral placeholder when absent."""
    return PLACEHOLDER if account_id is None else str(account_id)


def describe_transaction(txn: Transaction, perspective: int | None = None) -> str:
    """Describe a transaction in one line.

    Parameters
    ----------
    txn : Transaction
        The transaction to describe.
    perspective : int | None
        Account being viewed. When given, transfers are described relative
        to it ("Transfer to account 3" / "Transfer from account 1").
    """
    if not isinstance(txn, (Deposit, Withdrawal, Transfer)):
        raise TypeError(f"Unknown transaction variant: {type(txn).__name__}")

    amount = format_amount(txn.amount)
    if isinstance(txn, Deposit):
        if perspective is not None:
            return "Deposit to account"
        return f"{amount} deposited to account {txn.to_account}"
    if isinstance(txn, Withdrawal):
        if perspective is not None:
            return "Withdrawal from account"
        return f"{amount} withdrawn from account {txn.from_account}"
    if perspective == txn.from_account:
        return f"Transfer to account {txn.to_account}"
    if perspective == txn.to_account:
        return f"Transfer from account {txn.from_account}"
    return f"{amount} transferred from account {txn.from_account} to {txn.to_account}"
