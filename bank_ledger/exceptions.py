"""Custom exception hierarchy for bank-ledger."""


class LedgerError(Exception):
    """Base exception for all bank-ledger errors."""


class EntityNotFoundError(LedgerError):
    """Raised when a referenced customer, account or transaction does not exist."""


class InsufficientBalanceError(LedgerError):
    """Raised when a withdrawal or transfer exceeds the available balance."""


class ValidationError(LedgerError):
    """Raised when input fails validation.

    Parameters
    ----------
    messages : str | list[str]
        One message or every rule that failed.
    """

    def __init__(self, messages: str | list[str]) -> None:
        if isinstance(messages, str):
            messages = [messages]
        self.messages = list(messages)
        super().__init__("; ".join(self.messages))


class InvalidAmountError(ValidationError):
    """Raised when a monetary amount is not acceptable."""


class ConfigurationError(LedgerError):
    """Raised when configuration is invalid or missing."""


class SinkError(LedgerError):
    """Raised when a sink operation fails."""
