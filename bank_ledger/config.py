"""Configuration management for bank-ledger."""

from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path

from bank_ledger.exceptions import ConfigurationError


@dataclass
class ValidationConfig:
    """Input validation rules.

    Amount positivity is always enforced. The remaining rules (customer
    fields, amount ceiling, duplicate e-mails, sanitization) only apply
    when ``strict`` is enabled.
    """

    strict: bool = False
    min_age: int = 18
    max_age: int = 120
    max_amount: Decimal = Decimal("999999999.99")


@dataclass
class ExportConfig:
    """Snapshot export configuration."""

    output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty: bool = True
    filename_prefix: str = "banking-system-data"


@dataclass
class DisplayConfig:
    """Limits used by presentation layers when listing recent activity."""

    recent_activity_limit: int = 5
    recent_transactions_limit: int = 10


@dataclass
class LedgerConfig:
    """Main configuration for bank-ledger."""

    validation: ValidationConfig = field(default_factory=ValidationConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "LedgerConfig":
        """Create config from environment variables."""
        import os

        validation = ValidationConfig(
            strict=os.getenv("LEDGER_STRICT_VALIDATION", "false").lower() == "true",
        )

        export = ExportConfig(
            output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty=os.getenv("PRETTY_JSON", "true").lower() == "true",
            filename_prefix=os.getenv("EXPORT_PREFIX", "banking-system-data"),
        )

        display = DisplayConfig(
            recent_activity_limit=_int_env("RECENT_ACTIVITY_LIMIT", 5),
            recent_transactions_limit=_int_env("RECENT_TRANSACTIONS_LIMIT", 10),
        )

        seed = os.getenv("SEED")

        return cls(
            validation=validation,
            export=export,
            display=display,
            seed=_int_env("SEED", 0) if seed else None,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )


def _int_env(name: str, default: int) -> int:
    """Read an integer environment variable."""
    import os

    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc
