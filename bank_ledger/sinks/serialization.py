"""JSON encoding of ledger records shared by the sinks and store events."""

import json
from dataclasses import fields, is_dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any


def record_to_dict(record: Any) -> dict[str, Any]:
    """Convert a ledger record to a JSON-ready dict.

    Dataclass fields are read directly, so fields declared with
    ``init=False`` (a transaction's ``transaction_type`` and its unused
    account reference) are included. Mappings pass through with their
    values converted; anything else is wrapped as ``{"value": str(obj)}``.
    """
    if is_dataclass(record) and not isinstance(record, type):
        return {f.name: json_value(getattr(record, f.name)) for f in fields(record)}
    if isinstance(record, dict):
        return {key: json_value(value) for key, value in record.items()}
    return {"value": str(record)}


def json_value(value: Any) -> Any:
    """Convert one value: money to its two-place string, enums to their
    value, dates and datetimes to ISO 8601."""
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: json_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [json_value(v) for v in value]
    return value


def encode(data: Any, pretty: bool = True) -> str:
    """Render data as JSON text, indented by two spaces when ``pretty``."""
    return json.dumps(data, indent=2 if pretty else None, ensure_ascii=False, default=str)
