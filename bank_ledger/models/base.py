"""Base models shared across the ledger."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Event:
    """Change notification delivered to store subscribers."""

    event_id: int
    event_type: str  # entity.action (e.g., transaction.created)
    event_time: datetime
    subject: int | None  # Entity ID affected
    data: dict
    metadata: dict = field(default_factory=dict)
