"""Customer model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Customer:
    """Bank customer entity."""

    customer_id: int
    name: str
    age: int
    email: str
    contact: str
    updated_at: datetime | None = None
