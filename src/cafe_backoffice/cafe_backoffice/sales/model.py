from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SalesRecord:
    """Typed sales row resolved from a POS export by the field matcher."""

    date_key: Optional[str]
    total: float = 0.0
    service_amount: float = 0.0
    cost: float = 0.0
