from __future__ import annotations

import logging
from collections import defaultdict
from typing import Iterable, Mapping, Optional, Sequence

from ..common.datetime_utils import date_key, parse_loose_date
from .field_matcher import FieldMatcher, parse_numeric_value
from .model import SalesRecord
from .repository import SalesRow

logger = logging.getLogger(__name__)


class SalesIngestService:
    """Turns raw POS rows into typed records and daily service-charge pools."""

    def __init__(self, matcher: Optional[FieldMatcher] = None):
        self._matcher = matcher or FieldMatcher()

    def normalize_rows(self, rows: Iterable[Mapping[str, str]]) -> list[SalesRecord]:
        """Resolve headers once per distinct header set and build typed records."""
        records: list[SalesRecord] = []
        resolved_for: dict[tuple[str, ...], dict[str, Optional[str]]] = {}

        for row in rows:
            headers = tuple(row.keys())
            mapping = resolved_for.get(headers)
            if mapping is None:
                mapping = self._matcher.resolve(list(headers))
                resolved_for[headers] = mapping
                logger.debug("Sales headers %s resolved to %s", headers, mapping)

            def read(field: str) -> Optional[str]:
                header = mapping.get(field)
                return row.get(header) if header is not None else None

            parsed = parse_loose_date(read("date"))
            records.append(
                SalesRecord(
                    date_key=date_key(parsed) if parsed else None,
                    total=parse_numeric_value(read("total")),
                    service_amount=parse_numeric_value(read("service_amount")),
                    cost=parse_numeric_value(read("cost")),
                )
            )
        return records

    def _as_records(self, rows: Iterable[SalesRow]) -> Sequence[SalesRecord]:
        rows = list(rows)
        raw = [r for r in rows if not isinstance(r, SalesRecord)]
        typed = [r for r in rows if isinstance(r, SalesRecord)]
        return typed + self.normalize_rows(raw)

    def build_daily_service_charge_totals(self, rows: Iterable[SalesRow]) -> dict[str, float]:
        """Service-charge pool per date key.

        Amounts are rounded to cents and de-duplicated per day before summing, so a
        transaction exported twice is only counted once.
        """
        amounts: dict[str, list[float]] = defaultdict(list)
        for record in self._as_records(rows):
            if not record.date_key or record.service_amount <= 0:
                continue
            amounts[record.date_key].append(record.service_amount)

        pools: dict[str, float] = {}
        for key, values in amounts.items():
            total = sum(v for v in sorted({round(v, 2) for v in values}) if v > 0)
            if total > 0:
                pools[key] = total
        return pools
