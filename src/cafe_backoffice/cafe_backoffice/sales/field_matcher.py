"""Resolve loosely named POS export headers to a fixed sales schema.

Each field has an ordered rule: exact header names are tried first, then the
first header containing an ``include`` fragment and none of the ``exclude``
fragments. Headers are compared trimmed and lower-cased.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence


@dataclass(frozen=True)
class FieldRule:
    field: str
    include: tuple[str, ...]
    exclude: tuple[str, ...] = ()
    exact: tuple[str, ...] = ()


DATE_RULE = FieldRule(
    field="date",
    include=("date",),
    exact=("date", "transaction date", "sales date", "order date"),
)
SERVICE_RULE = FieldRule(
    field="service_amount",
    include=("service",),
    exact=("service amount",),
)
TOTAL_RULE = FieldRule(
    field="total",
    include=("total",),
    exclude=("service", "profit", "tax", "vat", "charge", "discount", "fee", "cost"),
    exact=("total",),
)
COST_RULE = FieldRule(
    field="cost",
    include=("cogs", "cost"),
    exclude=("service", "discount", "charge"),
    exact=("cogs", "cost of goods", "cost"),
)

DEFAULT_RULES: tuple[FieldRule, ...] = (DATE_RULE, SERVICE_RULE, TOTAL_RULE, COST_RULE)

_NON_NUMERIC_RE = re.compile(r"[^0-9.\-]+")
_NUMBER_PREFIX_RE = re.compile(r"-?\d*\.?\d+|-?\d+\.?")


def normalize_header(header: str) -> str:
    return (header or "").strip().lower()


def parse_numeric_value(value: Optional[str]) -> float:
    """Read an amount such as ``₱1,234.50``; anything unreadable is 0."""
    if value is None:
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    cleaned = _NON_NUMERIC_RE.sub("", str(value))
    match = _NUMBER_PREFIX_RE.match(cleaned)
    if not match:
        return 0.0
    try:
        return float(match.group(0))
    except ValueError:
        return 0.0


class FieldMatcher:
    def __init__(self, rules: Sequence[FieldRule] = DEFAULT_RULES):
        self._rules = {rule.field: rule for rule in rules}

    def resolve_header(self, headers: Sequence[str], field: str) -> Optional[str]:
        """Return the original header that supplies ``field``, or None."""
        rule = self._rules.get(field)
        if rule is None:
            raise KeyError(field)

        normalized = [(h, normalize_header(h)) for h in headers]
        for candidate in rule.exact:
            for original, key in normalized:
                if key == candidate:
                    return original

        for original, key in normalized:
            if any(fragment in key for fragment in rule.include):
                if any(fragment in key for fragment in rule.exclude):
                    continue
                return original
        return None

    def resolve(self, headers: Sequence[str]) -> dict[str, Optional[str]]:
        return {field: self.resolve_header(headers, field) for field in self._rules}

    def value(self, row: Mapping[str, str], field: str) -> Optional[str]:
        header = self.resolve_header(list(row.keys()), field)
        return row.get(header) if header is not None else None
