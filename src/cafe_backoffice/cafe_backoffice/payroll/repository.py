from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import PayrollRecord


class PayrollSnapshotRepository(Protocol):
    """Payroll runs a user explicitly saved; everything else is recomputed."""

    def save(self, *, start: str, end: str, records: Sequence[PayrollRecord]) -> None:
        raise NotImplementedError

    def get(self, *, start: str, end: str) -> Optional[Sequence[PayrollRecord]]:
        raise NotImplementedError


class InMemoryPayrollSnapshotRepository:
    def __init__(self):
        self._runs: dict[tuple[str, str], tuple[PayrollRecord, ...]] = {}

    def save(self, *, start: str, end: str, records: Sequence[PayrollRecord]) -> None:
        self._runs[(start, end)] = tuple(records)

    def get(self, *, start: str, end: str) -> Optional[Sequence[PayrollRecord]]:
        run = self._runs.get((start, end))
        return list(run) if run is not None else None
