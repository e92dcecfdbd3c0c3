from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def find_first(self, *, name: str, date_key: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def replace_all(self, records: Iterable[AttendanceRecord]) -> int:
        """Bulk import: drop every stored record and keep only ``records``.

        Returns the number of records stored.
        """

        raise NotImplementedError

    def upsert(self, record: AttendanceRecord) -> None:
        """Manual edit: overwrite the first record for (name, date) or append."""

        raise NotImplementedError
