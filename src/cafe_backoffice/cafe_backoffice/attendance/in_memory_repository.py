from __future__ import annotations

import threading
from typing import Iterable, Optional, Sequence

from ..employees.model import normalize_name
from .model import AttendanceRecord


class InMemoryAttendanceRepository:
    def __init__(self, records: Iterable[AttendanceRecord] = ()):
        self._lock = threading.Lock()
        self._records: list[AttendanceRecord] = list(records)

    def list_all(self) -> Sequence[AttendanceRecord]:
        return list(self._records)

    def find_first(self, *, name: str, date_key: str) -> Optional[AttendanceRecord]:
        wanted = normalize_name(name)
        for record in self._records:
            if record.name_key == wanted and record.date_key == date_key:
                return record
        return None

    def replace_all(self, records: Iterable[AttendanceRecord]) -> int:
        with self._lock:
            self._records = list(records)
            return len(self._records)

    def upsert(self, record: AttendanceRecord) -> None:
        with self._lock:
            for i, existing in enumerate(self._records):
                if existing.name_key == record.name_key and existing.date_key == record.date_key:
                    self._records[i] = record
                    return
            self._records.append(record)
