from __future__ import annotations

from typing import Iterable, Mapping, Protocol, Sequence, Union

from .model import SalesRecord

SalesRow = Union[SalesRecord, Mapping[str, str]]


class SalesRepository(Protocol):
    def list_all(self) -> Sequence[SalesRow]:
        raise NotImplementedError

    def replace_all(self, rows: Iterable[SalesRow]) -> int:
        raise NotImplementedError


class InMemorySalesRepository:
    def __init__(self, rows: Iterable[SalesRow] = ()):
        self._rows: list[SalesRow] = list(rows)

    def list_all(self) -> Sequence[SalesRow]:
        return list(self._rows)

    def replace_all(self, rows: Iterable[SalesRow]) -> int:
        self._rows = list(rows)
        return len(self._rows)
