"""Query options for list calls.

An ``Option`` is an ordered bundle of query pairs. ``apply_options`` merges a
sequence of them into one list, in order, appending every pair. Repeating a
key therefore sends it twice (``?count=5&count=10``) rather than letting the
last one win; that mirrors adding to a query string and is what the API has
always received from this client.

    client.sent(page(0, 20))
    client.received(between(last_week, now), page(20, 20))
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List, Tuple

from ..common.timestamps import format_query_timestamp

QueryPairs = Tuple[Tuple[str, str], ...]


@dataclass(frozen=True)
class Option:
    params: QueryPairs = ()

    def apply(self, query: List[Tuple[str, str]]) -> None:
        query.extend(self.params)


def apply_options(options: Iterable[Option]) -> List[Tuple[str, str]]:
    query: List[Tuple[str, str]] = []
    for opt in options:
        opt.apply(query)
    return query


def page(start_index: int, count: int) -> Option:
    return Option((("startindex", str(int(start_index))), ("count", str(int(count)))))


def between(start: datetime, finish: datetime) -> Option:
    return Option(
        (
            ("start", format_query_timestamp(start)),
            ("finish", format_query_timestamp(finish)),
        )
    )


def filter_by_account(reference: str) -> Option:
    return Option((("filterBy", "account"), ("filterValue", reference)))


def account_reference(reference: str) -> Option:
    return Option((("accountReference", reference),))
