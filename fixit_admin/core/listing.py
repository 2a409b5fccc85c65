"""In-memory list-view composition: tabs, filters, search and pagination.

Every listing screen of the dashboard works the same way: fetch the whole
collection from the backend, narrow it down, then slice out one page.

    view = ListView(
        search_fields=("name", "email"),
        tabs={"total": everything, "active": status_in("Active", "Online")},
    )
    result = view.apply(records, ListQuery(search="jo", tab="active", page=2))

Order of application is tab -> filters -> date -> search -> paginate. Tab
counts are always computed over the full collection. A filter given as a list
keeps records whose field is any of the listed values; an empty list does not
filter at all.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Callable, Mapping, Sequence

from fixit_admin.core.exceptions import ValidationError
from fixit_admin.core.pagination import PageMeta, paginate

Record = Mapping[str, Any]
Predicate = Callable[[Record], bool]

# Filter values meaning "do not filter on this field".
NO_FILTER = ("", "All", "all")


def everything(record: Record) -> bool:
    return True


def status_in(*statuses: str, field_name: str = "status") -> Predicate:
    """Predicate matching records whose *field_name* is one of *statuses*."""
    wanted = set(statuses)

    def _pred(record: Record) -> bool:
        return record.get(field_name) in wanted

    return _pred


def matches_search(record: Record, term: str | None, fields: Sequence[str]) -> bool:
    """Case-insensitive substring match of *term* on any of *fields*.

    List-valued fields match when any element matches. A blank term matches
    every record; a missing field never matches.
    """
    if not term or not term.strip():
        return True
    needle = term.strip().lower()
    for name in fields:
        value = record.get(name)
        if value is None:
            continue
        values = value if isinstance(value, (list, tuple)) else [value]
        if any(needle in str(v).lower() for v in values if v is not None):
            return True
    return False


def parse_day(value: Any) -> date | None:
    """Return the calendar day of an ISO date/datetime string, or None."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        return None


@dataclass
class ListQuery:
    search: str | None = None
    tab: str | None = None
    filters: dict[str, str | list[str] | None] = field(default_factory=dict)
    day: str | None = None
    # Inclusive day range, used by screens with a from/to picker.
    since: str | None = None
    until: str | None = None
    page: int = 1
    limit: int = 10


@dataclass
class ListResult:
    items: list[dict[str, Any]]
    meta: PageMeta
    tabs: dict[str, int]


@dataclass
class ListView:
    """Declarative description of one list screen."""

    search_fields: tuple[str, ...] = ()
    # Matched as case-sensitive substrings, e.g. order ids typed verbatim.
    id_fields: tuple[str, ...] = ()
    # First tab is the default and should match everything.
    tabs: dict[str, Predicate] = field(default_factory=dict)
    filter_fields: tuple[str, ...] = ()
    date_field: str | None = None

    def tab_counts(self, records: Sequence[Record]) -> dict[str, int]:
        return {name: sum(1 for r in records if pred(r)) for name, pred in self.tabs.items()}

    def _tab_predicate(self, tab: str | None) -> Predicate:
        if not self.tabs or not tab:
            return everything
        try:
            return self.tabs[tab]
        except KeyError:
            raise ValidationError(
                f"Unknown tab '{tab}'",
                fields={"tab": f"Expected one of: {', '.join(self.tabs)}"},
            ) from None

    def _matches_filters(self, record: Record, filters: Mapping[str, Any]) -> bool:
        for name in self.filter_fields:
            wanted = filters.get(name)
            if isinstance(wanted, (list, tuple)):
                wanted = [w for w in wanted if w not in NO_FILTER]
                if wanted and str(record.get(name)) not in wanted:
                    return False
                continue
            if wanted is None or wanted in NO_FILTER:
                continue
            if str(record.get(name)) != wanted:
                return False
        return True

    def _matches_day(
        self, record: Record, day: date | None, since: date | None, until: date | None
    ) -> bool:
        if not self.date_field or (day is None and since is None and until is None):
            return True
        value = parse_day(record.get(self.date_field))
        if value is None:
            return False
        if day is not None and value != day:
            return False
        if since is not None and value < since:
            return False
        return until is None or value <= until

    def _matches_term(self, record: Record, term: str | None) -> bool:
        if not term or not term.strip():
            return True
        if matches_search(record, term, self.search_fields):
            return True
        raw = term.strip()
        return any(raw in str(record.get(name, "")) for name in self.id_fields)

    def filter(self, records: Sequence[Record], query: ListQuery) -> list[dict[str, Any]]:
        pred = self._tab_predicate(query.tab)
        # An unparseable date is ignored rather than rejected.
        day = parse_day(query.day) if query.day else None
        since = parse_day(query.since) if query.since else None
        until = parse_day(query.until) if query.until else None
        out = []
        for record in records:
            if not pred(record):
                continue
            if not self._matches_filters(record, query.filters):
                continue
            if not self._matches_day(record, day, since, until):
                continue
            if not self._matches_term(record, query.search):
                continue
            out.append(dict(record))
        return out

    def apply(self, records: Sequence[Record], query: ListQuery) -> ListResult:
        rows = self.filter(records, query)
        items, meta = paginate(rows, query.page, query.limit)
        return ListResult(items=items, meta=meta, tabs=self.tab_counts(records))
