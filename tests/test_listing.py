import pytest

from fixit_admin.core.exceptions import ValidationError
from fixit_admin.core.listing import (
    ListQuery,
    ListView,
    everything,
    matches_search,
    parse_day,
    status_in,
)

RECORDS = [
    {"id": "A-1", "name": "Jane Doe", "email": "jane@example.com", "status": "Active", "tags": ["Plumbing"]},
    {"id": "A-2", "name": "John Smith", "email": "john@example.com", "status": "Inactive", "tags": ["Electrical"]},
    {"id": "A-3", "name": "Janet Roe", "email": "janet@example.com", "status": "Online", "tags": []},
    {"id": "A-4", "name": "Mark Poe", "email": "mark@example.com", "status": "Offline", "tags": ["Plumbing", "Tiling"]},
]

VIEW = ListView(
    search_fields=("name", "email", "tags"),
    id_fields=("id",),
    tabs={
        "total": everything,
        "active": status_in("Active", "Online"),
        "inactive": status_in("Inactive", "Offline"),
    },
    filter_fields=("status",),
)


def test_search_is_case_insensitive():
    assert matches_search(RECORDS[0], "JANE", ("name",))
    assert not matches_search(RECORDS[1], "jane", ("name",))


def test_blank_search_matches_everything():
    assert matches_search(RECORDS[0], "", ("name",))
    assert matches_search(RECORDS[0], "   ", ("name",))
    assert matches_search(RECORDS[0], None, ("name",))


def test_search_matches_any_list_element():
    assert matches_search(RECORDS[3], "tiling", ("tags",))
    assert not matches_search(RECORDS[2], "tiling", ("tags",))


def test_missing_field_never_matches():
    assert not matches_search({"name": "x"}, "x", ("email",))


def test_tab_counts_ignore_search_and_filters():
    result = VIEW.apply(RECORDS, ListQuery(search="jane", tab="active"))

    assert result.tabs == {"total": 4, "active": 2, "inactive": 2}
    assert [r["id"] for r in result.items] == ["A-1", "A-3"]


def test_inactive_tab_covers_offline():
    result = VIEW.apply(RECORDS, ListQuery(tab="inactive"))

    assert [r["status"] for r in result.items] == ["Inactive", "Offline"]


def test_unknown_tab_is_rejected():
    with pytest.raises(ValidationError) as exc:
        VIEW.apply(RECORDS, ListQuery(tab="archived"))
    assert "tab" in exc.value.fields


@pytest.mark.parametrize("value", [None, "", "All", "all"])
def test_all_filter_value_disables_the_filter(value):
    result = VIEW.apply(RECORDS, ListQuery(filters={"status": value}))

    assert result.meta.total == 4


def test_filter_matches_exact_value():
    result = VIEW.apply(RECORDS, ListQuery(filters={"status": "Online"}))

    assert [r["id"] for r in result.items] == ["A-3"]


def test_id_search_is_case_sensitive():
    assert VIEW.apply(RECORDS, ListQuery(search="A-2")).meta.total == 1
    assert VIEW.apply(RECORDS, ListQuery(search="a-2")).meta.total == 0


def test_search_narrows_before_pagination():
    many = [{"id": str(i), "name": f"Customer {i}"} for i in range(1, 31)]
    view = ListView(search_fields=("name",))

    result = view.apply(many, ListQuery(search="customer 1", page=1, limit=5))

    # "Customer 1" and "Customer 10".."Customer 19"
    assert result.meta.total == 11
    assert len(result.items) == 5
    assert result.tabs == {}


def test_date_filter_compares_calendar_days():
    records = [
        {"id": "1", "placed": "2024-03-01T10:00:00Z"},
        {"id": "2", "placed": "2024-03-02T00:30:00Z"},
        {"id": "3", "placed": None},
    ]
    view = ListView(date_field="placed")

    assert [r["id"] for r in view.filter(records, ListQuery(day="2024-03-01"))] == ["1"]
    # Unparseable day is ignored.
    assert len(view.filter(records, ListQuery(day="yesterday-ish"))) == 3


def test_list_filter_keeps_any_listed_value():
    result = VIEW.apply(RECORDS, ListQuery(filters={"status": ["Online", "Offline"]}))

    assert [r["id"] for r in result.items] == ["A-3", "A-4"]


def test_empty_list_filter_keeps_everything():
    assert VIEW.apply(RECORDS, ListQuery(filters={"status": []})).meta.total == 4


def test_day_range_is_inclusive_at_both_ends():
    records = [
        {"id": "1", "placed": "2024-03-01T23:59:00Z"},
        {"id": "2", "placed": "2024-03-02T08:00:00Z"},
        {"id": "3", "placed": "2024-03-03T00:00:00Z"},
        {"id": "4", "placed": "2024-03-04T12:00:00Z"},
    ]
    view = ListView(date_field="placed")

    rows = view.filter(records, ListQuery(since="2024-03-01", until="2024-03-03"))
    assert [r["id"] for r in rows] == ["1", "2", "3"]
    assert [r["id"] for r in view.filter(records, ListQuery(since="2024-03-03"))] == ["3", "4"]


def test_parse_day_variants():
    assert str(parse_day("2024-03-01T23:59:00Z")) == "2024-03-01"
    assert str(parse_day("2024-03-01")) == "2024-03-01"
    assert parse_day("not a date") is None
    assert parse_day(None) is None
