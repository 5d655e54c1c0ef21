from __future__ import annotations

from datetime import date

import pytest

from homeschool_tracker.core.exceptions import NotFoundError, ValidationError
from homeschool_tracker.roster.model import Child, Subject
from homeschool_tracker.school_year.model import SchoolYear


def test_fresh_store_is_seeded(store):
    children = store.list_children()
    subjects = store.list_subjects()

    assert [c.id for c in children] == ["child-a", "child-b", "child-c"]
    assert [c.order for c in children] == [0, 1, 2]
    assert [s.name for s in subjects] == [
        "Math", "Reading", "Writing", "Science", "History", "Bible", "Elective", "PE",
    ]
    assert store.get_school_year() == SchoolYear(date(2024, 9, 1), date(2025, 6, 30))


def test_add_child_appends_with_next_order(store):
    child_id = store.add_child("  Dana  ")

    child = store.get_child(child_id)
    assert child.name == "Dana"
    assert child.order == 3
    assert store.list_children()[-1].id == child_id


@pytest.mark.parametrize("name", ["", "   ", None])
def test_add_child_rejects_blank_name(store, name):
    with pytest.raises(ValidationError):
        store.add_child(name)
    assert len(store.list_children()) == 3


def test_add_subject_ids_are_unique(store):
    ids = {store.add_subject(f"Extra {i}") for i in range(5)}
    assert len(ids) == 5
    assert all(i.startswith("subject-") for i in ids)


def test_listing_sorts_by_order_and_keeps_insertion_on_ties(store):
    store.update_child(Child(id="child-a", name="Child A", order=5))
    store.update_child(Child(id="child-c", name="Child C", order=1))

    # child-b and child-c tie on order 1; child-b was inserted first
    assert [c.id for c in store.list_children()] == ["child-b", "child-c", "child-a"]


def test_update_child_replaces_name_and_order(store):
    store.update_child(Child(id="child-b", name="Bea", order=9))
    assert store.get_child("child-b") == Child(id="child-b", name="Bea", order=9)


def test_update_missing_child_raises_not_found(store):
    with pytest.raises(NotFoundError):
        store.update_child(Child(id="nope", name="X", order=0))


def test_update_subject_rejects_blank_name(store):
    with pytest.raises(ValidationError):
        store.update_subject(Subject(id="math", name=" ", order=0))
    assert store.get_subject("math").name == "Math"


def test_update_subject_rejects_non_integer_order(store):
    with pytest.raises(ValidationError):
        store.update_subject(Subject(id="math", name="Math", order="first"))


@pytest.mark.parametrize("order", [1.9, True, None])
def test_update_child_rejects_fractional_or_non_numeric_order(store, order):
    with pytest.raises(ValidationError):
        store.update_child(Child(id="child-a", name="Child A", order=order))
    assert store.get_child("child-a").order == 0


def test_update_child_accepts_whole_float_order(store):
    store.update_child(Child(id="child-a", name="Child A", order=2.0))
    assert store.get_child("child-a").order == 2


def test_delete_missing_entities_raise_not_found(store):
    with pytest.raises(NotFoundError):
        store.delete_child("ghost")
    with pytest.raises(NotFoundError):
        store.delete_subject("ghost")


def test_delete_child_cascades_records(store):
    store.toggle_record("2024-09-03", "child-a", "math")
    store.toggle_record("2024-09-04", "child-a", "reading")
    store.toggle_record("2024-09-03", "child-b", "math")

    store.delete_child("child-a")

    assert store.get_records_by_child("child-a") == []
    assert [r.child_id for r in store.get_records_by_date("2024-09-03")] == ["child-b"]


def test_delete_subject_cascades_records(store):
    store.toggle_record("2024-09-03", "child-a", "math")
    store.toggle_record("2024-09-03", "child-a", "reading")

    store.delete_subject("math")

    assert store.get_records_by_subject("math") == []
    assert len(store.get_records_by_date_and_child("2024-09-03", "child-a")) == 1


def test_update_school_year_upserts_singleton(store, backend):
    store.update_school_year(SchoolYear(start_date="2024-08-15", end_date="2025-05-30"))

    assert store.get_school_year() == SchoolYear(date(2024, 8, 15), date(2025, 5, 30))
    assert backend.school_year.count() == 1


def test_update_school_year_rejects_reversed_dates(store):
    with pytest.raises(ValidationError):
        store.update_school_year(SchoolYear(start_date=date(2025, 1, 1), end_date=date(2024, 1, 1)))
    assert store.get_school_year().start_date == date(2024, 9, 1)


def test_records_range_rejects_reversed_or_malformed_dates(store):
    with pytest.raises(ValidationError):
        store.get_records_by_date_range("2024-09-30", "2024-09-01")
    with pytest.raises(ValidationError):
        store.get_records_by_date_range("09/01/2024", "2024-09-30")


def test_clear_restores_defaults(store, summary_service):
    store.add_child("Extra")
    store.delete_subject("pe")
    store.update_school_year(SchoolYear(date(2020, 1, 1), date(2020, 12, 31)))
    store.toggle_record("2024-09-03", "child-a", "math")

    store.clear()

    assert [c.id for c in store.list_children()] == ["child-a", "child-b", "child-c"]
    assert len(store.list_subjects()) == 8
    assert store.get_school_year() == SchoolYear(date(2024, 9, 1), date(2025, 6, 30))
    for cs in summary_service.summarize("2000-01-01", "2099-12-31"):
        assert cs.total_days == 0
        assert set(cs.subject_totals.values()) == {0}
