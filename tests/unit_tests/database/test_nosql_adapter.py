"""Tests for the SQLite document adapter."""
import sqlite3
from datetime import datetime, timezone

import pydantic
import pytest

from database import NoSQLAdapter, validate_document


def insert(store: NoSQLAdapter, collection: str, **document):
    store.create_document(collection, document)
    return document


def test_create_and_get_round_trip(record_store):
    insert(record_store, "calendar", id="e1", title="Open day", desc=None, date=datetime(2024, 6, 1, tzinfo=timezone.utc))

    stored = record_store.get_document("calendar", "e1")

    assert stored == {"id": "e1", "title": "Open day", "desc": None, "date": "2024-06-01T00:00:00+00:00"}


def test_get_missing_document_returns_none(record_store):
    assert record_store.get_document("videos", "missing") is None


def test_duplicate_id_is_rejected(record_store):
    insert(record_store, "lrmi", id="r1", fileName="a.pdf", year=2024, quarter=1)

    with pytest.raises(sqlite3.IntegrityError):
        insert(record_store, "lrmi", id="r1", fileName="b.pdf", year=2024, quarter=2)


def test_unknown_collection_is_rejected(record_store):
    with pytest.raises(ValueError):
        record_store.query_documents("podcasts")


def test_query_filters_on_top_level_fields(record_store):
    insert(record_store, "newsletter", id="n1", fileName="a.pdf", year=2023, month=5, title="May (PDF)")
    insert(record_store, "newsletter", id="n2", fileName="b.pdf", year=2024, month=1, title="Jan (PDF)")
    insert(record_store, "newsletter", id="n3", fileName="c.pdf", year=2024, month=2, title="Feb (PDF)")

    found = record_store.query_documents("newsletter", {"year": 2024})

    assert [doc["id"] for doc in found] == ["n2", "n3"]
    assert record_store.count_documents("newsletter") == 3
    assert record_store.query_documents("newsletter", {"id": "n1"})[0]["title"] == "May (PDF)"


def test_query_limit_and_offset(record_store):
    for number in range(5):
        insert(record_store, "contacts", id=f"c{number}", name=f"Contact {number}")

    page = record_store.query_documents("contacts", limit=2, offset=1)

    assert [doc["id"] for doc in page] == ["c1", "c2"]
    assert [doc["id"] for doc in record_store.query_documents("contacts", offset=3)] == ["c3", "c4"]


def test_delete_reports_whether_a_row_was_removed(record_store):
    insert(record_store, "contacts", id="c1", name="Front desk")

    assert record_store.delete_document("contacts", "c1") is True
    assert record_store.delete_document("contacts", "c1") is False


def test_append_to_list_keeps_order(record_store):
    insert(record_store, "associates", id="p1", img="x.jpg", firstName="Ada", lastName="Lovelace", docs=[])

    assert record_store.append_to_list("associates", "p1", "docs", {"title": "one"})
    assert record_store.append_to_list("associates", "p1", "docs", {"title": "two"})

    docs = record_store.get_document("associates", "p1")["docs"]
    assert [doc["title"] for doc in docs] == ["one", "two"]


def test_append_to_missing_document_returns_false(record_store):
    assert record_store.append_to_list("associates", "nobody", "docs", {"title": "one"}) is False


def test_collections_survive_reinitialization(tmp_path):
    path = str(tmp_path / "archive.db")
    store = NoSQLAdapter(path)
    store.init_collections()
    insert(store, "contacts", id="c1", name="Front desk")

    reopened = NoSQLAdapter(path)
    reopened.init_collections()

    assert reopened.count_documents("contacts") == 1


def test_validate_document_returns_camel_case():
    document = validate_document(
        "videos",
        {
            "id": "v1",
            "eventName": "gala",
            "fileName": "k.mp4",
            "title": "Toast",
            "createdAt": "2024-06-01T10:00:00",
        },
    )

    assert document["eventName"] == "gala"
    assert document["desc"] is None
    assert document["createdAt"] == datetime(2024, 6, 1, 10, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "collection, document",
    [
        ("lrmi", {"id": "r1", "fileName": "a.pdf", "year": 2024, "quarter": 5}),
        ("newsletter", {"id": "n1", "fileName": "a.pdf", "year": 2024, "month": 13, "title": "x"}),
        ("associates", {"id": "p1", "img": "a.jpg", "firstName": "", "lastName": "Lovelace"}),
        ("videos", {"id": "v1", "eventName": "a/b", "fileName": "k.mp4", "title": "t", "createdAt": "2024-06-01T10:00:00Z"}),
    ],
)
def test_validate_document_rejects_bad_fields(collection, document):
    with pytest.raises(pydantic.ValidationError):
        validate_document(collection, document)


def test_date_only_calendar_entry_is_utc_midnight():
    document = validate_document("calendar", {"id": "e1", "title": "Open day", "date": "2024-06-18"})

    assert document["date"] == datetime(2024, 6, 18, tzinfo=timezone.utc)
