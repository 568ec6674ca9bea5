"""
ContactOp against the database directly, without the HTTP layer.
"""
from schema.contact import ContactFormIn
from controller.contact import ContactOp
from util.enum import SubmissionStatus


def _form(**overrides):
    data = {
        "name": "Ana Silva",
        "email": "ana@example.com",
        "message": "Preciso de ajuda urgente",
    }
    data.update(overrides)
    return ContactFormIn(**data)


def test_create_assigns_increasing_ids():
    first = ContactOp.create(_form())
    second = ContactOp.create(_form(name="Bruno Costa"))
    assert second.id > first.id
    assert first.status == SubmissionStatus.new
    assert first.created_at.tzinfo is not None


def test_list_all_is_newest_first():
    first = ContactOp.create(_form())
    second = ContactOp.create(_form())
    assert [s.id for s in ContactOp.list_all()] == [second.id, first.id]


def test_get_by_id_missing_returns_none():
    assert ContactOp.get_by_id(12345) is None


def test_update_status_missing_returns_false():
    assert ContactOp.update_status(12345, SubmissionStatus.read) is False


def test_update_status_accepts_plain_values():
    created = ContactOp.create(_form())
    assert ContactOp.update_status(created.id, "replied") is True
    assert ContactOp.get_by_id(created.id).status == SubmissionStatus.replied


def test_update_status_same_value_is_noop():
    created = ContactOp.create(_form())
    assert ContactOp.update_status(created.id, SubmissionStatus.new) is True
    fetched = ContactOp.get_by_id(created.id)
    assert fetched == created


def test_count_by_status_on_empty_store():
    assert ContactOp.count_by_status() == {"new": 0, "read": 0, "replied": 0, "total": 0}
