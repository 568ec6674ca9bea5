import pytest
from pydantic import ValidationError

from schema.contact import ContactFormIn, StatusUpdateIn
from util.enum import STATUS_COLORS, STATUS_LABELS, SubmissionStatus, status_label


def _form(**overrides):
    data = {"name": "Ana", "email": "ana@example.com", "message": "0123456789"}
    data.update(overrides)
    return data


def _failing_fields(exc_info):
    return [e["loc"][-1] for e in exc_info.value.errors()]


def test_minimum_lengths_are_accepted():
    form = ContactFormIn(**_form())
    assert form.name == "Ana"
    assert form.message == "0123456789"
    assert form.phone is None


def test_two_char_name_is_rejected():
    with pytest.raises(ValidationError) as exc_info:
        ContactFormIn(**_form(name="Al"))
    assert _failing_fields(exc_info) == ["name"]


def test_nine_char_message_is_rejected():
    with pytest.raises(ValidationError) as exc_info:
        ContactFormIn(**_form(message="012345678"))
    assert _failing_fields(exc_info) == ["message"]


def test_whitespace_does_not_count_towards_length():
    with pytest.raises(ValidationError):
        ContactFormIn(**_form(name="  Al  "))


def test_phone_is_free_text_and_blank_means_absent():
    assert ContactFormIn(**_form(phone="ramal 12")).phone == "ramal 12"
    assert ContactFormIn(**_form(phone="   ")).phone is None


@pytest.mark.parametrize("email", ["ana", "ana@", "@example.com", "ana example.com"])
def test_bad_email_is_rejected(email):
    with pytest.raises(ValidationError) as exc_info:
        ContactFormIn(**_form(email=email))
    assert _failing_fields(exc_info) == ["email"]


def test_status_update_only_accepts_known_values():
    assert StatusUpdateIn(status="read").status is SubmissionStatus.read
    with pytest.raises(ValidationError):
        StatusUpdateIn(status="archived")


def test_every_status_has_label_and_color():
    assert set(STATUS_LABELS) == set(SubmissionStatus)
    assert set(STATUS_COLORS) == set(SubmissionStatus)
    assert status_label("replied") == "Respondido"
