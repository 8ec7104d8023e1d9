from datetime import datetime, timezone

import pytest

from celercrea_contact.models.inquiry import (
    CONTENT_REQUIRED,
    INVALID_EMAIL,
    NAME_EMAIL_REQUIRED,
    InquiryRequest,
    build_outbound_email,
    is_bot,
    parse_inquiry,
)

NOW = datetime(2025, 3, 4, 5, 6, 7, 890000, tzinfo=timezone.utc)


def test_parse_trims_fields():
    inquiry, err = parse_inquiry(
        {"name": " Jane ", "email": " jane@example.com\n", "type": " Logo ", "msg": " hi "}
    )
    assert err is None
    assert inquiry == InquiryRequest(
        name="Jane", email="jane@example.com", type="Logo", msg="hi"
    )


def test_parse_stringifies_scalars():
    inquiry, err = parse_inquiry({"name": 123, "email": "a@b.co", "msg": 4.5})
    assert err is None
    assert inquiry.name == "123"
    assert inquiry.msg == "4.5"


@pytest.mark.parametrize(
    "data, expected",
    [
        ({"name": 0, "email": "a@b.co", "msg": "x"}, NAME_EMAIL_REQUIRED),
        ({"name": "Jane", "email": False, "msg": "x"}, NAME_EMAIL_REQUIRED),
        ({"name": "Jane", "email": "jane@example", "msg": "x"}, INVALID_EMAIL),
        ({"name": "Jane", "email": "jane@example.com"}, CONTENT_REQUIRED),
        (None, NAME_EMAIL_REQUIRED),
        ("jane@example.com", NAME_EMAIL_REQUIRED),
    ],
)
def test_parse_errors(data, expected):
    inquiry, err = parse_inquiry(data)
    assert inquiry is None
    assert err == expected


def test_is_bot():
    assert is_bot({"company": "Acme"})
    assert not is_bot({"company": "  "})
    assert not is_bot({"company": None})
    assert not is_bot({})


def test_outbound_email_subject_and_body():
    inquiry = InquiryRequest(name="Jane Doe", email="jane@example.com", type="Logo", msg="Need a logo")
    email = build_outbound_email(
        inquiry, from_email="forms@celercrea.com", to_email="hello@celercrea.com", now=NOW
    )
    assert email.subject == "CelerCrea Inquiry — Logo — Jane Doe"
    assert email.reply_to == "jane@example.com"
    assert email.text == (
        "New inquiry received (2025-03-04T05:06:07.890Z)\n"
        "\n"
        "Name: Jane Doe\n"
        "Email: jane@example.com\n"
        "Need: Logo\n"
        "\n"
        "Details:\n"
        "Need a logo\n"
    )


def test_outbound_email_placeholders():
    inquiry = InquiryRequest(name="Jane", email="jane@example.com", type="", msg="Hello")
    email = build_outbound_email(inquiry, from_email="f@x.io", to_email="t@x.io", now=NOW)
    assert email.subject == "CelerCrea Inquiry — Project request — Jane"
    assert "Need: (not specified)\n" in email.text

    inquiry = InquiryRequest(name="Jane", email="jane@example.com", type="Website")
    email = build_outbound_email(inquiry, from_email="f@x.io", to_email="t@x.io", now=NOW)
    assert email.text.endswith("Details:\n(none provided)\n")


def test_resend_payload_shape():
    inquiry = InquiryRequest(name="Jane", email="jane@example.com", msg="Hello")
    email = build_outbound_email(inquiry, from_email="f@x.io", to_email="t@x.io", now=NOW)
    assert email.to_resend_payload() == {
        "from": "f@x.io",
        "to": ["t@x.io"],
        "subject": email.subject,
        "text": email.text,
        "reply_to": "jane@example.com",
        "replyTo": "jane@example.com",
    }
