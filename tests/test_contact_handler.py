import pytest

from marketing_site.core.contact_handler import (
    ContactSubmissionHandler, is_valid_email, parse_submission
)
from marketing_site.core.exceptions import SubmissionValidationError
from marketing_site.models.contact import ContactOutcome, EmailDispatchResult

from conftest import FakeEmailSender, make_settings


@pytest.mark.parametrize("email,valid", [
    ("jane@example.com", True),
    ("j.doe+tag@mail.example.co.uk", True),
    ("jane@example", False),
    ("jane @example.com", False),
    ("jane@exa mple.com", False),
    ("jane@example.com\n", False),
    ("", False),
])
def test_is_valid_email(email, valid):
    assert is_valid_email(email) is valid


def test_parse_submission_treats_empty_phone_as_absent():
    submission = parse_submission({
        "name": "Jane Doe", "email": "jane@example.com", "phone": "", "message": "Hi",
    })
    assert submission.phone is None


def test_parse_submission_checks_required_fields_before_email_shape():
    with pytest.raises(SubmissionValidationError) as exc_info:
        parse_submission({"email": "not-an-email", "message": "Hi"})
    assert exc_info.value.message == "Missing required fields"


class UploadedNote:
    def __str__(self):
        return "note.txt"


def test_parse_submission_stringifies_non_text_values():
    submission = parse_submission({"name": UploadedNote(), "email": "jane@example.com", "message": "Hi"})
    assert submission.name == "note.txt"


@pytest.mark.asyncio
async def test_handler_delivers_and_reports_outcome():
    sender = FakeEmailSender()
    handler = ContactSubmissionHandler(make_settings(), sender)

    result = await handler.handle({"name": "Jane", "email": "jane@example.com", "message": "Hi"})

    assert result.outcome == ContactOutcome.DELIVERED
    assert result.status_code == 200
    assert result.body["success"] is True


@pytest.mark.asyncio
@pytest.mark.parametrize("settings_overrides,sender_kwargs,form,outcome,status_code", [
    ({}, {}, {"name": "Jane"}, ContactOutcome.VALIDATION_ERROR, 400),
    ({"resend_api_key": None}, {}, None, ContactOutcome.CONFIGURATION_ERROR, 500),
    ({}, {"result": EmailDispatchResult(success=False, error="rejected")}, None,
     ContactOutcome.DISPATCH_ERROR, 500),
    ({}, {"error": ValueError("bad payload")}, None, ContactOutcome.INTERNAL_ERROR, 500),
])
async def test_handler_failure_outcomes(settings_overrides, sender_kwargs, form, outcome, status_code):
    handler = ContactSubmissionHandler(make_settings(**settings_overrides), FakeEmailSender(**sender_kwargs))
    form = form or {"name": "Jane", "email": "jane@example.com", "message": "Hi"}

    result = await handler.handle(form)

    assert result.outcome == outcome
    assert result.status_code == status_code
    assert result.body["success"] is False
    assert "error" in result.body


def test_compose_sets_reply_to_submitter():
    handler = ContactSubmissionHandler(
        make_settings(public_contact_email="owner@acme.test"), FakeEmailSender()
    )
    submission = parse_submission({
        "name": "Jane Doe", "email": "jane@example.com", "message": "Hello",
    })

    email = handler.compose(submission)

    assert email.to == "owner@acme.test"
    assert email.from_email == "onboarding@resend.dev"
    assert email.reply_to == "jane@example.com"
    assert email.subject == "New Contact Form Submission from Jane Doe"
