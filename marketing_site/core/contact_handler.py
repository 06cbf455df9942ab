"""
Contact form submission pipeline.

One invocation handles exactly one submission:
parse -> validate required fields -> validate email -> resolve configuration
-> compose -> dispatch. Every path ends in a ContactResult; nothing raises
out of the handler and no state is kept between invocations.
"""

import logging
import re
from typing import Any, Awaitable, Mapping, Optional

from fastapi import Request

from marketing_site.core.config import Settings
from marketing_site.core.contact_email import build_subject, render_html, render_text
from marketing_site.core.email_sender import EmailSender
from marketing_site.core.exceptions import (
    ConfigurationError, ContactFormError, DispatchError, FormParseError, SubmissionValidationError
)
from marketing_site.models.contact import (
    ContactErrorResponse, ContactOutcome, ContactResult, ContactSubmission,
    ContactSuccessResponse, OutboundEmail
)

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")

SUCCESS_MESSAGE = "Thank you for your message. We will get back to you soon!"
MISSING_FIELDS_ERROR = "Missing required fields"
INVALID_EMAIL_ERROR = "Invalid email format"
UNEXPECTED_ERROR = "An unexpected error occurred. Please try again later."


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.fullmatch(email))


def _form_value(form: Mapping[str, Any], key: str) -> Optional[str]:
    """Text value of a form field; non-text values are stringified, empty strings count as missing"""
    value = form.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        value = str(value)
    return value or None


def parse_submission(form: Mapping[str, Any]) -> ContactSubmission:
    """
    Validate raw form fields into a ContactSubmission.

    Raises:
        SubmissionValidationError: a required field is missing or the email is malformed
    """
    name = _form_value(form, "name")
    email = _form_value(form, "email")
    message = _form_value(form, "message")

    if not name or not email or not message:
        raise SubmissionValidationError(MISSING_FIELDS_ERROR)

    if not is_valid_email(email):
        raise SubmissionValidationError(INVALID_EMAIL_ERROR)

    return ContactSubmission(
        name=name,
        email=email,
        phone=_form_value(form, "phone"),
        message=message,
    )


class ContactSubmissionHandler:
    """Relays contact form submissions to the site owner by email"""

    def __init__(self, settings: Settings, sender: EmailSender):
        self.settings = settings
        self.sender = sender

    async def handle_request(self, request: Request) -> ContactResult:
        return await self._run(self._process_request(request))

    async def handle(self, form: Mapping[str, Any]) -> ContactResult:
        return await self._run(self._process(form))

    async def _run(self, pipeline: Awaitable[ContactResult]) -> ContactResult:
        try:
            return await pipeline
        except ContactFormError as e:
            return ContactResult(
                outcome=e.outcome,
                status_code=e.status_code,
                body=ContactErrorResponse(error=e.message).model_dump(),
            )
        except Exception as e:
            logger.error(f"Contact form error: {str(e)}", exc_info=True)
            return ContactResult(
                outcome=ContactOutcome.INTERNAL_ERROR,
                status_code=500,
                body=ContactErrorResponse(error=UNEXPECTED_ERROR).model_dump(),
            )

    async def _process_request(self, request: Request) -> ContactResult:
        content_type = request.headers.get("content-type", "").lower()
        if not content_type.startswith(FORM_CONTENT_TYPES):
            raise FormParseError(f"Unsupported content type: {content_type or 'none'}")
        form = await request.form()
        return await self._process(form)

    async def _process(self, form: Mapping[str, Any]) -> ContactResult:
        submission = parse_submission(form)

        if not self.settings.email_service_configured:
            logger.warning("RESEND_API_KEY not configured. Email will not be sent.")
            raise ConfigurationError()

        email = self.compose(submission)
        result = await self.sender.send(email)

        if not result.success:
            logger.error(f"Resend error: {result.error}")
            raise DispatchError()

        logger.info(f"✅ Email sent successfully: {result.id}")
        return ContactResult(
            outcome=ContactOutcome.DELIVERED,
            status_code=200,
            body=ContactSuccessResponse(message=SUCCESS_MESSAGE).model_dump(),
        )

    def compose(self, submission: ContactSubmission) -> OutboundEmail:
        return OutboundEmail(
            from_email=self.settings.effective_from_email,
            to=self.settings.effective_contact_email,
            reply_to=submission.email,
            subject=build_subject(submission),
            html=render_html(submission),
            text=render_text(submission),
        )
