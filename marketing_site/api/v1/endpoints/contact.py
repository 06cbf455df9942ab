"""
Contact form endpoint.

Accepts application/x-www-form-urlencoded or multipart form posts with
name, email, phone (optional) and message, and relays them by email.
Every outcome is returned as JSON with a `success` flag.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from marketing_site.core.config import Settings, get_settings
from marketing_site.core.contact_handler import ContactSubmissionHandler
from marketing_site.core.email_sender import EmailSender, ResendEmailSender

router = APIRouter()


def get_email_sender(settings: Settings = Depends(get_settings)) -> EmailSender:
    return ResendEmailSender(
        api_key=settings.resend_api_key or "",
        api_url=settings.resend_api_url,
        timeout=settings.resend_timeout_seconds,
    )


def get_contact_handler(
    settings: Settings = Depends(get_settings),
    sender: EmailSender = Depends(get_email_sender),
) -> ContactSubmissionHandler:
    return ContactSubmissionHandler(settings=settings, sender=sender)


@router.post("/contact")
async def submit_contact_form(
    request: Request,
    handler: ContactSubmissionHandler = Depends(get_contact_handler),
):
    """
    Submit the website contact form.

    Returns:
        200 {success: true, message} when the email was dispatched,
        400 {success: false, error} for missing fields or a malformed email,
        500 {success: false, error} for configuration, provider or unexpected failures
    """
    result = await handler.handle_request(request)
    return JSONResponse(status_code=result.status_code, content=result.body)
