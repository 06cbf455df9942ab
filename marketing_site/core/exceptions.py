"""
Error taxonomy for the contact form relay and the footer provider.

Contact errors carry the HTTP status and the public message returned to the
browser, so the handler can turn any of them into a JSON response directly.
"""

from marketing_site.models.contact import ContactOutcome


class ContactFormError(Exception):
    status_code = 500
    outcome = ContactOutcome.INTERNAL_ERROR
    message = "An unexpected error occurred. Please try again later."

    def __init__(self, message: str = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class SubmissionValidationError(ContactFormError):
    status_code = 400
    outcome = ContactOutcome.VALIDATION_ERROR
    message = "Missing required fields"


class ConfigurationError(ContactFormError):
    outcome = ContactOutcome.CONFIGURATION_ERROR
    message = "Email service not configured. Please check server settings."


class DispatchError(ContactFormError):
    outcome = ContactOutcome.DISPATCH_ERROR
    message = "Failed to send email. Please try again later."


class FormParseError(ValueError):
    """Request body is not a form; handled by the catch-all like any unexpected failure"""


class FooterVariantNotFound(LookupError):
    def __init__(self, variant: str):
        self.variant = variant
        super().__init__(f"Footer variant '{variant}' not found")
