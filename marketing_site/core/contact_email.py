"""
Notification email for contact form submissions.

Builds the subject, the HTML body and the plain-text body sent to the site
owner. Submitted values are HTML-escaped in the HTML body only.
"""

from html import escape

from marketing_site.models.contact import ContactSubmission

SIGNATURE = "This email was sent from your website contact form."

FIELD_STYLE = "color: #374151; display: block; margin-bottom: 4px;"
VALUE_STYLE = "color: #111827;"


def build_subject(submission: ContactSubmission) -> str:
    return f"New Contact Form Submission from {submission.name}"


def _field_block(label: str, value_html: str) -> str:
    return f"""
            <div style="margin-bottom: 20px;">
              <strong style="{FIELD_STYLE}">{label}:</strong>
              {value_html}
            </div>"""


def render_html(submission: ContactSubmission) -> str:
    """Render the HTML notification; the phone block is left out when no phone was given"""
    name = escape(submission.name)
    email = escape(submission.email)
    message = escape(submission.message)

    fields = _field_block("Name", f'<span style="{VALUE_STYLE}">{name}</span>')
    fields += _field_block(
        "Email",
        f'<a href="mailto:{email}" style="color: #2563eb; text-decoration: none;">{email}</a>',
    )
    if submission.phone:
        fields += _field_block("Phone", f'<span style="{VALUE_STYLE}">{escape(submission.phone)}</span>')

    return f"""<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>New Contact Form Submission</title>
  </head>
  <body style="font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, 'Helvetica Neue', Arial, sans-serif; line-height: 1.6; color: #333; max-width: 600px; margin: 0 auto; padding: 20px;">
    <div style="background-color: #f8f9fa; border-radius: 8px; padding: 24px; margin-bottom: 20px;">
      <h1 style="color: #2563eb; margin: 0 0 16px 0; font-size: 24px;">New Contact Form Submission</h1>
      <p style="color: #666; margin: 0;">You have received a new message from your website contact form.</p>
    </div>
    <div style="background-color: #fff; border: 1px solid #e5e7eb; border-radius: 8px; padding: 24px;">{fields}
            <div style="margin-bottom: 0;">
              <strong style="color: #374151; display: block; margin-bottom: 8px;">Message:</strong>
              <div style="background-color: #f9fafb; border-left: 4px solid #2563eb; padding: 16px; border-radius: 4px;">
                <p style="margin: 0; color: #111827; white-space: pre-wrap;">{message}</p>
              </div>
            </div>
    </div>
    <div style="margin-top: 24px; padding-top: 24px; border-top: 1px solid #e5e7eb; text-align: center;">
      <p style="color: #9ca3af; font-size: 14px; margin: 0;">{SIGNATURE}</p>
    </div>
  </body>
</html>
"""


def render_text(submission: ContactSubmission) -> str:
    lines = [
        "New Contact Form Submission",
        "",
        f"Name: {submission.name}",
        f"Email: {submission.email}",
    ]
    if submission.phone:
        lines.append(f"Phone: {submission.phone}")
    lines += [
        "",
        "Message:",
        submission.message,
        "",
        "---",
        SIGNATURE,
    ]
    return "\n".join(lines)
