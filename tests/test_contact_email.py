from marketing_site.core.contact_email import build_subject, render_html, render_text
from marketing_site.models.contact import ContactSubmission


def make_submission(**overrides):
    values = {"name": "Jane Doe", "email": "jane@example.com", "phone": None, "message": "Hello"}
    values.update(overrides)
    return ContactSubmission(**values)


def test_text_body_without_phone():
    assert render_text(make_submission()) == (
        "New Contact Form Submission\n"
        "\n"
        "Name: Jane Doe\n"
        "Email: jane@example.com\n"
        "\n"
        "Message:\n"
        "Hello\n"
        "\n"
        "---\n"
        "This email was sent from your website contact form."
    )


def test_text_body_with_phone():
    text = render_text(make_submission(phone="555-0100"))
    assert "Email: jane@example.com\nPhone: 555-0100\n\nMessage:" in text


def test_html_body_links_email_and_preserves_whitespace():
    html = render_html(make_submission(message="Line one\n  Line two"))

    assert '<a href="mailto:jane@example.com"' in html
    assert "white-space: pre-wrap" in html
    assert "Line one\n  Line two" in html
    assert "Phone:" not in html


def test_html_body_includes_phone_when_given():
    html = render_html(make_submission(phone="555-0100"))
    assert "Phone:" in html
    assert "555-0100" in html


def test_html_body_escapes_submitted_values():
    html = render_html(make_submission(name="<b>Jane</b>", message="<script>alert(1)</script>"))

    assert "<script>" not in html
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html
    assert "&lt;b&gt;Jane&lt;/b&gt;" in html


def test_subject_uses_raw_name():
    assert build_subject(make_submission(name="Jane & Co")) == "New Contact Form Submission from Jane & Co"
