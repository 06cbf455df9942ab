import pytest
from fastapi.testclient import TestClient

from marketing_site.api.v1.endpoints.contact import get_email_sender
from marketing_site.core.config import Settings, get_settings
from marketing_site.core.email_sender import EmailSender
from marketing_site.main import app
from marketing_site.models.contact import EmailDispatchResult


class FakeEmailSender(EmailSender):
    def __init__(self, result=None, error=None):
        self.result = result or EmailDispatchResult(success=True, id="abc123")
        self.error = error
        self.sent = []

    async def send(self, email):
        self.sent.append(email)
        if self.error is not None:
            raise self.error
        return self.result


def make_settings(**overrides):
    values = {
        "resend_api_key": "re_test_key",
        "public_contact_email": None,
        "resend_from_email": None,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def sender():
    return FakeEmailSender()


@pytest.fixture
def client(settings, sender):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_email_sender] = lambda: sender
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
