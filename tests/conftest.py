import pytest

from enquiry_intake import create_app
from enquiry_intake.config import TestingConfig
from enquiry_intake.models import db


class FakeResponse:
    def __init__(self, status_code=200, body=None, text=None):
        self.status_code = status_code
        self._body = body
        self.text = text if text is not None else ("" if body is None else str(body))

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._body is None:
            raise ValueError("No JSON object could be decoded")
        return self._body


class MailerooStub:
    """Records calls to requests.post and answers with a canned response."""

    def __init__(self):
        self.calls = []
        self.response = FakeResponse(200, {"success": True, "message": "The email has been queued."})
        self.error = None

    def __call__(self, url, **kwargs):
        self.calls.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def maileroo(monkeypatch):
    stub = MailerooStub()
    monkeypatch.setattr("enquiry_intake.notifications.requests.post", stub)
    return stub


@pytest.fixture
def valid_submission():
    return {
        "firstName": "  Jane ",
        "lastName": "Citizen",
        "email": " Jane.Citizen@Example.COM ",
        "message": "I'd like to book an initial session.",
        "website": "",
        "pageUrl": "https://realcalm.com.au/contact",
        "userAgent": "Mozilla/5.0",
        "tz": "Australia/Sydney",
    }
