import pytest

from celercrea_contact import create_app
from celercrea_contact.config import ContactConfig


class FakeSender:
    """Records outbound emails instead of calling Resend."""

    def __init__(self, result=("resend", "msg_123")):
        self.result = result
        self.calls = []

    def __call__(self, email, *, config):
        self.calls.append(email)
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


@pytest.fixture
def config():
    return ContactConfig(
        resend_api_key="re_test_key",
        to_email="hello@celercrea.com",
        from_email="CelerCrea <forms@celercrea.com>",
    )


@pytest.fixture
def sender():
    return FakeSender()


@pytest.fixture
def app(config, sender):
    app = create_app(config=config, email_sender=sender)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def valid_payload():
    return {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "type": "Logo",
        "msg": "Need a logo",
    }


@pytest.fixture
def make_client(config):
    """Client for an app built with a given config and sender result."""

    def _make(result=("resend", "msg_123"), cfg=None):
        fake = FakeSender(result=result)
        app = create_app(config=cfg or config, email_sender=fake)
        app.config["TESTING"] = True
        return app.test_client(), fake

    return _make
