import pytest
from fastapi.testclient import TestClient

from rosterapp.core.config import settings
from rosterapp.main import app
from rosterapp.services.roster.fake import fake_api
from rosterapp.services.state import RosterContext
from rosterapp.views.pages import init

from tests.helpers.players import FIDO


@pytest.fixture
def fake_remote(monkeypatch):
    """Route every roster call to the in-process fake, seeded with Fido."""
    monkeypatch.setattr(settings, "ROSTER_FAKE_MODE", True)
    fake_api.reset([FIDO])
    yield fake_api
    fake_api.reset([])


@pytest.fixture
def ctx(fake_remote) -> RosterContext:
    """A page that has been loaded once."""
    context = RosterContext()
    init(context)
    return context


@pytest.fixture
def client(fake_remote):
    with TestClient(app) as c:
        yield c
