from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from linkhub.ai import CommentWriter
from linkhub.app import create_app
from linkhub.engagement import EngagementService
from linkhub.lists import FeedService
from linkhub.members import MembershipService
from linkhub.models import Store
from linkhub.views import ReadModels


@pytest.fixture
def store(tmp_path):
    store = Store(tmp_path / "linkhub.db").open()
    yield store
    store.close()


@pytest.fixture
def feeds(store):
    return FeedService(store)


@pytest.fixture
def members(store):
    return MembershipService(store)


@pytest.fixture
def engagement(store):
    return EngagementService(store)


@pytest.fixture
def views(store):
    return ReadModels(store)


class FakeCompletions:
    """Stands in for ``client.chat.completions``; records each call."""

    def __init__(self, content="", error=None):
        self.content = content
        self.error = error
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def fake_writer(content="", error=None, api_key="sk-test"):
    completions = FakeCompletions(content, error)
    client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return CommentWriter(api_key=api_key, model="test-model", client=client)


@pytest.fixture(name="fake_writer")
def fake_writer_fixture():
    return fake_writer


@pytest.fixture
def make_client(tmp_path):
    clients = []

    def _make(writer=None):
        client = TestClient(create_app(tmp_path / "api.db", writer or fake_writer()))
        clients.append(client.__enter__())
        return client

    yield _make
    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client):
    return make_client()
