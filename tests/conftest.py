import pytest

from backoffice.app.client import BackofficeClient
from backoffice.core.credentials import ACCESS_TOKEN, REFRESH_TOKEN, MemoryCredentialStore
from backoffice.core.dispatcher import Dispatcher
from backoffice.core.events import SessionEvents
from backoffice.core.query import QueryClient
from tests.helpers import FakeBackend, FakeTransport


@pytest.fixture
def store():
    return MemoryCredentialStore(**{ACCESS_TOKEN: "A1", REFRESH_TOKEN: "R1"})


@pytest.fixture
def events():
    return SessionEvents()


@pytest.fixture
def expired(events):
    received = []
    events.subscribe(received.append)
    return received


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def transport(backend):
    return FakeTransport(backend)


@pytest.fixture
def dispatcher(transport, store, events):
    return Dispatcher(transport, store, events, request_timeout=30, refresh_timeout=10)


@pytest.fixture
def queries():
    return QueryClient(stale_time=60)


@pytest.fixture
def api(transport, store, events):
    return BackofficeClient("http://api.test/api/v1", store=store, transport=transport, events=events)
