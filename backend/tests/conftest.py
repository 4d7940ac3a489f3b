import os
import sys
import pytest

# Ensure the backend root (containing the `chifourmi` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from chifourmi import create_app, socketio
from chifourmi.models import Match
from chifourmi.services.match import MatchCoordinator


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    PORT = 3001
    MAX_ROUNDS = 3
    MATCH_SLOTS = ('france', 'tunisie')
    SOCKETIO_NAMESPACE = '/'
    CORS_ORIGINS = ['http://localhost:4200']
    LOG_LEVEL = 'DEBUG'


class RecordingTransport:
    """Collects coordinator output instead of emitting it."""

    def __init__(self):
        self.sent = []
        self.broadcasts = []

    def send(self, connection_id, event, payload):
        self.sent.append((connection_id, event, payload))

    def broadcast(self, event, payload):
        self.broadcasts.append((event, payload))

    def broadcast_names(self):
        return [name for name, _ in self.broadcasts]

    def last(self, event):
        for name, payload in reversed(self.broadcasts):
            if name == event:
                return payload
        return None

    def clear(self):
        self.sent.clear()
        self.broadcasts.clear()


@pytest.fixture()
def transport():
    return RecordingTransport()


@pytest.fixture()
def match():
    return Match(slots=('france', 'tunisie'), max_rounds=3)


@pytest.fixture()
def coordinator(match, transport):
    return MatchCoordinator(match, transport)


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


def _sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/'
    )
    # Flush the connect greeting
    test_client.get_received('/')
    return test_client


@pytest.fixture()
def sio_client(flask_app):
    test_client = _sio_client(flask_app)
    yield test_client
    try:
        test_client.disconnect(namespace='/')
    except Exception:
        pass


@pytest.fixture()
def other_sio_client(flask_app):
    test_client = _sio_client(flask_app)
    yield test_client
    try:
        test_client.disconnect(namespace='/')
    except Exception:
        pass
