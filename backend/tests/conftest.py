import os
import sys
import pytest

# Ensure the backend root (containing the `gameofthree` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from gameofthree import create_app, db, socketio
from gameofthree.rooms import get_room_state
from gameofthree.services.game.opponent import reset_cpu_moves


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    HOST_LOCAL = 'localhost'
    SOCKET_PORT = 8082
    CORS_ORIGINS = ['*']
    SOCKETIO_NAMESPACE = '/'
    # Keep the CPU quick in tests
    CPU_MOVE_DELAY_MS = 200
    FIRST_NUMBER_MIN = 1999
    FIRST_NUMBER_MAX = 9999


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application
        db.session.remove()
        db.drop_all()
    reset_cpu_moves()


@pytest.fixture()
def rooms(flask_app):
    """Room membership and turn stores owned by the test app."""
    return get_room_state(flask_app)


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_factory(flask_app):
    """Builds connected Socket.IO test clients; disconnects leftovers on teardown."""
    created = []

    def _make():
        test_client = socketio.test_client(flask_app, flask_test_client=flask_app.test_client())
        created.append(test_client)
        return test_client

    yield _make
    for test_client in created:
        try:
            if test_client.is_connected():
                test_client.disconnect()
        except Exception:
            pass


def payload(pkt):
    # The test client hands "message" payloads over unwrapped
    if pkt['name'] in ('message', 'json'):
        return pkt['args']
    return pkt['args'][0] if pkt['args'] else None


def events(received, name):
    return [payload(pkt) for pkt in received if pkt['name'] == name]


def login(test_client, username):
    """Logs in and returns the connection id the server assigned."""
    test_client.emit('login', {'username': username})
    for pkt in test_client.get_received():
        if pkt['name'] == 'message' and 'socketId' in payload(pkt):
            return payload(pkt)['socketId']
    raise AssertionError('no welcome message received')
