from flask import current_app, request
from flask_socketio import emit
from gameofthree import socketio, directory
from gameofthree.errors import GameError
from gameofthree.rooms import get_room_state
from gameofthree.services.game import turns


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _relay_error(event: str, exc: GameError) -> None:
    """Report a failure to the requesting connection only, never the room."""
    emit('error', exc.to_dict())
    current_app.logger.warning(f"[{event}] sid={_get_sid()} failed: {exc.message}")


def handle_connect(auth=None):
    current_app.logger.info(f"[connect] sid={_get_sid()}")


def handle_login(data):
    username = (data or {}).get('username')
    sid = _get_sid()
    current_app.logger.info(f"[login] sid={sid} name={username}")
    try:
        if not username:
            raise GameError('username is required')
        directory.create_user(sid, username)
    except GameError as exc:
        _relay_error('login', exc)
        return
    emit('message', {
        'user': username,
        'message': f'Welcome {username}',
        'socketId': sid,
    })


def handle_join_room(data):
    data = data or {}
    room = data.get('room')
    try:
        if not room:
            raise GameError('room is required')
        turns.assign_room(get_room_state(), room, _get_sid(), data.get('roomType'))
    except GameError as exc:
        _relay_error('joinRoom', exc)


def handle_lets_play(data=None):
    try:
        turns.start_game(get_room_state(), _get_sid())
    except GameError as exc:
        _relay_error('letsPlay', exc)


def handle_send_number(data):
    turns.submit_number(get_room_state(), _get_sid(), data)


def handle_leave_room(data=None):
    turns.leave_current_room(get_room_state(), _get_sid())


def handle_disconnect(reason=None):
    turns.disconnect(get_room_state(), _get_sid())


def handle_unexpected_error(exc):
    # Fatal to this handler invocation only; the server keeps serving
    current_app.logger.exception(f"[handler-error] sid={_get_sid()} {exc}")


EVENT_HANDLERS = {
    'connect': handle_connect,
    'login': handle_login,
    'joinRoom': handle_join_room,
    'letsPlay': handle_lets_play,
    'sendNumber': handle_send_number,
    'leaveRoom': handle_leave_room,
    'disconnect': handle_disconnect,
}


def register_socketio_handlers(namespace: str = '/') -> None:
    """Register every inbound game event on ``namespace``."""
    for event, handler in EVENT_HANDLERS.items():
        socketio.on_event(event, handler, namespace=namespace)
    socketio.on_error_default(handle_unexpected_error)
