import threading
from typing import Dict, Optional

from gameofthree import socketio
from gameofthree.rooms import RoomState
from .evaluator import draw_cpu_move, evaluate

CPU_NAME = 'CPU'


class PendingMove:
    """Handle for one scheduled CPU reply in a ``cpu`` room."""

    def __init__(self, room: str, human_sid: str, baseline: int):
        self.room = room
        self.human_sid = human_sid
        self.baseline = baseline
        self.cancelled = False
        self.fired = False


_pending: Dict[str, PendingMove] = {}
_lock = threading.Lock()


def schedule_cpu_move(app, rooms: RoomState, room: str, human_sid: str, baseline: int) -> PendingMove:
    """Schedule the CPU reply to ``baseline`` for the given room.

    - At most one pending move per room; a newer move supersedes the old one
    - Fires once after CPU_MOVE_DELAY_MS unless cancelled first
    """
    delay = int(app.config.get('CPU_MOVE_DELAY_MS', 2000)) / 1000.0
    namespace = app.config.get('SOCKETIO_NAMESPACE', '/')
    move = PendingMove(room, human_sid, baseline)
    with _lock:
        previous = _pending.get(room)
        if previous is not None:
            previous.cancelled = True
        _pending[room] = move
    rooms.turns.set_active(room, None)
    app.logger.info(f"[cpu-set] room={room} baseline={baseline} delay={delay}s")
    socketio.start_background_task(_worker, app, rooms, move, delay, namespace)
    return move


def cancel_cpu_move(app, room: str) -> bool:
    with _lock:
        move = _pending.pop(room, None)
        if move is None:
            return False
        move.cancelled = True
    app.logger.info(f"[cpu-cancel] room={room}")
    return True


def pending_cpu_move(room: str) -> Optional[PendingMove]:
    with _lock:
        return _pending.get(room)


def reset_cpu_moves() -> None:
    with _lock:
        for move in _pending.values():
            move.cancelled = True
        _pending.clear()


def _worker(app, rooms: RoomState, move: PendingMove, delay: float, namespace: str):
    socketio.sleep(delay)
    with _lock:
        if move.cancelled or _pending.get(move.room) is not move:
            app.logger.info(f"[cpu-abort] room={move.room} cancelled or superseded")
            return
        del _pending[move.room]
    if not rooms.membership.contains(move.room, move.human_sid):
        app.logger.info(f"[cpu-abort] room={move.room} player left")
        return

    cpu_number = draw_cpu_move()
    result = evaluate([cpu_number, move.baseline], move.baseline)
    move.fired = True
    app.logger.info(f"[cpu-fire] room={move.room} move={cpu_number} result={result}")

    socketio.emit('randomNumber', {
        'number': result,
        'isFirst': False,
        'user': CPU_NAME,
        'selectedNumber': cpu_number,
        'isCorrectResult': result != move.baseline,
    }, to=move.room, namespace=namespace)

    rooms.turns.set_active(move.room, move.human_sid)
    socketio.emit('activateYourTurn', {
        'user': move.human_sid,
        'state': 'play',
    }, to=move.room, namespace=namespace)

    # Only an exact 1 ends the game on the CPU side
    if result == 1:
        socketio.emit('gameOver', {'user': CPU_NAME, 'isOver': True}, to=move.room, namespace=namespace)
