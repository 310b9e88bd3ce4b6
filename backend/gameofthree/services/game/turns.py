"""Room admission and turn handoff.

Every function here runs inside a Socket.IO event handler for the
connection ``sid``. The room stores are handed in by the caller, and the
directory and room membership are re-read at the point of use; nothing is
cached across calls.
"""
from flask import current_app
from flask_socketio import emit, join_room, leave_room

from gameofthree import directory
from gameofthree.errors import GameError
from gameofthree.models import ROOM_TYPE_CPU, ROOM_TYPE_HUMAN, capacity_for
from gameofthree.rooms import RoomState
from .evaluator import draw_opening_number, evaluate, is_winning
from .opponent import cancel_cpu_move, schedule_cpu_move

STATE_WAIT = 'wait'
STATE_PLAY = 'play'


def emit_ready_state(rooms: RoomState, room: str, capacity: int) -> bool:
    # Must run after the join has taken effect
    ready = rooms.membership.size(room) == capacity
    emit('onReady', {'state': ready}, to=room)
    return ready


def assign_room(rooms: RoomState, room: str, sid: str, room_type: str) -> bool:
    """Admit ``sid`` to ``room`` and broadcast the room's ready state.

    Raises ``UserNotFound`` for unknown connections and ``RoomFull`` when the
    room already holds its capacity. A rejected join leaves every room as it
    was. Joiners of an occupied room play by that room's type.
    """
    user = directory.get_user(sid)
    previous_room = user.room
    already_member = rooms.membership.contains(room, sid)

    room_type = rooms.membership.try_add(room, sid, room_type)
    capacity = capacity_for(room_type)
    try:
        if previous_room and previous_room != room:
            _vacate(rooms, sid, previous_room, include_self=True)
        directory.set_room(sid, room, room_type)
        join_room(room)
    except Exception:
        if not already_member:
            rooms.membership.remove(room, sid)
        raise
    current_app.logger.info(f"[join] sid={sid} room={room} type={room_type} size={rooms.membership.size(room)}/{capacity}")

    emit('message', {'user': user.name, 'message': f'welcome to room {room}', 'room': room})
    if room_type == ROOM_TYPE_HUMAN:
        emit('message', {'user': user.name, 'message': f'has joined {room}', 'room': room},
             to=room, include_self=False)
    ready = emit_ready_state(rooms, room, capacity)
    emit('listTrigger', 'true', broadcast=True, include_self=False)
    return ready


def start_game(rooms: RoomState, sid: str) -> None:
    user = directory.get_user(sid)
    if not user.room:
        raise GameError('Join a room before starting a game')
    room = user.room
    cancel_cpu_move(current_app, room)

    low = int(current_app.config.get('FIRST_NUMBER_MIN', 1999))
    high = int(current_app.config.get('FIRST_NUMBER_MAX', 9999))
    opening = draw_opening_number(low, high)
    current_app.logger.info(f"[start] room={room} by={sid} opening={opening}")
    emit('randomNumber', {'number': f'{opening}', 'isFirst': True}, to=room)

    rooms.turns.set_active(room, sid)
    emit('activateYourTurn', {'user': rooms.membership.other_member(room, sid), 'state': STATE_WAIT},
         to=room, include_self=False)
    emit('activateYourTurn', {'user': sid, 'state': STATE_PLAY})


def submit_number(rooms: RoomState, sid: str, payload) -> int:
    user = directory.get_user(sid)
    if not user.room:
        raise GameError('Join a room before playing')
    room = user.room
    number = int((payload or {}).get('number'))
    selected_number = int((payload or {}).get('selectedNumber'))

    result = evaluate([selected_number, number], number)

    if user.room_type == ROOM_TYPE_CPU:
        schedule_cpu_move(current_app._get_current_object(), rooms, room, sid, result)

    emit('randomNumber', {
        'number': result,
        'isFirst': False,
        'user': user.name,
        'selectedNumber': selected_number,
        'isCorrectResult': result != number,
    }, to=room)

    emit('activateYourTurn', {'user': sid, 'state': STATE_WAIT})

    if user.room_type == ROOM_TYPE_HUMAN:
        opponent = rooms.membership.other_member(room, sid)
        rooms.turns.set_active(room, opponent)
        emit('activateYourTurn', {'user': opponent, 'state': STATE_PLAY}, to=room, include_self=False)

    if is_winning(result):
        current_app.logger.info(f"[game-over] room={room} winner={user.name}")
        emit('gameOver', {'user': user.name, 'isOver': True}, to=room)
        cancel_cpu_move(current_app, room)
        rooms.turns.discard(room)
    return result


def leave_current_room(rooms: RoomState, sid: str) -> None:
    user = directory.find_user(sid)
    if user is None or not user.room:
        return
    _vacate(rooms, sid, user.room, include_self=True)


def disconnect(rooms: RoomState, sid: str) -> None:
    user = directory.find_user(sid)
    if user is not None and user.room:
        _vacate(rooms, sid, user.room, include_self=False)
    directory.delete_user(sid)
    current_app.logger.info(f"[disconnect] sid={sid}")
    emit('listTrigger', 'true', broadcast=True, include_self=False)


def _vacate(rooms: RoomState, sid: str, room: str, include_self: bool) -> None:
    emit('onReady', {'state': False}, to=room, include_self=include_self)
    directory.clear_room(sid)
    leave_room(room)
    remaining = rooms.membership.remove(room, sid)
    current_app.logger.info(f"[leave] sid={sid} room={room} remaining={remaining}")
    if remaining == 0:
        cancel_cpu_move(current_app, room)
        rooms.turns.discard(room)
