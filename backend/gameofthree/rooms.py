import threading
from typing import Dict, List, Optional, Set

from flask import current_app

from gameofthree.errors import RoomFull
from gameofthree.models import capacity_for, normalize_room_type

EXTENSION_KEY = 'gameofthree.rooms'


class RoomMembership:
    """Room name -> connection ids currently in it.

    Rooms only exist while they have members; empty sets are dropped as soon
    as the last member leaves, together with the room's type. The first
    joiner fixes the type, and with it the capacity. Reads hand out copies.
    """

    def __init__(self):
        self._rooms: Dict[str, Set[str]] = {}
        self._types: Dict[str, str] = {}
        self._lock = threading.Lock()

    def try_add(self, room: str, sid: str, room_type) -> str:
        """Admit ``sid`` unless the room is full; returns the room's type.

        Check and insert happen under one lock so concurrent joiners can
        never push a room past its capacity. Joiners adopt the type of an
        occupied room. Raises ``RoomFull``.
        """
        with self._lock:
            members = self._rooms.get(room)
            if not members:
                self._rooms[room] = {sid}
                self._types[room] = normalize_room_type(room_type)
                return self._types[room]
            existing_type = self._types[room]
            if sid in members:
                return existing_type
            capacity = capacity_for(existing_type)
            if len(members) >= capacity:
                raise RoomFull(room, capacity)
            members.add(sid)
            return existing_type

    def remove(self, room: str, sid: str) -> int:
        with self._lock:
            members = self._rooms.get(room)
            if members is None:
                return 0
            members.discard(sid)
            if not members:
                del self._rooms[room]
                self._types.pop(room, None)
                return 0
            return len(members)

    def members(self, room: str) -> Set[str]:
        with self._lock:
            return set(self._rooms.get(room, ()))

    def size(self, room: str) -> int:
        with self._lock:
            return len(self._rooms.get(room, ()))

    def contains(self, room: str, sid: str) -> bool:
        with self._lock:
            return sid in self._rooms.get(room, ())

    def room_type(self, room: str) -> Optional[str]:
        with self._lock:
            return self._types.get(room)

    def room_of(self, sid: str) -> Optional[str]:
        with self._lock:
            for room, members in self._rooms.items():
                if sid in members:
                    return room
            return None

    def other_member(self, room: str, sid: str) -> Optional[str]:
        for member in sorted(self.members(room)):
            if member != sid:
                return member
        return None

    def rooms(self) -> List[str]:
        with self._lock:
            return sorted(self._rooms)

    def clear(self) -> None:
        with self._lock:
            self._rooms.clear()
            self._types.clear()


class TurnTracker:
    """Room name -> connection id allowed to submit next.

    ``None`` while the simulated opponent is thinking or before a game starts.
    """

    def __init__(self):
        self._active: Dict[str, Optional[str]] = {}
        self._lock = threading.Lock()

    def set_active(self, room: str, sid: Optional[str]) -> None:
        with self._lock:
            self._active[room] = sid

    def active(self, room: str) -> Optional[str]:
        with self._lock:
            return self._active.get(room)

    def discard(self, room: str) -> None:
        with self._lock:
            self._active.pop(room, None)

    def clear(self) -> None:
        with self._lock:
            self._active.clear()


class RoomState:
    """The stores one app's game handlers share: membership and turns."""

    def __init__(self):
        self.membership = RoomMembership()
        self.turns = TurnTracker()


def init_app(flask_app) -> RoomState:
    state = RoomState()
    flask_app.extensions[EXTENSION_KEY] = state
    return state


def get_room_state(flask_app=None) -> RoomState:
    return (flask_app or current_app).extensions[EXTENSION_KEY]
