class GameError(Exception):
    """Failure relayed to the requesting connection as an ``error`` event."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {'message': self.message, 'type': type(self).__name__}


class UserNotFound(GameError):
    def __init__(self, sid: str):
        super().__init__(f'No user registered for connection {sid}')
        self.sid = sid


class UserExists(GameError):
    def __init__(self, sid: str):
        super().__init__(f'Connection {sid} is already logged in')
        self.sid = sid


class RoomFull(GameError):
    def __init__(self, room: str, capacity: int):
        super().__init__(f'Room {room} is full ({capacity} max)')
        self.room = room
        self.capacity = capacity
