from gameofthree import db

ROOM_TYPE_HUMAN = 'human'
ROOM_TYPE_CPU = 'cpu'


def normalize_room_type(room_type) -> str:
    """Anything other than ``cpu`` is played between two humans."""
    return ROOM_TYPE_CPU if room_type == ROOM_TYPE_CPU else ROOM_TYPE_HUMAN


def capacity_for(room_type) -> int:
    return 1 if normalize_room_type(room_type) == ROOM_TYPE_CPU else 2


class User(db.Model):
    __tablename__ = 'user'
    # Socket.IO connection id
    sid = db.Column(db.String(64), primary_key=True)
    name = db.Column(db.String(64), nullable=False)
    room = db.Column(db.String(128), nullable=True, index=True)
    room_type = db.Column(db.String(16), nullable=True)

    def to_dict(self):
        return {
            'id': self.sid,
            'name': self.name,
            'room': self.room,
            'roomType': self.room_type,
        }
