"""Session directory: one user record per logged-in connection.

Thin wrapper over the ``User`` table. Every read goes back to the database
so callers always see the state current at the point of use.
"""
from typing import List, Optional

from gameofthree import db
from gameofthree.errors import UserExists, UserNotFound
from gameofthree.models import User, normalize_room_type


def create_user(sid: str, name: str) -> User:
    if db.session.get(User, sid) is not None:
        raise UserExists(sid)
    user = User(sid=sid, name=name)
    db.session.add(user)
    db.session.commit()
    return user


def find_user(sid: str) -> Optional[User]:
    return db.session.get(User, sid)


def get_user(sid: str) -> User:
    user = find_user(sid)
    if user is None:
        raise UserNotFound(sid)
    return user


def set_room(sid: str, room: str, room_type: str) -> User:
    user = get_user(sid)
    user.room = room
    user.room_type = normalize_room_type(room_type)
    db.session.add(user)
    db.session.commit()
    return user


def clear_room(sid: str) -> None:
    user = find_user(sid)
    if user is None:
        return
    user.room = None
    user.room_type = None
    db.session.add(user)
    db.session.commit()


def delete_user(sid: str) -> bool:
    user = find_user(sid)
    if user is None:
        return False
    db.session.delete(user)
    db.session.commit()
    return True


def list_users() -> List[User]:
    return User.query.order_by(User.name).all()
