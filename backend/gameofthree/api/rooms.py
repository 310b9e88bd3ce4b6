from flask import Blueprint, jsonify
from gameofthree import directory
from gameofthree.models import capacity_for
from gameofthree.rooms import get_room_state

main = Blueprint('main', __name__)
rooms_api = Blueprint('rooms_api', __name__)


@main.route('/')
def index():
    return jsonify({'message': 'Welcome to the Game of Three server!'})


def _room_to_dict(rooms, room):
    members = sorted(rooms.membership.members(room))
    users = [directory.find_user(sid) for sid in members]
    room_type = rooms.membership.room_type(room)
    capacity = capacity_for(room_type)
    return {
        'room': room,
        'roomType': room_type,
        'members': [u.to_dict() for u in users if u is not None],
        'capacity': capacity,
        'ready': len(members) == capacity,
        'activePlayer': rooms.turns.active(room),
    }


@rooms_api.route('/users', methods=['GET'])
def list_users():
    """
    Returns every logged-in user with their current room.
    """
    return jsonify([u.to_dict() for u in directory.list_users()]), 200


@rooms_api.route('/rooms', methods=['GET'])
def list_rooms():
    """
    Returns the non-empty rooms, for the lobby's room list.
    """
    rooms = get_room_state()
    return jsonify([_room_to_dict(rooms, room) for room in rooms.membership.rooms()]), 200


@rooms_api.route('/rooms/<string:room>', methods=['GET'])
def get_room(room):
    rooms = get_room_state()
    if rooms.membership.size(room) == 0:
        return jsonify({'error': 'Room not found'}), 404
    return jsonify(_room_to_dict(rooms, room)), 200
