import pytest

from gameofthree import directory
from gameofthree.errors import UserExists, UserNotFound


def test_create_and_get_user(flask_app):
    directory.create_user('sid-1', 'Alice')
    user = directory.get_user('sid-1')
    assert user.to_dict() == {'id': 'sid-1', 'name': 'Alice', 'room': None, 'roomType': None}


def test_duplicate_login_is_rejected(flask_app):
    directory.create_user('sid-1', 'Alice')
    with pytest.raises(UserExists):
        directory.create_user('sid-1', 'Alice again')


def test_missing_user_raises(flask_app):
    with pytest.raises(UserNotFound):
        directory.get_user('nope')
    with pytest.raises(UserNotFound):
        directory.set_room('nope', 'R1', 'human')
    assert directory.find_user('nope') is None


def test_room_assignment_lifecycle(flask_app):
    directory.create_user('sid-1', 'Alice')
    directory.set_room('sid-1', 'R1', 'cpu')
    assert directory.get_user('sid-1').room == 'R1'
    assert directory.get_user('sid-1').room_type == 'cpu'

    directory.clear_room('sid-1')
    assert directory.get_user('sid-1').room is None
    directory.clear_room('unknown')

    assert directory.delete_user('sid-1') is True
    assert directory.delete_user('sid-1') is False
    assert directory.list_users() == []
