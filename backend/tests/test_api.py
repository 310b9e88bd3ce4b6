from conftest import login


def test_index(client):
    res = client.get('/')
    assert res.status_code == 200
    assert 'Game of Three' in res.get_json()['message']


def test_users_listing(client, sio_factory):
    alice = sio_factory()
    alice_sid = login(alice, 'Alice')
    users = client.get('/api/users').get_json()
    assert users == [{'id': alice_sid, 'name': 'Alice', 'room': None, 'roomType': None}]


def test_rooms_listing_reflects_membership(client, sio_factory):
    assert client.get('/api/rooms').get_json() == []

    alice, bob = sio_factory(), sio_factory()
    alice_sid = login(alice, 'Alice')
    alice.emit('joinRoom', {'username': 'Alice', 'room': 'R1', 'roomType': 'human'})
    room = client.get('/api/rooms/R1').get_json()
    assert room['capacity'] == 2
    assert room['ready'] is False
    assert room['roomType'] == 'human'

    bob_sid = login(bob, 'Bob')
    bob.emit('joinRoom', {'username': 'Bob', 'room': 'R1', 'roomType': 'human'})
    alice.emit('letsPlay')
    rooms = client.get('/api/rooms').get_json()
    assert len(rooms) == 1
    assert rooms[0]['ready'] is True
    assert rooms[0]['activePlayer'] == alice_sid
    assert {m['id'] for m in rooms[0]['members']} == {alice_sid, bob_sid}


def test_cpu_room_listing(client, sio_factory):
    alice = sio_factory()
    login(alice, 'Alice')
    alice.emit('joinRoom', {'username': 'Alice', 'room': 'C1', 'roomType': 'cpu'})
    room = client.get('/api/rooms/C1').get_json()
    assert room['capacity'] == 1
    assert room['ready'] is True


def test_unknown_room_is_404(client):
    res = client.get('/api/rooms/nowhere')
    assert res.status_code == 404
    assert res.get_json()['error'] == 'Room not found'
