from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_socketio import SocketIO
import click
from gameofthree.config import Config

db = SQLAlchemy()
socketio = SocketIO(async_mode=None)

def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    allowed_origins = flask_app.config.get('CORS_ORIGINS') or '*'
    if allowed_origins == ['*']:
        allowed_origins = '*'

    db.init_app(flask_app)
    # Room membership and turn stores, owned by this app
    from gameofthree import rooms
    rooms.init_app(flask_app)
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    from gameofthree.api.rooms import main, rooms_api
    flask_app.register_blueprint(main)
    # Room listing for the lobby UI, refreshed on every listTrigger
    flask_app.register_blueprint(rooms_api, url_prefix='/api')

    from gameofthree.socketio_events import register_socketio_handlers
    register_socketio_handlers(namespace=flask_app.config.get('SOCKETIO_NAMESPACE', '/'))

    # The session directory is process-local; no migrations to run
    from gameofthree import models  # noqa: F401
    with flask_app.app_context():
        db.create_all()

    @click.command('directory-reset')
    def directory_reset_command():
        """Drops and recreates the session directory."""
        with flask_app.app_context():
            db.drop_all()
            db.create_all()
            print('Session directory has been reset!')

    flask_app.cli.add_command(directory_reset_command)

    return flask_app
