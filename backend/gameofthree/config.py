import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Session directory lives in memory unless pointed elsewhere
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # Informational only, used in the startup log line
    HOST_LOCAL = os.environ.get('HOST_LOCAL', 'localhost')
    SOCKET_PORT = int(os.environ.get('SOCKET_PORT', '8082'))
    CORS_ORIGINS = [o.strip() for o in os.environ.get('CORS_ORIGINS', '*').split(',') if o.strip()]
    SOCKETIO_NAMESPACE = os.environ.get('SOCKETIO_NAMESPACE', '/')
    # Simulated opponent think time (ms)
    CPU_MOVE_DELAY_MS = int(os.environ.get('CPU_MOVE_DELAY_MS', '2000'))
    # Opening number range (inclusive)
    FIRST_NUMBER_MIN = int(os.environ.get('FIRST_NUMBER_MIN', '1999'))
    FIRST_NUMBER_MAX = int(os.environ.get('FIRST_NUMBER_MAX', '9999'))
