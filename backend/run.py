from gameofthree import create_app, socketio

app = create_app()

if __name__ == '__main__':
    app.logger.setLevel('INFO')
    app.logger.info(
        f"Socket Connection Established on {app.config['HOST_LOCAL']} in port {app.config['SOCKET_PORT']}"
    )
    # Use SocketIO server to enable websockets in dev
    socketio.run(app, host='0.0.0.0', port=app.config['SOCKET_PORT'], debug=True)
