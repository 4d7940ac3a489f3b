import time

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config

socketio = SocketIO(async_mode=None)


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.config.setdefault('STARTED_AT', time.time())
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    allowed_origins = flask_app.config.get('CORS_ORIGINS') or []
    CORS(flask_app, supports_credentials=True, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # One match per application, owned by its coordinator
    from chifourmi.models import Match
    from chifourmi.services.match import MatchCoordinator
    from chifourmi.transport import SocketIOTransport

    namespace = flask_app.config.get('SOCKETIO_NAMESPACE', '/')
    match = Match(
        slots=tuple(flask_app.config['MATCH_SLOTS']),
        max_rounds=int(flask_app.config.get('MAX_ROUNDS', 3)),
    )
    flask_app.extensions['match_coordinator'] = MatchCoordinator(
        match,
        SocketIOTransport(socketio, namespace=namespace),
        logger=flask_app.logger,
    )

    from chifourmi.routes import main
    flask_app.register_blueprint(main)

    from chifourmi.socketio_events import register_socketio_handlers
    register_socketio_handlers(namespace=namespace)

    flask_app.logger.info(
        f"[startup] slots={','.join(match.slots)} max_rounds={match.max_rounds} namespace={namespace}"
    )
    return flask_app
