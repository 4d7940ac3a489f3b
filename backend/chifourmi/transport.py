from typing import Any

from flask_socketio import SocketIO


class SocketIOTransport:
    """Delivers coordinator events over Socket.IO.

    Uses socketio.emit rather than flask_socketio.emit so it also works
    outside a handler's request context.
    """

    def __init__(self, socketio: SocketIO, namespace: str = '/'):
        self.socketio = socketio
        self.namespace = namespace

    def send(self, connection_id: str, event: str, payload: Any) -> None:
        # Every connection sits in a room named after its sid
        self.socketio.emit(event, payload, to=connection_id, namespace=self.namespace)

    def broadcast(self, event: str, payload: Any) -> None:
        self.socketio.emit(event, payload, namespace=self.namespace)
