from flask import current_app, request
from flask_socketio import emit

from chifourmi import socketio
from chifourmi.services.match import InvalidPayload, MatchCoordinator, MatchError


def _coordinator() -> MatchCoordinator:
    return current_app.extensions['match_coordinator']


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _reject(exc: MatchError) -> None:
    """Report a rejected operation to the requesting connection only."""
    current_app.logger.warning(f"[rejected] sid={_get_sid()} code={exc.code} {exc.message}")
    emit('error', exc.message)


def handle_connect(auth=None):
    emit('connected', {'id': _get_sid()})


def handle_disconnect(reason=None):
    _coordinator().disconnect(_get_sid())


def handle_join_game(data=None):
    try:
        if not isinstance(data, dict):
            raise InvalidPayload('joinGame expects {name, city}')
        _coordinator().join(_get_sid(), data.get('name'), data.get('city'))
    except MatchError as exc:
        _reject(exc)


def handle_make_choice(choice=None):
    try:
        _coordinator().choose(_get_sid(), choice)
    except MatchError as exc:
        _reject(exc)


def handle_new_game(data=None):
    current_app.logger.info(f"[reset] requested by sid={_get_sid()}")
    _coordinator().reset()


def register_socketio_handlers(namespace: str = '/') -> None:
    """Register Socket.IO event handlers on the match namespace."""
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    socketio.on_event('joinGame', handle_join_game, namespace=namespace)
    socketio.on_event('makeChoice', handle_make_choice, namespace=namespace)
    socketio.on_event('newGame', handle_new_game, namespace=namespace)
