import time
from datetime import datetime, timezone

from flask import Blueprint, current_app, jsonify

main = Blueprint('main', __name__)


def _snapshot():
    return current_app.extensions['match_coordinator'].snapshot()


@main.route('/')
def index():
    state = _snapshot()
    return jsonify({
        'message': 'Chifourmi server is up!',
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'players': len(state['players']),
        'currentRound': state['currentRound'],
        'winner': state['winner'],
    })


@main.route('/health')
def health():
    state = _snapshot()
    started_at = current_app.config.get('STARTED_AT', time.time())
    return jsonify({
        'status': 'OK',
        'uptime': round(time.time() - started_at, 3),
        'players': len(state['players']),
        'gameState': state,
    })
