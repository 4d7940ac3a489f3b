import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    PORT = int(os.environ.get('PORT', '3001'))
    # Rounds per match
    MAX_ROUNDS = int(os.environ.get('MAX_ROUNDS', '3'))
    # The two sides a player can occupy ("city" on the wire)
    MATCH_SLOTS = tuple(s.strip() for s in os.environ.get('MATCH_SLOTS', 'france,tunisie').split(',') if s.strip())
    SOCKETIO_NAMESPACE = os.environ.get('SOCKETIO_NAMESPACE', '/')
    CORS_ORIGINS = [
        o.strip()
        for o in os.environ.get('CORS_ORIGINS', 'http://localhost:4200,https://chifourmi.vercel.app').split(',')
        if o.strip()
    ]
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
