class MatchError(Exception):
    """Rejected match operation, reported to the requesting connection only."""

    code = 'match_error'

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class OccupiedSlot(MatchError):
    code = 'occupied_slot'


class NotJoined(MatchError):
    code = 'not_joined'


class RoundBusy(MatchError):
    code = 'round_busy'


class InvalidPayload(MatchError):
    code = 'invalid_payload'


class MatchFinished(MatchError):
    code = 'match_finished'
