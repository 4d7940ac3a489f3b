"""Match domain services: rules, errors and the coordinator.

Socket handlers and HTTP routes import from here, keeping transport
concerns separated from the core match mechanics.
"""

from .coordinator import MatchCoordinator
from .errors import InvalidPayload, MatchError, MatchFinished, NotJoined, OccupiedSlot, RoundBusy

__all__ = [
    'MatchCoordinator',
    'MatchError',
    'OccupiedSlot',
    'NotJoined',
    'RoundBusy',
    'InvalidPayload',
    'MatchFinished',
]
