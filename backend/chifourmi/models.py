from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


@dataclass
class Player:
    id: str
    name: str
    slot: str

    def to_dict(self):
        # The client still calls the slot a "city"
        return {
            'id': self.id,
            'name': self.name,
            'city': self.slot,
        }


@dataclass
class Match:
    """The single shared match held in memory for the life of the process."""

    slots: Tuple[str, ...]
    max_rounds: int = 3
    players: Dict[str, Player] = field(default_factory=dict)
    current_round: int = 0
    scores: Dict[str, int] = field(default_factory=dict)
    round_in_progress: bool = False
    choices: Dict[str, str] = field(default_factory=dict)
    winner: Optional[str] = None

    def __post_init__(self):
        if len(self.slots) != 2 or self.slots[0] == self.slots[1]:
            raise ValueError(f"A match needs exactly two distinct slots, got {self.slots!r}")
        if not self.scores:
            self.scores = self.zeroed_scores()

    def zeroed_scores(self) -> Dict[str, int]:
        return {slot: 0 for slot in self.slots}

    def player_in_slot(self, slot: str) -> Optional[Player]:
        for p in self.players.values():
            if p.slot == slot:
                return p
        return None

    @property
    def is_finished(self) -> bool:
        return self.winner is not None

    def to_dict(self):
        # Choice values stay private until the round resolves; only the slots
        # that have chosen are exposed.
        return {
            'players': {pid: p.to_dict() for pid, p in self.players.items()},
            'currentRound': self.current_round,
            'maxRounds': self.max_rounds,
            'scores': dict(self.scores),
            'roundInProgress': self.round_in_progress,
            'winner': self.winner,
            'slots': list(self.slots),
            'choicesMade': [
                self.players[pid].slot for pid in self.choices if pid in self.players
            ],
        }


@dataclass
class RoundResult:
    round: int
    choices: Dict[str, Dict[str, str]]
    winner: str
    scores: Dict[str, int]

    def to_dict(self):
        return {
            'round': self.round,
            'choices': {slot: dict(entry) for slot, entry in self.choices.items()},
            'winner': self.winner,
            'scores': dict(self.scores),
        }
