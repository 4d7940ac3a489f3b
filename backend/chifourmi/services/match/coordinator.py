import logging
import threading
from typing import Any, Optional, Protocol

from chifourmi.models import Match, Player, RoundResult
from .errors import InvalidPayload, MatchFinished, NotJoined, OccupiedSlot, RoundBusy
from .rules import TIE, final_winner, is_valid_choice, judge


class Transport(Protocol):
    def send(self, connection_id: str, event: str, payload: Any) -> None: ...

    def broadcast(self, event: str, payload: Any) -> None: ...


class MatchCoordinator:
    """Applies join/choose/reset/disconnect to the shared match.

    Each public method holds the coordinator lock for its whole run,
    including any round resolution and the broadcasts it triggers, so other
    connections never observe a half-applied round. Rejections are raised as
    MatchError subclasses; the caller reports them to the requester.
    """

    def __init__(self, match: Match, transport: Transport, logger: Optional[logging.Logger] = None):
        self.match = match
        self.transport = transport
        self.logger = logger or logging.getLogger('chifourmi')
        self._lock = threading.RLock()

    # ---- operations ----

    def join(self, connection_id: str, name, slot) -> Player:
        with self._lock:
            m = self.match
            if not isinstance(name, str):
                raise InvalidPayload('Player name must be a string')
            if slot not in m.slots:
                raise InvalidPayload(f"Unknown team {slot!r}, expected one of: {', '.join(m.slots)}")

            existing = m.player_in_slot(slot)
            if existing:
                raise OccupiedSlot(f"Team {slot} is already taken by {existing.name}!")

            previous = m.players.get(connection_id)
            if previous:
                # Moving sides frees the old slot
                self.logger.info(f"[leave] {previous.name!r} left {previous.slot} to switch sides")
                self.transport.broadcast('playerLeft', previous.to_dict())

            player = Player(id=connection_id, name=name, slot=slot)
            m.players[connection_id] = player
            self.logger.info(f"[join] {name!r} joined as {slot} players={len(m.players)}")

            self.transport.send(connection_id, 'gameJoined', {
                'playerId': connection_id,
                'gameState': m.to_dict(),
            })
            self.transport.broadcast('playerJoined', player.to_dict())
            self._broadcast_state()
            return player

    def choose(self, connection_id: str, choice) -> None:
        with self._lock:
            m = self.match
            player = m.players.get(connection_id)
            if not player:
                raise NotJoined('You must join the game first!')
            if m.round_in_progress:
                raise RoundBusy('Round in progress, wait for the result!')
            if not is_valid_choice(choice):
                raise InvalidPayload(f"Invalid choice {choice!r}")
            if m.is_finished or m.current_round >= m.max_rounds:
                raise MatchFinished('The match is over, start a new game!')

            # A second choice in the same round replaces the first
            m.choices[connection_id] = choice
            self.logger.info(f"[choice] {player.name!r} ({player.slot}) has chosen")
            self.logger.debug(f"[choice] {player.name!r} ({player.slot}) chose {choice}")
            self.transport.broadcast('choiceMade', {'city': player.slot})

            if len(m.players) == 2 and all(pid in m.choices for pid in m.players):
                self._resolve_round()

    def reset(self) -> None:
        with self._lock:
            m = self.match
            m.current_round = 0
            m.choices = {}
            m.winner = None
            m.round_in_progress = False
            m.scores = m.zeroed_scores()
            self.logger.info(f"[reset] new match players={len(m.players)}")
            self._broadcast_state()

    def disconnect(self, connection_id: str) -> Optional[Player]:
        with self._lock:
            m = self.match
            player = m.players.pop(connection_id, None)
            if not player:
                return None
            m.choices.pop(connection_id, None)
            self.logger.info(f"[leave] {player.name!r} ({player.slot}) left players={len(m.players)}")
            self.transport.broadcast('playerLeft', player.to_dict())
            self._broadcast_state()
            return player

    def snapshot(self) -> dict:
        with self._lock:
            return self.match.to_dict()

    # ---- internals ----

    def _resolve_round(self) -> RoundResult:
        m = self.match
        m.round_in_progress = True
        try:
            # Apply the whole round before anything is broadcast
            m.current_round += 1
            first, second = list(m.players.values())
            choice1 = m.choices[first.id]
            choice2 = m.choices[second.id]

            outcome = judge(choice1, choice2)
            if outcome is None:
                round_winner = TIE
            else:
                round_winner = (first, second)[outcome].slot
                m.scores[round_winner] += 1
            if m.current_round >= m.max_rounds:
                m.winner = final_winner(m.scores, m.slots)
            m.choices = {}

            result = RoundResult(
                round=m.current_round,
                choices={
                    first.slot: {'player': first.name, 'choice': choice1},
                    second.slot: {'player': second.name, 'choice': choice2},
                },
                winner=round_winner,
                scores=dict(m.scores),
            )
            self.logger.info(
                f"[round] round={m.current_round} {first.name!r}({choice1}) vs "
                f"{second.name!r}({choice2}) winner={round_winner} scores={m.scores}"
            )

            self.transport.broadcast('roundResult', result.to_dict())
            if m.is_finished:
                self.logger.info(f"[finish] winner={m.winner} final_scores={m.scores}")
                self.transport.broadcast('gameFinished', {
                    'winner': m.winner,
                    'finalScores': dict(m.scores),
                })
        finally:
            m.round_in_progress = False

        self._broadcast_state()
        return result

    def _broadcast_state(self) -> None:
        self.transport.broadcast('gameUpdate', self.match.to_dict())
