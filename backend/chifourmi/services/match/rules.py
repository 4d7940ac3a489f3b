from typing import Dict, Optional, Sequence

PIERRE = 'pierre'
PAPIER = 'papier'
CISEAUX = 'ciseaux'

CHOICES = (PIERRE, PAPIER, CISEAUX)

# choice -> the choice it defeats
BEATS = {
    PIERRE: CISEAUX,
    CISEAUX: PAPIER,
    PAPIER: PIERRE,
}

TIE = 'tie'


def is_valid_choice(value) -> bool:
    return isinstance(value, str) and value in BEATS


def beats(a: str, b: str) -> bool:
    return BEATS[a] == b


def judge(a: str, b: str) -> Optional[int]:
    """Compare two choices.

    Returns 0 if the first choice wins, 1 if the second wins and None on a
    tie. Equal choices always tie; there is no tie-break inside a round.
    """
    if a == b:
        return None
    return 0 if beats(a, b) else 1


def final_winner(scores: Dict[str, int], slots: Sequence[str]) -> str:
    """Slot with the higher cumulative score, or TIE on equal scores."""
    first, second = slots
    if scores.get(first, 0) > scores.get(second, 0):
        return first
    if scores.get(second, 0) > scores.get(first, 0):
        return second
    return TIE
