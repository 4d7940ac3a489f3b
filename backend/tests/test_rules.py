import pytest

from chifourmi.services.match.rules import CHOICES, TIE, beats, final_winner, is_valid_choice, judge


@pytest.mark.parametrize('winner, loser', [
    ('pierre', 'ciseaux'),
    ('ciseaux', 'papier'),
    ('papier', 'pierre'),
])
def test_judge_is_symmetric(winner, loser):
    assert beats(winner, loser)
    assert not beats(loser, winner)
    assert judge(winner, loser) == 0
    assert judge(loser, winner) == 1


@pytest.mark.parametrize('choice', CHOICES)
def test_equal_choices_tie(choice):
    assert judge(choice, choice) is None


def test_is_valid_choice():
    assert all(is_valid_choice(c) for c in CHOICES)
    assert not is_valid_choice('lizard')
    assert not is_valid_choice(None)
    assert not is_valid_choice(['pierre'])
    assert not is_valid_choice('PIERRE')


def test_final_winner():
    slots = ('france', 'tunisie')
    assert final_winner({'france': 2, 'tunisie': 1}, slots) == 'france'
    assert final_winner({'france': 0, 'tunisie': 1}, slots) == 'tunisie'
    assert final_winner({'france': 1, 'tunisie': 1}, slots) == TIE
    assert final_winner({'france': 0, 'tunisie': 0}, slots) == TIE
