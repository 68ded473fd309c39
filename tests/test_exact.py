"""Tests for the exact state-graph model of the game."""

import sys
import os
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from montyhall.exact import MontyHall, expected_desire, exact_win_probabilities
from montyhall.game import Strategy


def approx(a, b, tolerance=1e-9):
    """Check approximate equality."""
    return abs(a - b) < tolerance


def test_exact_win_probabilities():
    probs = exact_win_probabilities()
    assert approx(probs[Strategy.STAY], 1 / 3)
    assert approx(probs[Strategy.SWITCH], 2 / 3)


def test_strategies_complementary():
    probs = exact_win_probabilities()
    assert approx(sum(probs.values()), 1.0)


def test_transitions_sum_to_one():
    for state in [("setup",), ("hidden", 2), ("picked", 1, 1), ("picked", 1, 3)]:
        total = sum(p for p, _ in MontyHall.get_transitions(state))
        assert approx(total, 1.0)


def test_host_tie_break_splits_evenly():
    trans = MontyHall.get_transitions(("picked", 1, 1))
    assert sorted(s for _, s in trans) == [("opened", 1, 1, 2), ("opened", 1, 1, 3)]
    assert all(approx(p, 0.5) for p, _ in trans)


def test_host_forced_when_pick_is_goat():
    trans = MontyHall.get_transitions(("picked", 3, 1))
    assert trans == [(1.0, ("opened", 3, 1, 2))]


@pytest.mark.parametrize("strategy, final", [(Strategy.STAY, 1), (Strategy.SWITCH, 3), ("switch", 3)])
def test_decision_transition(strategy, final):
    trans = MontyHall.get_transitions(("opened", 3, 1, 2), strategy)
    assert trans == [(1.0, ("final", 3, final))]


def test_terminal_states():
    assert not MontyHall.is_terminal(MontyHall.initial_state())
    assert MontyHall.is_terminal(("final", 1, 1))
    assert MontyHall.get_transitions(("final", 1, 1)) == []


def test_desire():
    assert MontyHall.compute_intrinsic_desire(("final", 2, 2)) == 1.0
    assert MontyHall.compute_intrinsic_desire(("final", 2, 3)) == 0.0
    assert MontyHall.compute_intrinsic_desire(("picked", 2, 2)) == 0.0


def test_win_probability_given_pick():
    """Having picked the car, staying wins for sure; otherwise switching does."""
    d = expected_desire(MontyHall, Strategy.STAY)
    assert approx(d[("picked", 2, 2)], 1.0)
    assert approx(d[("picked", 2, 1)], 0.0)
    assert approx(d[("hidden", 2)], 1 / 3)


class LeakyGame:
    """Transitions from the start only carry half the probability mass."""

    @staticmethod
    def initial_state():
        return "start"

    @staticmethod
    def is_terminal(state):
        return state == "end"

    @staticmethod
    def get_transitions(state, config=None):
        return [(0.5, "end")] if state == "start" else []

    @staticmethod
    def compute_intrinsic_desire(state):
        return 0.0


def test_expected_desire_detects_leaky_transitions():
    with pytest.raises(RuntimeError):
        expected_desire(LeakyGame)


def test_expected_desire_switch():
    """Switching away from a goat pick always lands on the car."""
    d = expected_desire(MontyHall, Strategy.SWITCH)
    assert approx(d[("final", 1, 1)], 1.0)
    assert approx(d[MontyHall.initial_state()], 2 / 3)
