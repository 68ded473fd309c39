"""Exact win probabilities via the game's state graph.

State: a tuple whose first element names the stage.
- ("setup",)
- ("hidden", car)
- ("picked", car, pick)
- ("opened", car, pick, opened)
- ("final", car, final_pick)            terminal
"""

from __future__ import annotations

from montyhall.engine import change_door
from montyhall.game import DOORS, Strategy, parse_strategy


def _uniform(states):
    return [(1.0 / len(states), s) for s in states]


class MontyHall:
    """The three-door game as a state graph. ``config`` is the Strategy."""

    @staticmethod
    def initial_state():
        return ("setup",)

    @staticmethod
    def is_terminal(state):
        return state[0] == "final"

    @staticmethod
    def get_transitions(state, config=None):
        stage = state[0]
        if stage == "setup":
            return _uniform([("hidden", car) for car in DOORS])

        if stage == "hidden":
            _, car = state
            return _uniform([("picked", car, pick) for pick in DOORS])

        if stage == "picked":
            _, car, pick = state
            # Host opens a goat door that is not the pick; ties split evenly.
            return _uniform([("opened", car, pick, d) for d in DOORS if d not in (car, pick)])

        if stage == "opened":
            _, car, pick, opened = state
            stay = parse_strategy(config or Strategy.STAY) is Strategy.STAY
            return [(1.0, ("final", car, change_door(stay, opened, pick)))]

        return []

    @staticmethod
    def compute_intrinsic_desire(state):
        if state[0] != "final":
            return 0.0
        _, car, final_pick = state
        return 1.0 if final_pick == car else 0.0


def expected_desire(game, config=None) -> dict:
    """Expected intrinsic desire of every state reachable from the start.

    With a 1/0 win/lose desire this is P(win) from each state. Raises
    RuntimeError if terminal states are not reached with probability 1.
    """
    desire = {}
    ending = {}

    def visit(s):
        if s in desire:
            return
        desire[s] = game.compute_intrinsic_desire(s)
        ending[s] = 1.0 if game.is_terminal(s) else 0.0
        for prob, next_s in game.get_transitions(s, config):
            visit(next_s)
            desire[s] += prob * desire[next_s]
            ending[s] += prob * ending[next_s]

    start = game.initial_state()
    visit(start)
    if abs(ending[start] - 1.0) > 0.001:
        raise RuntimeError(f"Bug in probability propagation: total_end_probability={ending[start]:.6f}")
    return desire


def exact_win_probabilities() -> dict[Strategy, float]:
    """Exact P(win) per strategy: 1/3 for stay, 2/3 for switch."""
    return {s: expected_desire(MontyHall, s)[MontyHall.initial_state()] for s in Strategy}
