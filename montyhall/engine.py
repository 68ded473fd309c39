"""Single-trial mechanics of the Monty Hall game.

One trial: the car is hidden, the contestant picks a door, the host opens
a goat door that is not the pick, then both strategies are resolved
against that same layout, pick and opened door.

Every random step takes an optional ``rng`` (anything with the
``random.Random`` interface). Without one, the module-level ``random``
generator is used.
"""

from __future__ import annotations
import random

from montyhall.game import (
    DOORS,
    GameState,
    Outcome,
    Prize,
    Strategy,
    TrialResult,
    InvalidIndex,
    behind,
    check_door,
    check_game,
)


def _rng(rng):
    return random if rng is None else rng


def create_game(*, rng=None) -> GameState:
    """Hide one car and two goats behind the doors, uniformly at random."""
    return tuple(_rng(rng).sample([Prize.GOAT, Prize.GOAT, Prize.CAR], k=len(DOORS)))


def select_door(*, rng=None) -> int:
    """The contestant's initial pick, uniform over 1..3."""
    return _rng(rng).choice(DOORS)


def open_goat_door(game: GameState, pick: int, *, rng=None) -> int:
    """Door the host opens: a goat, never the contestant's pick.

    If the pick hides the car, either goat door may be opened and the host
    chooses between them uniformly. Otherwise exactly one door qualifies.
    """
    game = check_game(game)
    check_door(pick)

    if behind(game, pick) is Prize.CAR:
        goat_doors = [d for d in DOORS if behind(game, d) is Prize.GOAT]
        return _rng(rng).choice(goat_doors)

    (opened,) = [d for d in DOORS if d != pick and behind(game, d) is Prize.GOAT]
    return opened


def change_door(stay: bool, opened: int, pick: int) -> int:
    """Final door: the pick when staying, else the last unopened door."""
    check_door(opened)
    check_door(pick)
    if opened == pick:
        raise InvalidIndex(f"host cannot open the picked door {pick}")

    if stay:
        return pick
    (remaining,) = [d for d in DOORS if d not in (opened, pick)]
    return remaining


def determine_winner(final_pick: int, game: GameState) -> Outcome:
    game = check_game(game)
    return Outcome.WIN if behind(game, final_pick) is Prize.CAR else Outcome.LOSE


def play_game(*, rng=None) -> list[TrialResult]:
    """Play one trial and resolve both strategies against it.

    Returns ``[TrialResult(STAY, ...), TrialResult(SWITCH, ...)]``. Both
    share the layout, the initial pick and the opened door, so exactly one
    of them wins.
    """
    new_game = create_game(rng=rng)
    first_pick = select_door(rng=rng)
    opened = open_goat_door(new_game, first_pick, rng=rng)

    final_stay = change_door(True, opened, first_pick)
    final_switch = change_door(False, opened, first_pick)

    return [
        TrialResult(Strategy.STAY, determine_winner(final_stay, new_game)),
        TrialResult(Strategy.SWITCH, determine_winner(final_switch, new_game)),
    ]
