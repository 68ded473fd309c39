"""Data model for the three-door game: door contents, strategies, outcomes."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Sequence


DOORS = (1, 2, 3)


class Prize(Enum):
    """What sits behind a door."""
    CAR = "car"
    GOAT = "goat"


class Strategy(Enum):
    STAY = "stay"
    SWITCH = "switch"


class Outcome(Enum):
    WIN = "WIN"
    LOSE = "LOSE"


# Doors are numbered 1..3, so door d lives at game[d - 1].
GameState = tuple[Prize, Prize, Prize]


@dataclass(frozen=True)
class TrialResult:
    """One strategy's result in one trial."""
    strategy: Strategy
    outcome: Outcome


class InvalidArgument(ValueError):
    """Raised for bad counts, layouts or strategy names."""


class InvalidIndex(IndexError):
    """Raised when a door number is not one of 1, 2, 3."""


def check_door(door) -> int:
    """Validate a door number and return it."""
    if isinstance(door, bool) or not isinstance(door, int) or door not in DOORS:
        raise InvalidIndex(f"door must be one of {DOORS}, got {door!r}")
    return door


def check_game(game: Sequence[Prize]) -> GameState:
    """Validate a layout: three doors, exactly one car."""
    game = tuple(game)
    if len(game) != len(DOORS):
        raise InvalidArgument(f"game must have {len(DOORS)} doors, got {len(game)}")
    if any(not isinstance(p, Prize) for p in game):
        raise InvalidArgument(f"game contents must be Prize values, got {game!r}")
    cars = game.count(Prize.CAR)
    if cars != 1:
        raise InvalidArgument(f"game must hide exactly one car, found {cars}")
    return game


def behind(game: GameState, door: int) -> Prize:
    return game[check_door(door) - 1]


def parse_strategy(name: str | Strategy) -> Strategy:
    """Accept a Strategy or its name ("stay" / "switch", any case)."""
    if isinstance(name, Strategy):
        return name
    try:
        return Strategy(str(name).lower())
    except ValueError:
        raise InvalidArgument(f"unknown strategy {name!r}, expected 'stay' or 'switch'") from None
