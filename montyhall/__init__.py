"""Monty Hall simulation: stay vs switch over repeated three-door trials."""

from .game import Prize, Strategy, Outcome, TrialResult, InvalidArgument, InvalidIndex
from .engine import create_game, select_door, open_goat_door, change_door, determine_winner, play_game
from .simulate import play_n_games, proportion_table, format_table, simulate_win_rates, summarize_win_rates
from .exact import exact_win_probabilities

__all__ = [
    "Prize", "Strategy", "Outcome", "TrialResult", "InvalidArgument", "InvalidIndex",
    "create_game", "select_door", "open_goat_door", "change_door", "determine_winner", "play_game",
    "play_n_games", "proportion_table", "format_table", "simulate_win_rates", "summarize_win_rates",
    "exact_win_probabilities",
]
