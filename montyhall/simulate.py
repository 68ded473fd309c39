"""Repeated trials and win-rate aggregation.

Counting and proportions are pure functions over a list of TrialResult;
``format_table`` renders them and ``play_n_games`` prints the rendering.
``simulate_win_rates`` compares a batch against the exact probabilities.
"""

from __future__ import annotations
import random

from montyhall.engine import play_game
from montyhall.exact import exact_win_probabilities
from montyhall.game import InvalidArgument, Outcome, Strategy, TrialResult


def _check_n(n) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidArgument(f"n must be a positive integer, got {n!r}")
    if n < 1:
        raise InvalidArgument(f"n must be a positive integer, got {n}")
    return n


def count_outcomes(results: list[TrialResult]) -> dict[Strategy, dict[Outcome, int]]:
    """Tally outcomes per strategy. Every cell is present, possibly 0."""
    counts = {s: {o: 0 for o in Outcome} for s in Strategy}
    for r in results:
        counts[r.strategy][r.outcome] += 1
    return counts


def proportion_table(results: list[TrialResult], digits: int = 2) -> dict[Strategy, dict[Outcome, float]]:
    """Row proportions of WIN/LOSE per strategy, rounded to ``digits``.

    LOSE is the complement of the rounded WIN cell, so each non-empty row
    sums to exactly 1. A strategy with no results gets 0.0 in both cells.
    """
    table = {}
    for strategy, row in count_outcomes(results).items():
        total = sum(row.values())
        if not total:
            table[strategy] = {Outcome.WIN: 0.0, Outcome.LOSE: 0.0}
            continue
        win = round(row[Outcome.WIN] / total, digits)
        table[strategy] = {Outcome.WIN: win, Outcome.LOSE: round(1 - win, digits)}
    return table


def format_table(table: dict[Strategy, dict[Outcome, float]]) -> str:
    """Render a proportion table as a strategy x outcome cross-tab."""
    columns = sorted(Outcome, key=lambda o: o.value)
    width = max([len("strategy")] + [len(s.value) for s in table])
    lines = ["outcome".rjust(width + 1 + len("outcome"))]
    lines.append("strategy".ljust(width) + " " + " ".join(f"{o.value:>5}" for o in columns))
    for strategy, row in table.items():
        cells = " ".join(f"{row[o]:5.2f}" for o in columns)
        lines.append(f"{strategy.value:<{width}} {cells}")
    return "\n".join(lines)


def play_n_games(n: int = 100, *, seed: int | None = None, rng=None, show: bool = True) -> list[TrialResult]:
    """Play ``n`` trials and return all 2n results in play order.

    Prints the win/lose proportions per strategy unless ``show`` is False.
    ``seed`` builds a private generator; ``rng`` supplies one directly.
    """
    n = _check_n(n)
    if seed is not None and rng is not None:
        raise InvalidArgument("pass either seed or rng, not both")
    if seed is not None:
        rng = random.Random(seed)

    results = []
    for _ in range(n):
        results.extend(play_game(rng=rng))

    if show:
        print(format_table(proportion_table(results)))

    return results


def simulate_win_rates(num_simulations: int = 10000, *, seed: int | None = None) -> dict:
    """Estimate win rates by simulation and compare with the exact values.

    Returns dict with:
        - stay_sim / switch_sim: simulated win proportions (unrounded)
        - stay_exact / switch_exact: exact probabilities
        - error: largest absolute difference between the two
        - num_simulations: trial count
    """
    return summarize_win_rates(play_n_games(num_simulations, seed=seed, show=False))


def summarize_win_rates(results: list[TrialResult]) -> dict:
    """Compare the win proportions of an existing batch with the exact values."""
    counts = count_outcomes(results)
    num_simulations = sum(counts[Strategy.STAY].values())
    if not num_simulations:
        raise InvalidArgument("cannot summarize an empty batch")
    exact = exact_win_probabilities()

    sim = {s: counts[s][Outcome.WIN] / num_simulations for s in Strategy}
    return {
        "stay_sim": sim[Strategy.STAY],
        "switch_sim": sim[Strategy.SWITCH],
        "stay_exact": exact[Strategy.STAY],
        "switch_exact": exact[Strategy.SWITCH],
        "error": max(abs(sim[s] - exact[s]) for s in Strategy),
        "num_simulations": num_simulations,
    }
