"""Command line entry point: ``python -m montyhall -n 10000 --seed 1``."""

import argparse

from montyhall.game import Strategy
from montyhall.simulate import play_n_games, summarize_win_rates


def _positive_int(text):
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return value


def main(argv=None):
    parser = argparse.ArgumentParser(prog="montyhall", description="Simulate stay vs switch in the Monty Hall game")
    parser.add_argument("-n", "--games", type=_positive_int, default=100, help="Number of trials (default: 100)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible run")
    parser.add_argument("--exact", action="store_true", help="Also print exact probabilities and the error")
    args = parser.parse_args(argv)

    results = play_n_games(args.games, seed=args.seed)

    if args.exact:
        summary = summarize_win_rates(results)
        print()
        for strategy in Strategy:
            name = strategy.value
            print(f"{name:<8} sim={summary[name + '_sim']:.4f}  exact={summary[name + '_exact']:.4f}")
        print(f"max error: {summary['error']:.4f}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
