# apps/cli/replay.py
"""
Replay recorded games through the game loop.

This script:
  1) Checks the word lists and prints a one-line summary.
  2) Reads games from a CSV (`answer`, `guess_1` ... columns; a previous
     replay's output works as input).
  3) Replays every game with a progress bar, writes one result row per game
     to --out, and prints how many were solved.

    python -m apps.cli.replay --games recorded.csv --out replayed.csv
"""

from __future__ import annotations

import argparse
import sys

from wordle.datasets import (
    DEFAULT_ALLOWED, DEFAULT_ANSWERS, Dictionary, pretty_summary, validate_wordlists,
)
from wordle.engine import WORD_LENGTH
from wordle.harness import MAX_TURNS, read_games, run_batch, write_csv


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Replay recorded games and write the results")
    ap.add_argument("--games", required=True, help="CSV of recorded games")
    ap.add_argument("--out", default="replayed.csv", help="CSV to write results to")
    ap.add_argument("--answers", default=str(DEFAULT_ANSWERS),
                    help="path to the target word list")
    ap.add_argument("--allowed", default=str(DEFAULT_ALLOWED),
                    help="path to extra accepted guesses")
    ap.add_argument("--progress", choices=["auto", "bar", "off"], default="auto",
                    help="progress bar (auto = only when stderr is a terminal)")
    args = ap.parse_args(argv)

    rep = validate_wordlists(WORD_LENGTH, args.answers, args.allowed)
    print(pretty_summary(rep), file=sys.stderr)

    try:
        dictionary = Dictionary.from_files(args.answers, args.allowed)
        games = read_games(args.games)
    except (FileNotFoundError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    show = args.progress == "bar" or (args.progress == "auto" and sys.stderr.isatty())
    results = run_batch(dictionary, games, progress=show)
    write_csv(results, args.out, max_turns=MAX_TURNS)

    solved = sum(1 for r in results if r["success"])
    invalid = sum(r["invalid"] for r in results)
    print(f"Replayed {len(results)} game(s): {solved} solved, {invalid} invalid guess(es) skipped.")
    print(f"Wrote: {args.out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
