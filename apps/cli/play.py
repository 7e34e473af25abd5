# apps/cli/play.py
"""
Interactive terminal game.

This script:
  1) Validates the word lists and prints a one-line summary.
  2) Loads them once into a Dictionary.
  3) Plays games back-to-back: picks a target, prompts for up to 6 valid
     guesses, prints the feedback for each, and reveals the word at the end.

Stops after --games games, or at end of input (Ctrl-D) when --games is 0.

    python -m apps.cli.play --seed 7
"""

from __future__ import annotations

import argparse
import random
import sys
from typing import Optional, TextIO

from wordle.datasets import (
    DEFAULT_ALLOWED, DEFAULT_ANSWERS, Dictionary, EmptyDictionary, pretty_summary,
    validate_wordlists,
)
from wordle.engine import ScoredGuess, WORD_LENGTH
from wordle.harness import MAX_TURNS, run_game


def render(scored: ScoredGuess) -> str:
    """
    Two aligned rows: the guess letters and their G/Y/- codes.

        S T A L E
        G Y G Y G
    """
    letters = " ".join(c.upper() for c, _ in scored)
    codes = " ".join(cls.code for _, cls in scored)
    return f"{letters}\n{codes}"


def _make_ask(inp: TextIO, out: TextIO):
    def ask(turn: int) -> Optional[str]:
        out.write(f"Enter guess #{turn}: \n")
        out.flush()
        line = inp.readline()
        if not line:
            return None  # EOF
        return line.rstrip("\r\n")

    return ask


def play(dictionary: Dictionary, *, games: int = 0, seed: int | None = None,
         inp: Optional[TextIO] = None, out: Optional[TextIO] = None) -> int:
    """
    Run the interactive loop (stdin/stdout unless given). Returns the number
    of games solved. Raises EmptyDictionary if no target can be picked.
    """
    inp = inp if inp is not None else sys.stdin
    out = out if out is not None else sys.stdout
    rng = random.Random(seed)
    ask = _make_ask(inp, out)
    solved = 0
    played = 0

    while games == 0 or played < games:
        out.write("Starting new game...\n")
        result = run_game(
            dictionary,
            ask,
            rng=rng,
            on_invalid=lambda g: out.write("That is not a valid word\n"),
            on_score=lambda turn, scored: out.write(render(scored) + "\n"),
        )
        played += 1

        if result["success"]:
            solved += 1
            out.write(f"Congratulations! You solved it in {result['guesses']} attempts.\n")
        out.write(f"The word was: {result['answer']}.\n\n")

        if result["quit"]:
            break

    return solved


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Guess the hidden five-letter word in six tries")
    ap.add_argument("--answers", default=str(DEFAULT_ANSWERS),
                    help="path to the target word list (one word per line)")
    ap.add_argument("--allowed", default=str(DEFAULT_ALLOWED),
                    help="path to extra accepted guesses (one word per line)")
    ap.add_argument("--games", type=int, default=0,
                    help="number of games to play (0 = until end of input)")
    ap.add_argument("--seed", type=int, help="RNG seed for target selection")
    args = ap.parse_args(argv)

    rep = validate_wordlists(WORD_LENGTH, args.answers, args.allowed)
    print(pretty_summary(rep), file=sys.stderr)
    for issue in rep["issues"]:
        print(f"  - {issue}", file=sys.stderr)

    try:
        dictionary = Dictionary.from_files(args.answers, args.allowed)
        solved = play(dictionary, games=args.games, seed=args.seed)
    except (FileNotFoundError, EmptyDictionary) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(f"Solved {solved} game(s) within {MAX_TURNS} guesses.", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
