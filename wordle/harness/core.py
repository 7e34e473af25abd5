"""
Game loop primitives.

- run_game:  play one game against a Dictionary, asking for guesses through
             a callback until the word is found or the turn budget runs out.
- run_batch: replay many recorded games in sequence.
- Enforces the 6-turn limit at the harness layer.

These functions are UI-agnostic: the terminal CLI, the replay tool and the
tests all drive the same loop with different `ask` callbacks.
"""

from __future__ import annotations
import random
import time
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from tqdm import tqdm

from wordle.datasets.dictionary import Dictionary
from wordle.engine import ScoredGuess, is_solved, normalize, score, to_pattern

# Single source of truth for the turn budget.
MAX_TURNS = 6

Ask = Callable[[int], Optional[str]]
Game = Tuple[str, Sequence[str]]  # (target, guesses in order)


def _assert_turns(max_turns: int) -> None:
    """Guardrail: prevent accidental runs with a different turn budget."""
    if max_turns != MAX_TURNS:
        raise ValueError(f"max_turns must be {MAX_TURNS}; got {max_turns}")


def run_game(
        dictionary: Dictionary,
        ask: Ask,
        *,
        target: str | None = None,
        rng: random.Random | None = None,
        max_turns: int = MAX_TURNS,
        on_invalid: Callable[[str], None] | None = None,
        on_score: Callable[[int, ScoredGuess], None] | None = None,
) -> Dict:
    """
    Play one game until it is solved, the turns run out, or the player quits.

    Args:
        dictionary: word lists used for target selection and guess validation
        ask:        ask(turn) -> raw guess, or None when the player quits
        target:     hidden word; picked with dictionary.select_target(rng) if None
        rng:        RNG for target selection
        max_turns:  must be 6 (enforced)
        on_invalid: called with each rejected guess; the same turn is asked again
        on_score:   called with (turn, scored_guess) after every valid guess

    Returns:
        dict with keys:
            answer (str), success (bool), guesses (int), invalid (int),
            quit (bool), time_ms (float), history (list[(guess, pattern)])

    Raises:
        EmptyDictionary if no target is given and the answers list is empty.
    """
    _assert_turns(max_turns)

    if target is None:
        target = dictionary.select_target(rng)
    target = normalize(target)

    history: List[Tuple[str, str]] = []
    invalid = 0
    success = False
    quit_ = False

    t0 = time.perf_counter()
    for turn in range(1, max_turns + 1):
        # Re-ask until the dictionary accepts the guess; rejects cost no turn
        guess = ask(turn)
        while guess is not None and not dictionary.is_valid_word(guess):
            invalid += 1
            if on_invalid is not None:
                on_invalid(guess)
            guess = ask(turn)

        if guess is None:
            quit_ = True
            break

        guess = normalize(guess)
        scored = score(target, guess)
        history.append((guess, to_pattern(scored)))
        if on_score is not None:
            on_score(turn, scored)

        if is_solved(scored):
            success = True
            break

    return {
        "answer": target,
        "success": success,
        "guesses": len(history),
        "invalid": invalid,
        "quit": quit_,
        "time_ms": (time.perf_counter() - t0) * 1000.0,
        "history": history,
    }


def scripted(guesses: Iterable[str]) -> Ask:
    """
    An `ask` callback that hands out recorded guesses in order and then
    reports a quit (None) once they are exhausted.
    """
    it: Iterator[str] = iter(guesses)

    def ask(turn: int) -> Optional[str]:
        return next(it, None)

    return ask


def run_batch(
        dictionary: Dictionary,
        games: Iterable[Game],
        *,
        max_turns: int = MAX_TURNS,
        progress: bool = False,
) -> List[Dict]:
    """
    Replay recorded games back-to-back.

    Each game is (target, guesses). Guesses the dictionary rejects are
    counted as invalid and skipped, exactly as in an interactive game.
    """
    _assert_turns(max_turns)

    games = list(games)
    out: List[Dict] = []
    for target, guesses in tqdm(games, ncols=80, desc="Replaying", unit="game",
                                disable=not progress):
        out.append(run_game(dictionary, scripted(guesses), target=target,
                            max_turns=max_turns))
    return out
