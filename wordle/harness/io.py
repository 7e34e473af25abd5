"""
CSV in and out for recorded games.

- write_csv:  flatten per-game results into a tidy CSV (one row per game).
- read_games: read recorded games back; a write_csv file is valid input.

Notes:
- Patterns are prefixed with an apostrophe to keep Excel from interpreting
  strings like "-GYY-" as formulas (which would display as #NAME?).
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Tuple
import csv

from wordle.engine import is_well_formed, normalize
from .core import MAX_TURNS


def _excel_safe_pattern(patt: str) -> str:
    """
    Prefix with an apostrophe so spreadsheet apps treat it as text.
    Example: "-GYY-" -> "'-GYY-"
    """
    return "'" + patt if patt else patt


def write_csv(results: List[Dict], path: str, max_turns: int = MAX_TURNS) -> str:
    """
    Serialize a batch of game results to CSV.

    Schema (columns):
      answer, success, guesses, invalid, time_ms,
      guess_1, patt_1, guess_2, patt_2, ..., guess_max_turns, patt_max_turns

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["answer", "success", "guesses", "invalid", "time_ms"]
    for i in range(1, max_turns + 1):
        fields += [f"guess_{i}", f"patt_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "answer": r["answer"],
                "success": r["success"],
                "guesses": r["guesses"],
                "invalid": r.get("invalid", 0),
                "time_ms": round(float(r["time_ms"]), 3),
            }

            # Expand history into fixed columns (Excel-safe patterns)
            hist = r.get("history", [])
            for i in range(1, max_turns + 1):
                if i <= len(hist):
                    g, patt = hist[i - 1]
                    row[f"guess_{i}"] = g
                    row[f"patt_{i}"] = _excel_safe_pattern(patt)
                else:
                    row[f"guess_{i}"] = ""
                    row[f"patt_{i}"] = ""

            w.writerow(row)

    return str(p)


def read_games(path: str) -> List[Tuple[str, List[str]]]:
    """
    Read recorded games from a CSV with an `answer` column and any number of
    `guess_1`, `guess_2`, ... columns. Output of write_csv is valid input.

    Blank guess cells are skipped; guesses are left as recorded so the game
    loop can reject them. Raises FileNotFoundError if the file is missing and
    ValueError if there is no `answer` column or an answer is not a
    five-letter word.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(p)

    games: List[Tuple[str, List[str]]] = []
    with p.open("r", newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        fields = reader.fieldnames or []
        if "answer" not in fields:
            raise ValueError(f"{p}: missing 'answer' column")
        guess_cols = sorted(
            (c for c in fields if c.startswith("guess_") and c[6:].isdigit()),
            key=lambda c: int(c[6:]),
        )
        for line_no, row in enumerate(reader, start=2):
            answer = row["answer"] or ""
            if not is_well_formed(answer):
                raise ValueError(f"{p}:{line_no}: answer {answer!r} is not a five-letter word")
            guesses = [row[c].strip() for c in guess_cols if (row[c] or "").strip()]
            games.append((normalize(answer), guesses))
    return games

