"""
Word-list checker.

Reads the answers and allowed lists the same way Dictionary does and
reports what the game will actually see:
  - how many distinct playable words each list holds
  - lines the dictionary will skip (wrong length, non-letters), with line numbers
  - lines accepted only after trimming/lowercasing ("recased")
  - repeated words, and words listed in both files

Blank lines are ignored, exactly as the dictionary ignores them.

Typical use:
    from wordle.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists(5, "wordle/datasets/data/answers_5.txt",
                                "wordle/datasets/data/allowed_5.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Dict, List

from wordle.engine.validation import coerce_word
from .io import read_lines

# How many skipped lines to quote per file in `issues`.
_QUOTE_LIMIT = 3


def _check_list(path: str, N: int) -> Dict:
    p = Path(path)
    if not p.exists():
        return {"path": path, "exists": False, "words": [], "skipped": [],
                "recased": 0, "duplicates": []}

    words: List[str] = []
    skipped: List[List] = []  # [line_no, text]
    recased = 0
    for no, raw in enumerate(read_lines(p), start=1):
        if not raw.strip():
            continue
        w = coerce_word(raw, N)
        if w is None:
            skipped.append([no, raw])
            continue
        if w != raw:
            recased += 1
        words.append(w)

    dupes = sorted(w for w, n in Counter(words).items() if n > 1)
    return {"path": path, "exists": True, "words": words, "skipped": skipped,
            "recased": recased, "duplicates": dupes}


def validate_wordlists(N: int, answers_path: str, allowed_path: str) -> Dict:
    """
    Check the answers/allowed word lists for word length N.

    Returns a JSON-serializable dict:
      answers / allowed : {path, exists, count, skipped, recased, duplicates}
                          (count = distinct playable words)
      overlap           : sorted words present in both lists
      passed            : both files exist, nothing skipped, answers non-empty
      issues            : human-readable problems

    Recased lines and duplicates are reported but do not fail the check;
    the dictionary normalizes and dedupes them.
    """
    issues: List[str] = []
    lists = {"answers": _check_list(answers_path, N),
             "allowed": _check_list(allowed_path, N)}

    for name, rep in lists.items():
        if not rep["exists"]:
            issues.append(f"{name} file not found: {rep['path']}")
            continue
        if rep["skipped"]:
            quoted = ", ".join(f"line {no}: {text!r}" for no, text in rep["skipped"][:_QUOTE_LIMIT])
            issues.append(f"{name} has {len(rep['skipped'])} unplayable line(s) ({quoted})")
        if rep["duplicates"]:
            issues.append(f"{name} repeats {len(rep['duplicates'])} word(s)")

    overlap = sorted(set(lists["answers"]["words"]) & set(lists["allowed"]["words"]))
    if overlap:
        issues.append(f"{len(overlap)} word(s) listed in both answers and allowed")

    answers_count = len(set(lists["answers"]["words"]))
    if lists["answers"]["exists"] and answers_count == 0:
        issues.append("answers file contains 0 playable words")

    passed = (
            lists["answers"]["exists"]
            and lists["allowed"]["exists"]
            and not lists["answers"]["skipped"]
            and not lists["allowed"]["skipped"]
            and answers_count > 0
    )

    report: Dict = {"N": N, "overlap": overlap, "passed": passed, "issues": issues}
    for name, rep in lists.items():
        words = rep.pop("words")
        report[name] = dict(rep, count=len(set(words)))
    return report


def pretty_summary(report: Dict) -> str:
    """
    One line for the console, e.g.

        N=5 | answers=474 words | allowed=143 words (2 skipped) | overlap=0 | OK
    """
    def part(name: str) -> str:
        rep = report[name]
        if not rep["exists"]:
            return f"{name}=missing"
        extra = f" ({len(rep['skipped'])} skipped)" if rep["skipped"] else ""
        return f"{name}={rep['count']} words{extra}"

    status = "OK" if report["passed"] else "FAIL"
    return (f"N={report['N']} | {part('answers')} | {part('allowed')} "
            f"| overlap={len(report['overlap'])} | {status}")
