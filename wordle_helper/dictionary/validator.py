"""
Dictionary report for a chosen word length.

What this module does:
- Scan a word list (one word per line) and classify each line for length N:
  usable (a–z after lowercasing, exact length N), other length, or invalid
  (blank, or non-alphabetic characters).
- Detect duplicate usable words; compute SHA-256 of the raw file.
- Return a machine-readable dict and provide a pretty one-line summary that
  the CLI prints before a session starts.

Typical use:
    from wordle_helper.dictionary import validate_wordlist, pretty_summary
    rep = validate_wordlist(5, "data/words_alpha.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List
import hashlib


@dataclass
class WordlistReport:
    """Per-file diagnostics for one word length."""
    N: int
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    lines: int           # total lines read
    usable: int          # lines that are clean N-letter words
    unique_usable: int   # usable words after dedupe
    other_length: int    # clean words of a different length (dropped silently)
    invalid_lines: int   # blank or non-alphabetic lines
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool = False
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def validate_wordlist(N: int, path: str) -> Dict:
    """
    Report on the word list at `path` for words of length N.

    Returns a JSON-serializable dict (see WordlistReport). `passed` is True
    when the file exists and has at least one usable word; invalid lines and
    duplicates are reported in `issues` but do not fail the report, since
    the engine drops them anyway.
    """
    p = Path(path)
    if not p.exists():
        rep = WordlistReport(N, path, False, 0, 0, 0, 0, 0, "",
                             issues=[f"dictionary not found: {path}"])
        return asdict(rep)

    lines = usable_count = other = invalid = 0
    seen = set()
    with p.open("r", encoding="utf-8", errors="replace") as f:
        for raw in f:
            lines += 1
            w = raw.strip().lower()
            if not w or not (w.isascii() and w.isalpha()):
                invalid += 1
            elif len(w) != N:
                other += 1
            else:
                usable_count += 1
                seen.add(w)

    rep = WordlistReport(
        N=N,
        path=str(p),
        exists=True,
        lines=lines,
        usable=usable_count,
        unique_usable=len(seen),
        other_length=other,
        invalid_lines=invalid,
        sha256=_sha256_file(p),
    )

    if rep.usable == 0:
        rep.issues.append(f"no usable {N}-letter words")
    if invalid:
        rep.issues.append(f"{invalid} invalid line(s)")
    if rep.usable != rep.unique_usable:
        rep.issues.append(f"{rep.usable - rep.unique_usable} duplicate word(s)")

    rep.passed = rep.usable > 0
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact, human-friendly one-liner for the console.

    Example:
        N=5 | words_alpha.txt: 15,921 usable (uniq=15,921) of 370,105 lines | sha=abc123def456 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    name = Path(report["path"]).name
    sha = (report.get("sha256") or "")[:12]
    line = (
        f"N={report['N']} | {name}: {report['usable']:,} usable "
        f"(uniq={report['unique_usable']:,}) of {report['lines']:,} lines "
        f"| sha={sha} | {status}"
    )
    if report["issues"]:
        line += " | " + "; ".join(report["issues"])
    return line
