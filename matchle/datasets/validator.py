"""
Word-list validator.

What this module does:
- Validate a word list (one token per line) destined for a Corpus of length N.
- Enforce formatting rules (lowercase, a–z only, exact length N, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from matchle.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist(5, "data/words_5.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered


@dataclass
class ValidationReport:
    """Top-level validation result for one word list."""
    N: int
    words: FileReport
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase a–z
      - must have exact length N
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and w == w.lower() and w.isalpha() and len(w) == N:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(N: int, path: str) -> Dict:
    """
    Validate a word list for corpus length N.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with
        counts, SHA-256, duplicate/invalid diagnostics, a strict `passed`
        flag (non-empty, no invalid lines) and `issues`.
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"word list not found: {path}")
        rep = ValidationReport(
            N=N,
            words=FileReport(path, False, 0, "", 0, 0),
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    words, invalid = _load_and_check(p, N)
    report = FileReport(
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(set(words)),
        invalid_lines=invalid,
    )

    if report.count == 0:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    # duplicates collapse silently in the corpus, so they are reported but not fatal
    if report.count != report.unique_count:
        issues.append("word list contains duplicate lines")

    passed = report.count > 0 and invalid == 0

    return asdict(ValidationReport(N=N, words=report, passed=passed, issues=issues))


def pretty_summary(report: Dict) -> str:
    """
    Compact, human-friendly one-liner for console output.

    Example:
        N=5 | words=2315 (uniq=2315, sha=abc123def456) | OK
    """
    w = report["words"]
    status = "OK" if report["passed"] else "FAIL"
    sha = (w.get("sha256") or "")[:12]
    return f"N={report['N']} | words={w['count']} (uniq={w['unique_count']}, sha={sha}) | {status}"
