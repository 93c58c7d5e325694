"""
Dataset validator for wordlebits.

What this module does:
- Validate the pair of data files: dictionary.txt ("word count" per line,
  the corpus) and answers.txt (past answers, one word per line).
- Enforce formatting rules (lowercase, a–z only, exactly 5 letters,
  non-negative integer counts).
- Detect duplicates and invalid lines; compute SHA-256 of the raw files.
- Check that answers ⊆ dictionary.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from wordlebits.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists("data/dictionary.txt", "data/answers.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from wordlebits.engine.scoring import WORD_LENGTH


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
    """Top-level validation result for the (dictionary, answers) pair."""
    N: int
    dictionary: FileReport
    answers: FileReport
    total_weight: float
    answers_subset_dictionary: bool
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _valid_word(w: str, N: int) -> bool:
    # require already-lowercase & alphabetic & exact length
    return w == w.lower() and w.isascii() and w.isalpha() and len(w) == N


def _load_dictionary(path: Path, N: int) -> Tuple[List[str], float, int]:
    """
    Rules:
      - exactly two tokens per line: word and count
      - word must be lowercase a–z with exact length N
      - count must be a non-negative integer
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, total_weight, invalid_count)
    """
    valid: List[str] = []
    total = 0.0
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            parts = raw.split()
            if (len(parts) != 2 or not _valid_word(parts[0], N)
                    or not (parts[1].isascii() and parts[1].isdigit())):
                invalid += 1
                continue
            valid.append(parts[0])
            total += int(parts[1])

    return valid, total, invalid


def _load_answers(path: Path, N: int) -> Tuple[List[str], int]:
    """One word per line; same word rules as the dictionary. Returns (valid_words, invalid_count)."""
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if _valid_word(w, N):
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def _report(path: Path, words: List[str], invalid: int) -> FileReport:
    return FileReport(
        path=str(path),
        exists=True,
        count=len(words),
        sha256=_sha256_file(path),
        unique_count=len(set(words)),
        invalid_lines=invalid,
    )


# -----------------------------
# Public API
# -----------------------------

def validate_wordlists(dictionary_path: str, answers_path: str, N: int = WORD_LENGTH) -> Dict:
    """
    Validate the dictionary/answers files.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with:
          - counts, SHA-256, duplicate/invalid flags, total frequency weight
          - answers ⊆ dictionary check
          - `passed` boolean (strict: requires non-empty, no invalids, subset OK)
          - `issues` (list of strings) to surface any problems
    """
    issues: List[str] = []

    dict_p = Path(dictionary_path)
    ans_p = Path(answers_path)

    # Early return if either file is missing
    if not dict_p.exists() or not ans_p.exists():
        if not dict_p.exists():
            issues.append(f"dictionary file not found: {dictionary_path}")
        if not ans_p.exists():
            issues.append(f"answers file not found: {answers_path}")
        rep = ValidationReport(
            N=N,
            dictionary=FileReport(dictionary_path, dict_p.exists(), 0, "", 0, 0),
            answers=FileReport(answers_path, ans_p.exists(), 0, "", 0, 0),
            total_weight=0.0,
            answers_subset_dictionary=False,
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    words, total_weight, dict_invalid = _load_dictionary(dict_p, N)
    answers, ans_invalid = _load_answers(ans_p, N)
    dict_report = _report(dict_p, words, dict_invalid)
    ans_report = _report(ans_p, answers, ans_invalid)

    subset_ok = set(answers).issubset(words)
    if not subset_ok:
        # Surface a few examples to debug quickly (limit to 5 for brevity)
        missing = sorted(set(answers) - set(words))[:5]
        issues.append(f"answers not subset of dictionary (e.g., {missing})")

    if dict_report.count == 0:
        issues.append("dictionary file contains 0 valid words")
    if total_weight <= 0 and dict_report.count:
        issues.append("dictionary counts sum to 0")
    if ans_report.count == 0:
        issues.append("answers file contains 0 valid words")

    if dict_invalid:
        issues.append(f"dictionary has {dict_invalid} invalid line(s)")
    if ans_invalid:
        issues.append(f"answers has {ans_invalid} invalid line(s)")

    if dict_report.count != dict_report.unique_count:
        issues.append("dictionary contains duplicate words")
    if ans_report.count != ans_report.unique_count:
        issues.append("answers contains duplicate lines")

    passed = (
            subset_ok
            and dict_invalid == 0
            and ans_invalid == 0
            and dict_report.count > 0
            and ans_report.count > 0
            and total_weight > 0
    )

    rep = ValidationReport(
        N=N,
        dictionary=dict_report,
        answers=ans_report,
        total_weight=total_weight,
        answers_subset_dictionary=subset_ok,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        dictionary=12972 (uniq=12972, sha=abc123...) | answers=2309 (uniq=2309, sha=def456...) | answers⊆dictionary=True | OK
    """
    d = report["dictionary"]
    a = report["answers"]
    subset = report["answers_subset_dictionary"]
    status = "OK" if report["passed"] else "FAIL"
    # abbreviate sha to 12 chars for readability
    d_sha = (d.get("sha256") or "")[:12]
    a_sha = (a.get("sha256") or "")[:12]
    return (
        f"dictionary={d['count']} (uniq={d['unique_count']}, sha={d_sha}) "
        f"| answers={a['count']} (uniq={a['unique_count']}, sha={a_sha}) "
        f"| answers⊆dictionary={subset} | {status}"
    )
