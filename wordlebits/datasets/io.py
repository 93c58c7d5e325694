from __future__ import annotations
from pathlib import Path
from typing import Iterable, List, Tuple

from wordlebits.engine import Corpus
from wordlebits.engine.scoring import WORD_LENGTH


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def parse_dictionary_line(line: str, lineno: int = 0) -> Tuple[str, float]:
    """
    Parse one "word count" line, e.g. "which 123456".
    Raises ValueError naming the line number when it is malformed.
    """
    parts = line.split()
    if len(parts) != 2:
        raise ValueError(f"line {lineno}: expected 'word count', got '{line.strip()}'")
    word, count = parts
    # occurrence counts are plain ASCII digits
    if not (count.isascii() and count.isdigit()):
        raise ValueError(f"line {lineno}: count must be a non-negative integer, got '{count}'")
    return word.lower(), float(count)


def load_corpus(p: Path | str, N: int = WORD_LENGTH) -> Corpus:
    """
    Load the word/frequency dictionary into an immutable Corpus.

    Blank lines are ignored, words that are not N letters a-z are dropped,
    and a repeated word keeps its first count.
    """
    pairs = []
    for lineno, line in enumerate(read_lines(p), start=1):
        if not line.strip():
            continue
        word, weight = parse_dictionary_line(line, lineno)
        if len(word) == N and word.isascii() and word.isalpha():
            pairs.append((word, weight))
    return Corpus.from_pairs(pairs)


def load_answers(p: Path | str) -> List[str]:
    """Past answers, one per line, lowercased, blanks dropped (order kept)."""
    return [w.strip().lower() for w in read_lines(p) if w.strip()]
