"""
Remove duplicate entries from a word list file.

Features:
- Preserves original order (stable dedupe; the first occurrence wins).
- Works on plain answer lists and on "word count" dictionaries: the key is
  the first token of each line, lowercased.
- Optional stripping of blank/whitespace-only lines.
- Optional sorting AFTER dedupe (alphabetical by key); otherwise keep input order.
- Overwrite in place by default, or write to a separate --out path.

Usage:
    python -m script.dedupe_txt --in data/dictionary.txt --strip-blanks
"""

import argparse
from pathlib import Path

from wordlebits.datasets import read_lines, write_lines


def line_key(s: str) -> str:
    parts = s.split()
    return parts[0].lower() if parts else ""


def unique_preserve_order(lines: list[str], key=line_key) -> list[str]:
    seen, out = set(), []
    for s in lines:
        k = key(s)
        if k not in seen:
            seen.add(k)
            out.append(s)
    return out


def main():
    ap = argparse.ArgumentParser(description="Remove duplicate words from a word list file.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--strip-blanks", action="store_true", help="drop empty/whitespace-only lines")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe (otherwise keep original order)")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp

    lines = read_lines(inp)
    if args.strip_blanks:
        lines = [s.strip() for s in lines if s.strip()]

    out = unique_preserve_order(lines)
    if args.sort:
        out = sorted(out, key=line_key)

    write_lines(out, outp)
    print(f"Input: {inp} ({len(lines)} lines) -> Output: {outp} ({len(out)} unique)")


if __name__ == "__main__":
    main()
