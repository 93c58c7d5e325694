"""
Scrape past Wordle answers and write them as an answers file.

What it does:
- Downloads the page with historical answers.
- Parses visible text and extracts rows like: YYYY-MM-DD (Day) <num> <ANSWER>
- Captures the final 5-letter UPPERCASE token as the answer.
- Lowercases, de-duplicates while preserving calendar order.
- Optionally drops answers missing from the dictionary (--dictionary), since
  the solver can only ever find words in its corpus.

Usage:
    python -m script.extract_wordle_answers --out data/answers.txt
    python -m script.extract_wordle_answers --dictionary data/dictionary.txt --out data/answers.txt
"""

import re
import argparse

import requests
from bs4 import BeautifulSoup

from wordlebits.datasets import load_corpus, write_lines

URL = "https://wordlehints.co.uk/wordle-past-answers/"
ROW_RE = re.compile(r"(\d{4}-\d{2}-\d{2})\s*\([A-Za-z]+\)\s*\d+\s+([A-Z]{5})\b")


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def parse_answers(html: str) -> list[str]:
    """Answers found in the page text, oldest first as listed, without repeats."""
    text = BeautifulSoup(html, "html.parser").get_text("\n", strip=True)
    return unique_preserve_order(m.group(2).lower() for m in ROW_RE.finditer(text))


def fetch_answers(url: str = URL) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return parse_answers(r.text)


def main():
    ap = argparse.ArgumentParser(description="Extract unique past Wordle answers")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="data/answers.txt")
    ap.add_argument("--dictionary", help="keep only answers present in this 'word count' file")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "calendar order")
    args = ap.parse_args()

    answers = fetch_answers(args.url)
    if args.dictionary:
        corpus = load_corpus(args.dictionary)
        dropped = [a for a in answers if a not in corpus]
        answers = [a for a in answers if a in corpus]
        if dropped:
            print(f"Dropped {len(dropped)} answers not in {args.dictionary} (e.g. {dropped[:5]})")
    if args.sort:
        answers = sorted(answers)

    write_lines(answers, args.out)
    print(f"Wrote {len(answers)} unique answers -> {args.out}")


if __name__ == "__main__":
    main()
