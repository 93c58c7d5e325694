from pathlib import Path

import pytest
from wordlebits.datasets import load_answers, load_corpus, pretty_summary, validate_wordlists


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlists_happy_path(tmp_path: Path):
    dic = tmp_path / "dictionary.txt"
    ans = tmp_path / "answers.txt"
    _write(dic, ["crane 120", "raise 80", "stare 40", "trace 10", "cared 5"])
    _write(ans, ["crane", "raise", "stare"])

    rep = validate_wordlists(str(dic), str(ans))
    assert rep["passed"] is True
    assert rep["answers_subset_dictionary"] is True
    assert rep["total_weight"] == 255
    s = pretty_summary(rep)
    assert "dictionary=5" in s and "answers⊆dictionary=True" in s and s.endswith("OK")


def test_validate_wordlists_flags_errors(tmp_path: Path):
    dic = tmp_path / "dictionary.txt"
    ans = tmp_path / "answers.txt"
    # bad count, wrong length, uppercase, duplicate word
    dic.write_text("crane 12\nraise many\ncranes 3\nSTARE 4\ncrane 7\n", encoding="utf-8")
    ans.write_text("crane\n???\n", encoding="utf-8")

    rep = validate_wordlists(str(dic), str(ans))
    assert rep["passed"] is False
    assert rep["dictionary"]["invalid_lines"] == 3
    assert any("duplicate" in msg for msg in rep["issues"])
    assert any("invalid" in msg for msg in rep["issues"])


def test_validate_wordlists_subset_violation_and_missing(tmp_path: Path):
    dic = tmp_path / "dictionary.txt"
    ans = tmp_path / "answers.txt"
    _write(dic, ["crane 1", "stare 1"])
    _write(ans, ["crane", "raise"])  # 'raise' not in dictionary

    rep = validate_wordlists(str(dic), str(ans))
    assert rep["passed"] is False
    assert rep["answers_subset_dictionary"] is False
    assert any("subset" in msg for msg in rep["issues"])

    rep = validate_wordlists(str(tmp_path / "nope.txt"), str(ans))
    assert rep["passed"] is False
    assert rep["dictionary"]["exists"] is False


def test_load_corpus(tmp_path: Path):
    dic = tmp_path / "dictionary.txt"
    _write(dic, ["Crane 120", "", "cranes 3", "raise 80", "crane 1"])
    corpus = load_corpus(dic)
    assert corpus.words() == ["crane", "raise"]
    assert corpus.weight("crane") == 120.0


@pytest.mark.parametrize("line", [
    "crane", "crane many", "crane -4", "crane 1 2", "crane nan", "crane inf", "crane 1e3", "crane 2.5",
])
def test_load_corpus_rejects_malformed(tmp_path: Path, line):
    dic = tmp_path / "dictionary.txt"
    _write(dic, ["raise 80", line])
    with pytest.raises(ValueError, match="line 2"):
        load_corpus(dic)


def test_load_answers(tmp_path: Path):
    ans = tmp_path / "answers.txt"
    _write(ans, ["CIGAR", "", " rebut "])
    assert load_answers(ans) == ["cigar", "rebut"]
    with pytest.raises(FileNotFoundError):
        load_answers(tmp_path / "missing.txt")
