import math

import pytest
from wordlebits.engine import CandidateSet, Corpus, entropy, rank_all, score

WORDS = ["crane", "raise", "stare", "trace", "cared", "adieu", "alone", "depot", "least", "tares"]


def _cands(pairs):
    return CandidateSet.from_corpus(Corpus.from_pairs(pairs))


def test_entropy_nonnegative_and_bounded():
    cands = CandidateSet.from_corpus(Corpus.uniform(WORDS))
    for g in WORDS:
        H = entropy(cands, g)
        assert 0.0 <= H <= math.log2(len(WORDS)) + 1e-9


def test_entropy_zero_iff_single_bucket():
    # 'zzzzz' shares no letter with any candidate -> one bucket
    cands = CandidateSet.from_corpus(Corpus.uniform(["abcde", "fghij", "klmno"]))
    assert entropy(cands, "zzzzz") == 0.0
    # 'abcde' isolates itself; the other two share the all-wrong bucket
    expected = -(1 / 3 * math.log2(1 / 3) + 2 / 3 * math.log2(2 / 3))
    assert entropy(cands, "abcde") == pytest.approx(expected)
    # 'afkzz' hits one letter of each word in a different spot -> 3 buckets
    assert entropy(cands, "afkzz") == pytest.approx(math.log2(3))


def test_entropy_uses_frequency_weights():
    # 'abcde' splits {abcde} from {fghij}: p = 3/4, 1/4
    cands = _cands([("abcde", 3), ("fghij", 1)])
    expected = -(0.75 * math.log2(0.75) + 0.25 * math.log2(0.25))
    assert entropy(cands, "abcde") == pytest.approx(expected)


def test_entropy_zero_total_weight():
    cands = _cands([("abcde", 0), ("fghij", 0)])
    assert entropy(cands, "abcde") == 0.0


def test_score_is_probability_times_entropy():
    cands = _cands([("abcde", 3), ("fghij", 1)])
    H = entropy(cands, "abcde")
    assert score(cands, "abcde") == pytest.approx(0.75 * H)
    assert score(cands, "fghij") == pytest.approx(0.25 * H)
    # not a candidate -> no probability mass
    assert score(cands, "zzzzz") == 0.0


def test_rank_all_orders_by_score_then_entropy_then_word():
    cands = _cands([("fghij", 1), ("abcde", 1)])
    ranked = rank_all(cands)
    # identical score and entropy -> alphabetical
    assert [r.word for r in ranked] == ["abcde", "fghij"]
    assert ranked[0].score == pytest.approx(0.5)
    assert ranked[0].entropy == pytest.approx(1.0)


def test_rank_all_prefers_likely_words():
    cands = _cands([("abcde", 1), ("fghij", 5)])
    assert rank_all(cands)[0].word == "fghij"
    # without the prior both carry 1 bit and the alphabetical word wins
    assert rank_all(cands, use_prior=False)[0].word == "abcde"


def test_rank_all_corpus_pool_uses_entropy_tiebreak():
    cands = CandidateSet.from_corpus(Corpus.uniform(["abcde", "fghij"]))
    ranked = rank_all(cands, ["zzzzz", "abcde", "fghij"])
    assert ranked[-1].word == "zzzzz"
    assert ranked[-1].score == 0.0 and ranked[-1].entropy == 0.0


def test_rank_all_parallel_matches_serial():
    cands = CandidateSet.from_corpus(Corpus.from_pairs((w, i + 1) for i, w in enumerate(WORDS)))
    serial = rank_all(cands)
    parallel = rank_all(cands, workers=2, parallel_threshold=1)
    assert [r.word for r in parallel] == [r.word for r in serial]
    assert [r.score for r in parallel] == pytest.approx([r.score for r in serial])


def test_rank_all_zero_score_guesses_order_by_entropy():
    cands = CandidateSet.from_corpus(Corpus.uniform(["abcde", "fghij", "klmno"]))
    ranked = rank_all(cands, ["zzzzz", "aaaaa", "afkzz", "abcde"])
    # abcde is the only candidate; the rest score 0 and sort by entropy,
    # so afkzz (3 buckets) beats aaaaa even though aaaaa sorts first
    assert [r.word for r in ranked] == ["abcde", "afkzz", "aaaaa", "zzzzz"]
    assert [r.score for r in ranked[1:]] == [0.0, 0.0, 0.0]
    assert ranked[1].entropy == pytest.approx(math.log2(3))
    assert ranked[2].entropy == pytest.approx(-(1 / 3 * math.log2(1 / 3) + 2 / 3 * math.log2(2 / 3)))
