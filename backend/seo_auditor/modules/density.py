# seo_auditor/modules/density.py
from collections import Counter
from typing import Dict, List

import regex

from seo_auditor.core.schemas import KeywordReport, PhraseMetric

TOP_K = 15

# English function words, filtered from single-word counts only
STOP_WORDS = frozenset("""
a an the is and or to of in for on with as at by from up out into over under above below
through about before after since until while where when why how all any both each few more
most other some such no nor not only own same so than too very s t can will just don should
now are be has have had do does did but if because against between during down off again
further then once here there
""".split())

# \w here includes combining marks (\p{M}), so Devanagari or NFD text stays whole
_NON_WORD = regex.compile(r"[^\w\s]")
_WHITESPACE = regex.compile(r"\s+")


def tokenize(text: str) -> List[str]:
    """Lowercase, strip punctuation and symbols, split on whitespace, drop 1-char tokens."""
    if not text:
        return []
    clean = _NON_WORD.sub("", text.lower())
    clean = _WHITESPACE.sub(" ", clean).strip()
    return [t for t in clean.split(" ") if len(t) > 1]


def count_ngrams(tokens: List[str], n: int, stop_words=STOP_WORDS) -> Dict[str, int]:
    """
    Count every n-token sliding window. Keys keep first-seen order.
    Stop words are skipped for n == 1 only.
    """
    counts: Counter = Counter()
    for i in range(len(tokens) - n + 1):
        phrase = " ".join(tokens[i:i + n])
        if n == 1 and phrase in stop_words:
            continue
        counts[phrase] += 1
    return counts


def rank_phrases(counts: Dict[str, int], total_tokens: int, n: int, top_k: int = TOP_K) -> List[PhraseMetric]:
    # The denominator counts every window, stop words included
    windows = total_tokens - (n - 1)
    # sorted() is stable with reverse=True, so ties keep insertion order
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)[:top_k]
    return [
        PhraseMetric(
            phrase=phrase,
            count=count,
            density=(count / windows * 100) if windows > 0 else 0.0,
        )
        for phrase, count in ranked
    ]


def analyze_density(text: str, top_k: int = TOP_K) -> KeywordReport:
    """
    Build the single, two-word and three-word phrase tables for a page body.
    Pure and total: any string (empty included) yields a report.
    """
    tokens = tokenize(text)
    total = len(tokens)
    tables = [rank_phrases(count_ngrams(tokens, n), total, n, top_k) for n in (1, 2, 3)]
    return KeywordReport(single=tables[0], two_word=tables[1], three_word=tables[2])
