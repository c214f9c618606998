"""Ranking of documents against search queries."""

from __future__ import annotations

import math
import re
from collections import Counter
from dataclasses import dataclass
from typing import Iterable

from docsearch.index import InvertedIndex

_WORD = re.compile(r"[^ \t\n\v\f\r]+")


@dataclass(frozen=True)
class RelativeIndex:
    """A document and its relevance to a query, scaled to at most 1."""

    doc_id: int
    rank: float


def _round_rank(value: float) -> float:
    return math.floor(value * 1000 + 0.5) / 1000


class SearchServer:
    """Answers queries using the word counts of an inverted index."""

    def __init__(self, index: InvertedIndex) -> None:
        self._index = index

    def search(
        self, queries: Iterable[str], responses_limit: int = 5
    ) -> list[list[RelativeIndex]]:
        """Return, for each query, documents ordered by descending rank.

        Repeated words in a query count once. Ties are ordered by document
        id, and each result keeps at most ``responses_limit`` documents.
        """
        limit = max(responses_limit, 0)
        results: list[list[RelativeIndex]] = []
        for query in queries:
            relevance: Counter[int] = Counter()
            for word in sorted(set(_WORD.findall(query))):
                for entry in self._index.get_word_count(word):
                    relevance[entry.doc_id] += entry.count

            if not relevance:
                results.append([])
                continue

            top = max(relevance.values())
            ranked = sorted(
                (
                    RelativeIndex(doc_id, _round_rank(count / top))
                    for doc_id, count in relevance.items()
                ),
                key=lambda item: (-item.rank, item.doc_id),
            )
            results.append(ranked[:limit])
        return results