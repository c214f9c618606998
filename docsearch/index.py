"""Inverted index mapping words to their per-document occurrence counts."""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass
from typing import Iterable

_WORD = re.compile(r"[^ \t\n\v\f\r]+")


def _split_words(text: str) -> list[str]:
    return _WORD.findall(text)


@dataclass(frozen=True, order=True)
class Entry:
    """Number of times a word occurs in the document with id ``doc_id``."""

    doc_id: int
    count: int


class InvertedIndex:
    """Word frequency dictionary built from the first line of each document."""

    def __init__(self) -> None:
        self._docs: list[str] = []
        self._freq: dict[str, list[Entry]] = {}

    def update_document_base(self, paths: Iterable[str]) -> None:
        """Replace the indexed documents with the contents of ``paths``.

        Only the first line of each file is indexed. Files that cannot be
        opened are reported and skipped, so document ids follow the order of
        the files that were read.
        """
        docs: list[str] = []
        for path in paths:
            try:
                with open(path, encoding="utf-8", errors="replace") as handle:
                    line = handle.readline()
            except OSError:
                print(f"Path file missing: {path}")
                continue
            docs.append(line.rstrip("\n"))

        freq: dict[str, list[Entry]] = {}
        for doc_id, text in enumerate(docs):
            for word, count in Counter(_split_words(text)).items():
                freq.setdefault(word, []).append(Entry(doc_id, count))

        self._docs = docs
        self._freq = freq

    def get_word_count(self, word: str) -> list[Entry]:
        """Return the entries for ``word``, ordered by document id."""
        if not self._docs:
            print("Docs is empty!", end="")
            return []
        return list(self._freq.get(word, ()))