from __future__ import annotations

from typing import Iterable

from nltk.tokenize import RegexpTokenizer


class WordTokenizer:
    """Splits normalized text into runs of ASCII letters."""

    def __init__(self) -> None:
        self._tokenizer = RegexpTokenizer(r"[A-Za-z]+")

    def tokenize(self, text: str) -> list[str]:
        return [t for t in self._tokenizer.tokenize(text or "") if t]


class StopwordFilter:
    def __init__(self, stopwords: Iterable[str]) -> None:
        self._stopwords = frozenset(w.lower() for w in stopwords)

    def remove(self, tokens: Iterable[str]) -> list[str]:
        return [t for t in tokens if t.lower() not in self._stopwords]
