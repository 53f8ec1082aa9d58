from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Protocol

from nltk.stem import PorterStemmer

from textsentiment.cleaning import normalize_text
from textsentiment.config import Settings, load_settings
from textsentiment.resources import load_lexicon, load_stopwords
from textsentiment.tokens import StopwordFilter, WordTokenizer

logger = logging.getLogger(__name__)


class Tokenizer(Protocol):
    def tokenize(self, text: str) -> list[str]: ...


class Stemmer(Protocol):
    def stem(self, word: str) -> str: ...


class Scorer(Protocol):
    def score(self, tokens: list[str]) -> float: ...


@dataclass(frozen=True)
class SentimentResult:
    score: float
    label: str
    tokens: tuple[str, ...]


def sentiment_label(score: float, threshold: float = Settings.label_threshold) -> str:
    if score >= threshold and score > 0:
        return "Positive"
    if score <= -threshold and score < 0:
        return "Negative"
    return "Neutral"


class SentimentAnalyzer:
    """Lexicon scorer over stemmed tokens.

    The lexicon is re-keyed by stem once, at construction; when several words
    share a stem the last one in the lexicon wins. A token is looked up as-is
    (lowercased) first and by its stem second. The result is the mean over
    all tokens, unknown ones counting as zero.
    """

    def __init__(self, lexicon: Mapping[str, float], stemmer: Optional[Stemmer] = None) -> None:
        self._stemmer = stemmer
        if stemmer is None:
            self._vocabulary = {w.lower(): float(s) for w, s in lexicon.items()}
        else:
            self._vocabulary = {stemmer.stem(w.lower()): float(s) for w, s in lexicon.items()}

    def __len__(self) -> int:
        return len(self._vocabulary)

    def token_score(self, token: str) -> float:
        lowered = token.lower()
        if lowered in self._vocabulary:
            return self._vocabulary[lowered]
        if self._stemmer is not None:
            return self._vocabulary.get(self._stemmer.stem(lowered), 0.0)
        return 0.0

    def score(self, tokens: Iterable[str]) -> float:
        items = list(tokens)
        if not items:
            return 0.0
        return sum(self.token_score(t) for t in items) / len(items)


class SentimentPipeline:
    def __init__(
        self,
        *,
        tokenizer: Tokenizer,
        stopword_filter: StopwordFilter,
        scorer: Scorer,
        threshold: float = Settings.label_threshold,
    ) -> None:
        self._tokenizer = tokenizer
        self._stopword_filter = stopword_filter
        self._scorer = scorer
        self._threshold = float(threshold)

    def preprocess(self, text: str | None) -> list[str]:
        normalized = normalize_text(text)
        tokens = self._tokenizer.tokenize(normalized)
        filtered = self._stopword_filter.remove(tokens)
        logger.debug("tokens=%s filtered=%s", tokens, filtered)
        return filtered

    def analyze(self, text: str | None) -> SentimentResult:
        filtered = self.preprocess(text)
        value = float(self._scorer.score(filtered))
        return SentimentResult(score=value, label=sentiment_label(value, self._threshold), tokens=tuple(filtered))

    def score(self, text: str | None) -> float:
        return self.analyze(text).score


def build_pipeline(settings: Settings | None = None) -> SentimentPipeline:
    """Load the stopword set and lexicon and assemble the default stages.

    Raises LoadError when either resource is unavailable.
    """
    cfg = settings or load_settings()
    stop = load_stopwords("english", download=cfg.nltk_download)
    table = load_lexicon(cfg.lexicon)
    return SentimentPipeline(
        tokenizer=WordTokenizer(),
        stopword_filter=StopwordFilter(stop),
        scorer=SentimentAnalyzer(table, PorterStemmer()),
        threshold=cfg.label_threshold,
    )


_default_pipeline: SentimentPipeline | None = None


def init_default_pipeline(settings: Settings | None = None) -> SentimentPipeline:
    """Build the process-wide pipeline used by get_sentiment when none is passed.

    Call once at startup so LoadError surfaces there, not on the first score.
    """
    global _default_pipeline
    _default_pipeline = build_pipeline(settings)
    return _default_pipeline


def get_sentiment(text: str | None, pipeline: SentimentPipeline | None = None) -> float:
    target = pipeline or _default_pipeline
    if target is None:
        raise RuntimeError("No sentiment pipeline: pass one or call init_default_pipeline() first")
    return target.score(text)
