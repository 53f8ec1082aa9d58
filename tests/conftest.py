"""Shared fixtures: small in-memory resources so no NLTK corpus download is needed."""

import pytest
from nltk.stem import PorterStemmer

from textsentiment.sentiment import SentimentAnalyzer, SentimentPipeline
from textsentiment.tokens import StopwordFilter, WordTokenizer

STOPWORDS = frozenset({"the", "a", "an", "is", "this", "i", "it", "and", "of", "was"})

LEXICON = {
    "great": 3.1,
    "love": 3.2,
    "loved": 2.9,
    "happy": 2.7,
    "hate": -2.7,
    "hated": -3.2,
    "bad": -2.5,
    "terrible": -2.1,
    "cant": -1.0,
}


@pytest.fixture
def lexicon():
    return dict(LEXICON)


@pytest.fixture
def stopword_filter():
    return StopwordFilter(STOPWORDS)


@pytest.fixture
def analyzer(lexicon):
    return SentimentAnalyzer(lexicon, PorterStemmer())


@pytest.fixture
def pipeline(stopword_filter, analyzer):
    return SentimentPipeline(
        tokenizer=WordTokenizer(),
        stopword_filter=stopword_filter,
        scorer=analyzer,
    )


@pytest.fixture
def lexicon_file(tmp_path):
    path = tmp_path / "afinn.txt"
    path.write_text("good\t3\nawful\t-3\nbreathtaking\t5\n", encoding="utf-8")
    return path


@pytest.fixture
def stopword_set():
    return STOPWORDS
