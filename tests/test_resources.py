import pytest

from textsentiment import resources
from textsentiment.resources import LoadError, load_lexicon, load_stopwords


class _MissingCorpus:
    def __init__(self, words_after_download=None):
        self.downloaded = False
        self._words = words_after_download

    def words(self, language):
        if not self.downloaded:
            raise LookupError("Resource stopwords not found.")
        return self._words


def test_lexicon_file_is_parsed(lexicon_file):
    assert load_lexicon(str(lexicon_file)) == {"good": 3.0, "awful": -3.0, "breathtaking": 5.0}


def test_lexicon_file_ignores_comments_blank_lines_and_extra_columns(tmp_path):
    path = tmp_path / "vader_style.txt"
    path.write_text("# header\n\nsplendid\t2.8\t0.6\t[3, 3, 2]\n", encoding="utf-8")
    assert load_lexicon(str(path)) == {"splendid": 2.8}


def test_missing_lexicon_file_raises(tmp_path):
    with pytest.raises(LoadError, match="Unable to read"):
        load_lexicon(str(tmp_path / "nope.txt"))


def test_malformed_lexicon_line_raises(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("good\t3\nbroken line\n", encoding="utf-8")
    with pytest.raises(LoadError, match=":2:"):
        load_lexicon(str(path))


def test_non_numeric_score_raises(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("good\tvery\n", encoding="utf-8")
    with pytest.raises(LoadError, match="invalid score"):
        load_lexicon(str(path))


def test_empty_lexicon_file_raises(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("# nothing here\n", encoding="utf-8")
    with pytest.raises(LoadError, match="no entries"):
        load_lexicon(str(path))


def test_vader_lexicon_has_polarity():
    lexicon = load_lexicon("vader")
    assert lexicon["great"] > 0
    assert lexicon["hate"] < 0


def test_missing_stopwords_raise_without_download(monkeypatch):
    monkeypatch.setattr(resources, "stopwords", _MissingCorpus())
    with pytest.raises(LoadError, match="stopwords corpus not found"):
        load_stopwords()


def test_missing_stopwords_are_downloaded_when_enabled(monkeypatch):
    corpus = _MissingCorpus(["The", "a", " "])

    def fake_download(name, quiet=False):
        assert name == "stopwords"
        corpus.downloaded = True
        return True

    monkeypatch.setattr(resources, "stopwords", corpus)
    monkeypatch.setattr(resources.nltk, "download", fake_download)
    assert load_stopwords(download=True) == frozenset({"the", "a"})


def test_failed_download_raises(monkeypatch):
    monkeypatch.setattr(resources, "stopwords", _MissingCorpus())
    monkeypatch.setattr(resources.nltk, "download", lambda name, quiet=False: False)
    with pytest.raises(LoadError, match="Unable to download"):
        load_stopwords(download=True)


def test_real_english_stopwords():
    try:
        words = load_stopwords()
    except LoadError:
        pytest.skip("NLTK stopwords corpus is not installed")
    assert {"the", "a", "is", "this"} <= words
