from __future__ import annotations

import logging
from pathlib import Path

import nltk
from nltk.corpus import stopwords
from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer

logger = logging.getLogger(__name__)

VADER_LEXICON = "vader"


class LoadError(RuntimeError):
    """A lexicon or stopword resource could not be found or parsed."""


def load_stopwords(language: str = "english", *, download: bool = False) -> frozenset[str]:
    try:
        words = stopwords.words(language)
    except LookupError as exc:
        if not download:
            raise LoadError(
                "NLTK stopwords corpus not found; run nltk.download('stopwords') "
                "or set TEXTSENTIMENT_NLTK_DOWNLOAD=1"
            ) from exc
        logger.info("Downloading NLTK stopwords corpus")
        if not nltk.download("stopwords", quiet=True):
            raise LoadError("Unable to download NLTK stopwords corpus") from exc
        try:
            words = stopwords.words(language)
        except (LookupError, OSError) as retry_exc:
            raise LoadError(f"Unable to load {language} stopwords") from retry_exc
    except OSError as exc:
        raise LoadError(f"Unable to load {language} stopwords") from exc

    result = frozenset(w.strip().lower() for w in words if w.strip())
    if not result:
        raise LoadError(f"Stopword list for {language} is empty")
    logger.info("Loaded %d %s stopwords", len(result), language)
    return result


def load_lexicon(source: str = VADER_LEXICON) -> dict[str, float]:
    """Return a word -> polarity mapping.

    ``"vader"`` selects the lexicon bundled with vaderSentiment. Anything else
    is read as a tab-separated ``word<TAB>score`` file (AFINN and
    vader_lexicon.txt both use this layout; extra columns are ignored).
    """
    if (source or "").strip().lower() == VADER_LEXICON:
        return _load_vader_lexicon()
    return _load_lexicon_file(Path(source))


def _load_vader_lexicon() -> dict[str, float]:
    try:
        lexicon = dict(SentimentIntensityAnalyzer().lexicon)
    except (OSError, ValueError) as exc:
        raise LoadError("Unable to load the VADER lexicon") from exc
    logger.info("Loaded VADER lexicon with %d entries", len(lexicon))
    return lexicon


def _load_lexicon_file(path: Path) -> dict[str, float]:
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise LoadError(f"Unable to read lexicon file {path}") from exc

    lexicon: dict[str, float] = {}
    for lineno, line in enumerate(raw.splitlines(), start=1):
        if not line.strip() or line.lstrip().startswith("#"):
            continue
        parts = line.rstrip("\r\n").split("\t")
        if len(parts) < 2 or not parts[0].strip():
            raise LoadError(f"{path}:{lineno}: expected 'word<TAB>score'")
        try:
            lexicon[parts[0].strip()] = float(parts[1])
        except ValueError as exc:
            raise LoadError(f"{path}:{lineno}: invalid score {parts[1]!r}") from exc

    if not lexicon:
        raise LoadError(f"Lexicon file {path} has no entries")
    logger.info("Loaded lexicon %s with %d entries", path, len(lexicon))
    return lexicon
