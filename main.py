from __future__ import annotations
import argparse
import json
import logging
import sys
from dataclasses import replace
from typing import Optional, Sequence
from textsentiment.config import check_threshold, load_settings
from textsentiment.resources import LoadError
from textsentiment.sentiment import build_pipeline

logger = logging.getLogger(__name__)

def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Score the sentiment of English text with a word lexicon.")
    p.add_argument("text", nargs="*", help="Text to score; read from stdin when omitted")
    p.add_argument("--lexicon", help="'vader' or a path to a tab-separated word/score file")
    p.add_argument("--threshold", type=float, help="Half-width of the Neutral label band")
    p.add_argument("--json", action="store_true", help="Print score, label and tokens as JSON")
    p.add_argument("--verbose", action="store_true")
    return p.parse_args(argv)

def _configure_logging(level: str, verbose: bool) -> None:
    resolved = logging.DEBUG if verbose else getattr(logging, level)
    logging.basicConfig(level=resolved, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)

    try:
        settings = load_settings()
    except ValueError as exc:
        raise SystemExit(f"Invalid configuration: {exc}")
    if args.threshold is not None:
        try:
            check_threshold(args.threshold, "--threshold")
        except ValueError as exc:
            raise SystemExit(str(exc))
        settings = replace(settings, label_threshold=args.threshold)
    if args.lexicon:
        settings = replace(settings, lexicon=args.lexicon)

    _configure_logging(settings.log_level, args.verbose)

    try:
        pipeline = build_pipeline(settings)
    except LoadError as exc:
        raise SystemExit(f"Failed to load sentiment resources: {exc}")

    text = " ".join(args.text) if args.text else sys.stdin.read()
    result = pipeline.analyze(text)
    logger.debug("Scored %d tokens with lexicon %s", len(result.tokens), settings.lexicon)

    if args.json:
        payload = {"score": result.score, "label": result.label, "tokens": list(result.tokens)}
        print(json.dumps(payload, ensure_ascii=False))
    else:
        print(f"{result.score:.4f}\t{result.label}")

if __name__ == "__main__":
    main()
