from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from . import filter_file, load_stop_words
from .loading import env_path

logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")


def _add_stopword_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--stop-words",
        type=Path,
        default=os.getenv("STOP_WORDS_PATH"),
        help="Newline-delimited stop word file (default: STOP_WORDS_PATH if set)",
    )
    parser.add_argument(
        "--extra-stopword",
        action="append",
        default=[],
        help="Additional stop words (can be repeated)",
    )
    parser.add_argument(
        "--nltk-language",
        default=os.getenv("NLTK_STOPWORDS_LANGUAGE"),
        help="Also use NLTK's stop word list for this language, e.g. 'english' "
        "(default: NLTK_STOPWORDS_LANGUAGE if set)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Stopword filter utilities")
    subparsers = parser.add_subparsers(dest="command", required=True)

    filter_parser = subparsers.add_parser("filter", help="Remove stop words from a tokenized JSON corpus")
    filter_parser.add_argument(
        "--input-file",
        type=Path,
        default=env_path("CORPUS_JSON", "corpus.json"),
        help="JSON list of token lists or cleaned documents (default: %(default)s or CORPUS_JSON)",
    )
    _add_stopword_arguments(filter_parser)
    filter_parser.add_argument(
        "--output",
        type=Path,
        default=env_path("OUTPUT_JSON", "filtered.json"),
        help="Destination for filtered JSON output (default: %(default)s or OUTPUT_JSON)",
    )

    stopwords_parser = subparsers.add_parser("stopwords", help="Print the composed stop word list")
    _add_stopword_arguments(stopwords_parser)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "filter":
        filter_file(
            args.input_file,
            args.output,
            stop_words_path=args.stop_words,
            extra_stopwords=args.extra_stopword,
            nltk_language=args.nltk_language,
        )
    elif args.command == "stopwords":
        stop_words = load_stop_words(
            args.stop_words,
            extra_stopwords=args.extra_stopword,
            nltk_language=args.nltk_language,
        )
        for word in sorted(stop_words):
            print(word)
    else:
        parser.error("No command provided")


def filter_cli() -> None:
    argv = sys.argv[1:]
    main(["filter", *argv])


if __name__ == "__main__":
    main()
