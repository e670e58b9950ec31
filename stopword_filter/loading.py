from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Iterable, List, Sequence, Set

from nltk.corpus import stopwords

from stopword_filter.filtering import filter_corpus

LOGGER = logging.getLogger(__name__)


def env_path(var_name: str, default: str) -> Path:
    return Path(os.getenv(var_name, default))


def _ensure_file_exists(path: Path, description: str) -> None:
    if not path.exists():
        raise FileNotFoundError(f"{description} does not exist: {path}")
    if not path.is_file():
        raise ValueError(f"{description} is not a file: {path}")


def _sentence_from_entry(entry: object, index: int) -> List[str]:
    if isinstance(entry, list):
        return entry
    if isinstance(entry, Mapping) and isinstance(entry.get("words"), list):
        return entry["words"]
    raise ValueError(
        f"Corpus entry {index} must be a list of tokens or an object with a 'words' list, "
        f"got {type(entry).__name__}"
    )


def load_corpus(corpus_path: Path) -> List[List[str]]:
    """Load tokenized sentences from a JSON file.

    The top level must be a list. Each entry is either a list of tokens or a
    cleaned-document record (``{"filename": ..., "text": ..., "words": [...]}``),
    in which case its ``words`` are used.
    """

    _ensure_file_exists(corpus_path, "Corpus file")
    LOGGER.info("Loading corpus from %s", corpus_path)
    with corpus_path.open("r", encoding="utf-8") as infile:
        loaded = json.load(infile)

    if not isinstance(loaded, list):
        raise ValueError(f"Corpus file must contain a JSON list, got {type(loaded).__name__}: {corpus_path}")

    corpus = [_sentence_from_entry(entry, index) for index, entry in enumerate(loaded)]
    LOGGER.debug("Loaded %d sentences", len(corpus))
    return corpus


def load_stop_words(
    stop_words_path: Path | None,
    *,
    extra_stopwords: Sequence[str] | None = None,
    nltk_language: str | None = None,
) -> Set[str]:
    """Compose a stop word set from an optional file, extras, and an NLTK list.

    Words are kept exactly as written; no case folding is applied.
    """

    compiled: Set[str] = set()

    if nltk_language:
        LOGGER.debug("Adding NLTK '%s' stop words", nltk_language)
        compiled.update(stopwords.words(nltk_language))

    if stop_words_path:
        _ensure_file_exists(stop_words_path, "Stop word file")
        LOGGER.debug("Loading stop words from %s", stop_words_path)
        with stop_words_path.open("r", encoding="utf-8") as infile:
            compiled.update(line.strip() for line in infile if line.strip())

    if extra_stopwords:
        compiled.update(extra_stopwords)

    LOGGER.info("Using %d stop words", len(compiled))
    return compiled


def write_json(sentences: Iterable[str], output_path: Path) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    LOGGER.info("Writing filtered sentences to %s", output_path)
    with output_path.open("w", encoding="utf-8") as outfile:
        json.dump(list(sentences), outfile, ensure_ascii=False)


def filter_file(
    corpus_path: Path,
    output_path: Path,
    *,
    stop_words_path: Path | None = None,
    extra_stopwords: Sequence[str] | None = None,
    nltk_language: str | None = None,
) -> List[str]:
    corpus = load_corpus(corpus_path)
    stop_words = load_stop_words(
        stop_words_path,
        extra_stopwords=extra_stopwords,
        nltk_language=nltk_language,
    )
    filtered = filter_corpus(corpus, stop_words)
    LOGGER.info("Filtered %d sentences", len(filtered))
    write_json(filtered, output_path)
    return filtered
