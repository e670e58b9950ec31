from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import FrozenSet, List

from stopword_filter.types import Corpus, Sentence, StopwordSet

LOGGER = logging.getLogger(__name__)


def _ensure_token_iterable(value: object, description: str) -> None:
    if isinstance(value, (str, bytes)):
        raise TypeError(f"{description} must be a sequence of strings, not a single {type(value).__name__}")
    if isinstance(value, Mapping) or not isinstance(value, Iterable):
        raise TypeError(f"{description} must be a sequence of strings, got {type(value).__name__}")


def _ensure_tokens(tokens: Iterable[object], description: str) -> List[str]:
    checked: List[str] = []
    for index, token in enumerate(tokens):
        if not isinstance(token, str):
            raise TypeError(f"{description}[{index}] must be a string, got {type(token).__name__}")
        checked.append(token)
    return checked


def build_stopword_set(stopwords: StopwordSet) -> FrozenSet[str]:
    """Validate a stopword collection and freeze it for membership tests."""

    _ensure_token_iterable(stopwords, "stopwords")
    return frozenset(_ensure_tokens(stopwords, "stopwords"))


def _join_survivors(tokens: List[str], stop_set: FrozenSet[str]) -> str:
    return " ".join(token for token in tokens if token not in stop_set)


def filter_sentence(tokens: Sentence, stopwords: StopwordSet) -> str:
    """Drop every token exactly equal to a stopword and join the rest with single spaces.

    Matching is whole-token and case-sensitive. An empty sentence, or one made
    only of stopwords, yields the empty string.
    """

    _ensure_token_iterable(tokens, "tokens")
    checked = _ensure_tokens(tokens, "tokens")
    return _join_survivors(checked, build_stopword_set(stopwords))


def filter_corpus(corpus: Corpus, stopwords: StopwordSet) -> List[str]:
    """Filter each sentence of ``corpus`` against one shared stopword set.

    The result holds exactly one string per input sentence, in input order.
    Every sentence is validated before any is filtered, so a malformed corpus
    raises ``TypeError`` without producing partial output.
    """

    if isinstance(corpus, (str, bytes)) or isinstance(corpus, Mapping) or not isinstance(corpus, Iterable):
        raise TypeError(f"corpus must be a sequence of sentences, got {type(corpus).__name__}")

    stop_set = build_stopword_set(stopwords)

    sentences: List[List[str]] = []
    for index, sentence in enumerate(corpus):
        description = f"corpus[{index}]"
        _ensure_token_iterable(sentence, description)
        sentences.append(_ensure_tokens(sentence, description))

    LOGGER.debug("Filtering %d sentences against %d stopwords", len(sentences), len(stop_set))
    return [_join_survivors(sentence, stop_set) for sentence in sentences]
