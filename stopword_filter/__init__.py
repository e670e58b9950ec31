"""Stopword removal for tokenized sentences."""

from .filtering import filter_corpus, filter_sentence
from .loading import filter_file, load_corpus, load_stop_words
from .types import TokenizedDocument

__all__ = [
    "filter_corpus",
    "filter_sentence",
    "filter_file",
    "load_corpus",
    "load_stop_words",
    "TokenizedDocument",
]
