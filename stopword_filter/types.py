from __future__ import annotations

from typing import Iterable, Sequence, TypedDict

Token = str
Sentence = Sequence[Token]
StopwordSet = Iterable[Token]
Corpus = Sequence[Sentence]


class TokenizedDocument(TypedDict, total=False):
    """Record shape accepted by the corpus loader; only ``words`` is required."""

    filename: str
    text: str
    words: list[str]
