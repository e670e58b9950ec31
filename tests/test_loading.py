from __future__ import annotations

import json
from pathlib import Path

import pytest
import stopword_filter.loading as loading
from pytest import MonkeyPatch
from stopword_filter import filter_file, load_corpus, load_stop_words
from stopword_filter.types import TokenizedDocument


class DummyStopwords:
    def __init__(self) -> None:
        self.requested: list[str] = []

    def words(self, language: str) -> list[str]:
        self.requested.append(language)
        return ["the", "and", "a"]


def test_load_corpus_accepts_token_lists_and_documents(tmp_path: Path) -> None:
    document: TokenizedDocument = {"filename": "story1.txt", "text": "Cats and dogs", "words": ["cats", "and", "dogs"]}
    corpus_path = tmp_path / "corpus.json"
    corpus_path.write_text(json.dumps([["the", "fox"], document, []]), encoding="utf-8")

    assert load_corpus(corpus_path) == [["the", "fox"], ["cats", "and", "dogs"], []]


def test_load_corpus_rejects_bad_shapes(tmp_path: Path) -> None:
    not_a_list = tmp_path / "object.json"
    not_a_list.write_text(json.dumps({"words": ["a"]}), encoding="utf-8")
    bad_entry = tmp_path / "entry.json"
    bad_entry.write_text(json.dumps([["a"], "b c"]), encoding="utf-8")

    with pytest.raises(ValueError, match="JSON list"):
        load_corpus(not_a_list)
    with pytest.raises(ValueError, match="Corpus entry 1"):
        load_corpus(bad_entry)
    with pytest.raises(FileNotFoundError):
        load_corpus(tmp_path / "missing.json")
    with pytest.raises(ValueError, match="is not a file"):
        load_corpus(tmp_path)


def test_load_stop_words_merges_sources_without_case_folding(monkeypatch: MonkeyPatch, tmp_path: Path) -> None:
    dummy = DummyStopwords()
    monkeypatch.setattr(loading, "stopwords", dummy)
    stop_words_path = tmp_path / "stop.txt"
    stop_words_path.write_text("The\n\n  however \n", encoding="utf-8")

    compiled = load_stop_words(stop_words_path, extra_stopwords=["Also"], nltk_language="english")

    assert dummy.requested == ["english"]
    assert compiled == {"the", "and", "a", "The", "however", "Also"}


def test_load_stop_words_without_sources_is_empty(monkeypatch: MonkeyPatch) -> None:
    dummy = DummyStopwords()
    monkeypatch.setattr(loading, "stopwords", dummy)

    assert load_stop_words(None) == set()
    assert dummy.requested == []


def test_filter_file_writes_filtered_json(tmp_path: Path) -> None:
    corpus_path = tmp_path / "corpus.json"
    corpus_path.write_text(json.dumps([["the", "dog", "runs"], ["a", "cat"], ["a"]]), encoding="utf-8")
    output_path = tmp_path / "out" / "filtered.json"

    filtered = filter_file(corpus_path, output_path, extra_stopwords=["the", "a"])

    assert filtered == ["dog runs", "cat", ""]
    assert json.loads(output_path.read_text(encoding="utf-8")) == ["dog runs", "cat", ""]
