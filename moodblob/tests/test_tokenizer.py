from __future__ import annotations

import pytest

from moodblob.services.nlp.tokenizer import normalize_token, tokenize, tokenize_normalized


def test_tokenize_splits_on_non_letters():
    assert tokenize("Hello, world! It's 9am... me-too") == ["hello", "world", "it's", "am", "me", "too"]


@pytest.mark.parametrize("text", ["", "   ", "!!! ... ???", "1234 5678", None])
def test_tokenize_empty_inputs(text):
    assert tokenize(text) == []
    assert tokenize_normalized(text) == []


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("I'm", "im"),
        ("im", "im"),
        ("Can't", "cant"),
        ("won't", "wont"),
        ("don’t", "dont"),
        ("didn't", "didnt"),
        ("isn't", "isnt"),
        ("aren't", "arent"),
    ],
)
def test_contractions_are_canonicalized(raw, expected):
    assert normalize_token(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("excited", "excit"),
        ("EXCITED", "excit"),
        ("burned", "burn"),
        ("feelings", "feel"),
        ("happiness", "happi"),
        ("kindness", "kind"),
        ("happiest", "happi"),
        ("lonely", "lone"),
        ("really", "real"),
        ("slightly", "slight"),
        ("tired", "tired"),
        ("sadly", "sadly"),
        ("angry", "angry"),
        ("boss", "boss"),
        ("glass", "glass"),
        ("super", "super"),
        ("dumps", "dump"),
    ],
)
def test_conservative_suffix_stripping(raw, expected):
    assert normalize_token(raw) == expected


def test_short_tokens_fall_back_to_original():
    assert normalize_token("") == ""
    assert normalize_token("a") == "a"
    assert normalize_token("'") == "'"


@pytest.mark.parametrize(
    "word",
    ["happy", "excited", "happiness", "feelings", "lonely", "burned", "really", "can't", "frustrated", "depressed"],
)
def test_normalize_is_idempotent(word):
    once = normalize_token(word)
    assert normalize_token(once) == once


@pytest.mark.parametrize(
    "word, once, twice",
    [("forester", "forest", "for"), ("harvester", "harvest", "harv")],
)
def test_stacked_suffixes_are_not_idempotent(word, once, twice):
    assert normalize_token(word) == once
    assert normalize_token(once) == twice


def test_normalized_sequence_keeps_token_count():
    text = "I'm SO tired of feeling down, but tomorrow's looking brighter!"
    assert len(tokenize_normalized(text)) == len(tokenize(text))
    assert tokenize_normalized(text)[:3] == ["im", "so", "tired"]
