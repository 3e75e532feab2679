from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from .tokenizer import normalize_token

EMOTIONS: tuple[str, ...] = ("anger", "joy", "sad")

CONTRAST_BOOST = 1.6
NEGATION_FACTOR = -0.8

_RAW_CONTRAST_MARKERS = ("but", "however", "though")

_RAW_NEGATIONS = (
    "not", "no", "never", "dont", "can't", "cant", "won't", "wont",
    "didn't", "didnt", "isn't", "isnt", "aren't", "arent",
)

_RAW_INTENSIFIERS = {
    "very": 1.6,
    "really": 1.4,
    "so": 1.3,
    "extremely": 2.0,
    "super": 1.6,
    "incredibly": 2.0,
    "insanely": 2.0,
}

_RAW_DIMINISHERS = {
    "kinda": 0.55,
    "kindof": 0.55,
    "sorta": 0.60,
    "somewhat": 0.65,
    "slightly": 0.60,
    "little": 0.50,
    # placeholder: a bare "a" must not fall through to the farther token
    "a": 1.0,
    "a little": 0.50,
    "a bit": 0.55,
    "a little bit": 0.45,
    "kind of": 0.55,
    "sort of": 0.60,
    "not that": 0.60,
    "a touch": 0.55,
    "a tad": 0.55,
}


def normalize_phrase(phrase: str) -> str:
    return " ".join(normalize_token(part) for part in phrase.split(" "))


def _normalized_table(raw: Mapping[str, float]) -> Mapping[str, float]:
    table: dict[str, float] = {}
    for key, factor in raw.items():
        table.setdefault(normalize_phrase(key), factor)
    return MappingProxyType(table)


def _normalized_set(raw: Iterable[str]) -> frozenset[str]:
    return frozenset(normalize_token(word) for word in raw)


# Keys are stored in token-normalized form ("really" -> "real") because the
# scorer only ever sees normalized tokens.
CONTRAST_MARKERS = _normalized_set(_RAW_CONTRAST_MARKERS)
NEGATIONS = _normalized_set(_RAW_NEGATIONS)
INTENSIFIERS = _normalized_table(_RAW_INTENSIFIERS)
DIMINISHERS = _normalized_table(_RAW_DIMINISHERS)
