from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Mapping, Sequence

from .lexicon_normalizer import PhraseEntry
from .modifiers import (
    CONTRAST_BOOST,
    CONTRAST_MARKERS,
    DIMINISHERS,
    EMOTIONS,
    INTENSIFIERS,
    NEGATION_FACTOR,
    NEGATIONS,
)
from .tokenizer import tokenize_normalized


@dataclass
class ScoreResult:
    anger: float = 0.0
    joy: float = 0.0
    sad: float = 0.0
    hits: int = 0
    total_words: int = 0

    def add(self, emotion: str, contribution: float) -> None:
        setattr(self, emotion, getattr(self, emotion) + contribution)
        self.hits += 1

    def to_dict(self) -> dict[str, float | int]:
        payload = asdict(self)
        payload["totalWords"] = payload.pop("total_words")
        return payload


def _word_at(words: Sequence[str], index: int) -> str:
    if 0 <= index < len(words):
        return words[index]
    return ""


def _first_factor(table: Mapping[str, float], *keys: str) -> float:
    for key in keys:
        factor = table.get(key)
        if factor is not None:
            return factor
    return 1.0


def find_contrast_pivot(words: Sequence[str]) -> int | None:
    for index, word in enumerate(words):
        if word in CONTRAST_MARKERS:
            return index
    return None


def match_phrase(words: Sequence[str], index: int, phrases: Sequence[PhraseEntry]) -> PhraseEntry | None:
    for entry in phrases:
        end = index + len(entry.words)
        if end <= len(words) and tuple(words[index:end]) == entry.words:
            return entry
    return None


def contribution(words: Sequence[str], index: int, weight: float, pivot: int | None) -> float:
    prev = _word_at(words, index - 1)
    prev2 = _word_at(words, index - 2)

    negated = prev in NEGATIONS or prev2 in NEGATIONS
    intensity = _first_factor(INTENSIFIERS, prev, prev2)
    soften = _first_factor(DIMINISHERS, prev, prev2)

    value = weight * intensity * soften
    if pivot is not None and index > pivot:
        value *= CONTRAST_BOOST
    # negation flips to a small counter-signal instead of zeroing
    if negated:
        value *= NEGATION_FACTOR
    return value


def get_post_diminisher(words: Sequence[str], index: int) -> float:
    following = [_word_at(words, index + offset) for offset in range(1, 5)]
    windows = [" ".join(following[:size]).strip() for size in (4, 3, 2, 1)]
    return _first_factor(DIMINISHERS, *windows)


def score_text_with_context(
    text: str,
    lexicon: Mapping[str, Mapping[str, float]] | None,
    phrases: Sequence[PhraseEntry] = (),
) -> ScoreResult:
    words = tokenize_normalized(text)
    result = ScoreResult(total_words=len(words))
    if lexicon is None or not words:
        return result

    pivot = find_contrast_pivot(words)
    consumed = [False] * len(words)

    for index, word in enumerate(words):
        if consumed[index]:
            continue

        matched = match_phrase(words, index, phrases)
        if matched is not None:
            for offset in range(len(matched.words)):
                consumed[index + offset] = True
            result.add(matched.emotion, contribution(words, index, matched.weight, pivot))
            continue

        for emotion in EMOTIONS:
            weight = (lexicon.get(emotion) or {}).get(word)
            if weight is not None:
                result.add(emotion, contribution(words, index, weight, pivot))

    return result


__all__ = [
    "ScoreResult",
    "contribution",
    "find_contrast_pivot",
    "get_post_diminisher",
    "match_phrase",
    "score_text_with_context",
]
