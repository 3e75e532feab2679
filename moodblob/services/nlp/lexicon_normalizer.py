from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from .modifiers import EMOTIONS
from .tokenizer import normalize_token

Lexicon = dict[str, dict[str, float]]


@dataclass(frozen=True)
class PhraseEntry:
    words: tuple[str, ...]
    emotion: str
    weight: float

    @property
    def phrase(self) -> str:
        return " ".join(self.words)

    def __len__(self) -> int:
        return len(self.words)


def normalize_lexicon_keys(raw: Mapping[str, Mapping[str, float]]) -> Lexicon:
    out: Lexicon = {emotion: {} for emotion in EMOTIONS}

    for emotion in EMOTIONS:
        bucket = out[emotion]
        for raw_key, weight in (raw.get(emotion) or {}).items():
            # phrases keep their spelling, extract_phrases normalizes them
            if " " in raw_key:
                bucket[raw_key] = weight
                continue

            k1 = raw_key.lower()
            k2 = normalize_token(k1)
            bucket[k1] = max(bucket.get(k1, 0.0), weight)
            bucket[k2] = max(bucket.get(k2, 0.0), weight)

    return out


def extract_phrases(lexicon: Mapping[str, Mapping[str, float]]) -> list[PhraseEntry]:
    phrases: list[PhraseEntry] = []
    for emotion in EMOTIONS:
        for key, weight in (lexicon.get(emotion) or {}).items():
            if " " not in key:
                continue
            words = tuple(normalize_token(part) for part in key.split(" "))
            phrases.append(PhraseEntry(words=words, emotion=emotion, weight=weight))

    # longest first; sort is stable so equal lengths keep discovery order
    phrases.sort(key=len, reverse=True)
    return phrases


__all__ = ["Lexicon", "PhraseEntry", "extract_phrases", "normalize_lexicon_keys"]
