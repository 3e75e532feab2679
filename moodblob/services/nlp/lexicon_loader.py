from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

import requests

from ...config import (
    EMOTION_LEXICON_BASE,
    EMOTION_LEXICON_FILENAME,
    EMOTION_LEXICON_TIMEOUT_S,
)
from .lexicon_normalizer import Lexicon, PhraseEntry, extract_phrases, normalize_lexicon_keys
from .modifiers import EMOTIONS

logger = logging.getLogger(__name__)

ANGER_WORDS = ("angry", "mad", "furious", "hate", "pissed", "annoyed", "rage", "frustrated")
JOY_WORDS = ("happy", "excited", "joy", "fun", "love", "great", "awesome", "good")
SAD_WORDS = ("sad", "tired", "down", "depressed", "lonely", "upset", "empty", "low")


class LexiconFormatError(ValueError):
    pass


@dataclass(frozen=True)
class LexiconState:
    lexicon: Mapping[str, Mapping[str, float]]
    phrases: tuple[PhraseEntry, ...]
    source: str = "fallback"
    origin: str = field(default="", compare=False)

    def entry_counts(self) -> dict[str, int]:
        return {emotion: len(self.lexicon.get(emotion, {})) for emotion in EMOTIONS}


def build_fallback_lexicon() -> Lexicon:
    lexicon: Lexicon = {"anger": {}, "joy": {}, "sad": {}}
    for word in ANGER_WORDS:
        lexicon["anger"][word] = 1.0
    for word in JOY_WORDS:
        lexicon["joy"][word] = 1.0
    for word in SAD_WORDS:
        lexicon["sad"][word] = 1.0
    return lexicon


def build_state(raw: Mapping[str, Mapping[str, float]], source: str, origin: str = "") -> LexiconState:
    normalized = normalize_lexicon_keys(raw)
    phrases = extract_phrases(normalized)
    frozen = MappingProxyType(
        {emotion: MappingProxyType(entries) for emotion, entries in normalized.items()}
    )
    return LexiconState(lexicon=frozen, phrases=tuple(phrases), source=source, origin=origin)


def _is_weight(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        value = float(value)
    except OverflowError:
        return False
    return math.isfinite(value) and value >= 0


def validate_lexicon_document(data: Any) -> Lexicon:
    if not isinstance(data, dict):
        raise LexiconFormatError(f"lexicon document must be an object, got {type(data).__name__}")

    unknown = sorted(str(key) for key in data if key not in EMOTIONS)
    if unknown:
        logger.debug("Ignoring unknown lexicon sections: %s", unknown)

    cleaned: Lexicon = {emotion: {} for emotion in EMOTIONS}
    skipped = 0
    for emotion in EMOTIONS:
        section = data.get(emotion, {})
        if not isinstance(section, dict):
            raise LexiconFormatError(f"lexicon section {emotion!r} must be an object")
        for key, weight in section.items():
            if not isinstance(key, str) or not key.strip() or not _is_weight(weight):
                skipped += 1
                continue
            # keys that collide after stripping keep the stronger weight
            stripped = key.strip()
            cleaned[emotion][stripped] = max(cleaned[emotion].get(stripped, 0.0), float(weight))

    if skipped:
        logger.debug("Skipped %d malformed lexicon entries", skipped)
    if not any(cleaned.values()):
        raise LexiconFormatError("lexicon document has no usable entries")
    return cleaned


def _is_remote(base: str) -> bool:
    return base.startswith(("http://", "https://"))


def _fetch_remote(url: str, timeout: float) -> Any:
    response = requests.get(url, timeout=timeout)
    if response.status_code != 200:
        raise LexiconFormatError(f"lexicon fetch failed: {response.status_code}")
    return response.json()


def _read_file(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def load_lexicon(
    base: str | None = None,
    *,
    filename: str = EMOTION_LEXICON_FILENAME,
    timeout: float = EMOTION_LEXICON_TIMEOUT_S,
) -> LexiconState:
    target_base = str(base if base is not None else EMOTION_LEXICON_BASE)
    remote = _is_remote(target_base)
    origin = f"{target_base.rstrip('/')}/{filename}" if remote else str(Path(target_base) / filename)

    try:
        data = _fetch_remote(origin, timeout) if remote else _read_file(Path(origin))
        raw = validate_lexicon_document(data)
    except Exception as exc:
        logger.warning("Lexicon at %s not found / failed to load, using fallback lexicon: %s", origin, exc)
        return build_state(build_fallback_lexicon(), source="fallback")

    state = build_state(raw, source="remote" if remote else "file", origin=origin)
    logger.info(
        "Loaded lexicon from %s (%s entries, %d phrases)",
        origin,
        state.entry_counts(),
        len(state.phrases),
    )
    return state


__all__ = [
    "LexiconFormatError",
    "LexiconState",
    "build_fallback_lexicon",
    "build_state",
    "load_lexicon",
    "validate_lexicon_document",
]
