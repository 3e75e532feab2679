from __future__ import annotations

import re

_TOKEN_RE = re.compile(r"[a-z']+")

_CONTRACTIONS: dict[str, str] = {
    "i'm": "im",
    "im": "im",
    "can't": "cant",
    "cant": "cant",
    "won't": "wont",
    "wont": "wont",
    "don't": "dont",
    "dont": "dont",
    "didn't": "didnt",
    "didnt": "didnt",
    "isn't": "isnt",
    "isnt": "isnt",
    "aren't": "arent",
    "arent": "arent",
}

# (suffix, minimum length of the running word), applied once each in order.
_SUFFIX_RULES: tuple[tuple[str, int], ...] = (
    ("ly", 6),
    ("ness", 7),
    ("ing", 7),
    ("ed", 6),
)


def normalize_token(raw: str) -> str:
    if not raw:
        return ""

    word = raw.lower().replace("’", "'")
    word = _CONTRACTIONS.get(word, word)
    original = word

    if len(word) >= 5 and word.endswith("s") and not word.endswith("ss"):
        word = word[:-1]

    for suffix, min_len in _SUFFIX_RULES:
        if len(word) >= min_len and word.endswith(suffix):
            word = word[: -len(suffix)]

    if len(word) >= 6 and word.endswith("est"):
        word = word[:-3]
    elif len(word) >= 6 and word.endswith("er"):
        word = word[:-2]

    if len(word) < 2:
        return original
    return word


def tokenize(text: str) -> list[str]:
    return _TOKEN_RE.findall((text or "").lower())


def tokenize_normalized(text: str) -> list[str]:
    return [normalize_token(token) for token in tokenize(text)]


__all__ = ["normalize_token", "tokenize", "tokenize_normalized"]
