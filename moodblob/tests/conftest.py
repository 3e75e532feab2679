from __future__ import annotations

import pytest
import requests

from moodblob.services.nlp import engine
from moodblob.services.nlp import lexicon_loader
from moodblob.services.nlp.lexicon_loader import build_fallback_lexicon, build_state


def _offline_get(*_args, **_kwargs):
    raise requests.ConnectionError("network disabled in tests")


@pytest.fixture(autouse=True)
def isolate_engine_state(monkeypatch: pytest.MonkeyPatch):
    # Keep tests deterministic and offline: no remote lexicon fetches, no state leaking between tests.
    monkeypatch.setattr(lexicon_loader.requests, "get", _offline_get)
    engine._STATE = None
    yield
    engine._STATE = None


@pytest.fixture
def fallback_state():
    return build_state(build_fallback_lexicon(), source="fallback")


@pytest.fixture
def make_state():
    def _make(raw: dict) -> lexicon_loader.LexiconState:
        return build_state(raw, source="file")

    return _make
