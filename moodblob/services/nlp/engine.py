from __future__ import annotations

import logging
import threading

from .lexicon_loader import LexiconState, load_lexicon
from .scorer import ScoreResult, score_text_with_context
from .signal_mapper import SignalTargets, map_signals

logger = logging.getLogger(__name__)

_STATE: LexiconState | None = None
_INIT_LOCK = threading.Lock()


def initialize(base: str | None = None) -> LexiconState:
    global _STATE
    with _INIT_LOCK:
        if _STATE is None:
            _STATE = load_lexicon(base)
            logger.info("Emotion lexicon ready (source=%s)", _STATE.source)
        return _STATE


def get_state() -> LexiconState | None:
    return _STATE


def score_text(text: str) -> ScoreResult:
    state = _STATE
    if state is None:
        return score_text_with_context(text, None)
    return score_text_with_context(text, state.lexicon, state.phrases)


def analyze_text(text: str, typing_energy: float = 0.0) -> tuple[ScoreResult, SignalTargets]:
    result = score_text(text)
    return result, map_signals(result, typing_energy)
