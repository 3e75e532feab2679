from fastapi import APIRouter

from ..models.request_models import (
    LexiconStatusResponse,
    ScoreRequest,
    ScoreResponse,
    SignalRequest,
    SignalResponse,
)
from ..services.nlp import engine

router = APIRouter()


@router.post("/score", response_model=ScoreResponse)
async def score_text(request: ScoreRequest):
    return engine.score_text(request.text).to_dict()


@router.post("/signal", response_model=SignalResponse)
async def map_text_signal(request: SignalRequest):
    result, targets = engine.analyze_text(request.text, request.typing_energy)
    return {
        "score": result.to_dict(),
        "targets": {
            "speed": targets.speed,
            "amplitude": targets.amplitude,
            "anger_pct": targets.anger_pct,
            "joy_pct": targets.joy_pct,
            "sad_pct": targets.sad_pct,
            "drama": targets.drama,
            "baseline": targets.baseline,
            "color": targets.color,
        },
    }


@router.get("/lexicon", response_model=LexiconStatusResponse)
async def lexicon_status():
    state = engine.get_state()
    if state is None:
        return {"loaded": False}
    return {
        "loaded": True,
        "source": state.source,
        "entries": state.entry_counts(),
        "phrases": len(state.phrases),
    }
