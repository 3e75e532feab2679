from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ScoreRequest(BaseModel):
    text: str = ""


class ScoreResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    anger: float
    joy: float
    sad: float
    hits: int = Field(..., ge=0)
    total_words: int = Field(..., ge=0, alias="totalWords")


class SignalRequest(BaseModel):
    text: str = ""
    typing_energy: float = Field(default=0.0, ge=0.0, le=1.0)


class SignalTargetsModel(BaseModel):
    speed: float
    amplitude: float
    anger_pct: float
    joy_pct: float
    sad_pct: float
    drama: float
    baseline: float
    color: tuple[float, float, float]


class SignalResponse(BaseModel):
    score: ScoreResponse
    targets: SignalTargetsModel


class LexiconStatusResponse(BaseModel):
    loaded: bool
    source: Literal["file", "remote", "fallback"] | None = None
    entries: dict[str, int] = Field(default_factory=dict)
    phrases: int = 0
