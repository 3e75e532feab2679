from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .scorer import ScoreResult

BASE_SPEED = 1.0
BASE_AMP = 0.6

SPEED_RANGE = (0.2, 6.0)
AMP_RANGE = (0.05, 5.0)

# per-emotion push, ordered (anger, joy, sad); sad pulls down
SPEED_WEIGHTS = np.array([2.0, 0.1, -1.0])
AMP_WEIGHTS = np.array([1.2, 0.1, -0.6])

# 12 = medium dramatic, 18 = very dramatic, 24 = extreme
DRAMA_SCALE = 12.0
TEXT_LENGTH_WORDS = 40.0

BASELINE_FLOOR = 0.25
BASELINE_TYPING = 0.9
BASELINE_LENGTH = 0.25
IDLE_SPEED_BASELINE = 0.8
IDLE_AMP_BASELINE = 0.6
ACTIVE_SPEED_BASELINE = 0.35
ACTIVE_AMP_BASELINE = 0.25

MIN_COLOR = 0.12
NEUTRAL_COLOR = (0.18, 0.18, 0.22)

TYPING_SPIKE = 0.35
TYPING_DECAY = 0.03
COLOR_LERP = 0.06
MOTION_LERP = 0.08


def clamp(value: float, low: float, high: float) -> float:
    return float(np.clip(value, low, high))


def lerp(a, b, t: float):
    return a + (b - a) * t


@dataclass(frozen=True)
class SignalTargets:
    speed: float = BASE_SPEED
    amplitude: float = BASE_AMP
    anger_pct: float = 0.0
    joy_pct: float = 0.0
    sad_pct: float = 0.0
    drama: float = 0.0
    baseline: float = 0.0

    @property
    def color(self) -> tuple[float, float, float]:
        rgb = np.maximum(MIN_COLOR, [self.anger_pct, self.joy_pct, self.sad_pct])
        return tuple(float(c) for c in rgb)


def baseline_boost(total_words: int, typing_energy: float) -> float:
    text_length_boost = clamp(total_words / TEXT_LENGTH_WORDS, 0.0, 1.0)
    return BASELINE_FLOOR + typing_energy * BASELINE_TYPING + text_length_boost * BASELINE_LENGTH


def map_signals(result: ScoreResult, typing_energy: float = 0.0) -> SignalTargets:
    if result.total_words == 0:
        return SignalTargets()

    positive = np.maximum(0.0, [result.anger, result.joy, result.sad])
    total = float(positive.sum())
    baseline = baseline_boost(result.total_words, typing_energy)

    if total == 0.0:
        return SignalTargets(
            speed=clamp(BASE_SPEED + baseline * IDLE_SPEED_BASELINE, *SPEED_RANGE),
            amplitude=clamp(BASE_AMP + baseline * IDLE_AMP_BASELINE, *AMP_RANGE),
            baseline=baseline,
        )

    pct = positive / total
    density = result.hits / result.total_words
    drama = 1.0 + density * DRAMA_SCALE

    speed = BASE_SPEED + float(pct @ SPEED_WEIGHTS) * drama + baseline * ACTIVE_SPEED_BASELINE
    amplitude = BASE_AMP + float(pct @ AMP_WEIGHTS) * drama + baseline * ACTIVE_AMP_BASELINE

    return SignalTargets(
        speed=clamp(speed, *SPEED_RANGE),
        amplitude=clamp(amplitude, *AMP_RANGE),
        anger_pct=float(pct[0]),
        joy_pct=float(pct[1]),
        sad_pct=float(pct[2]),
        drama=drama,
        baseline=baseline,
    )


class TypingActivity:
    """Keystroke energy in [0, 1]: spikes on input, fades every frame."""

    def __init__(self, energy: float = 0.0):
        self.energy = clamp(energy, 0.0, 1.0)

    def bump(self) -> float:
        self.energy = clamp(self.energy + TYPING_SPIKE, 0.0, 1.0)
        return self.energy

    def decay(self) -> float:
        self.energy = lerp(self.energy, 0.0, TYPING_DECAY)
        return self.energy


@dataclass(frozen=True)
class SignalFrame:
    speed: float
    amplitude: float
    color: tuple[float, float, float]


class SignalSmoother:
    def __init__(self):
        self.speed = BASE_SPEED
        self.amplitude = BASE_AMP
        self._color = np.array(NEUTRAL_COLOR, dtype=float)

    @property
    def color(self) -> tuple[float, float, float]:
        return tuple(float(c) for c in self._color)

    def step(self, targets: SignalTargets) -> SignalFrame:
        self._color = lerp(self._color, np.array(targets.color, dtype=float), COLOR_LERP)
        self.speed = lerp(self.speed, targets.speed, MOTION_LERP)
        self.amplitude = lerp(self.amplitude, targets.amplitude, MOTION_LERP)
        return SignalFrame(speed=self.speed, amplitude=self.amplitude, color=self.color)


__all__ = [
    "SignalFrame",
    "SignalSmoother",
    "SignalTargets",
    "TypingActivity",
    "baseline_boost",
    "map_signals",
]
