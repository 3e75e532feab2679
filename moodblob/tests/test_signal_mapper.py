from __future__ import annotations

import pytest

from moodblob.services.nlp.scorer import ScoreResult
from moodblob.services.nlp.signal_mapper import (
    BASE_AMP,
    BASE_SPEED,
    SignalSmoother,
    SignalTargets,
    TypingActivity,
    baseline_boost,
    map_signals,
)


def test_no_words_is_neutral():
    targets = map_signals(ScoreResult(), typing_energy=0.9)
    assert targets == SignalTargets()
    assert (targets.speed, targets.amplitude) == (BASE_SPEED, BASE_AMP)
    assert targets.color == (0.12, 0.12, 0.12)


def test_neutral_text_still_moves_with_typing_baseline():
    targets = map_signals(ScoreResult(total_words=4), typing_energy=0.0)
    assert targets.baseline == pytest.approx(0.275)
    assert targets.speed == pytest.approx(1.0 + 0.275 * 0.8)
    assert targets.amplitude == pytest.approx(0.6 + 0.275 * 0.6)
    assert targets.drama == 0.0
    assert (targets.anger_pct, targets.joy_pct, targets.sad_pct) == (0.0, 0.0, 0.0)

    typing = map_signals(ScoreResult(total_words=4), typing_energy=1.0)
    assert typing.speed > targets.speed


def test_negative_scores_count_as_no_signal():
    targets = map_signals(ScoreResult(joy=-0.8, hits=1, total_words=4))
    assert targets.joy_pct == 0.0
    assert targets.speed == pytest.approx(1.0 + 0.275 * 0.8)


def test_joy_mix_drives_targets():
    targets = map_signals(ScoreResult(joy=2.0, hits=1, total_words=20))
    assert targets.joy_pct == pytest.approx(1.0)
    assert targets.drama == pytest.approx(1.6)
    assert targets.baseline == pytest.approx(0.375)
    assert targets.speed == pytest.approx(1.0 + 0.1 * 1.6 + 0.375 * 0.35)
    assert targets.amplitude == pytest.approx(0.6 + 0.1 * 1.6 + 0.375 * 0.25)
    assert targets.color == pytest.approx((0.12, 1.0, 0.12))


def test_percentages_split_the_positive_mass():
    targets = map_signals(ScoreResult(anger=1.0, joy=-0.5, sad=3.0, hits=3, total_words=30))
    assert targets.anger_pct == pytest.approx(0.25)
    assert targets.joy_pct == 0.0
    assert targets.sad_pct == pytest.approx(0.75)


def test_targets_are_clamped():
    angry = map_signals(ScoreResult(anger=1.0, hits=1, total_words=2))
    assert angry.speed == pytest.approx(6.0)
    assert angry.amplitude == pytest.approx(5.0)

    sad = map_signals(ScoreResult(sad=1.0, hits=1, total_words=10))
    assert sad.speed == pytest.approx(0.2)
    assert sad.amplitude == pytest.approx(0.05)


def test_baseline_caps_text_length_contribution():
    assert baseline_boost(400, 0.0) == pytest.approx(0.5)
    assert baseline_boost(0, 1.0) == pytest.approx(1.15)


def test_typing_activity_spikes_and_decays():
    activity = TypingActivity()
    assert activity.bump() == pytest.approx(0.35)
    activity.bump()
    assert activity.bump() == pytest.approx(1.0)
    assert activity.decay() == pytest.approx(0.97)


def test_smoother_lerps_toward_targets():
    smoother = SignalSmoother()
    targets = SignalTargets(speed=2.0, amplitude=1.6, anger_pct=1.0)
    frame = smoother.step(targets)
    assert frame.speed == pytest.approx(1.08)
    assert frame.amplitude == pytest.approx(0.68)
    assert frame.color == pytest.approx((0.18 + 0.82 * 0.06, 0.18 - 0.06 * 0.06, 0.22 - 0.10 * 0.06))

    for _ in range(500):
        frame = smoother.step(targets)
    assert frame.speed == pytest.approx(2.0, abs=1e-6)
    assert frame.color == pytest.approx((1.0, 0.12, 0.12), abs=1e-6)
