"""
Hand-tuned linear scoring of TextMetrics into a 0-100 AI-likelihood.

Each rule starts from a signed weight (negative pulls towards human) and
fires at most one branch, checked high -> mid -> low:

    value > high  ->  weight * 1.0
    value > mid   ->  weight * 0.7
    value < low   ->  -weight * 1.2
"""

import math
from dataclasses import dataclass
from typing import Optional

from .text_metrics import TextMetrics

BASELINE = 50.0

HIGH_MULTIPLIER = 1.0
MID_MULTIPLIER = 0.7
LOW_MULTIPLIER = 1.2


@dataclass(frozen=True)
class ThresholdRule:
    metric: str
    weight: float
    high: float
    mid: Optional[float] = None
    low: Optional[float] = None


@dataclass(frozen=True)
class Adjustment:
    metric: str
    branch: str  # "high", "mid" or "low"
    value: float
    delta: float


RULES = (
    ThresholdRule("lexical_diversity", weight=-25, high=0.7, mid=0.5, low=0.4),
    ThresholdRule("sentence_length_variation", weight=-20, high=4, low=2),
    ThresholdRule("contraction_rate", weight=-15, high=0.4, low=0.1),
    ThresholdRule("filler_rate", weight=-10, high=0.3, low=0.05),
    ThresholdRule("passive_rate", weight=15, high=0.3),
    ThresholdRule("starter_diversity", weight=-15, high=0.8, low=0.4),
)


def _apply_rule(rule: ThresholdRule, value: float) -> Optional[Adjustment]:
    if value > rule.high:
        return Adjustment(rule.metric, "high", value, rule.weight * HIGH_MULTIPLIER)
    if rule.mid is not None and value > rule.mid:
        return Adjustment(rule.metric, "mid", value, rule.weight * MID_MULTIPLIER)
    if rule.low is not None and value < rule.low:
        return Adjustment(rule.metric, "low", value, -rule.weight * LOW_MULTIPLIER)
    return None


def score_adjustments(metrics: TextMetrics) -> list[Adjustment]:
    fired = []
    for rule in RULES:
        adjustment = _apply_rule(rule, getattr(metrics, rule.metric))
        if adjustment is not None:
            fired.append(adjustment)
    return fired


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def estimate_ai_probability(metrics: TextMetrics) -> int:
    score = BASELINE
    for adjustment in score_adjustments(metrics):
        score += adjustment.delta

    score = max(0.0, min(100.0, score))
    return _round_half_up(score)
