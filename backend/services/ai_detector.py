# services/ai_detector.py
import traceback
from dataclasses import dataclass
from typing import Optional

from utils.config import Settings

from .confidence import LOW, MIN_RELIABLE_LENGTH, classify_confidence
from .errors import ComputationError, InvalidInput
from .probability import Adjustment, estimate_ai_probability, score_adjustments
from .text_metrics import TextMetrics, extract_metrics

METRIC_LABELS = {
    "lexical_diversity": "lexical diversity",
    "sentence_length_variation": "sentence length variation",
    "contraction_rate": "contraction usage",
    "filler_rate": "filler word usage",
    "passive_rate": "passive voice usage",
    "starter_diversity": "sentence starter variety",
}


@dataclass(frozen=True)
class ScoreResult:
    ai_probability: int
    confidence: str
    metrics: TextMetrics
    reasoning: tuple

    def to_dict(self, include_metrics: bool = True) -> dict:
        payload = {
            "aiProbability": self.ai_probability,
            "confidence": self.confidence,
            "reasoning": list(self.reasoning),
        }
        if include_metrics:
            payload["metrics"] = self.metrics.to_dict()
        return payload


def validate_text(text, min_length: int = 50, max_length: Optional[int] = None) -> str:
    if not text or not isinstance(text, str) or not text.strip() or len(text) < min_length:
        raise InvalidInput(f"Text is required and must be at least {min_length} characters")
    if max_length is not None and len(text) > max_length:
        raise InvalidInput(f"Text must be at most {max_length} characters")
    return text


def _describe(adjustment: Adjustment) -> str:
    label = METRIC_LABELS.get(adjustment.metric, adjustment.metric)
    level = "Low" if adjustment.branch == "low" else "High"
    if adjustment.branch == "mid":
        level = "Moderately high"
    if adjustment.delta < 0:
        return f"{level} {label} suggests human authorship"
    return f"{level} {label} is consistent with AI writing"


def build_reasoning(text_length: int, confidence: str, adjustments: list[Adjustment]) -> tuple:
    reasons = [_describe(a) for a in adjustments]
    if not reasons:
        reasons.append("No metric crossed a threshold; score stays at the neutral baseline")
    if confidence == LOW and text_length < MIN_RELIABLE_LENGTH:
        reasons.append(f"Short text ({text_length} characters) limits reliability")
    return tuple(reasons)


def score_text(text: str) -> ScoreResult:
    """Run extraction, estimation and confidence on already-validated text."""
    try:
        metrics = extract_metrics(text)
        ai_prob = estimate_ai_probability(metrics)
        confidence = classify_confidence(len(text), metrics)
        reasoning = build_reasoning(len(text), confidence, score_adjustments(metrics))
    except Exception as e:
        print(f"[AI Detector] Exception: {e}")
        print(traceback.format_exc())
        raise ComputationError(str(e) or e.__class__.__name__) from e

    return ScoreResult(
        ai_probability=ai_prob,
        confidence=confidence,
        metrics=metrics,
        reasoning=reasoning,
    )


def detect_ai(text, settings: Settings) -> ScoreResult:
    text = validate_text(text, settings.min_text_length, settings.max_text_length)
    result = score_text(text)
    print(f"[AI Detector] {len(text)} chars -> {result.ai_probability}% with {result.confidence} confidence")
    return result
