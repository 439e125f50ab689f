from .text_metrics import TextMetrics

HIGH = "high"
MEDIUM = "medium"
LOW = "low"

MIN_RELIABLE_LENGTH = 200


def classify_confidence(text_length: int, metrics: TextMetrics) -> str:
    if text_length < MIN_RELIABLE_LENGTH:
        return LOW

    # Long text with both diversity and variation far from the middle band
    if text_length > 500 and (
        metrics.lexical_diversity < 0.35 or metrics.lexical_diversity > 0.75
    ) and (
        metrics.sentence_length_variation < 1.5 or metrics.sentence_length_variation > 5
    ):
        return HIGH

    if text_length > 300 and (
        metrics.contraction_rate < 0.05
        or metrics.contraction_rate > 0.5
        or metrics.starter_diversity < 0.3
        or metrics.starter_diversity > 0.8
    ):
        return MEDIUM

    return LOW
