"""Maps gateway per-sentence labels back into local sentence scores."""
from aidetect.dtos.analysis_dto import Classification, SentenceScore
from aidetect.utils.verdict_aggregator import round_half_up

DEFAULT_REMOTE_PERCENT = 50


def clamp_percent(value: float | None) -> float:
    """Clamp a 0-100 value; a missing value counts as 50."""
    if value is None:
        return DEFAULT_REMOTE_PERCENT
    return max(0.0, min(100.0, value))


def remote_percent(value: float | None) -> int:
    return round_half_up(clamp_percent(value))


def score_from_remote(classification: str | None, confidence: float | None) -> SentenceScore:
    """Turn a (classification, confidence 0-100) pair into a SentenceScore.

    Labels are matched exactly; anything other than "ai" or "human",
    including a missing label, scores exactly 0.5.
    """
    fraction = clamp_percent(confidence) / 100

    if classification == Classification.AI.value:
        return SentenceScore.from_ai_probability(fraction)
    if classification == Classification.HUMAN.value:
        return SentenceScore.from_ai_probability(1 - fraction)
    return SentenceScore.from_ai_probability(0.5)
