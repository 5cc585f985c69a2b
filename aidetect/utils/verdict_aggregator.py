"""Aggregates per-sentence scores into a single document-level verdict."""
import math

from aidetect.core.exceptions import EmptyInputError
from aidetect.dtos.analysis_dto import (
    Classification,
    DocumentVerdictDTO,
    SentenceScore,
    SentenceVerdictDTO,
)
from aidetect.utils.sentence_scorer import classify

LIKELY_AI_PERCENT = 65
PARTIALLY_AI_PERCENT = 40


def round_half_up(value: float) -> int:
    """Round .5 towards positive infinity, as the percentage gauges expect."""
    return math.floor(value + 0.5)


def verdict_label(ai_percent: int) -> str:
    if ai_percent >= LIKELY_AI_PERCENT:
        return "Likely AI Generated"
    if ai_percent >= PARTIALLY_AI_PERCENT:
        return "Partially AI Generated"
    return "Likely Human Written"


def sentence_confidence(score: SentenceScore) -> int:
    """Confidence shown next to a sentence in the breakdown table."""
    label = classify(score.ai_probability)
    if label is Classification.AI:
        return round_half_up(score.ai_probability * 100)
    if label is Classification.HUMAN:
        return round_half_up(score.human_probability * 100)
    return round_half_up((1 - abs(score.ai_probability - 0.5) * 2) * 100)


def describe_sentences(
    sentences: list[str],
    scores: list[SentenceScore],
) -> list[SentenceVerdictDTO]:
    return [
        SentenceVerdictDTO(
            text=text,
            score=score,
            classification=classify(score.ai_probability),
            confidence=sentence_confidence(score),
        )
        for text, score in zip(sentences, scores)
    ]


def build_verdict(ai_percent: int, scores: list[SentenceScore]) -> DocumentVerdictDTO:
    """Build a verdict around a given overall AI percentage.

    The per-classification count percentages are rounded independently for
    AI and human; mixed takes the residual, so the three may disagree with
    the raw counts by a rounding step.
    """
    if not scores:
        raise EmptyInputError("Cannot build a verdict from zero sentences")

    labels = [classify(s.ai_probability) for s in scores]
    total = len(labels)
    ai_count = labels.count(Classification.AI)
    human_count = labels.count(Classification.HUMAN)
    mixed_count = total - ai_count - human_count

    ai_count_percent = round_half_up(ai_count / total * 100)
    human_count_percent = round_half_up(human_count / total * 100)

    return DocumentVerdictDTO(
        ai_percent=ai_percent,
        human_percent=100 - ai_percent,
        label=verdict_label(ai_percent),
        ai_count=ai_count,
        human_count=human_count,
        mixed_count=mixed_count,
        ai_count_percent=ai_count_percent,
        human_count_percent=human_count_percent,
        mixed_count_percent=100 - ai_count_percent - human_count_percent,
    )


def aggregate(scores: list[SentenceScore]) -> DocumentVerdictDTO:
    """Combine sentence scores into a document verdict.

    The overall AI percentage is the rounded mean of the sentence AI
    probabilities; the human percentage is its complement.
    """
    if not scores:
        raise EmptyInputError("No sentence scores to aggregate")

    mean_ai = sum(s.ai_probability for s in scores) / len(scores)
    return build_verdict(round_half_up(mean_ai * 100), scores)
