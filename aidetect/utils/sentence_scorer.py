"""Pattern-based AI/human scoring for single sentences.

Used when the remote classifier is unavailable. Scores are approximate by
construction: a little noise is mixed in and the result is kept away from
0 and 1.
"""
import random

from aidetect.dtos.analysis_dto import Classification, SentenceScore, SignalCounts
from aidetect.utils.sentence_tokenizer import count_words
from aidetect.utils.signal_patterns import AI_PATTERNS, HUMAN_PATTERNS, count_matches

AI_THRESHOLD = 0.62
HUMAN_THRESHOLD = 0.40

_AI_LENGTH_RANGE = (18, 32)
_AI_LENGTH_BONUS = 0.5
_HUMAN_SHORT_BELOW = 8
_HUMAN_LONG_ABOVE = 45
_HUMAN_LENGTH_BONUS = 0.3

_PRIOR_FLOOR = 0.28
_PRIOR_SPREAD = 0.44
_NOISE_SPREAD = 0.12
_MIN_PROBABILITY = 0.03
_MAX_PROBABILITY = 0.97


def classify(ai_probability: float) -> Classification:
    """Map an AI probability to its three-way label."""
    if ai_probability >= AI_THRESHOLD:
        return Classification.AI
    if ai_probability <= HUMAN_THRESHOLD:
        return Classification.HUMAN
    return Classification.MIXED


def count_signals(sentence: str) -> SignalCounts:
    """Pattern hits per side, plus the fractional sentence-length adjustments."""
    ai_hits: float = count_matches(AI_PATTERNS, sentence)
    human_hits: float = count_matches(HUMAN_PATTERNS, sentence)

    words = count_words(sentence)
    low, high = _AI_LENGTH_RANGE
    if low <= words <= high:
        ai_hits += _AI_LENGTH_BONUS
    if words < _HUMAN_SHORT_BELOW or words > _HUMAN_LONG_ABOVE:
        human_hits += _HUMAN_LENGTH_BONUS

    return SignalCounts(ai_hits=ai_hits, human_hits=human_hits)


class SentenceScorer:
    """Scores sentences from their signal counts using an injected random source."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def score(self, sentence: str) -> SentenceScore:
        signals = count_signals(sentence)

        if signals.total == 0:
            # Nothing fired: draw from a band around an even prior
            ai_probability = _PRIOR_FLOOR + self._rng.random() * _PRIOR_SPREAD
            return SentenceScore.from_ai_probability(ai_probability)

        raw = signals.ai_hits / signals.total
        noise = (self._rng.random() - 0.5) * _NOISE_SPREAD
        ai_probability = min(_MAX_PROBABILITY, max(_MIN_PROBABILITY, raw + noise))
        return SentenceScore.from_ai_probability(ai_probability)

    def score_all(self, sentences: list[str]) -> list[SentenceScore]:
        return [self.score(sentence) for sentence in sentences]
