from dataclasses import dataclass, field
from enum import Enum


class Classification(str, Enum):
    AI = "ai"
    HUMAN = "human"
    MIXED = "mixed"


class VerdictSource(str, Enum):
    GATEWAY = "gateway"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class SentenceScore:
    """Complementary AI/human probability pair for one sentence."""
    ai_probability: float
    human_probability: float

    @classmethod
    def from_ai_probability(cls, ai_probability: float) -> "SentenceScore":
        return cls(ai_probability=ai_probability, human_probability=1 - ai_probability)


@dataclass(frozen=True)
class SignalCounts:
    ai_hits: float
    human_hits: float

    @property
    def total(self) -> float:
        return self.ai_hits + self.human_hits


@dataclass
class SentenceVerdictDTO:
    text: str
    score: SentenceScore
    classification: Classification
    confidence: int


@dataclass
class DocumentVerdictDTO:
    ai_percent: int
    human_percent: int
    label: str
    ai_count: int
    human_count: int
    mixed_count: int
    ai_count_percent: int
    human_count_percent: int
    mixed_count_percent: int

    @property
    def sentence_count(self) -> int:
        return self.ai_count + self.human_count + self.mixed_count


@dataclass
class TextAnalysisInputDTO:
    text: str


@dataclass
class TextAnalysisResultDTO:
    source: VerdictSource
    verdict: DocumentVerdictDTO
    sentences: list[SentenceVerdictDTO] = field(default_factory=list)
    reasoning: str | None = None


@dataclass
class TextStatsDTO:
    word_count: int
    sentence_count: int
    analyzable: bool


@dataclass
class ImageAnalysisInputDTO:
    image_data: str | None = None
    image_url: str | None = None
    name: str | None = None


@dataclass
class ImageAttributeDTO:
    name: str
    score: int


@dataclass
class ImageAnalysisResultDTO:
    source: VerdictSource
    authenticity_score: int
    label: str
    description: str
    reasoning: str | None = None
    attributes: list[ImageAttributeDTO] = field(default_factory=list)
    demo_override_applied: bool = False
