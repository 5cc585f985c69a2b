from pydantic import BaseModel, Field, field_validator

from aidetect.core.config import config
from aidetect.utils.sentence_tokenizer import tokenize


class TextStatsRequest(BaseModel):
    text: str = Field(max_length=100_000)


class TextAnalysisRequest(BaseModel):
    """Text to classify; must be long enough to contain at least one sentence."""

    text: str = Field(max_length=100_000)

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        v = v.strip()
        if len(v) < config.analysis.min_text_chars:
            raise ValueError(
                f"Text must be at least {config.analysis.min_text_chars} characters long"
            )
        if not tokenize(v):
            raise ValueError("Text must contain at least one sentence")
        return v


class SentenceBreakdown(BaseModel):
    text: str
    classification: str
    ai_probability: float
    human_probability: float
    confidence: int


class VerdictBreakdown(BaseModel):
    ai_count: int
    human_count: int
    mixed_count: int
    ai_percent: int
    human_percent: int
    mixed_percent: int


class TextAnalysisResponse(BaseModel):
    source: str
    ai_percent: int
    human_percent: int
    label: str
    breakdown: VerdictBreakdown
    sentences: list[SentenceBreakdown]
    reasoning: str | None = None


class TextStatsResponse(BaseModel):
    word_count: int
    sentence_count: int
    analyzable: bool


class SampleTextResponse(BaseModel):
    kind: str
    text: str
