"""
Verdict payloads expected inside the gateway's message content.

The model is asked for a fixed schema but may omit fields, so everything
except the structure itself is optional.
"""

from pydantic import BaseModel, ConfigDict, Field


class _GatewayPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")


class GatewaySentence(_GatewayPayload):
    text: str | None = None
    classification: str | None = None
    confidence: float | None = None


class TextVerdictPayload(_GatewayPayload):
    ai_probability: float | None = None
    human_probability: float | None = None
    verdict: str | None = None
    reasoning: str | None = None
    sentences: list[GatewaySentence] = Field(default_factory=list)


class GatewayImageAttribute(_GatewayPayload):
    name: str
    score: float | None = None


class ImageVerdictPayload(_GatewayPayload):
    authenticity_score: float | None = None
    verdict: str | None = None
    description: str | None = None
    reasoning: str | None = None
    attributes: list[GatewayImageAttribute] = Field(default_factory=list)

    def attribute(self, name: str) -> GatewayImageAttribute | None:
        return next(
            (a for a in self.attributes if a.name == name and a.score is not None),
            None,
        )
