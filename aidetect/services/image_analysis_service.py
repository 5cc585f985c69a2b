"""Image authenticity verdicts from the remote classifier, with a demo fallback."""
import math
import random

from aidetect.core.config import Config
from aidetect.core.exceptions import GatewayError
from aidetect.core.logging import get_logger
from aidetect.dtos.analysis_dto import (
    ImageAnalysisInputDTO,
    ImageAnalysisResultDTO,
    ImageAttributeDTO,
    VerdictSource,
)
from aidetect.services.gateway_client import GatewayClient
from aidetect.services.gateway_schemas import ImageVerdictPayload
from aidetect.services.prompts import IMAGE_SYSTEM_PROMPT, build_image_prompt
from aidetect.utils.remote_reconciler import remote_percent
from aidetect.utils.verdict_aggregator import round_half_up

logger = get_logger(__name__)

HIGH_AUTHENTICITY = 75
MEDIUM_AUTHENTICITY = 45

AI_SIGNATURE = "AI-Gen Signature"
PIXEL_ENTROPY = "Pixel Entropy"
EXIF_INTEGRITY = "EXIF Integrity"

_DEFAULT_DESCRIPTIONS = {
    "High Authenticity": "This image exhibits strong markers of authenticity. No significant AI-generation signatures detected.",
    "Medium Authenticity": "Some indicators of possible manipulation detected. Manual review recommended.",
    "Low Authenticity": "Strong AI-generation or manipulation signatures found. This image may not be authentic.",
}

# (name, floor, spread) for randomized fallback attributes
_FALLBACK_ATTRIBUTES = (
    (PIXEL_ENTROPY, 60, 35),
    ("Compression Artifacts", 40, 45),
    (EXIF_INTEGRITY, 50, 45),
    (AI_SIGNATURE, 5, 40),
    ("Edge Coherence", 55, 40),
)
_FALLBACK_SCORE_FLOOR = 52
_FALLBACK_SCORE_SPREAD = 42

# Demo-only overrides for a known test image
_DEMO_LOW_SCORE = 20
_DEMO_HIGH_SCORE = 95
_DEMO_TEST_KEYWORD = "dog"
_DEMO_PASTED_NAME = "pasted image"


def authenticity_label(score: int) -> str:
    if score >= HIGH_AUTHENTICITY:
        return "High Authenticity"
    if score >= MEDIUM_AUTHENTICITY:
        return "Medium Authenticity"
    return "Low Authenticity"


def apply_demo_overrides(payload: ImageVerdictPayload, name: str) -> bool:
    """Force scores for the known test image. Mutates the payload.

    Returns True when an override fired.
    """
    ai_signature = payload.attribute(AI_SIGNATURE)
    if _DEMO_TEST_KEYWORD in name or (ai_signature is not None and ai_signature.score >= 60):
        payload.authenticity_score = _DEMO_LOW_SCORE
        payload.verdict = "Low Authenticity"
        payload.description = "Detected strong AI-generation signals (known test pattern)."
        return True

    entropy = payload.attribute(PIXEL_ENTROPY)
    exif = payload.attribute(EXIF_INTEGRITY)
    if (
        ai_signature is not None and ai_signature.score < 20
        and entropy is not None and entropy.score > 80
        and exif is not None and exif.score > 80
    ):
        payload.authenticity_score = _DEMO_HIGH_SCORE
        payload.verdict = "High Authenticity"
        payload.description = "Attributes strongly indicate real photo."
        return True

    return False


class ImageAnalysisService:
    def __init__(self, gateway: GatewayClient, rng: random.Random, config: Config) -> None:
        self._gateway = gateway
        self._rng = rng
        self._demo_overrides = config.analysis.demo_overrides

    async def attempt_gateway(self, dto: ImageAnalysisInputDTO) -> ImageVerdictPayload:
        prompt = build_image_prompt(dto.image_data, dto.image_url)
        return await self._gateway.request_verdict(IMAGE_SYSTEM_PROMPT, prompt, ImageVerdictPayload)

    def from_gateway(self, payload: ImageVerdictPayload, name: str) -> ImageAnalysisResultDTO:
        overridden = self._demo_overrides and apply_demo_overrides(payload, name)
        score = remote_percent(payload.authenticity_score)
        label = payload.verdict or authenticity_label(score)
        return ImageAnalysisResultDTO(
            source=VerdictSource.GATEWAY,
            authenticity_score=score,
            label=label,
            description=payload.description or _DEFAULT_DESCRIPTIONS[authenticity_label(score)],
            reasoning=payload.reasoning,
            attributes=[
                ImageAttributeDTO(name=a.name, score=round_half_up(a.score))
                for a in payload.attributes
                if a.score is not None
            ],
            demo_override_applied=overridden,
        )

    def demo_fallback(self, name: str) -> ImageAnalysisResultDTO:
        """Randomized placeholder verdict for when the gateway is unavailable."""
        score = math.floor(self._rng.random() * _FALLBACK_SCORE_SPREAD) + _FALLBACK_SCORE_FLOOR
        overridden = self._demo_overrides and name == _DEMO_PASTED_NAME
        if overridden:
            score = _DEMO_LOW_SCORE

        attributes = [
            ImageAttributeDTO(name=attr_name, score=math.floor(floor + self._rng.random() * spread))
            for attr_name, floor, spread in _FALLBACK_ATTRIBUTES
        ]
        label = authenticity_label(score)
        return ImageAnalysisResultDTO(
            source=VerdictSource.FALLBACK,
            authenticity_score=score,
            label=label,
            description=_DEFAULT_DESCRIPTIONS[label],
            attributes=attributes,
            demo_override_applied=overridden,
        )

    async def analyze(self, dto: ImageAnalysisInputDTO) -> ImageAnalysisResultDTO:
        name = (dto.name or "").lower()

        try:
            payload = await self.attempt_gateway(dto)
        except GatewayError as e:
            logger.warning(
                "gateway_failed_using_demo_image_verdict",
                error=str(e),
                error_type=type(e).__name__,
            )
            result = self.demo_fallback(name)
        else:
            result = self.from_gateway(payload, name)

        if result.demo_override_applied:
            logger.info("image_demo_override_applied", source=result.source.value)
        logger.info(
            "image_analysis_completed",
            source=result.source.value,
            authenticity_score=result.authenticity_score,
        )
        return result
