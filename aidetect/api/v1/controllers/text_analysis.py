from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status

from aidetect.api.v1.schemas.text_analysis import (
    SampleTextResponse,
    SentenceBreakdown,
    TextAnalysisRequest,
    TextAnalysisResponse,
    TextStatsRequest,
    TextStatsResponse,
    VerdictBreakdown,
)
from aidetect.core.config import Config
from aidetect.dtos.analysis_dto import TextAnalysisInputDTO
from aidetect.services.text_analysis_service import TextAnalysisService, text_stats
from aidetect.utils.samples import SAMPLES

router = APIRouter(
    route_class=DishkaRoute,
    prefix="/api/v1/text",
    tags=["Text analysis"],
)


@router.post("/analyze", response_model=TextAnalysisResponse)
async def analyze_text(
    request: TextAnalysisRequest,
    service: FromDishka[TextAnalysisService],
) -> TextAnalysisResponse:
    """Estimate whether the text is AI-generated, with a per-sentence breakdown."""
    result = await service.analyze(TextAnalysisInputDTO(text=request.text))
    verdict = result.verdict
    return TextAnalysisResponse(
        source=result.source.value,
        ai_percent=verdict.ai_percent,
        human_percent=verdict.human_percent,
        label=verdict.label,
        breakdown=VerdictBreakdown(
            ai_count=verdict.ai_count,
            human_count=verdict.human_count,
            mixed_count=verdict.mixed_count,
            ai_percent=verdict.ai_count_percent,
            human_percent=verdict.human_count_percent,
            mixed_percent=verdict.mixed_count_percent,
        ),
        sentences=[
            SentenceBreakdown(
                text=s.text,
                classification=s.classification.value,
                ai_probability=s.score.ai_probability,
                human_probability=s.score.human_probability,
                confidence=s.confidence,
            )
            for s in result.sentences
        ],
        reasoning=result.reasoning,
    )


@router.post("/stats", response_model=TextStatsResponse)
async def get_text_stats(
    request: TextStatsRequest,
    config: FromDishka[Config],
) -> TextStatsResponse:
    """Word and sentence counts, and whether the text is long enough to analyze."""
    stats = text_stats(request.text, config.analysis.min_text_chars)
    return TextStatsResponse(
        word_count=stats.word_count,
        sentence_count=stats.sentence_count,
        analyzable=stats.analyzable,
    )


@router.get("/samples/{kind}", response_model=SampleTextResponse)
async def get_sample_text(kind: str) -> SampleTextResponse:
    if kind not in SAMPLES:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Unknown sample")
    return SampleTextResponse(kind=kind, text=SAMPLES[kind])
