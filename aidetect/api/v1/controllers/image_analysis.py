from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from aidetect.api.v1.schemas.image_analysis import (
    ImageAnalysisRequest,
    ImageAnalysisResponse,
    ImageAttribute,
)
from aidetect.dtos.analysis_dto import ImageAnalysisInputDTO
from aidetect.services.image_analysis_service import ImageAnalysisService

router = APIRouter(
    route_class=DishkaRoute,
    prefix="/api/v1/image",
    tags=["Image analysis"],
)


@router.post("/analyze", response_model=ImageAnalysisResponse)
async def analyze_image(
    request: ImageAnalysisRequest,
    service: FromDishka[ImageAnalysisService],
) -> ImageAnalysisResponse:
    """Estimate how likely the image is authentic rather than AI-generated."""
    input_dto = ImageAnalysisInputDTO(
        image_data=request.image_data,
        image_url=request.image_url,
        name=request.name,
    )
    result = await service.analyze(input_dto)
    return ImageAnalysisResponse(
        source=result.source.value,
        authenticity_score=result.authenticity_score,
        label=result.label,
        description=result.description,
        reasoning=result.reasoning,
        attributes=[ImageAttribute(name=a.name, score=a.score) for a in result.attributes],
        demo_override_applied=result.demo_override_applied,
    )
