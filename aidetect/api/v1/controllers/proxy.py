from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from aidetect.api.v1.schemas.proxy import ProxyRequest
from aidetect.services.proxy_service import ProxyFailure, ProxyService

PROXY_PATH = "/api/groq"

router = APIRouter(route_class=DishkaRoute, tags=["Proxy"])


@router.post(PROXY_PATH)
async def proxy_completion(
    request: ProxyRequest,
    service: FromDishka[ProxyService],
) -> JSONResponse:
    """Forward a prompt pair upstream and relay the raw completion response."""
    try:
        result = await service.forward(request.system_prompt, request.user_prompt)
    except ProxyFailure:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "proxy failure"},
        )
    return JSONResponse(status_code=result.status_code, content=result.body)
