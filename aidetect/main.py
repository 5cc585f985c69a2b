"""
Main FastAPI application with logging, middleware and DI container setup.
"""
from contextlib import asynccontextmanager

from dishka import Provider, make_async_container
from dishka.integrations.fastapi import DishkaRoute
from dishka.integrations import fastapi as fastapi_integration
from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from aidetect.api.middlewares.request_context_middleware import RequestContextMiddleware
from aidetect.api.middlewares.response_middleware import StandardResponseMiddleware
from aidetect.api.exceptions.exception_handlers import register_exception_handlers
from aidetect.api.v1.controllers.image_analysis import router as image_analysis_router
from aidetect.api.v1.controllers.proxy import router as proxy_router
from aidetect.api.v1.controllers.text_analysis import router as text_analysis_router
from aidetect.core.config import config, Config
from aidetect.core.logging import get_logger, set_service_context, setup_logging
from aidetect.ioc import AppProvider

setup_logging(
    level="DEBUG" if config.debug else "INFO",
    json_logs=not config.debug,
)
set_service_context(config.app_name, config.version, config.environment)

logger = get_logger(__name__)

health_router = APIRouter(route_class=DishkaRoute, tags=["Health"])


@health_router.get("/health")
async def health_check():
    """
    Basic liveness check endpoint.
    """
    return {"status": "healthy", "service": config.app_name}


@health_router.get("/health/ready")
async def readiness_check():
    """
    Readiness check endpoint.
    """
    return {
        "status": "ready",
        "service": config.app_name
    }


def create_app(provider: Provider | None = None, app_config: Config = config) -> FastAPI:
    """
    Create and configure FastAPI application with Dishka DI container.
    """
    container = make_async_container(provider or AppProvider(), context={Config: app_config})

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "application_startup",
            app_name=app_config.app_name,
            gateway_url=app_config.gateway.url,
            demo_overrides=app_config.analysis.demo_overrides,
        )
        if not app_config.groq.api_key:
            logger.warning("groq_api_key_missing_proxy_disabled")
        yield
        logger.info("application_shutdown", app_name=app_config.app_name)
        await container.close()

    app = FastAPI(
        title=app_config.app_name,
        description="AI-generated content detection with a local heuristic fallback",
        version=app_config.version,
        lifespan=lifespan,
    )

    fastapi_integration.setup_dishka(container, app)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(StandardResponseMiddleware)
    app.add_middleware(RequestContextMiddleware)

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(text_analysis_router)
    app.include_router(image_analysis_router)
    app.include_router(proxy_router)

    return app


app = create_app()
