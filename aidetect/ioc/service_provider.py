"""
Service provider for dependency injection.

This module provides all service dependencies.
"""

import random
from typing import AsyncIterable

import httpx
from dishka import Provider, Scope, from_context, provide

from aidetect.core.config import Config
from aidetect.services.gateway_client import GatewayClient
from aidetect.services.image_analysis_service import ImageAnalysisService
from aidetect.services.proxy_service import ProxyService
from aidetect.services.text_analysis_service import TextAnalysisService
from aidetect.utils.sentence_scorer import SentenceScorer


class ServiceProvider(Provider):
    """
    Provider for service dependencies.

    All services are provided at APP scope (singleton). A transport and a
    random source may be passed in to replace the network and the RNG.
    """

    config = from_context(provides=Config, scope=Scope.APP)

    def __init__(
        self,
        transport: httpx.AsyncBaseTransport | None = None,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__()
        self._transport = transport
        self._rng = rng

    @provide(scope=Scope.APP)
    async def provide_http_client(self, config: Config) -> AsyncIterable[httpx.AsyncClient]:
        async with httpx.AsyncClient(
            transport=self._transport,
            timeout=httpx.Timeout(config.gateway.timeout_seconds),
        ) as client:
            yield client

    @provide(scope=Scope.APP)
    def provide_random(self) -> random.Random:
        return self._rng or random.Random()

    @provide(scope=Scope.APP)
    def provide_gateway_client(self, client: httpx.AsyncClient, config: Config) -> GatewayClient:
        return GatewayClient(client, config)

    @provide(scope=Scope.APP)
    def provide_proxy_service(self, client: httpx.AsyncClient, config: Config) -> ProxyService:
        return ProxyService(client, config)

    @provide(scope=Scope.APP)
    def provide_sentence_scorer(self, rng: random.Random) -> SentenceScorer:
        return SentenceScorer(rng)

    @provide(scope=Scope.APP)
    def provide_text_analysis_service(
        self,
        gateway: GatewayClient,
        scorer: SentenceScorer,
        config: Config,
    ) -> TextAnalysisService:
        return TextAnalysisService(gateway, scorer, config)

    @provide(scope=Scope.APP)
    def provide_image_analysis_service(
        self,
        gateway: GatewayClient,
        rng: random.Random,
        config: Config,
    ) -> ImageAnalysisService:
        return ImageAnalysisService(gateway, rng, config)
