import random

import httpx
import pytest
from fastapi.testclient import TestClient

from aidetect.core.config import AnalysisConfig, Config, GroqConfig
from aidetect.ioc import AppProvider
from aidetect.main import create_app


@pytest.fixture
def config():
    return Config(groq=GroqConfig(api_key=None))


@pytest.fixture
def demo_config():
    return Config(analysis=AnalysisConfig(demo_overrides=True))


@pytest.fixture
def proxy_config():
    return Config(groq=GroqConfig(api_key="test-key"))


@pytest.fixture
def make_client():
    """Build a TestClient whose outbound HTTP goes to the given handler."""
    def _make(handler, app_config=None, seed=7):
        provider = AppProvider(
            transport=httpx.MockTransport(handler),
            rng=random.Random(seed),
        )
        app = create_app(provider, app_config or Config(groq=GroqConfig(api_key=None)))
        return TestClient(app)
    return _make
