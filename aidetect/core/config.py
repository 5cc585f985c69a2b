from pathlib import Path

from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent.parent
ENV_FILE = BASE_DIR / '.env'


class GatewayConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix='GATEWAY_',
        env_file=ENV_FILE,
        extra='ignore',
    )
    url: str = "http://127.0.0.1:8000/api/groq"
    # None disables the client timeout entirely
    timeout_seconds: float | None = None


class GroqConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix='GROQ_',
        env_file=ENV_FILE,
        extra='ignore',
    )
    api_key: str | None = None
    base_url: str = "https://api.groq.com/openai/v1"
    model: str = "llama-3.3-70b-versatile"
    temperature: float = 0.1
    max_tokens: int = 1024

    @computed_field
    @property
    def completions_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/chat/completions"


class AnalysisConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix='ANALYSIS_',
        env_file=ENV_FILE,
        extra='ignore',
    )
    min_text_chars: int = 20
    max_prompt_chars: int = 3000
    max_image_bytes: int = 10 * 1024 * 1024
    demo_overrides: bool = False


class Config(BaseSettings):
    app_name: str = "AI Content Detector"
    version: str = "0.1.0"
    environment: str = "development"
    debug: bool = True

    # Nested configs
    gateway: GatewayConfig = GatewayConfig()
    groq: GroqConfig = GroqConfig()
    analysis: AnalysisConfig = AnalysisConfig()

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore',
    )

config = Config()
