import base64
import binascii
from urllib.parse import urlparse

from pydantic import BaseModel, Field, field_validator, model_validator

from aidetect.core.config import config

_DATA_URL_PREFIX = "data:image/"


class ImageAnalysisRequest(BaseModel):
    """Either an image data URL or an http(s) image URL."""

    image_data: str | None = None
    image_url: str | None = None
    name: str | None = Field(default=None, max_length=255)

    @field_validator("image_data")
    @classmethod
    def validate_image_data(cls, v: str | None) -> str | None:
        if v is None:
            return v
        header, sep, encoded = v.partition(",")
        if not sep or not header.startswith(_DATA_URL_PREFIX) or not header.endswith(";base64"):
            raise ValueError("Image data must be a base64 image data URL")
        try:
            decoded = base64.b64decode(encoded, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ValueError("Image data is not valid base64") from e
        if len(decoded) > config.analysis.max_image_bytes:
            raise ValueError("Image is too large")
        return v

    @field_validator("image_url")
    @classmethod
    def validate_image_url(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError("Please enter a valid image URL")
        return v

    @model_validator(mode="after")
    def require_image(self) -> "ImageAnalysisRequest":
        if not self.image_data and not self.image_url:
            raise ValueError("Provide image_data or image_url")
        return self


class ImageAttribute(BaseModel):
    name: str
    score: int


class ImageAnalysisResponse(BaseModel):
    source: str
    authenticity_score: int
    label: str
    description: str
    reasoning: str | None = None
    attributes: list[ImageAttribute]
    demo_override_applied: bool
