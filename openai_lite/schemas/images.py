# See https://platform.openai.com/docs/api-reference/images
from typing import List, Literal, Optional

from pydantic import Field, model_validator

from openai_lite.schemas.base import APIObject, Arguments

ImageFormat = Literal["url", "b64_json"]
ImageSize = Literal["256x256", "512x512", "1024x1024"]


class ImageArguments(Arguments):
    # max 1000 characters upstream
    prompt: str
    n: Optional[int] = Field(default=None, ge=1, le=10)
    # defaults to `url` upstream
    response_format: Optional[ImageFormat] = None
    # defaults to `1024x1024` upstream
    size: Optional[ImageSize] = None
    user: Optional[str] = None


class ImageObject(APIObject):
    """A generated image: either a URL or base64 JSON, depending on `response_format`."""

    url: Optional[str] = None
    b64_json: Optional[str] = None

    @model_validator(mode="after")
    def _one_payload(self):
        if self.url is None and self.b64_json is None:
            raise ValueError("image object carries neither 'url' nor 'b64_json'")
        return self

    @property
    def value(self) -> str:
        return self.url if self.url is not None else self.b64_json


class ImageResponse(APIObject):
    created: int
    data: List[ImageObject]

    def values(self) -> List[str]:
        return [img.value for img in self.data]
