# See https://platform.openai.com/docs/api-reference/models
from typing import List

from openai_lite.schemas.base import APIObject


class Model(APIObject):
    """Describes a model offering that can be used with the API."""

    # identifier referenced by the other endpoints
    id: str
    object: str = "model"
    # unix timestamp, seconds
    created: int
    owned_by: str


class ListModelsResponse(APIObject):
    object: str = "list"
    data: List[Model]
