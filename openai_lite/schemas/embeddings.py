# See https://platform.openai.com/docs/api-reference/embeddings
from typing import List, Optional, Union

from openai_lite.schemas.base import APIObject, Arguments


class EmbeddingsArguments(Arguments):
    model: str
    # one string, or a batch of strings embedded in a single request
    input: Union[str, List[str]]
    user: Optional[str] = None


class EmbeddingsData(APIObject):
    object: str = "embedding"
    embedding: List[float]
    index: int


class EmbeddingsUsage(APIObject):
    prompt_tokens: int
    total_tokens: int


class EmbeddingsResponse(APIObject):
    object: str = "list"
    data: List[EmbeddingsData]
    model: str
    usage: EmbeddingsUsage
