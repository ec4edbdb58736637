from .base import APIObject, Arguments
from .chat import (
    ChatArguments,
    ChatChoice,
    ChatCompletion,
    ChatCompletionChunk,
    ChatDelta,
    ChatMessage,
    ChatUsage,
    ChunkChoice,
    Role,
)
from .completions import (
    CompletionArguments,
    CompletionChoice,
    CompletionResponse,
    CompletionUsage,
    LogProbs,
)
from .edits import EditArguments, EditChoice, EditResponse, EditUsage
from .embeddings import (
    EmbeddingsArguments,
    EmbeddingsData,
    EmbeddingsResponse,
    EmbeddingsUsage,
)
from .images import ImageArguments, ImageObject, ImageResponse
from .models import ListModelsResponse, Model

__all__ = [
    "APIObject",
    "Arguments",
    # chat
    "Role",
    "ChatMessage",
    "ChatArguments",
    "ChatChoice",
    "ChatUsage",
    "ChatCompletion",
    "ChatDelta",
    "ChunkChoice",
    "ChatCompletionChunk",
    # completions
    "CompletionArguments",
    "CompletionChoice",
    "CompletionUsage",
    "CompletionResponse",
    "LogProbs",
    # edits
    "EditArguments",
    "EditChoice",
    "EditUsage",
    "EditResponse",
    # embeddings
    "EmbeddingsArguments",
    "EmbeddingsData",
    "EmbeddingsUsage",
    "EmbeddingsResponse",
    # images
    "ImageArguments",
    "ImageObject",
    "ImageResponse",
    # models
    "Model",
    "ListModelsResponse",
]
