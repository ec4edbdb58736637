# openai_lite/__init__.py
"""Typed async bindings for the OpenAI HTTP API."""
from .client import Client
from .config import Settings
from .schemas import (
    ChatArguments,
    ChatCompletion,
    ChatCompletionChunk,
    ChatMessage,
    CompletionArguments,
    CompletionResponse,
    EditArguments,
    EditResponse,
    EmbeddingsArguments,
    EmbeddingsResponse,
    ImageArguments,
    Model,
    Role,
)
from .streaming import ChatCompletionChunkStream, ServerSentEvent, SSEDecoder
from .utils.errors import (
    APIConnectionError,
    APIError,
    APITimeoutError,
    AuthenticationError,
    BadRequestError,
    ConfigurationError,
    InternalServerError,
    NotFoundError,
    OpenAILiteError,
    PermissionDeniedError,
    RateLimitError,
    ResponseValidationError,
    StreamDecodeError,
    UnprocessableEntityError,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "Client",
    "Settings",
    # Request / response models
    "Role",
    "ChatMessage",
    "ChatArguments",
    "ChatCompletion",
    "ChatCompletionChunk",
    "CompletionArguments",
    "CompletionResponse",
    "EditArguments",
    "EditResponse",
    "EmbeddingsArguments",
    "EmbeddingsResponse",
    "ImageArguments",
    "Model",
    # Streaming
    "ChatCompletionChunkStream",
    "ServerSentEvent",
    "SSEDecoder",
    # Errors
    "OpenAILiteError",
    "ConfigurationError",
    "APIError",
    "BadRequestError",
    "AuthenticationError",
    "PermissionDeniedError",
    "NotFoundError",
    "UnprocessableEntityError",
    "RateLimitError",
    "InternalServerError",
    "APIConnectionError",
    "APITimeoutError",
    "ResponseValidationError",
    "StreamDecodeError",
]
