# Chat completions: request arguments, full responses and streamed chunks.
# See https://platform.openai.com/docs/api-reference/chat
from enum import Enum
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, field_validator

from openai_lite.schemas.base import APIObject, Arguments


class Role(str, Enum):
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class ChatMessage(BaseModel):
    role: Role
    content: str

    @field_validator("content", mode="before")
    @classmethod
    def _null_content(cls, v):
        # assistant messages may carry `"content": null`
        return "" if v is None else v

    @classmethod
    def system(cls, content: str) -> "ChatMessage":
        return cls(role=Role.SYSTEM, content=content)

    @classmethod
    def user(cls, content: str) -> "ChatMessage":
        return cls(role=Role.USER, content=content)

    @classmethod
    def assistant(cls, content: str) -> "ChatMessage":
        return cls(role=Role.ASSISTANT, content=content)


class ChatArguments(Arguments):
    """
    Request arguments for chat completion.
    See https://platform.openai.com/docs/api-reference/chat/create
    """

    model: str
    messages: List[ChatMessage]
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    n: Optional[int] = None
    stream: Optional[bool] = None
    stop: Optional[Union[str, List[str]]] = None
    max_tokens: Optional[int] = None
    presence_penalty: Optional[float] = None
    frequency_penalty: Optional[float] = None
    logit_bias: Optional[Dict[str, float]] = None
    user: Optional[str] = None


class ChatUsage(APIObject):
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


class ChatChoice(APIObject):
    index: int
    message: ChatMessage
    finish_reason: Optional[str] = None


class ChatCompletion(APIObject):
    id: str
    object: str = "chat.completion"
    created: int
    model: Optional[str] = None
    choices: List[ChatChoice]
    usage: Optional[ChatUsage] = None


# --- streaming -------------------------------------------------------------

class ChatDelta(APIObject):
    role: Optional[Role] = None
    content: Optional[str] = None


class ChunkChoice(APIObject):
    index: int
    delta: ChatDelta
    finish_reason: Optional[str] = None


class ChatCompletionChunk(APIObject):
    """One event of a streamed chat completion. `str()` gives the delta text."""

    id: str
    object: str = "chat.completion.chunk"
    created: int
    model: Optional[str] = None
    choices: List[ChunkChoice]

    def __str__(self) -> str:
        if not self.choices:
            return ""
        return self.choices[0].delta.content or ""
