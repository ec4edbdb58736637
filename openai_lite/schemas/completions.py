# Legacy text completions.
# See https://platform.openai.com/docs/api-reference/completions
from typing import Dict, List, Optional, Union

from pydantic import Field

from openai_lite.schemas.base import APIObject, Arguments


class CompletionArguments(Arguments):
    model: str
    prompt: Union[str, List[str]]
    suffix: Optional[str] = None
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    n: Optional[int] = None
    # upstream caps logprobs at 5
    logprobs: Optional[int] = Field(default=None, ge=0, le=5)
    echo: Optional[bool] = None
    stop: Optional[Union[str, List[str]]] = None
    presence_penalty: Optional[float] = None
    frequency_penalty: Optional[float] = None
    best_of: Optional[int] = None
    logit_bias: Optional[Dict[str, float]] = None
    user: Optional[str] = None


class LogProbs(APIObject):
    """
    Per-token log probabilities. With `echo=True` the first prompt token has
    no logprob, so entries of `token_logprobs` / `top_logprobs` may be None.
    """

    tokens: List[str] = Field(default_factory=list)
    token_logprobs: List[Optional[float]] = Field(default_factory=list)
    top_logprobs: List[Optional[Dict[str, float]]] = Field(default_factory=list)
    text_offset: List[int] = Field(default_factory=list)


class CompletionChoice(APIObject):
    text: str
    index: int
    logprobs: Optional[LogProbs] = None
    finish_reason: Optional[str] = None


class CompletionUsage(APIObject):
    prompt_tokens: int
    completion_tokens: int = 0
    total_tokens: int


class CompletionResponse(APIObject):
    id: str
    object: str = "text_completion"
    created: int
    model: str
    choices: List[CompletionChoice]
    usage: Optional[CompletionUsage] = None
