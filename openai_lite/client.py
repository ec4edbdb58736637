# -*- coding: utf-8 -*-
# openai_lite/client.py
import json
import logging
import warnings
from typing import Any, Dict, List, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from openai_lite.config import Settings
from openai_lite.schemas.chat import ChatArguments, ChatCompletion
from openai_lite.schemas.completions import CompletionArguments, CompletionResponse
from openai_lite.schemas.edits import EditArguments, EditResponse
from openai_lite.schemas.embeddings import EmbeddingsArguments, EmbeddingsResponse
from openai_lite.schemas.images import ImageArguments, ImageResponse
from openai_lite.schemas.models import ListModelsResponse, Model
from openai_lite.streaming import ChatCompletionChunkStream
from openai_lite.utils.errors import (
    APIConnectionError,
    APITimeoutError,
    ConfigurationError,
    ResponseValidationError,
    error_from_response,
)

log = logging.getLogger("openai_lite.client")

_ResponseT = TypeVar("_ResponseT", bound=BaseModel)


def _json(obj: Any) -> str:
    try:
        return json.dumps(obj, ensure_ascii=False)
    except (TypeError, ValueError):
        return str(obj)


def _safe_summary(payload: Dict[str, Any]) -> Dict[str, Any]:
    # never log prompts, messages or the key
    return {
        "model": payload.get("model"),
        "messages_len": len(payload.get("messages") or []),
        "stream": bool(payload.get("stream")),
        "max_tokens": payload.get("max_tokens"),
    }


class Client:
    """
    Main interface to the API.

    - `api_key`, `base_url` and `timeout` fall back to `Settings`
      (OPENAI_API_KEY, OPENAI_BASE_URL, REQUEST_TIMEOUT_S).
    - `http_client` lets callers bring their own `httpx.AsyncClient`;
      it is used as-is and never closed here, and its own timeout applies
      (`timeout` is then ignored with a warning and `self.timeout` is None).
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        organization: Optional[str] = None,
    ):
        settings = Settings()
        key = api_key or settings.OPENAI_API_KEY
        if not key:
            raise ConfigurationError("missing API key: pass api_key or set OPENAI_API_KEY")

        self.api_key = key
        self.base_url = (base_url or settings.OPENAI_BASE_URL).rstrip("/")
        self.organization = organization or settings.OPENAI_ORGANIZATION

        self._owns_http = http_client is None
        if self._owns_http:
            self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT_S
            self._http = httpx.AsyncClient(timeout=self.timeout)
        else:
            if timeout is not None:
                warnings.warn(
                    "timeout is ignored when http_client is given; configure it on that client",
                    UserWarning,
                    stacklevel=2,
                )
            # the caller's client owns its timeouts
            self.timeout = None
            self._http = http_client

    def __repr__(self) -> str:
        return f"Client(base_url={self.base_url!r})"

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    # --- plumbing ------------------------------------------------------------

    def _headers(self) -> Dict[str, str]:
        headers = {"Authorization": f"Bearer {self.api_key}"}
        if self.organization:
            headers["OpenAI-Organization"] = self.organization
        return headers

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    async def _send(
        self,
        method: str,
        path: str,
        payload: Optional[Dict[str, Any]] = None,
        stream: bool = False,
    ) -> httpx.Response:
        """Issue one request; anything but a 200 raises the matching APIError."""
        url = self._url(path)
        if payload is not None:
            log.debug("%s %s payload (safe) %s", method, url, _json(_safe_summary(payload)))

        request = self._http.build_request(method, url, headers=self._headers(), json=payload)
        try:
            r = await self._http.send(request, stream=stream)
        except httpx.TimeoutException as e:
            log.error("%s %s timed out: %s", method, url, e)
            raise APITimeoutError(f"request timed out: {e}") from e
        except httpx.TransportError as e:
            log.error("%s %s connection error: %s", method, url, e)
            raise APIConnectionError(f"connection error: {e}") from e

        log.info("%s %s -> %s", method, url, r.status_code)
        if r.status_code == 200:
            return r

        if stream:
            await r.aread()
            await r.aclose()
        body = r.text or ""
        log.error("%s %s failed with %s: %s", method, url, r.status_code, body[:800])
        raise error_from_response(r.status_code, body)

    def _parse(self, r: httpx.Response, model: Type[_ResponseT]) -> _ResponseT:
        try:
            return model.model_validate_json(r.content)
        except ValidationError as e:
            body = r.text or ""
            log.error("body does not match %s (%d bytes)", model.__name__, len(r.content))
            raise ResponseValidationError(
                f"unexpected {model.__name__} body: {e}",
                status_code=r.status_code,
                body=body,
            ) from e

    # --- endpoints -----------------------------------------------------------

    async def list_models(self) -> List[Model]:
        """
        List and describe the models available in the API.
        See https://platform.openai.com/docs/api-reference/models/list
        """
        r = await self._send("GET", "models")
        return self._parse(r, ListModelsResponse).data

    async def retrieve_model(self, model_id: str) -> Model:
        r = await self._send("GET", f"models/{model_id}")
        return self._parse(r, Model)

    async def create_chat(self, args: ChatArguments) -> ChatCompletion:
        """
        Given a list of messages comprising a conversation, return the model's reply.

            args = ChatArguments(model="gpt-3.5-turbo", messages=[ChatMessage.user("Hello GPT!")])
            res = await client.create_chat(args)
            print(res.choices[0].message.content)
        """
        payload = args.to_payload()
        # a streamed body cannot be parsed as a ChatCompletion
        payload.pop("stream", None)
        r = await self._send("POST", "chat/completions", payload)
        return self._parse(r, ChatCompletion)

    async def create_chat_stream(self, args: ChatArguments) -> ChatCompletionChunkStream:
        """
        Like `create_chat`, but the reply arrives as a stream of chunks.
        The caller's `args` is left untouched; `stream=True` is set on a copy.
        """
        streamed = args.model_copy(update={"stream": True})
        r = await self._send("POST", "chat/completions", streamed.to_payload(), stream=True)
        return ChatCompletionChunkStream(r)

    async def create_completion(self, args: CompletionArguments) -> CompletionResponse:
        """
        Given a prompt, return one or more predicted completions, optionally
        with the log probabilities of alternative tokens.
        """
        r = await self._send("POST", "completions", args.to_payload())
        return self._parse(r, CompletionResponse)

    async def create_edit(self, args: EditArguments) -> EditResponse:
        """Given a prompt and an instruction, return an edited version of the prompt."""
        warnings.warn(
            "the edits endpoint is deprecated upstream; use create_chat instead",
            DeprecationWarning,
            stacklevel=2,
        )
        r = await self._send("POST", "edits", args.to_payload())
        return self._parse(r, EditResponse)

    async def create_embeddings(self, args: EmbeddingsArguments) -> EmbeddingsResponse:
        """Get a vector representation of the given input."""
        r = await self._send("POST", "embeddings", args.to_payload())
        return self._parse(r, EmbeddingsResponse)

    async def create_image(self, args: ImageArguments) -> List[str]:
        """Create images from a prompt; returns URLs or base64 JSON strings."""
        r = await self._send("POST", "images/generations", args.to_payload())
        return self._parse(r, ImageResponse).values()
