# openai_lite/streaming.py
# Server-sent events decoding for streamed chat completions.
import codecs
import json
import logging
from dataclasses import dataclass
from typing import AsyncIterator, List, Optional

import httpx
from pydantic import ValidationError

from openai_lite.schemas.chat import ChatCompletionChunk
from openai_lite.utils.errors import StreamDecodeError, error_from_response

log = logging.getLogger("openai_lite.streaming")

DONE = "[DONE]"


@dataclass
class ServerSentEvent:
    data: str = ""
    event: Optional[str] = None
    id: Optional[str] = None
    retry: Optional[int] = None


class SSEDecoder:
    """
    Incremental `text/event-stream` parser.
    - `feed()` accepts chunks split anywhere, even inside a UTF-8 sequence or a CRLF.
    - Lines end with LF, CRLF or CR; an empty line dispatches the pending event.
    - `:`-prefixed lines are comments; several `data:` lines join with LF.
    """

    def __init__(self) -> None:
        self._utf8 = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._buffer = ""
        self._data: List[str] = []
        self._event: Optional[str] = None
        self._last_id: Optional[str] = None
        self._retry: Optional[int] = None
        self._started = False

    def feed(self, chunk: bytes) -> List[ServerSentEvent]:
        self._append(self._utf8.decode(chunk))
        return self._drain(final=False)

    def flush(self) -> List[ServerSentEvent]:
        """End of stream: emit whatever is still pending."""
        self._append(self._utf8.decode(b"", final=True))
        events = self._drain(final=True)
        if self._buffer:
            # last line had no terminator
            self._process_line(self._buffer)
            self._buffer = ""
        event = self._dispatch()
        if event is not None:
            events.append(event)
        return events

    def _append(self, text: str) -> None:
        if not self._started and text:
            self._started = True
            # one leading BOM is not part of the stream
            if text.startswith("\ufeff"):
                text = text[1:]
        self._buffer += text

    def _drain(self, final: bool) -> List[ServerSentEvent]:
        events: List[ServerSentEvent] = []
        while True:
            line = self._next_line(final)
            if line is None:
                return events
            event = self._process_line(line)
            if event is not None:
                events.append(event)

    def _next_line(self, final: bool) -> Optional[str]:
        buf = self._buffer
        lf = buf.find("\n")
        cr = buf.find("\r")
        if lf == -1 and cr == -1:
            return None
        if cr == -1 or (lf != -1 and lf < cr):
            self._buffer = buf[lf + 1:]
            return buf[:lf]
        if cr == len(buf) - 1 and not final:
            # could be the first half of a CRLF
            return None
        skip = 2 if buf[cr + 1:cr + 2] == "\n" else 1
        self._buffer = buf[cr + skip:]
        return buf[:cr]

    def _process_line(self, line: str) -> Optional[ServerSentEvent]:
        if not line:
            return self._dispatch()
        if line.startswith(":"):
            return None

        name, sep, value = line.partition(":")
        if sep and value.startswith(" "):
            value = value[1:]

        if name == "data":
            self._data.append(value)
        elif name == "event":
            self._event = value
        elif name == "id":
            if "\0" not in value:
                self._last_id = value
        elif name == "retry":
            if value.isascii() and value.isdigit():
                self._retry = int(value)
        # unknown fields are ignored
        return None

    def _dispatch(self) -> Optional[ServerSentEvent]:
        if not self._data:
            self._event = None
            self._retry = None
            return None
        event = ServerSentEvent(
            data="\n".join(self._data),
            event=self._event,
            id=self._last_id,
            retry=self._retry,
        )
        self._data = []
        self._event = None
        self._retry = None
        return event


class ChatCompletionChunkStream:
    """
    Async iterator over the chunks of a streamed chat completion.

        async with await client.create_chat_stream(args) as stream:
            async for chunk in stream:
                print(chunk, end="", flush=True)

    Iteration stops at `data: [DONE]`. The underlying response is closed on
    exhaustion, on error and on `aclose()`.
    """

    def __init__(self, response: httpx.Response) -> None:
        self.response = response
        self._decoder = SSEDecoder()
        self._chunks = self._iter_chunks()

    def __aiter__(self) -> "ChatCompletionChunkStream":
        return self

    async def __anext__(self) -> ChatCompletionChunk:
        return await self._chunks.__anext__()

    async def __aenter__(self) -> "ChatCompletionChunkStream":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._chunks.aclose()
        await self.response.aclose()

    async def text(self) -> str:
        """Concatenate the delta content of every remaining chunk."""
        parts = [str(chunk) async for chunk in self]
        return "".join(parts)

    async def _iter_events(self) -> AsyncIterator[ServerSentEvent]:
        async for raw in self.response.aiter_bytes():
            for event in self._decoder.feed(raw):
                yield event
        for event in self._decoder.flush():
            yield event

    async def _iter_chunks(self) -> AsyncIterator[ChatCompletionChunk]:
        try:
            async for event in self._iter_events():
                data = event.data.strip()
                if not data:
                    continue
                if data == DONE:
                    log.debug("stream finished with %s", DONE)
                    return
                yield self._decode(data)
        finally:
            await self.response.aclose()

    def _decode(self, data: str) -> ChatCompletionChunk:
        try:
            payload = json.loads(data)
        except ValueError as e:
            log.error("malformed stream event (%d chars)", len(data))
            raise StreamDecodeError(f"malformed stream event: {e}", body=data) from e

        if isinstance(payload, dict) and payload.get("error"):
            log.error("stream carried an error event: %s", data[:800])
            raise error_from_response(None, data)

        try:
            return ChatCompletionChunk.model_validate(payload)
        except ValidationError as e:
            log.error("unexpected chunk shape (%d chars)", len(data))
            raise StreamDecodeError(f"unexpected chunk shape: {e}", body=data) from e
