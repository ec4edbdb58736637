# -*- coding: utf-8 -*-
import json
from typing import Any, Dict, Optional, Type


class OpenAILiteError(Exception):
    """Base class for every error raised by openai_lite."""


class ConfigurationError(OpenAILiteError):
    pass


class APIError(OpenAILiteError):
    """
    An error reported by (or while talking to) the API.
    `error_type`, `param` and `code` mirror the vendor envelope
    `{"error": {"message", "type", "param", "code"}}` when one was sent.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
        error_type: Optional[str] = None,
        param: Optional[str] = None,
        code: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body
        self.error_type = error_type
        self.param = param
        self.code = code

    def __str__(self) -> str:
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message


class BadRequestError(APIError):
    pass


class AuthenticationError(APIError):
    pass


class PermissionDeniedError(APIError):
    pass


class NotFoundError(APIError):
    pass


class UnprocessableEntityError(APIError):
    pass


class RateLimitError(APIError):
    pass


class InternalServerError(APIError):
    pass


class APIConnectionError(APIError):
    """The request never got an HTTP response."""


class APITimeoutError(APIConnectionError):
    pass


class ResponseValidationError(APIError):
    """A 200 body that does not match the expected response model."""


class StreamDecodeError(APIError):
    """A streamed event whose payload is not valid JSON or not a chunk."""


_STATUS_ERRORS: Dict[int, Type[APIError]] = {
    400: BadRequestError,
    401: AuthenticationError,
    403: PermissionDeniedError,
    404: NotFoundError,
    422: UnprocessableEntityError,
    429: RateLimitError,
}


def parse_error_body(body: Optional[str]) -> Dict[str, Any]:
    """Extract the vendor `error` object from a body; {} when there is none."""
    if not body:
        return {}
    try:
        j = json.loads(body)
    except ValueError:
        return {}
    err = j.get("error") if isinstance(j, dict) else None
    if isinstance(err, dict):
        return err
    if isinstance(err, str):
        return {"message": err}
    return {}


def error_from_response(status_code: Optional[int], body: Optional[str]) -> APIError:
    """Build the APIError subclass matching an HTTP status and error body."""
    err = parse_error_body(body)
    message = err.get("message") or body or f"HTTP {status_code}"

    if status_code is None:
        cls: Type[APIError] = APIError
    elif status_code in _STATUS_ERRORS:
        cls = _STATUS_ERRORS[status_code]
    elif status_code >= 500:
        cls = InternalServerError
    else:
        cls = APIError

    return cls(
        message,
        status_code=status_code,
        body=body,
        error_type=err.get("type"),
        param=err.get("param"),
        code=err.get("code"),
    )
