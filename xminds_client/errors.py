from __future__ import annotations

from enum import Enum
from typing import Any, Mapping

import requests


class ErrorKind(str, Enum):
    AUTH = "Auth"
    DUPLICATED = "Duplicated"
    FORBIDDEN = "Forbidden"
    TOKEN_EXPIRED = "TokenExpired"
    METHOD_NOT_ALLOWED = "MethodNotAllowed"
    NOT_FOUND = "NotFound"
    REFRESH_TOKEN_EXPIRED = "RefreshTokenExpired"
    SERVER = "Server"
    SERVER_UNAVAILABLE = "ServerUnavailable"
    TOO_MANY_REQUESTS = "TooManyRequests"
    WRONG_DATA = "WrongData"


# error_name sent by the API -> (kind, client-side status code)
_ERROR_TABLE: dict[str, tuple[ErrorKind, int]] = {
    "AuthError": (ErrorKind.AUTH, 401),
    "DuplicatedError": (ErrorKind.DUPLICATED, 400),
    "ForbiddenError": (ErrorKind.FORBIDDEN, 403),
    "JwtTokenExpired": (ErrorKind.TOKEN_EXPIRED, 401),
    "MethodNotAllowed": (ErrorKind.METHOD_NOT_ALLOWED, 405),
    "NotFoundError": (ErrorKind.NOT_FOUND, 404),
    "RefreshTokenExpired": (ErrorKind.REFRESH_TOKEN_EXPIRED, 401),
    "ServerUnavailable": (ErrorKind.SERVER_UNAVAILABLE, 503),
    "TooManyRequests": (ErrorKind.TOO_MANY_REQUESTS, 429),
    "WrongData": (ErrorKind.WRONG_DATA, 400),
    "ServerError": (ErrorKind.SERVER, 500),
}
_DEFAULT_CLASSIFICATION = (ErrorKind.SERVER, 500)

_PLACEHOLDERS = ("error", "type", "key", "method")


class XMindsError(RuntimeError):
    pass


class ClassifiedError(XMindsError):
    """An error returned by the API, classified from its ``error_name``."""

    def __init__(
        self,
        kind: ErrorKind,
        status_code: int,
        message: str,
        detail: Mapping[str, Any] | None = None,
        error_name: str | None = None,
    ):
        super().__init__(message)
        self._kind = kind
        self._status_code = status_code
        self._message = message
        self._detail = dict(detail) if detail is not None else None
        self._error_name = error_name

    @property
    def kind(self) -> ErrorKind:
        return self._kind

    @property
    def status_code(self) -> int:
        return self._status_code

    @property
    def message(self) -> str:
        return self._message

    @property
    def detail(self) -> dict[str, Any] | None:
        return dict(self._detail) if self._detail is not None else None

    @property
    def error_name(self) -> str | None:
        return self._error_name

    @property
    def is_token_expired(self) -> bool:
        return self._kind is ErrorKind.TOKEN_EXPIRED

    def __reduce__(self):
        return (
            self.__class__,
            (self._kind, self._status_code, self._message, self._detail, self._error_name),
        )

    def __repr__(self) -> str:
        return (
            f"ClassifiedError(kind={self._kind.value}, status_code={self._status_code}, "
            f"message={self._message!r})"
        )


class ApiConnectionError(XMindsError):
    """The request never produced an HTTP response."""

    def __init__(self, message: str, timed_out: bool = False):
        super().__init__(message)
        self.timed_out = timed_out

    def __reduce__(self):
        return (self.__class__, (str(self), self.timed_out))

    @classmethod
    def from_request_exception(cls, method: str, url: str, exc: requests.RequestException) -> "ApiConnectionError":
        timed_out = isinstance(exc, requests.Timeout)
        reason = "timed out" if timed_out else "failed"
        return cls(f"{method} {url} {reason}: {exc}", timed_out=timed_out)


def format_error_message(message: str, detail: Mapping[str, Any] | None) -> str:
    if not detail:
        return message

    formatted = message
    for name in _PLACEHOLDERS:
        if name in detail:
            formatted = formatted.replace("{" + name + "}", str(detail[name]))
    return formatted


def parse_error(payload: Any) -> ClassifiedError:
    """Build the ClassifiedError for an API error payload.

    Never raises: unknown or missing ``error_name`` values, and payloads that
    are not JSON objects at all, classify as a server error.
    """
    if not isinstance(payload, Mapping):
        text = "" if payload is None else str(payload)
        kind, status_code = _DEFAULT_CLASSIFICATION
        return ClassifiedError(kind, status_code, text[:500])

    error_name = payload.get("error_name")
    kind, status_code = _ERROR_TABLE.get(str(error_name), _DEFAULT_CLASSIFICATION)

    raw_message = payload.get("message")
    message = "" if raw_message is None else str(raw_message)

    detail = payload.get("error_data")
    if not isinstance(detail, Mapping):
        detail = None

    return ClassifiedError(
        kind,
        status_code,
        format_error_message(message, detail),
        detail=detail,
        error_name=str(error_name) if error_name is not None else None,
    )
