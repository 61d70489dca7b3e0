"""Scripted requests transport used across the suite."""

from __future__ import annotations

import json
from typing import Any

import requests
from requests.adapters import BaseAdapter

HOST = "https://api.test"


class FakeAdapter(BaseAdapter):
    """Transport adapter returning scripted responses and recording requests.

    Routes are keyed by ``(method, path)``; the path includes the query
    string. Each route holds responses consumed in order, the last one
    repeating. A response is ``(status, payload)`` or an exception instance
    to raise instead of answering.
    """

    def __init__(self) -> None:
        super().__init__()
        self.routes: dict[tuple[str, str], list[Any]] = {}
        self.requests: list[requests.PreparedRequest] = []
        self.timeouts: list[Any] = []

    def add(self, method: str, path: str, *responses: Any) -> None:
        self.routes[(method.upper(), path)] = list(responses)

    def calls(self, method: str | None = None, path: str | None = None) -> list[requests.PreparedRequest]:
        return [
            request
            for request in self.requests
            if (method is None or request.method == method.upper())
            and (path is None or request.path_url == path)
        ]

    @property
    def sequence(self) -> list[tuple[str, str]]:
        return [(request.method, request.path_url) for request in self.requests]

    def send(self, request, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        self.requests.append(request)
        self.timeouts.append(timeout)
        key = (request.method, request.path_url)
        if key not in self.routes:
            return build_response(request, 404, {"error_name": "NotFoundError", "message": "no route"})

        queue = self.routes[key]
        scripted = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(scripted, Exception):
            raise scripted
        status, payload = scripted
        return build_response(request, status, payload)

    def close(self) -> None:
        pass


def build_response(request: requests.PreparedRequest, status: int, payload: Any) -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response.request = request
    response.url = request.url or ""
    if payload is None:
        response._content = b""
    elif isinstance(payload, str):
        response._content = payload.encode("utf-8")
    else:
        response._content = json.dumps(payload).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    response.encoding = "utf-8"
    return response


def body_of(request: requests.PreparedRequest) -> Any:
    if not request.body:
        return None
    raw = request.body.decode("utf-8") if isinstance(request.body, bytes) else request.body
    return json.loads(raw)


def login_ok(token: str = "jwt-1", refresh_token: str = "refresh-2") -> tuple[int, dict[str, Any]]:
    return 200, {"token": token, "refresh_token": refresh_token, "database": {"id": "db"}}


def token_expired() -> tuple[int, dict[str, Any]]:
    return 401, {"error_name": "JwtTokenExpired", "message": "JWT token has expired"}


def not_found(key: str = "user") -> tuple[int, dict[str, Any]]:
    return 404, {
        "error_name": "NotFoundError",
        "message": "{type} {key} does not exist",
        "error_data": {"type": "user", "key": key},
    }
