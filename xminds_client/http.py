from __future__ import annotations

import logging
from typing import Any

import requests

from xminds_client.config import ClientSettings
from xminds_client.credentials import CredentialStore
from xminds_client.errors import ApiConnectionError, parse_error

logger = logging.getLogger(__name__)

_BODY_METHODS = ("PUT", "POST", "DELETE")
_METHODS = ("GET",) + _BODY_METHODS


class HttpClient:
    def __init__(
        self,
        settings: ClientSettings,
        credentials: CredentialStore,
        session: requests.Session | None = None,
    ):
        self._settings = settings
        self._credentials = credentials
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Accept": "application/json",
                "Content-Type": "application/json",
                "User-Agent": settings.user_agent,
            }
        )

    @property
    def session(self) -> requests.Session:
        return self._session

    def close(self) -> None:
        self._session.close()

    def get_json(self, path: str, timeout_seconds: float | None = None) -> Any:
        return self.send("GET", path, timeout_seconds=timeout_seconds)

    def put_json(self, path: str, payload: Any = None, timeout_seconds: float | None = None) -> Any:
        return self.send("PUT", path, payload, timeout_seconds)

    def post_json(self, path: str, payload: Any = None, timeout_seconds: float | None = None) -> Any:
        return self.send("POST", path, payload, timeout_seconds)

    def delete_json(self, path: str, payload: Any = None, timeout_seconds: float | None = None) -> Any:
        return self.send("DELETE", path, payload, timeout_seconds)

    def send(
        self,
        method: str,
        path: str,
        body: Any = None,
        timeout_seconds: float | None = None,
    ) -> Any:
        method = method.upper()
        if method not in _METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        url = f"{self._settings.host}{path}"
        headers: dict[str, str] = {}
        token = self._credentials.bearer_token
        if token:
            headers["Authorization"] = f"Bearer {token}"

        request_kwargs: dict[str, Any] = {
            "headers": headers,
            "timeout": timeout_seconds or self._settings.timeout_seconds,
        }
        if method in _BODY_METHODS and body is not None:
            request_kwargs["json"] = body

        logger.debug("%s %s", method, path)
        try:
            response = self._session.request(method, url, **request_kwargs)
        except requests.RequestException as exc:
            logger.warning("%s %s failed without a response: %s", method, path, exc)
            raise ApiConnectionError.from_request_exception(method, url, exc) from exc

        if response.ok:
            if not response.content:
                return {}
            try:
                return response.json()
            except ValueError:
                logger.warning("%s %s returned HTTP %s with a non-JSON body", method, path, response.status_code)
                raise parse_error(response.text) from None

        error = parse_error(self._decode_error_body(response))
        logger.debug(
            "%s %s returned HTTP %s classified as %s",
            method,
            path,
            response.status_code,
            error.kind.value,
        )
        raise error

    @staticmethod
    def _decode_error_body(response: requests.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text
