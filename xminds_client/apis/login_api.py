from __future__ import annotations

from typing import Any

from xminds_client.config import ClientSettings
from xminds_client.http import HttpClient

LOGIN_REFRESH_TOKEN_PATH = "/login/refresh-token/"


class LoginApi:
    def __init__(self, settings: ClientSettings, http_client: HttpClient):
        self._settings = settings
        self._http_client = http_client

    def login_refresh_token(self, refresh_token: str) -> dict[str, Any]:
        return self._http_client.post_json(LOGIN_REFRESH_TOKEN_PATH, {"refresh_token": refresh_token})
