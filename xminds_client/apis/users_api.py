from __future__ import annotations

from typing import Any, Sequence

from xminds_client.apis._paths import segment
from xminds_client.config import ClientSettings
from xminds_client.http import HttpClient


class UsersApi:
    def __init__(self, settings: ClientSettings, http_client: HttpClient):
        self._settings = settings
        self._http_client = http_client

    def get_user(self, user_id: Any) -> dict[str, Any]:
        return self._http_client.get_json(f"/users/{segment(user_id)}/")

    def list_users(self, users_id: Sequence[Any]) -> dict[str, Any]:
        return self._http_client.post_json("/users-bulk/list/", {"users_id": list(users_id)})
