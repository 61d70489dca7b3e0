from __future__ import annotations

from typing import Any, Sequence

from xminds_client.apis._paths import segment
from xminds_client.config import ClientSettings
from xminds_client.http import HttpClient


class ItemsApi:
    def __init__(self, settings: ClientSettings, http_client: HttpClient):
        self._settings = settings
        self._http_client = http_client

    def get_item(self, item_id: Any) -> dict[str, Any]:
        return self._http_client.get_json(f"/items/{segment(item_id)}/")

    def list_items(self, items_id: Sequence[Any]) -> dict[str, Any]:
        return self._http_client.post_json("/items-bulk/list/", {"items_id": list(items_id)})
