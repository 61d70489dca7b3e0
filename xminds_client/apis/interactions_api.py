from __future__ import annotations

from typing import Any, Sequence

from xminds_client.apis._paths import segment
from xminds_client.config import ClientSettings
from xminds_client.http import HttpClient


class InteractionsApi:
    def __init__(self, settings: ClientSettings, http_client: HttpClient):
        self._settings = settings
        self._http_client = http_client

    def create_interaction(
        self,
        user_id: Any,
        item_id: Any,
        interaction_type: str,
        timestamp: float | None = None,
    ) -> dict[str, Any]:
        payload: dict[str, Any] = {"interaction_type": interaction_type}
        if timestamp:
            payload["timestamp"] = timestamp
        return self._http_client.post_json(
            f"/users/{segment(user_id)}/interactions/{segment(item_id)}/",
            payload,
        )

    def create_or_update_user_interactions_bulk(
        self,
        user_id: Any,
        interactions: Sequence[dict[str, Any]],
    ) -> dict[str, Any]:
        return self._http_client.post_json(
            f"/users/{segment(user_id)}/interactions-bulk/",
            {"interactions": list(interactions)},
            timeout_seconds=self._settings.bulk_timeout_seconds,
        )
