from __future__ import annotations

from typing import Any

from xminds_client.apis._paths import segment
from xminds_client.config import ClientSettings
from xminds_client.http import HttpClient
from xminds_client.query import build_recommendation_params, convert_to_query_string


class RecommendationsApi:
    def __init__(self, settings: ClientSettings, http_client: HttpClient):
        self._settings = settings
        self._http_client = http_client

    def item_to_items(self, item_id: Any, opts: dict[str, Any]) -> dict[str, Any]:
        query = convert_to_query_string(build_recommendation_params(opts))
        return self._http_client.get_json(f"/recommendation/items/{segment(item_id)}/items/{query}")

    def session_to_items(self, opts: dict[str, Any]) -> dict[str, Any]:
        return self._http_client.post_json("/recommendation/sessions/items/", dict(opts))

    def user_to_items(self, user_id: Any, opts: dict[str, Any]) -> dict[str, Any]:
        query = convert_to_query_string(build_recommendation_params(opts))
        return self._http_client.get_json(f"/recommendation/users/{segment(user_id)}/items/{query}")

    def precomputed_item_to_items(self, item_id: Any, opts: dict[str, Any]) -> dict[str, Any]:
        query = convert_to_query_string(opts)
        return self._http_client.get_json(
            f"/recommendation/precomputed/items/{segment(item_id)}/items/{query}"
        )

    def precomputed_user_to_items(self, user_id: Any, opts: dict[str, Any]) -> dict[str, Any]:
        query = convert_to_query_string(opts)
        return self._http_client.get_json(
            f"/recommendation/precomputed/users/{segment(user_id)}/items/{query}"
        )
