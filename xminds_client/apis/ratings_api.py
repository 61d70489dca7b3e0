from __future__ import annotations

from typing import Any, Sequence

from xminds_client.apis._paths import segment
from xminds_client.config import ClientSettings
from xminds_client.http import HttpClient
from xminds_client.query import convert_to_query_string


class RatingsApi:
    def __init__(self, settings: ClientSettings, http_client: HttpClient):
        self._settings = settings
        self._http_client = http_client

    def create_or_update_rating(
        self,
        user_id: Any,
        item_id: Any,
        rating: float,
        timestamp: float | None = None,
    ) -> dict[str, Any]:
        payload: dict[str, Any] = {"rating": rating}
        if timestamp:
            payload["timestamp"] = timestamp
        return self._http_client.put_json(f"/users/{segment(user_id)}/ratings/{segment(item_id)}/", payload)

    def delete_rating(self, user_id: Any, item_id: Any) -> dict[str, Any]:
        return self._http_client.delete_json(f"/users/{segment(user_id)}/ratings/{segment(item_id)}/")

    def list_user_ratings(self, user_id: Any, page: int = 1, amt: int = 64) -> dict[str, Any]:
        query = convert_to_query_string({"page": page, "amt": amt})
        return self._http_client.get_json(f"/users/{segment(user_id)}/ratings/{query}")

    def create_or_update_user_ratings_bulk(
        self,
        user_id: Any,
        ratings: Sequence[dict[str, Any]],
    ) -> dict[str, Any]:
        return self._http_client.put_json(
            f"/users/{segment(user_id)}/ratings/",
            {"ratings": list(ratings)},
            timeout_seconds=self._settings.bulk_timeout_seconds,
        )

    def delete_user_ratings(self, user_id: Any) -> dict[str, Any]:
        return self._http_client.delete_json(f"/users/{segment(user_id)}/ratings/")
