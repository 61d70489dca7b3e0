from __future__ import annotations

import logging
from typing import Any, Sequence

import requests

from xminds_client.apis import (
    InteractionsApi,
    ItemsApi,
    LoginApi,
    RatingsApi,
    RecommendationsApi,
    UsersApi,
)
from xminds_client.auto_refresh import AutoRefreshController
from xminds_client.config import ClientSettings
from xminds_client.credentials import CredentialStore
from xminds_client.errors import ClassifiedError, ErrorKind
from xminds_client.http import HttpClient

logger = logging.getLogger(__name__)


class XMindsService:
    """Client for the recommendation API.

    Every endpoint except ``login_refresh_token`` goes through the
    auto-refresh controller, so an expired bearer token is renewed with the
    stored refresh token and the call retried once.
    """

    def __init__(self, settings: ClientSettings | None = None, session: requests.Session | None = None):
        self._settings = settings or ClientSettings()
        self._credentials = CredentialStore(self._settings.refresh_token)
        self._http_client = HttpClient(self._settings, self._credentials, session=session)
        self._login_api = LoginApi(self._settings, self._http_client)
        self._users_api = UsersApi(self._settings, self._http_client)
        self._items_api = ItemsApi(self._settings, self._http_client)
        self._ratings_api = RatingsApi(self._settings, self._http_client)
        self._recommendations_api = RecommendationsApi(self._settings, self._http_client)
        self._interactions_api = InteractionsApi(self._settings, self._http_client)
        self._controller = AutoRefreshController(self._credentials, self.login_refresh_token)

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    @property
    def jwt_token(self) -> str:
        return self._credentials.bearer_token

    @property
    def credentials(self) -> CredentialStore:
        return self._credentials

    def close(self) -> None:
        self._http_client.close()

    def __enter__(self) -> "XMindsService":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # Login

    def login_refresh_token(self, refresh_token: str = "") -> dict[str, Any]:
        used_refresh_token = refresh_token or self._credentials.refresh_token
        auth_data = self._login_api.login_refresh_token(used_refresh_token)
        token = auth_data.get("token") if isinstance(auth_data, dict) else None
        if not token:
            raise ClassifiedError(
                ErrorKind.SERVER,
                500,
                "Login response did not include a token",
                error_name="ServerError",
            )
        # keep the refresh token just used when the response does not rotate it
        self._credentials.update(token, auth_data.get("refresh_token") or used_refresh_token)
        logger.debug("Logged in with refresh token; bearer token renewed")
        return auth_data

    # Users

    def get_user(self, user_id: Any) -> dict[str, Any]:
        return self._controller.invoke(lambda: self._users_api.get_user(user_id))

    def list_users(self, users_id: Sequence[Any]) -> dict[str, Any]:
        return self._controller.invoke(lambda: self._users_api.list_users(users_id))

    # Items

    def get_item(self, item_id: Any) -> dict[str, Any]:
        return self._controller.invoke(lambda: self._items_api.get_item(item_id))

    def list_items(self, items_id: Sequence[Any]) -> dict[str, Any]:
        return self._controller.invoke(lambda: self._items_api.list_items(items_id))

    # Ratings

    def create_or_update_rating(
        self,
        user_id: Any,
        item_id: Any,
        rating: float,
        timestamp: float | None = None,
    ) -> dict[str, Any]:
        return self._controller.invoke(
            lambda: self._ratings_api.create_or_update_rating(user_id, item_id, rating, timestamp)
        )

    def delete_rating(self, user_id: Any, item_id: Any) -> dict[str, Any]:
        return self._controller.invoke(lambda: self._ratings_api.delete_rating(user_id, item_id))

    def list_user_ratings(self, user_id: Any, page: int = 1, amt: int = 64) -> dict[str, Any]:
        return self._controller.invoke(lambda: self._ratings_api.list_user_ratings(user_id, page, amt))

    def create_or_update_user_ratings_bulk(
        self,
        user_id: Any,
        ratings: Sequence[dict[str, Any]],
    ) -> dict[str, Any]:
        return self._controller.invoke(
            lambda: self._ratings_api.create_or_update_user_ratings_bulk(user_id, ratings)
        )

    def delete_user_ratings(self, user_id: Any) -> dict[str, Any]:
        return self._controller.invoke(lambda: self._ratings_api.delete_user_ratings(user_id))

    # Recommendations

    def get_recommendations_item_to_items(self, item_id: Any, **opts: Any) -> dict[str, Any]:
        return self._controller.invoke(lambda: self._recommendations_api.item_to_items(item_id, opts))

    def get_recommendations_session_to_items(self, **opts: Any) -> dict[str, Any]:
        return self._controller.invoke(lambda: self._recommendations_api.session_to_items(opts))

    def get_recommendations_user_to_items(self, user_id: Any, **opts: Any) -> dict[str, Any]:
        return self._controller.invoke(lambda: self._recommendations_api.user_to_items(user_id, opts))

    def get_precomputed_recommendations_item_to_items(self, item_id: Any, **opts: Any) -> dict[str, Any]:
        return self._controller.invoke(
            lambda: self._recommendations_api.precomputed_item_to_items(item_id, opts)
        )

    def get_precomputed_recommendations_user_to_items(self, user_id: Any, **opts: Any) -> dict[str, Any]:
        return self._controller.invoke(
            lambda: self._recommendations_api.precomputed_user_to_items(user_id, opts)
        )

    # Interactions

    def create_interaction(
        self,
        user_id: Any,
        item_id: Any,
        interaction_type: str,
        timestamp: float | None = None,
    ) -> dict[str, Any]:
        return self._controller.invoke(
            lambda: self._interactions_api.create_interaction(user_id, item_id, interaction_type, timestamp)
        )

    def create_or_update_user_interactions_bulk(
        self,
        user_id: Any,
        interactions: Sequence[dict[str, Any]],
    ) -> dict[str, Any]:
        return self._controller.invoke(
            lambda: self._interactions_api.create_or_update_user_interactions_bulk(user_id, interactions)
        )


def build_service(settings: ClientSettings | None = None, session: requests.Session | None = None) -> XMindsService:
    return XMindsService(settings or ClientSettings.from_env(), session=session)
