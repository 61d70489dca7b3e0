from __future__ import annotations

import threading

from xminds_client.models import Credentials


class CredentialStore:
    """Bearer token and refresh token held by one client.

    Both tokens are replaced together by ``update``; readers always see a
    pair that came from the same login response.
    """

    def __init__(self, refresh_token: str = ""):
        self._lock = threading.Lock()
        self._credentials = Credentials(bearer_token="", refresh_token=refresh_token or "")

    @property
    def bearer_token(self) -> str:
        return self._credentials.bearer_token

    @property
    def refresh_token(self) -> str:
        return self._credentials.refresh_token

    @property
    def has_token(self) -> bool:
        return self._credentials.is_authenticated

    def snapshot(self) -> Credentials:
        return self._credentials

    def update(self, bearer_token: str, refresh_token: str) -> Credentials:
        credentials = Credentials(bearer_token=bearer_token or "", refresh_token=refresh_token or "")
        with self._lock:
            self._credentials = credentials
        return credentials
