from __future__ import annotations

import logging
from typing import Any, Callable, TypeVar

from xminds_client.credentials import CredentialStore
from xminds_client.errors import ClassifiedError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AutoRefreshController:
    """Runs authenticated operations, renewing the bearer token when needed.

    ``login`` is the refresh-login call. It runs before the first attempt when
    no bearer token is held yet, and at most once after an attempt rejected
    with an expired token, followed by exactly one retry. Every other failure
    propagates unchanged, including one raised by the retry itself.
    """

    def __init__(self, credentials: CredentialStore, login: Callable[[], Any]):
        self._credentials = credentials
        self._login = login

    def invoke(self, operation: Callable[[], T]) -> T:
        if not self._credentials.has_token:
            logger.debug("No bearer token held; logging in before the first request")
            self._login()
            return operation()

        try:
            return operation()
        except ClassifiedError as error:
            if not error.is_token_expired:
                raise
            logger.info("Bearer token expired; refreshing and retrying once")

        self._login()
        return operation()
