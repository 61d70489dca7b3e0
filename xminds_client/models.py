from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Credentials:
    bearer_token: str = ""
    refresh_token: str = ""

    @property
    def is_authenticated(self) -> bool:
        return bool(self.bearer_token)


@dataclass(frozen=True)
class RecommendationFilter:
    property_name: str
    op: str
    value: Any = None
