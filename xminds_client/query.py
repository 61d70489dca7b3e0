from __future__ import annotations

from typing import Any, Iterable, Mapping
from urllib.parse import quote

from xminds_client.models import RecommendationFilter

# Characters left unescaped, on top of letters, digits and "_.-~"
_SAFE = "!*'()"


def format_filter(recommendation_filter: RecommendationFilter | Mapping[str, Any]) -> str:
    """Render one filter as ``name:op`` or ``name:op:value``."""
    if isinstance(recommendation_filter, RecommendationFilter):
        property_name = recommendation_filter.property_name
        op = recommendation_filter.op
        value = recommendation_filter.value
    else:
        property_name = recommendation_filter["property_name"]
        op = recommendation_filter["op"]
        value = recommendation_filter.get("value")

    formatted = f"{property_name}:{op}"
    if value:
        formatted += f":{_stringify(value)}"
    return formatted


def get_formatted_filters_array(
    filters: Iterable[RecommendationFilter | Mapping[str, Any]],
) -> list[str]:
    return [format_filter(recommendation_filter) for recommendation_filter in filters]


def convert_to_query_string(params: Mapping[str, Any]) -> str:
    pairs = []
    for key, value in params.items():
        if value is None:
            continue
        pairs.append(f"{_encode(key)}={_encode(_stringify(value))}")

    if not pairs:
        return ""
    return "?" + "&".join(pairs)


def build_recommendation_params(opts: Mapping[str, Any]) -> dict[str, Any]:
    params = dict(opts)
    filters = params.get("filters")
    if filters:
        params["filters"] = get_formatted_filters_array(filters)
    return params


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_stringify(item) for item in value)
    return str(value)


def _encode(value: Any) -> str:
    return quote(str(value), safe=_SAFE)
