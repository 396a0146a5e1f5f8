"""Helpers for JSON:API query parameter parsing."""

from __future__ import annotations

from typing import Any, Mapping


def split_csv(value: str) -> list[str]:
    return [item for item in (part.strip() for part in value.split(",")) if item]


def parse_query_params(params: Mapping[str, Any]) -> dict[str, Any]:
    """Split ``include`` into association names; pass everything else through."""
    normalized: dict[str, Any] = {"include": []}
    for key, value in params.items():
        if value is None:
            continue
        if key == "include":
            normalized["include"] = split_csv(str(value))
        else:
            normalized[key] = value
    return normalized
