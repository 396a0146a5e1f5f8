"""Included resource accumulation."""

from __future__ import annotations

from typing import Any, Iterable, Mapping


def deduplicate_included(resources: Iterable[Mapping[str, Any]]) -> list[dict[str, Any]]:
    """Collapse repeated resources, keeping the last one seen per (type, id).

    A related resource reached through several parents is serialized once per
    parent; only one copy may appear in ``included``.
    """
    unique: dict[tuple[Any, Any], dict[str, Any]] = {}
    for resource in resources:
        unique[(resource.get("type"), resource.get("id"))] = dict(resource)
    return list(unique.values())
