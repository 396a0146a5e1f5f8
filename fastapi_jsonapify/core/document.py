"""JSON:API document construction."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, MutableMapping

from fastapi_jsonapify.utils.naming import to_dash_case

TOP_LEVEL_MEMBERS = frozenset({"data", "included", "meta", "links"})


class JSONAPIDocumentBuilder:
    """Build JSON:API v1.1 documents from serialized data."""

    def build_single(
        self,
        resource: Mapping[str, Any] | None,
        *,
        included: Iterable[Mapping[str, Any]] | None = None,
        links: Mapping[str, Any] | None = None,
        meta: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return a JSON:API document for a single resource object."""
        document: dict[str, Any] = {"data": None if resource is None else dict(resource)}
        return self._decorate(document, included=included, links=links, meta=meta)

    def build_collection(
        self,
        resources: Iterable[Mapping[str, Any]],
        *,
        included: Iterable[Mapping[str, Any]] | None = None,
        links: Mapping[str, Any] | None = None,
        meta: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return a JSON:API document for a collection of resources."""
        document: dict[str, Any] = {"data": [dict(item) for item in resources]}
        return self._decorate(document, included=included, links=links, meta=meta)

    def _decorate(
        self,
        document: dict[str, Any],
        *,
        included: Iterable[Mapping[str, Any]] | None,
        links: Mapping[str, Any] | None,
        meta: Mapping[str, Any] | None,
    ) -> dict[str, Any]:
        if included:
            document["included"] = [dict(item) for item in included]
        if links:
            document["links"] = dict(links)
        if meta:
            document["meta"] = dict(meta)
        return document


def extract_meta(result: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    """Move non JSON:API top-level members of ``result`` into ``meta``.

    Moved keys are dash-cased. Nothing happens when there is nothing to move.
    """
    extra = [key for key in result if key not in TOP_LEVEL_MEMBERS]
    if not extra:
        return result
    meta = result.setdefault("meta", {})
    for key in extra:
        meta[to_dash_case(key)] = result.pop(key)
    return result
