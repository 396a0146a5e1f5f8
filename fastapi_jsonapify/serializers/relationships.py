"""Embedded association to relationship conversion."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from fastapi_jsonapify.schemas.model import AssociationDescriptor, ModelMetadata
from fastapi_jsonapify.utils.identity import primary_key_of
from fastapi_jsonapify.utils.naming import to_dash_case

logger = logging.getLogger(__name__)


def _is_many(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def relationship_name(association: AssociationDescriptor) -> str:
    """Return the key used under ``relationships`` for an association."""
    name, _, _ = association.validate()
    if association.underscored:
        return to_dash_case(name)
    return name


def reference(association: AssociationDescriptor, related: Mapping[str, Any]) -> dict[str, Any]:
    """Build the ``{type, id}`` pointer to one related record."""
    _, target, _ = association.validate()
    key = association.target_key or primary_key_of(target)
    value = related.get(key)
    return {"type": target.name, "id": "" if value is None else str(value)}


def resolve_relationships(
    record: Mapping[str, Any],
    model: ModelMetadata,
    associations: Sequence[AssociationDescriptor],
    included: list[dict[str, Any]],
) -> tuple[dict[str, Any], set[str]]:
    """Turn the embedded associations of ``record`` into relationships.

    Related records are serialized one level deep and appended to
    ``included``. Returns the relationships map together with the record
    fields consumed in the process, which must stay out of ``attributes``.
    The record itself is left untouched.
    """
    from .assembler import jsonapify

    relationships: dict[str, Any] = {}
    consumed: set[str] = set()

    for association in associations:
        name, target, foreign_key = association.validate()
        embedded = record.get(name)

        data: Any = None
        if isinstance(embedded, Mapping):
            data = reference(association, embedded)
            related = [embedded]
        elif _is_many(embedded):
            related = [item for item in embedded if isinstance(item, Mapping)]
            data = [reference(association, item) for item in related]
        else:
            if embedded is not None:
                logger.warning(
                    "Ignoring malformed %s.%s association data of type %s",
                    model.name,
                    name,
                    type(embedded).__name__,
                )
            related = []

        if related:
            result = jsonapify(related, target, target.collection_path)
            included.extend(result.document)

        consumed.add(name)
        consumed.add(foreign_key)
        if data is not None:
            relationships[relationship_name(association)] = {"data": data}

    return relationships, consumed
