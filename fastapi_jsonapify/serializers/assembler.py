"""Turn records described by model metadata into JSON:API resources."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Sequence

from fastapi_jsonapify.schemas.model import AssociationDescriptor, ModelMetadata
from fastapi_jsonapify.utils.identity import primary_key_of

from .base import JSONAPISerializer
from .relationships import resolve_relationships


@dataclass
class AssemblyResult:
    """Output of :func:`jsonapify`.

    ``document`` is a resource object, or a list of them for collection
    input. ``related`` holds the serialized related resources (not yet
    deduplicated) or ``None`` when nothing was included.
    """

    document: Any
    links: dict[str, str]
    related: list[dict[str, Any]] | None = None


def jsonapify(
    data: Mapping[str, Any] | Sequence[Mapping[str, Any]],
    model: ModelMetadata,
    self_url: str,
    include: Iterable[AssociationDescriptor | str] = (),
) -> AssemblyResult:
    """Assemble JSON:API resource objects for one record or a collection.

    ``include`` lists the associations whose embedded records are turned
    into relationships and included resources. Related records are
    assembled without includes of their own, so expansion stops one level
    down even on self-referencing models.
    """
    id_field = primary_key_of(model)
    associations = model.resolve_includes(include)
    serializer = JSONAPISerializer(
        model.name,
        id_field=id_field,
        attributes=model.attribute_names,
        path=self_url,
    )
    included: list[dict[str, Any]] = []

    def assemble(record: Mapping[str, Any]) -> dict[str, Any]:
        if not associations:
            return serializer.to_resource(record)
        relationships, consumed = resolve_relationships(record, model, associations, included)
        return serializer.to_resource(record, relationships=relationships, exclude=consumed)

    base = "/" + self_url.strip("/")
    if isinstance(data, Mapping):
        document: Any = assemble(data)
        links = {"self": f"{base}/{document['id']}"}
    else:
        document = [assemble(record) for record in data]
        links = {"self": base}

    return AssemblyResult(document=document, links=links, related=included or None)
