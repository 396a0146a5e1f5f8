"""Generic resource object serialization for plain records."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from fastapi_jsonapify.utils.naming import to_dash_case


class JSONAPISerializer:
    """Serialize attribute mappings into JSON:API resource objects.

    Only the listed ``attributes`` are copied into the resource; anything
    else carried by the record (embedded related records, foreign keys
    already turned into relationships) is left out.
    """

    def __init__(
        self,
        type_: str,
        *,
        id_field: str,
        attributes: Iterable[str],
        path: str | None = None,
    ) -> None:
        self.type_ = type_
        self.id_field = id_field
        self.attributes = [name for name in attributes if name != id_field]
        self.path = (path if path is not None else type_).strip("/")

    def to_resource(
        self,
        record: Mapping[str, Any],
        *,
        relationships: Mapping[str, Any] | None = None,
        exclude: Iterable[str] = (),
    ) -> dict[str, Any]:
        """Serialize a record into a JSON:API resource object."""
        attributes = self.get_attributes(record, exclude=exclude)
        resource: dict[str, Any] = {
            "type": self.type_,
            "id": self.get_id(record),
            "attributes": attributes,
        }
        # A model attribute literally named "relationships" would nest under
        # attributes; it belongs at the top level of the resource.
        nested = attributes.pop("relationships", None)
        merged = dict(nested) if isinstance(nested, Mapping) else {}
        merged.update(relationships or {})
        if merged:
            resource["relationships"] = merged
        resource["links"] = {"self": self._resource_url(resource["id"])}
        return resource

    def get_id(self, record: Mapping[str, Any]) -> str:
        """Return the resource id as a string."""
        value = record.get(self.id_field)
        return "" if value is None else str(value)

    def get_attributes(
        self, record: Mapping[str, Any], *, exclude: Iterable[str] = ()
    ) -> dict[str, Any]:
        """Return dash-cased attributes present on the record."""
        excluded = set(exclude)
        return {
            to_dash_case(name): record[name]
            for name in self.attributes
            if name in record and name not in excluded
        }

    def _resource_url(self, resource_id: str) -> str:
        return f"/{self.path}/{resource_id}"
