"""Serialization of records that come without model metadata."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from fastapi_jsonapify.utils.identity import derived_identity
from fastapi_jsonapify.utils.naming import dasherize_keys


class PlainSerializer:
    """Build minimal resource objects from plain records.

    The id comes from ``identifier_key`` or, when unset, from a hash of the
    record's content. The type comes from ``type_key`` or falls back to the
    service name.
    """

    def __init__(
        self,
        service_name: str,
        *,
        identifier_key: str | None = None,
        type_key: str | None = None,
    ) -> None:
        self.service_name = service_name
        self.identifier_key = identifier_key
        self.type_key = type_key

    def to_resource(self, record: Mapping[str, Any], path: str) -> dict[str, Any]:
        """Serialize one record."""
        consumed: set[str] = set()
        # A configured key the record lacks falls back to the defaults.
        if self.identifier_key and record.get(self.identifier_key) is not None:
            resource_id = str(record[self.identifier_key])
            consumed.add(self.identifier_key)
        else:
            resource_id = derived_identity(record)
        if self.type_key and record.get(self.type_key) is not None:
            type_ = str(record[self.type_key])
            consumed.add(self.type_key)
        else:
            type_ = self.service_name

        attributes = {key: value for key, value in record.items() if key not in consumed}
        return {
            "type": type_,
            "id": resource_id,
            "attributes": dasherize_keys(attributes),
            "links": {"self": f"/{path.strip('/')}/{resource_id}"},
        }

    def serialize(self, data: Any, path: str) -> dict[str, Any]:
        """Return ``{"data": ...}`` for a record or a sequence of records.

        More than one record gives a list of resources, exactly one gives a
        single resource and nothing gives an empty list.
        """
        if isinstance(data, Mapping):
            records: Sequence[Mapping[str, Any]] = [data] if data else []
        else:
            records = list(data or [])
        if len(records) > 1:
            return {"data": [self.to_resource(record, path) for record in records]}
        if len(records) == 1:
            return {"data": self.to_resource(records[0], path)}
        return {"data": []}
