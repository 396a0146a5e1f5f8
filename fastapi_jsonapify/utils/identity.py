"""Resource identity helpers."""

from __future__ import annotations

import hashlib
import json
from typing import Any, Mapping

from fastapi_jsonapify.core.errors import SchemaError
from fastapi_jsonapify.schemas.model import ModelMetadata


def primary_key_of(model: ModelMetadata) -> str:
    """Return the name of the attribute flagged as primary key."""
    for attribute in model.attributes:
        if attribute.primary_key:
            return attribute.name
    raise SchemaError(f"Model {model.name!r} has no primary key attribute.")


def canonical_form(record: Mapping[str, Any]) -> str:
    # Field order is kept: records serialized in a different order hash differently.
    return json.dumps(record, separators=(",", ":"), default=str, ensure_ascii=False)


def derived_identity(record: Mapping[str, Any]) -> str:
    """Return a content hash usable as a synthetic resource id.

    SHA-1 is used for its spread, not for security; equal records (same
    values, same field order) always get the same id.
    """
    return hashlib.sha1(canonical_form(record).encode("utf-8")).hexdigest()
