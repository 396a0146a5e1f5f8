"""Model metadata and plain records from SQLAlchemy mapped classes."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from sqlalchemy.inspection import inspect
from sqlalchemy.orm.attributes import NO_VALUE

from fastapi_jsonapify.core.errors import SchemaError
from fastapi_jsonapify.schemas.model import (
    AssociationDescriptor,
    AttributeMetadata,
    ModelMetadata,
)


def _foreign_key(relationship: Any) -> str:
    # The column of the local/remote pair that carries the FOREIGN KEY
    # constraint: local for many-to-one, remote for one-to-many and
    # many-to-many (the latter lives on the secondary table).
    for local, remote in relationship.local_remote_pairs:
        column = local if local.foreign_keys else remote
        return column.key
    raise SchemaError(f"Relationship {relationship.key!r} has no foreign key columns.")


def _reflect(model: Any, underscored: bool, registry: dict[Any, ModelMetadata]) -> ModelMetadata:
    if model in registry:
        return registry[model]
    mapper = inspect(model)
    primary_keys = {column.key for column in mapper.primary_key}
    if not primary_keys:
        raise SchemaError(f"Mapped class {model.__name__} has no primary key.")

    metadata = ModelMetadata(
        name=mapper.persist_selectable.name,
        attributes=[
            AttributeMetadata(prop.key, primary_key=prop.columns[0].key in primary_keys)
            for prop in mapper.column_attrs
        ],
    )
    # Registered before walking relationships so self references resolve.
    registry[model] = metadata
    for relationship in mapper.relationships:
        metadata.associations.append(
            AssociationDescriptor(
                as_=relationship.key,
                target=_reflect(relationship.mapper.class_, underscored, registry),
                foreign_key=_foreign_key(relationship),
                underscored=underscored,
                singular=not relationship.uselist,
            )
        )
    return metadata


@lru_cache(maxsize=128)
def reflect_model(model: Any, underscored: bool = False) -> ModelMetadata:
    """Build (and cache) :class:`ModelMetadata` for a mapped class.

    The table name becomes the JSON:API type, column attributes become
    attributes and every relationship becomes an association embedded
    under its attribute name.
    """
    return _reflect(model, underscored, {})


def instance_to_record(instance: Any) -> dict[str, Any]:
    """Convert a mapped instance into a plain record.

    Column values are copied as-is. Relationships are embedded only when
    already loaded, so converting never triggers lazy loads.
    """
    state = inspect(instance)
    mapper = state.mapper
    record: dict[str, Any] = {prop.key: getattr(instance, prop.key) for prop in mapper.column_attrs}
    for relationship in mapper.relationships:
        loaded = state.attrs[relationship.key].loaded_value
        if loaded is NO_VALUE:
            continue
        if relationship.uselist:
            record[relationship.key] = [_columns(item) for item in loaded or []]
        else:
            record[relationship.key] = None if loaded is None else _columns(loaded)
    return record


def _columns(instance: Any) -> dict[str, Any]:
    mapper = inspect(instance).mapper
    return {prop.key: getattr(instance, prop.key) for prop in mapper.column_attrs}
