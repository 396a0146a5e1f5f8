"""Model metadata consumed by the document assembler.

The assembler never probes ORM objects directly. Each record type is
described by a :class:`ModelMetadata` listing its attributes, which of them
is the primary key, and the associations under which related records may
be embedded. ``fastapi_jsonapify.sqlalchemy.reflect_model`` builds these from
SQLAlchemy mappers; other data sources can declare them by hand.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from fastapi_jsonapify.core.errors import SchemaError


@dataclass(frozen=True)
class AttributeMetadata:
    """A single model attribute."""

    name: str
    primary_key: bool = False


@dataclass(eq=False)
class AssociationDescriptor:
    """How a parent record embeds related records.

    ``as_`` is the field holding the embedded record(s) in the parent,
    ``foreign_key`` the parent field pointing at the related record and
    ``target_key`` the related field used as identifier in references
    (the target primary key when unset). ``singular`` is informational:
    to-one vs to-many is decided by the embedded value's shape.
    """

    as_: str | None = None
    target: ModelMetadata | None = None
    foreign_key: str | None = None
    target_key: str | None = None
    underscored: bool = False
    singular: bool | None = None

    def validate(self) -> tuple[str, ModelMetadata, str]:
        """Return ``(as_, target, foreign_key)``.

        Raises :class:`SchemaError` when one of them is missing.
        """
        for required in ("as_", "target", "foreign_key"):
            if getattr(self, required) is None:
                raise SchemaError(
                    f"Association descriptor {self.as_ or '<unnamed>'!r} is missing '{required.rstrip('_')}'."
                )
        return self.as_, self.target, self.foreign_key  # type: ignore[return-value]


@dataclass(eq=False)
class ModelMetadata:
    """Describe one record type."""

    name: str
    attributes: list[AttributeMetadata]
    associations: list[AssociationDescriptor] = field(default_factory=list)
    path: str | None = None

    @classmethod
    def build(
        cls,
        name: str,
        attributes: Iterable[str],
        *,
        primary_key: str = "id",
        associations: Iterable[AssociationDescriptor] = (),
        path: str | None = None,
    ) -> ModelMetadata:
        """Shortcut for declaring metadata from plain attribute names."""
        return cls(
            name=name,
            attributes=[
                AttributeMetadata(attribute, primary_key=attribute == primary_key)
                for attribute in attributes
            ],
            associations=list(associations),
            path=path,
        )

    @property
    def attribute_names(self) -> list[str]:
        return [attribute.name for attribute in self.attributes]

    @property
    def collection_path(self) -> str:
        return (self.path or self.name).strip("/")

    def association(self, name: str) -> AssociationDescriptor:
        """Return the association embedded under ``name``."""
        for association in self.associations:
            if association.as_ == name:
                return association
        raise SchemaError(f"Model {self.name!r} has no association {name!r}.")

    def resolve_includes(self, include: Iterable[Any]) -> list[AssociationDescriptor]:
        """Turn association names or descriptors into descriptors."""
        return [
            item if isinstance(item, AssociationDescriptor) else self.association(item)
            for item in include
        ]
