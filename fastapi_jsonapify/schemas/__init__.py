"""Schemas for model metadata and JSON:API documents."""

from .model import AssociationDescriptor, AttributeMetadata, ModelMetadata
from .resource import (
    JSONAPIDocument,
    JSONAPIErrorDocument,
    JSONAPIRelationship,
    JSONAPIResource,
    JSONAPIResourceIdentifier,
)

__all__ = [
    "AssociationDescriptor",
    "AttributeMetadata",
    "JSONAPIDocument",
    "JSONAPIErrorDocument",
    "JSONAPIRelationship",
    "JSONAPIResource",
    "JSONAPIResourceIdentifier",
    "ModelMetadata",
]
