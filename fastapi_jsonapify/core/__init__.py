"""Core JSON:API document and error helpers."""

from .errors import (
    JSONAPIErrorBuilder,
    JSONAPIException,
    ResourceNotFound,
    SchemaError,
)
from .document import JSONAPIDocumentBuilder, extract_meta
from .included import deduplicate_included

__all__ = [
    "JSONAPIDocumentBuilder",
    "JSONAPIErrorBuilder",
    "JSONAPIException",
    "ResourceNotFound",
    "SchemaError",
    "deduplicate_included",
    "extract_meta",
]
