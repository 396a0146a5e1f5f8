"""Record to JSON:API resource serializers."""

from .assembler import AssemblyResult, jsonapify
from .base import JSONAPISerializer
from .plain import PlainSerializer
from .relationships import resolve_relationships

__all__ = [
    "AssemblyResult",
    "JSONAPISerializer",
    "PlainSerializer",
    "jsonapify",
    "resolve_relationships",
]
