"""Viewsets for read-only JSON:API resources."""

from .base import JSONAPIViewSet

__all__ = ["JSONAPIViewSet"]
