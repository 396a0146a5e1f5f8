"""Routers for JSON:API viewsets."""

from .base import JSONAPIResponse, JSONAPIRouter

__all__ = ["JSONAPIResponse", "JSONAPIRouter"]
