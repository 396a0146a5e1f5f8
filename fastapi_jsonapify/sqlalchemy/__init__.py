"""SQLAlchemy helpers for JSON:API."""

from .metadata import instance_to_record, reflect_model

__all__ = ["instance_to_record", "reflect_model"]
