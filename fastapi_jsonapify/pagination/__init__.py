"""Pagination for JSON:API documents."""

from .base import PaginationBase
from .offset import OffsetPagination

__all__ = ["OffsetPagination", "PaginationBase"]
