"""Skip/limit pagination links."""

from __future__ import annotations

import logging
from typing import Any

from .base import PaginationBase

logger = logging.getLogger(__name__)

PAGINATION_FIELDS = ("skip", "limit", "total")


class OffsetPagination(PaginationBase):
    """Links for results paged with ``skip``/``limit`` and a known ``total``."""

    def __init__(self, skip_param: str = "$skip") -> None:
        self.skip_param = skip_param

    def build_url(self, path: str, skip: int) -> str:
        return f"/{path.strip('/')}?{self.skip_param}={skip}"

    def get_links(
        self, *, skip: int | None, limit: int | None, total: int | None, path: str
    ) -> dict[str, str]:
        """Build ``first``/``prev``/``next``/``last`` links for the page.

        Nothing is emitted unless all three counts are known.
        """
        if skip is None or limit is None or total is None:
            return {}
        if limit <= 0:
            logger.debug("Skipping pagination links for %s: limit=%s", path, limit)
            return {}

        links: dict[str, str] = {}
        if skip >= limit:
            links["first"] = self.build_url(path, 0)
        # Literal condition: holds as soon as skip > 0.
        if skip + limit > limit:
            links["prev"] = self.build_url(path, skip - limit)
        if skip + limit < total:
            links["next"] = self.build_url(path, skip + limit)
            links["last"] = self.build_url(path, (total // limit) * limit)
        return links

    @staticmethod
    def counts(result: dict[str, Any]) -> dict[str, int | None]:
        """Pick the pagination counts out of a find result."""
        return {field: result.get(field) for field in PAGINATION_FIELDS}
