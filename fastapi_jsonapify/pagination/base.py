"""Pagination base class for JSON:API links."""


class PaginationBase:
    """Define pagination API for JSON:API."""

    def get_links(
        self, *, skip: int | None, limit: int | None, total: int | None, path: str
    ) -> dict[str, str]:
        """Return JSON:API pagination links."""
        raise NotImplementedError
