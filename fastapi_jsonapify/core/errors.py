"""JSON:API exceptions and error object builders."""

from __future__ import annotations

from http import HTTPStatus
from typing import Any


class JSONAPIException(Exception):
    """Base exception rendered as a JSON:API error document."""

    status: int = HTTPStatus.INTERNAL_SERVER_ERROR.value
    title: str = "Internal Server Error"

    def __init__(self, detail: str = "", *, status: int | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        if status is not None:
            self.status = status


class SchemaError(JSONAPIException, ValueError):
    """Model metadata or an association descriptor is incomplete."""

    title = "Schema Error"


class ResourceNotFound(JSONAPIException, LookupError):
    """A single-record read found nothing."""

    status = HTTPStatus.NOT_FOUND.value
    title = "Not Found"


class JSONAPIErrorBuilder:
    """Build JSON:API error objects and error documents."""

    def error_object(
        self,
        *,
        status: str | None = None,
        code: str | None = None,
        title: str | None = None,
        detail: str | None = None,
        source: dict[str, Any] | None = None,
        meta: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return a JSON:API error object."""
        error: dict[str, Any] = {}
        if status is not None:
            error["status"] = status
        if code is not None:
            error["code"] = code
        if title is not None:
            error["title"] = title
        if detail is not None:
            error["detail"] = detail
        if source is not None:
            error["source"] = source
        if meta is not None:
            error["meta"] = meta
        if not error:
            raise ValueError("Error object must include at least one field.")
        return error

    def from_exception(self, exc: Exception) -> dict[str, Any]:
        """Return an error object describing ``exc``."""
        if isinstance(exc, JSONAPIException):
            return self.error_object(
                status=str(exc.status),
                code=type(exc).__name__,
                title=exc.title,
                detail=exc.detail or None,
            )
        return self.error_object(
            status=str(HTTPStatus.INTERNAL_SERVER_ERROR.value),
            title="Internal Server Error",
            detail=str(exc) or None,
        )

    def error_document(self, errors: list[dict[str, Any]]) -> dict[str, Any]:
        """Return a JSON:API document with an errors array."""
        return {"errors": errors}
