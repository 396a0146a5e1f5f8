"""Base viewset for read-only JSON:API resources."""

from typing import Any

from fastapi import Request

from fastapi_jsonapify.config import HookOptions
from fastapi_jsonapify.core.errors import ResourceNotFound
from fastapi_jsonapify.hooks import HookContext, JSONAPIHook, ServiceInfo
from fastapi_jsonapify.schemas.model import ModelMetadata
from fastapi_jsonapify.utils.query_params import parse_query_params


class JSONAPIViewSet:
    """Base class wiring a read service to the JSON:API hook.

    Subclasses implement :meth:`find` and :meth:`get`. ``find`` returns a
    list of records or ``{"data": [...], "skip": ..., "limit": ...,
    "total": ...}``; ``get`` returns one record or ``None``. Records are
    plain mappings, with related records embedded under association names.
    """

    name: str = ""
    path: str | None = None
    model: ModelMetadata | None = None
    hook_options: HookOptions | dict[str, Any] | None = None
    allowed_actions: list[str] = ["list", "retrieve"]

    @property
    def collection_path(self) -> str:
        return (self.path or self.name).strip("/")

    def get_hook(self) -> JSONAPIHook:
        """Instantiate the hook."""
        return JSONAPIHook(self.hook_options)

    def get_service_info(self) -> ServiceInfo:
        if not self.name:
            raise ValueError("name must be set.")
        return ServiceInfo(name=self.name, model=self.model)

    def get_query_params(self, request: Request) -> dict[str, Any]:
        """Parse query parameters passed on to the service."""
        return parse_query_params(request.query_params)

    async def find(self, params: dict[str, Any]) -> Any:
        """Return the collection result. Override in subclasses."""
        raise NotImplementedError

    async def get(self, resource_id: str, params: dict[str, Any]) -> Any:
        """Return a single record or None. Override in subclasses."""
        raise NotImplementedError

    async def run_hook(self, method: str, result: Any, params: dict[str, Any]) -> Any:
        context = HookContext(
            method=method,
            path=self.collection_path,
            result=result,
            service=self.get_service_info(),
            params=params,
        )
        context = await self.get_hook()(context)
        return context.result

    async def list(self, request: Request) -> Any:
        """Handle GET collection requests."""
        params = self.get_query_params(request)
        result = await self.find(params)
        return await self.run_hook("find", result, params)

    async def retrieve(self, request: Request, resource_id: str) -> Any:
        """Handle GET single resource requests."""
        params = self.get_query_params(request)
        record = await self.get(resource_id, params)
        if record is None:
            raise ResourceNotFound(f"{self.name} {resource_id!r} does not exist.")
        return await self.run_hook("get", record, params)
