"""Router mounting JSON:API viewsets."""

from typing import Any, Callable

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from fastapi_jsonapify.config import get_settings


class JSONAPIResponse(JSONResponse):
    """JSON response served with the JSON:API media type."""

    media_type = "application/vnd.api+json"

    def __init__(self, content: Any, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("media_type", get_settings().media_type)
        super().__init__(content, *args, **kwargs)


class JSONAPIRouter(APIRouter):
    """APIRouter wrapper for JSON:API viewsets."""

    def register_viewset(
        self,
        prefix: str | None,
        viewset: Any | Callable[..., Any],
        *,
        dependencies: list[Any] | None = None,
    ) -> None:
        """Register ``GET <prefix>`` and ``GET <prefix>/{resource_id}``.

        Args:
            prefix: URL prefix for the routes (e.g. "/topics"). Defaults to
                the viewset's collection path.
            viewset: Viewset instance or factory function returning one. A
                factory is resolved per request through FastAPI dependency
                injection.
            dependencies: Additional FastAPI dependencies for all routes.

        Examples:
            router.register_viewset("/topics", TopicViewSet())

            def get_topic_viewset(session: Session = Depends(get_session)) -> TopicViewSet:
                return TopicViewSet(session)

            router.register_viewset("/topics", get_topic_viewset)
        """
        is_factory = (
            callable(viewset)
            and not isinstance(viewset, type)
            and not hasattr(viewset, "list")
            and not hasattr(viewset, "retrieve")
        )

        if is_factory:
            if prefix is None:
                raise ValueError("prefix is required when registering a viewset factory.")
            allowed_actions = ["list", "retrieve"]
            return_type = getattr(viewset, "__annotations__", {}).get("return")
            if return_type is not None and hasattr(return_type, "allowed_actions"):
                allowed_actions = return_type.allowed_actions

            async def list_wrapper(request: Request, viewset_instance: Any = Depends(viewset)) -> Any:
                return await viewset_instance.list(request)

            async def retrieve_wrapper(
                request: Request,
                resource_id: str,
                viewset_instance: Any = Depends(viewset),
            ) -> Any:
                return await viewset_instance.retrieve(request, resource_id)

            list_endpoint: Callable[..., Any] = list_wrapper
            retrieve_endpoint: Callable[..., Any] = retrieve_wrapper
        else:
            if prefix is None:
                prefix = f"/{viewset.collection_path}"
            allowed_actions = getattr(viewset, "allowed_actions", ["list", "retrieve"])
            list_endpoint = viewset.list
            retrieve_endpoint = viewset.retrieve

        if "list" in allowed_actions:
            self.add_jsonapi_route(
                prefix, list_endpoint, methods=["GET"], name=f"{prefix}_list", dependencies=dependencies
            )
        if "retrieve" in allowed_actions:
            self.add_jsonapi_route(
                f"{prefix}/{{resource_id}}",
                retrieve_endpoint,
                methods=["GET"],
                name=f"{prefix}_retrieve",
                dependencies=dependencies,
            )

    def add_jsonapi_route(
        self,
        path: str,
        endpoint: Callable[..., Any],
        *,
        methods: list[str],
        name: str | None = None,
        dependencies: list[Any] | None = None,
    ) -> None:
        """Add a route with JSON:API defaults (content type)."""
        self.add_api_route(
            path,
            endpoint,
            methods=methods,
            name=name,
            response_class=JSONAPIResponse,
            dependencies=dependencies or None,
        )
