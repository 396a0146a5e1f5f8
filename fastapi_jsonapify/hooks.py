"""After-read hook turning service results into JSON:API documents."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from fastapi_jsonapify.config import HookOptions
from fastapi_jsonapify.core.document import JSONAPIDocumentBuilder, extract_meta
from fastapi_jsonapify.core.included import deduplicate_included
from fastapi_jsonapify.pagination.offset import OffsetPagination
from fastapi_jsonapify.schemas.model import ModelMetadata
from fastapi_jsonapify.serializers.assembler import jsonapify
from fastapi_jsonapify.serializers.plain import PlainSerializer
from fastapi_jsonapify.utils.query_params import split_csv

logger = logging.getLogger(__name__)


@dataclass
class ServiceInfo:
    """What the hook needs to know about the service that ran the read."""

    name: str
    model: ModelMetadata | None = None


@dataclass
class HookContext:
    """A completed service call.

    ``method`` is the kind of operation (``find``, ``get``, ...), ``path``
    the collection path the service is mounted on and ``result`` what the
    operation returned. ``params["include"]`` lists the associations (names
    or descriptors) whose embedded records should be expanded.
    """

    method: str
    path: str
    result: Any
    service: ServiceInfo
    params: dict[str, Any] = field(default_factory=dict)

    @property
    def include(self) -> list[Any]:
        include = self.params.get("include") or []
        if isinstance(include, str):
            return split_csv(include)
        return list(include)


class JSONAPIHook:
    """Rewrite ``find`` and ``get`` results as JSON:API documents.

    Other methods pass through untouched.
    """

    def __init__(self, options: HookOptions | Mapping[str, Any] | None = None) -> None:
        if options is None:
            options = HookOptions.from_settings()
        elif not isinstance(options, HookOptions):
            options = HookOptions.model_validate(options)
        self.options = options
        self.pagination = OffsetPagination(skip_param=options.skip_param)
        self.document_builder = JSONAPIDocumentBuilder()

    async def __call__(self, context: HookContext) -> HookContext:
        return self.apply(context)

    def apply(self, context: HookContext) -> HookContext:
        """Transform ``context.result`` in place and return the context."""
        if context.method == "find":
            logger.debug("Building JSON:API collection for %s", context.path)
            context.result = self.find(context)
        elif context.method == "get":
            logger.debug("Building JSON:API resource for %s", context.path)
            context.result = self.get(context)
        return context

    def plain_serializer(self, context: HookContext) -> PlainSerializer:
        return PlainSerializer(
            context.service.name,
            identifier_key=self.options.identifier_key,
            type_key=self.options.type_key,
        )

    def find(self, context: HookContext) -> dict[str, Any]:
        """Build the document for a collection result."""
        if isinstance(context.result, Mapping):
            result = dict(context.result)
        else:
            result = {"data": context.result}
        records = list(result.pop("data", None) or [])
        result.pop("included", None)
        model = context.service.model
        related: list[dict[str, Any]] = []

        if model is not None:
            assembled = jsonapify(records, model, context.path, context.include)
            resources = assembled.document
            links = {**(result.pop("links", None) or {}), **assembled.links}
            related = assembled.related or []
        else:
            serializer = self.plain_serializer(context)
            resources = [serializer.to_resource(record, context.path) for record in records]
            links = {**(result.pop("links", None) or {}), "self": "/" + context.path.strip("/")}

        links.update(self.pagination.get_links(path=context.path, **self.pagination.counts(result)))
        document = self.document_builder.build_collection(
            resources,
            included=deduplicate_included(related),
            links=links,
        )
        # Counts and any other extra members end up under meta.
        document.update(result)
        return dict(extract_meta(document))

    def get(self, context: HookContext) -> dict[str, Any]:
        """Build the document for a single-record result."""
        model = context.service.model
        parent = "/" + context.path.strip("/")

        if model is not None:
            assembled = jsonapify(context.result, model, context.path, context.include)
            document = self.document_builder.build_single(
                assembled.document,
                included=deduplicate_included(assembled.related or []),
                links={**assembled.links, "parent": parent},
            )
        else:
            document = self.plain_serializer(context).serialize(context.result, context.path)
            data = document["data"]
            self_link = data["links"]["self"] if isinstance(data, Mapping) else parent
            document["links"] = {"self": self_link, "parent": parent}
        return dict(extract_meta(document))
