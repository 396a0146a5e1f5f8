"""Turn read results into JSON:API documents, with FastAPI integration."""

from .config import HookOptions, Settings, get_settings
from .core.document import JSONAPIDocumentBuilder, extract_meta
from .core.errors import JSONAPIErrorBuilder, ResourceNotFound, SchemaError
from .hooks import HookContext, JSONAPIHook, ServiceInfo
from .routers.base import JSONAPIRouter
from .schemas.model import AssociationDescriptor, AttributeMetadata, ModelMetadata
from .serializers.assembler import AssemblyResult, jsonapify
from .serializers.plain import PlainSerializer
from .viewsets.base import JSONAPIViewSet

__all__ = [
    "AssemblyResult",
    "AssociationDescriptor",
    "AttributeMetadata",
    "HookContext",
    "HookOptions",
    "JSONAPIDocumentBuilder",
    "JSONAPIErrorBuilder",
    "JSONAPIHook",
    "JSONAPIRouter",
    "JSONAPIViewSet",
    "ModelMetadata",
    "PlainSerializer",
    "ResourceNotFound",
    "SchemaError",
    "ServiceInfo",
    "Settings",
    "extract_meta",
    "get_settings",
    "jsonapify",
]
