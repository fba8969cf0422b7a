"""Generic declarative provisioning engine."""

from resource_engine.providers.base.api_config import APIConfig, PaginationConfig, URLBuilder
from resource_engine.providers.base.base_resource import BaseResource
from resource_engine.providers.base.definition_registry import (
    STANDARD_OPERATIONS,
    DefinitionRegistry,
    ResourceDefinition,
)
from resource_engine.providers.base.native_id import (
    NativeIdConfig,
    build_native_id,
    parse_native_id,
)
from resource_engine.providers.base.operation_config import OperationConfig
from resource_engine.providers.base.operation_poller import OperationPoller
from resource_engine.providers.base.resource_config import (
    CustomSegmentsConfig,
    OptimisticLockingConfig,
    ParentResourceConfig,
    ResourceConfig,
)
from resource_engine.providers.base.transformers import (
    FieldMappingTransformer,
    PassThroughTransformer,
    RequestTransformer,
    RequestTransformerFunc,
    ResponseTransformer,
    ResponseTransformerFunc,
    TransformContext,
)

__all__: list[str] = [
    "APIConfig",
    "BaseResource",
    "CustomSegmentsConfig",
    "DefinitionRegistry",
    "FieldMappingTransformer",
    "NativeIdConfig",
    "OperationConfig",
    "OperationPoller",
    "OptimisticLockingConfig",
    "PaginationConfig",
    "ParentResourceConfig",
    "PassThroughTransformer",
    "RequestTransformer",
    "RequestTransformerFunc",
    "ResourceConfig",
    "ResourceDefinition",
    "ResponseTransformer",
    "ResponseTransformerFunc",
    "STANDARD_OPERATIONS",
    "TransformContext",
    "URLBuilder",
    "build_native_id",
    "parse_native_id",
]
