"""OVH DNS zone API: zones, records and redirections."""

from typing import Any

from resource_engine.domain.base.ports.transport_port import TransportPort
from resource_engine.domain.resource.descriptor import ResourceSchema
from resource_engine.domain.resource.value_objects import (
    NativeIdFormat,
    Operation,
    PathContext,
    ScopeType,
    UpdateMethod,
)
from resource_engine.infrastructure.logging.logger import get_logger
from resource_engine.infrastructure.registry.resource_registry import ResourceRegistry
from resource_engine.providers.base.api_config import APIConfig, PaginationConfig
from resource_engine.providers.base.definition_registry import (
    DefinitionRegistry,
    ResourceDefinition,
)
from resource_engine.providers.base.native_id import NativeIdConfig, parse_native_id
from resource_engine.providers.base.operation_config import OperationConfig
from resource_engine.providers.base.payload import stringify_id
from resource_engine.providers.base.resource_config import ResourceConfig
from resource_engine.providers.ovh.cloud_api import API_VERSION

ZONE_RESOURCE_TYPE = "OVH::DNS::Zone"
RECORD_RESOURCE_TYPE = "OVH::DNS::Record"
REDIRECTION_RESOURCE_TYPE = "OVH::DNS::Redirection"

logger = get_logger(__name__)

_HIERARCHICAL = NativeIdConfig(format=NativeIdFormat.HIERARCHICAL)


def dns_path_builder(ctx: PathContext) -> str:
    """/domain/zone/{zone}/{resourceType}[/{resourceName}]"""
    path = f"/domain/zone/{ctx.zone}/{ctx.resource_type}"
    if ctx.resource_name:
        path += f"/{ctx.resource_name}"
    return path


def zone_path_builder(ctx: PathContext) -> str:
    """/domain/zone[/{zoneName}], zones are addressed by their own name."""
    if ctx.resource_name:
        return f"/domain/zone/{ctx.resource_name}"
    return "/domain/zone"


def parse_dns_native_id(native_id: str) -> PathContext:
    """Parse zone/id identifiers."""
    return parse_native_id(_HIERARCHICAL, native_id)


def extract_dns_native_id(body: dict[str, Any], ctx: PathContext) -> str:
    if body.get("id") is None:
        return ""
    return f"{ctx.zone}/{stringify_id(body['id'])}"


def refresh_zone(ctx: PathContext, transport: TransportPort) -> None:
    """Apply pending changes of a zone. Record mutations are not served until then."""
    if not ctx.zone:
        return
    logger.debug("Refreshing DNS zone %s", ctx.zone)
    transport.post(f"/domain/zone/{ctx.zone}/refresh")


DNS_API = APIConfig(
    api_version=API_VERSION,
    path_builder=dns_path_builder,
    pagination=PaginationConfig(disabled=True),
)

DNS_OPERATIONS = OperationConfig(
    synchronous=True,
    native_id_extractor=extract_dns_native_id,
    post_mutation_hook=refresh_zone,
)

DNS_NATIVE_ID = NativeIdConfig(format=NativeIdFormat.HIERARCHICAL, parser=parse_dns_native_id)


def dns_definitions() -> list[ResourceDefinition]:
    """Resource definitions of the DNS family."""
    return [
        ResourceDefinition(
            type_name=ZONE_RESOURCE_TYPE,
            resource_config=ResourceConfig(resource_type="zone", scope=ScopeType.NONE),
            api_config=APIConfig(api_version=API_VERSION, path_builder=zone_path_builder),
            native_id_config=NativeIdConfig(format=NativeIdFormat.SIMPLE_NAME),
            operations=(Operation.READ, Operation.LIST),
            schema=ResourceSchema(identifier="name", read_only=["name"]),
            description="DNS zone (read only)",
        ),
        ResourceDefinition(
            type_name=RECORD_RESOURCE_TYPE,
            resource_config=ResourceConfig(
                resource_type="record",
                scope=ScopeType.ZONE,
                supports_update=True,
                update_method=UpdateMethod.PUT,
            ),
            schema=ResourceSchema(
                required=["zone", "fieldType", "target"],
                read_only=["id"],
                create_only=["zone", "fieldType"],
            ),
            description="DNS record",
        ),
        ResourceDefinition(
            type_name=REDIRECTION_RESOURCE_TYPE,
            resource_config=ResourceConfig(
                resource_type="redirection",
                scope=ScopeType.ZONE,
                supports_update=True,
                update_method=UpdateMethod.PUT,
            ),
            schema=ResourceSchema(
                required=["zone", "target", "type"],
                read_only=["id"],
                create_only=["zone"],
            ),
            description="DNS web redirection",
        ),
    ]


def register_dns_resources(resource_registry: ResourceRegistry) -> DefinitionRegistry:
    """Register the DNS family into ``resource_registry``."""
    registry = DefinitionRegistry(resource_registry, DNS_API, DNS_OPERATIONS, DNS_NATIVE_ID)
    registry.register_all(dns_definitions())
    return registry
