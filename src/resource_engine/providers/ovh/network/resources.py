"""OVH Cloud network resources.

Most types share the cloud project API defaults. Floating IPs, private
subnets and gateways address their resources with irregular paths and get
their own API configuration.
"""

from dataclasses import replace
from typing import Any

from resource_engine.domain.resource.descriptor import ResourceSchema
from resource_engine.domain.resource.value_objects import (
    NativeIdFormat,
    Operation,
    PathContext,
    ScopeType,
)
from resource_engine.infrastructure.registry.resource_registry import ResourceRegistry
from resource_engine.providers.base.api_config import APIConfig, PaginationConfig
from resource_engine.providers.base.definition_registry import (
    DefinitionRegistry,
    ResourceDefinition,
)
from resource_engine.providers.base.native_id import NativeIdConfig
from resource_engine.providers.base.operation_config import OperationConfig
from resource_engine.providers.base.resource_config import (
    CustomSegmentsConfig,
    ParentResourceConfig,
    ResourceConfig,
)
from resource_engine.providers.base.transformers import FieldMappingTransformer
from resource_engine.providers.ovh.cloud_api import (
    API_VERSION,
    CLOUD_API,
    CLOUD_NATIVE_ID,
    CLOUD_OPERATIONS,
)
from resource_engine.providers.ovh.network.transformers import (
    PrivateNetworkResponseTransformer,
    SubnetRequestTransformer,
    gateway_status_checker,
    private_network_status_checker,
)

NETWORK_RESOURCE_TYPE = "OVH::Network::Network"
PRIVATE_NETWORK_RESOURCE_TYPE = "OVH::Network::PrivateNetwork"
SUBNET_RESOURCE_TYPE = "OVH::Network::Subnet"
SUBNET_PRIVATE_RESOURCE_TYPE = "OVH::Network::SubnetPrivate"
FLOATING_IP_RESOURCE_TYPE = "OVH::Network::FloatingIP"
SECURITY_GROUP_RESOURCE_TYPE = "OVH::Network::SecurityGroup"
GATEWAY_RESOURCE_TYPE = "OVH::Network::Gateway"

CREATE_READ_DELETE_LIST = (Operation.CREATE, Operation.READ, Operation.DELETE, Operation.LIST)


def _id_under(ctx: PathContext, *scope: str) -> str:
    segments = [segment for segment in scope if segment]
    return "/".join([*segments, ctx.resource_name]) if segments else ctx.resource_name


# ---------------------------------------------------------------------------
# Floating IPs
# ---------------------------------------------------------------------------


def floating_ip_path_builder(ctx: PathContext) -> str:
    """
    Floating IPs are created under their instance but addressed on their own.

    Create: /cloud/project/{p}/region/{r}/instance/{instanceId}/floatingIp
    List:   /cloud/project/{p}/region/{r}/floatingip
    Item:   /cloud/project/{p}/region/{r}/floatingip/{id}
    """
    path = f"/cloud/project/{ctx.project}"
    if ctx.region:
        path += f"/region/{ctx.region}"
    if not ctx.resource_name and ctx.parent_resource:
        return f"{path}/instance/{ctx.parent_resource}/floatingIp"
    if not ctx.resource_name:
        return f"{path}/floatingip"
    return f"{path}/floatingip/{ctx.resource_name}"


def extract_regional_native_id(body: dict[str, Any], ctx: PathContext) -> str:
    """project/region/id, parents used only on create are not part of the identity."""
    resource_id = body.get("resourceId")
    if not isinstance(resource_id, str) or not resource_id:
        resource_id = body.get("id")
    if not isinstance(resource_id, str) or not resource_id:
        return ""
    if ctx.project and ctx.region:
        return f"{ctx.project}/{ctx.region}/{resource_id}"
    return _id_under(ctx.with_name(resource_id), ctx.project)


FLOATING_IP_API = APIConfig(
    api_version=API_VERSION,
    path_builder=floating_ip_path_builder,
    pagination=PaginationConfig(disabled=True),
)

FLOATING_IP_OPERATIONS = OperationConfig(
    synchronous=True,
    native_id_extractor=extract_regional_native_id,
)

FLOATING_IP_NATIVE_ID = NativeIdConfig(format=NativeIdFormat.PROJECT_REGIONAL)


# ---------------------------------------------------------------------------
# Private subnets
# ---------------------------------------------------------------------------


def private_subnet_path_builder(ctx: PathContext) -> str:
    """/cloud/project/{p}/network/private[/{networkId}/subnet][/{subnetId}]"""
    path = f"/cloud/project/{ctx.project}/network/private"
    if ctx.parent_resource:
        path += f"/{ctx.parent_resource}/subnet"
    if ctx.resource_name:
        path += f"/{ctx.resource_name}"
    return path


def extract_private_subnet_native_id(body: dict[str, Any], ctx: PathContext) -> str:
    resource_id = body.get("id")
    if not isinstance(resource_id, str) or not resource_id:
        return ""
    return _id_under(ctx.with_name(resource_id), ctx.project, ctx.parent_resource)


PRIVATE_SUBNET_API = APIConfig(
    api_version=API_VERSION,
    path_builder=private_subnet_path_builder,
    pagination=PaginationConfig(disabled=True),
)

PRIVATE_SUBNET_OPERATIONS = OperationConfig(
    synchronous=True,
    native_id_extractor=extract_private_subnet_native_id,
)

NESTED_NATIVE_ID = NativeIdConfig(format=NativeIdFormat.PROJECT_NESTED)


# ---------------------------------------------------------------------------
# Gateways
# ---------------------------------------------------------------------------


def gateway_path_builder(ctx: PathContext) -> str:
    """
    Gateways are created under a network subnet but addressed on their own.

    Create: /cloud/project/{p}/region/{r}/network/{networkId}/subnet/{subnetId}/gateway
    List:   /cloud/project/{p}/region/{r}/gateway
    Item:   /cloud/project/{p}/region/{r}/gateway/{id}

    The network and subnet ids are the first two custom segments.
    """
    path = f"/cloud/project/{ctx.project}"
    if ctx.region:
        path += f"/region/{ctx.region}"
    if not ctx.resource_name and len(ctx.custom_segments) >= 2:
        network_id, subnet_id = ctx.custom_segments[:2]
        return f"{path}/network/{network_id}/subnet/{subnet_id}/gateway"
    if not ctx.resource_name:
        return f"{path}/gateway"
    return f"{path}/gateway/{ctx.resource_name}"


GATEWAY_API = APIConfig(
    api_version=API_VERSION,
    path_builder=gateway_path_builder,
    pagination=PaginationConfig(disabled=True),
)

GATEWAY_OPERATIONS = replace(CLOUD_OPERATIONS, native_id_extractor=extract_regional_native_id)


def network_definitions() -> list[ResourceDefinition]:
    """Resource definitions sharing the cloud project API defaults."""
    return [
        ResourceDefinition(
            type_name=NETWORK_RESOURCE_TYPE,
            resource_config=ResourceConfig(resource_type="network", scope=ScopeType.REGIONAL),
            operations=CREATE_READ_DELETE_LIST,
            schema=ResourceSchema(required=["name"], read_only=["id"], create_only=["name"]),
            description="Regional network with embedded subnet",
        ),
        ResourceDefinition(
            type_name=PRIVATE_NETWORK_RESOURCE_TYPE,
            resource_config=ResourceConfig(
                resource_type="network/private", scope=ScopeType.PROJECT
            ),
            response_transformer=PrivateNetworkResponseTransformer(),
            status_checker=private_network_status_checker,
            operations=(*CREATE_READ_DELETE_LIST, Operation.CHECK_STATUS),
            schema=ResourceSchema(
                required=["name"], read_only=["id", "status"], create_only=["vlanId", "regions"]
            ),
            description="Private network spanning one or more regions",
        ),
        ResourceDefinition(
            type_name=SUBNET_RESOURCE_TYPE,
            resource_config=ResourceConfig(
                resource_type="subnet",
                scope=ScopeType.REGIONAL,
                parent_resource=ParentResourceConfig(
                    requires_parent=True, parent_type="network", property_name="network_id"
                ),
            ),
            native_id_config=NESTED_NATIVE_ID,
            request_transformer=SubnetRequestTransformer(),
            operations=CREATE_READ_DELETE_LIST,
            schema=ResourceSchema(
                required=["network_id", "cidr"],
                read_only=["id"],
                create_only=["network_id", "cidr", "enableDhcp", "enableGatewayIp"],
            ),
            description="Subnet of a regional network",
        ),
        ResourceDefinition(
            type_name=SECURITY_GROUP_RESOURCE_TYPE,
            resource_config=ResourceConfig(
                resource_type="instance/group", scope=ScopeType.PROJECT, supports_update=True
            ),
            operations=(
                Operation.CREATE,
                Operation.READ,
                Operation.UPDATE,
                Operation.DELETE,
                Operation.LIST,
            ),
            schema=ResourceSchema(required=["name"], read_only=["id"]),
            description="Instance security group",
        ),
    ]


def register_network_resources(resource_registry: ResourceRegistry) -> list[DefinitionRegistry]:
    """Register the cloud network family into ``resource_registry``."""
    cloud = DefinitionRegistry(resource_registry, CLOUD_API, CLOUD_OPERATIONS, CLOUD_NATIVE_ID)
    cloud.register_all(network_definitions())

    private_subnets = DefinitionRegistry(
        resource_registry, PRIVATE_SUBNET_API, PRIVATE_SUBNET_OPERATIONS, NESTED_NATIVE_ID
    )
    private_subnets.register(
        ResourceDefinition(
            type_name=SUBNET_PRIVATE_RESOURCE_TYPE,
            resource_config=ResourceConfig(
                resource_type="subnet",
                scope=ScopeType.PROJECT,
                parent_resource=ParentResourceConfig(
                    requires_parent=True, parent_type="network/private", property_name="network_id"
                ),
            ),
            request_transformer=FieldMappingTransformer(drop_fields=("network_id",)),
            operations=CREATE_READ_DELETE_LIST,
            schema=ResourceSchema(
                required=["network_id", "network", "region", "start", "end"],
                read_only=["id"],
                create_only=["network_id", "network", "region", "start", "end", "dhcp"],
            ),
            description="Subnet of a private network",
        )
    )

    floating_ips = DefinitionRegistry(
        resource_registry, FLOATING_IP_API, FLOATING_IP_OPERATIONS, FLOATING_IP_NATIVE_ID
    )
    floating_ips.register(
        ResourceDefinition(
            type_name=FLOATING_IP_RESOURCE_TYPE,
            resource_config=ResourceConfig(
                resource_type="floatingip",
                scope=ScopeType.REGIONAL,
                parent_resource=ParentResourceConfig(
                    requires_parent=True,
                    parent_type="instance",
                    property_name="instance_id",
                    create_only=True,
                ),
            ),
            request_transformer=FieldMappingTransformer(drop_fields=("instance_id",)),
            operations=CREATE_READ_DELETE_LIST,
            schema=ResourceSchema(
                required=["instance_id", "ip"], read_only=["id"], create_only=["instance_id"]
            ),
            description="Floating IP attached to an instance",
        )
    )

    gateways = DefinitionRegistry(
        resource_registry, GATEWAY_API, GATEWAY_OPERATIONS, FLOATING_IP_NATIVE_ID
    )
    gateways.register(
        ResourceDefinition(
            type_name=GATEWAY_RESOURCE_TYPE,
            resource_config=ResourceConfig(
                resource_type="gateway",
                scope=ScopeType.REGIONAL,
                custom_segments=CustomSegmentsConfig(property_names=("network_id", "subnet_id")),
                supports_update=True,
            ),
            request_transformer=FieldMappingTransformer(drop_fields=("network_id", "subnet_id")),
            status_checker=gateway_status_checker,
            schema=ResourceSchema(
                required=["name", "model", "network_id", "subnet_id"],
                read_only=["id", "status"],
                create_only=["network_id", "subnet_id"],
            ),
            description="Cloud gateway for private networks",
        )
    )

    return [cloud, private_subnets, floating_ips, gateways]
