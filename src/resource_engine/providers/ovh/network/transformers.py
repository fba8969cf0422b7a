"""Field mapping for OVH Cloud network resources."""

import ipaddress
from typing import Any

from resource_engine.domain.base.exceptions import TransformError
from resource_engine.providers.base.transformers import (
    RequestTransformer,
    ResponseTransformer,
    TransformContext,
)


def default_allocation_range(cidr: str) -> tuple[str, str]:
    """
    Compute the DHCP allocation range of an IPv4 subnet.

    The range starts after the network address and the gateway (network + 2)
    and ends just before the broadcast address.

    Raises:
        ValueError: If the CIDR is invalid, not IPv4, or has fewer than two host bits
    """
    try:
        network = ipaddress.ip_network(cidr, strict=False)
    except ValueError as e:
        raise ValueError(f"invalid CIDR: {e}") from e
    if network.version != 4:
        raise ValueError("only IPv4 is supported")
    if network.max_prefixlen - network.prefixlen < 2:
        raise ValueError("CIDR block too small for allocation")

    start = network.network_address + 2
    end = network.broadcast_address - 1
    return str(start), str(end)


class SubnetRequestTransformer(RequestTransformer):
    """
    Map subnet properties to the regional subnet API body.

    cidr becomes network plus a derived start/end allocation range,
    enableDhcp becomes dhcp and enableGatewayIp becomes the inverted
    noGateway. Unmapped properties are dropped.
    """

    def transform(self, properties: dict[str, Any], ctx: TransformContext) -> dict[str, Any]:
        body: dict[str, Any] = {}

        region = properties.get("region")
        if isinstance(region, str):
            body["region"] = region

        cidr = properties.get("cidr")
        if isinstance(cidr, str):
            try:
                start, end = default_allocation_range(cidr)
            except ValueError as e:
                raise TransformError(
                    f"failed to calculate allocation range from cidr '{cidr}': {e}"
                ) from e
            body["network"] = cidr
            body["start"] = start
            body["end"] = end

        enable_dhcp = properties.get("enableDhcp")
        if isinstance(enable_dhcp, bool):
            body["dhcp"] = enable_dhcp

        enable_gateway_ip = properties.get("enableGatewayIp")
        if isinstance(enable_gateway_ip, bool):
            body["noGateway"] = not enable_gateway_ip

        return body


class PrivateNetworkResponseTransformer(ResponseTransformer):
    """Flatten ``regions`` from [{"region": "DE1", ...}] to ["DE1"]."""

    def transform(self, body: dict[str, Any], ctx: TransformContext) -> dict[str, Any]:
        properties = dict(body)
        regions = body.get("regions")
        if isinstance(regions, list):
            properties["regions"] = [
                region["region"]
                for region in regions
                if isinstance(region, dict) and isinstance(region.get("region"), str)
            ]
        return properties


def gateway_status_checker(body: dict[str, Any]) -> bool:
    """A gateway is ready once ACTIVE. Bodies without a status count as ready."""
    status = body.get("status")
    if not isinstance(status, str):
        return True
    return status == "ACTIVE"


def private_network_status_checker(body: dict[str, Any]) -> bool:
    """A private network is ready once every region it spans is ACTIVE."""
    regions = body.get("regions")
    if not isinstance(regions, list):
        return True
    return all(
        region.get("status") == "ACTIVE" for region in regions if isinstance(region, dict)
    )
