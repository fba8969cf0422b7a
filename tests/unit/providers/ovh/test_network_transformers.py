"""Unit tests for OVH network transformers and readiness checks."""

import pytest

from resource_engine.domain.base.exceptions import TransformError
from resource_engine.domain.resource.value_objects import Operation
from resource_engine.providers.base.transformers import TransformContext
from resource_engine.providers.ovh.network.transformers import (
    PrivateNetworkResponseTransformer,
    SubnetRequestTransformer,
    default_allocation_range,
    gateway_status_checker,
    private_network_status_checker,
)

CTX = TransformContext(operation=Operation.CREATE, resource_type="subnet", project="p1")


@pytest.mark.unit
class TestDefaultAllocationRange:
    """Test cases for default_allocation_range."""

    @pytest.mark.parametrize(
        "cidr,expected",
        [
            ("10.0.0.0/24", ("10.0.0.2", "10.0.0.254")),
            ("192.168.0.0/16", ("192.168.0.2", "192.168.255.254")),
            ("10.1.2.0/28", ("10.1.2.2", "10.1.2.14")),
            ("10.1.2.0/30", ("10.1.2.2", "10.1.2.2")),
        ],
    )
    def test_range(self, cidr, expected):
        """Test the range skips network and gateway and stops before broadcast."""
        assert default_allocation_range(cidr) == expected

    def test_host_bits_are_ignored(self):
        """Test a CIDR with host bits set is normalised to its network."""
        assert default_allocation_range("10.0.0.17/24") == ("10.0.0.2", "10.0.0.254")

    @pytest.mark.parametrize("cidr", ["not-a-cidr", "10.0.0.0/33", ""])
    def test_invalid_cidr(self, cidr):
        """Test malformed CIDRs are rejected."""
        with pytest.raises(ValueError, match="invalid CIDR"):
            default_allocation_range(cidr)

    def test_ipv6_is_rejected(self):
        """Test IPv6 networks are rejected."""
        with pytest.raises(ValueError, match="only IPv4"):
            default_allocation_range("2001:db8::/64")

    @pytest.mark.parametrize("cidr", ["10.0.0.0/31", "10.0.0.0/32"])
    def test_too_small(self, cidr):
        """Test networks without room for an allocation range are rejected."""
        with pytest.raises(ValueError, match="too small"):
            default_allocation_range(cidr)


@pytest.mark.unit
class TestSubnetRequestTransformer:
    """Test cases for SubnetRequestTransformer."""

    def setup_method(self):
        """Set up test fixtures."""
        self.transformer = SubnetRequestTransformer()

    def test_full_mapping(self):
        """Test every supported property is mapped."""
        body = self.transformer.transform(
            {
                "network_id": "net-1",
                "region": "GRA7",
                "cidr": "10.0.3.0/24",
                "enableDhcp": True,
                "enableGatewayIp": True,
            },
            CTX,
        )

        assert body == {
            "region": "GRA7",
            "network": "10.0.3.0/24",
            "start": "10.0.3.2",
            "end": "10.0.3.254",
            "dhcp": True,
            "noGateway": False,
        }

    def test_gateway_disabled(self):
        """Test enableGatewayIp=false becomes noGateway=true."""
        body = self.transformer.transform({"enableGatewayIp": False}, CTX)

        assert body == {"noGateway": True}

    def test_unset_flags_are_omitted(self):
        """Test absent or non-boolean flags are not sent."""
        body = self.transformer.transform({"cidr": "10.0.0.0/24", "enableDhcp": "yes"}, CTX)

        assert "dhcp" not in body
        assert "noGateway" not in body

    def test_invalid_cidr_raises_transform_error(self):
        """Test an invalid CIDR fails the transformation."""
        with pytest.raises(TransformError, match="failed to calculate allocation range"):
            self.transformer.transform({"cidr": "10.0.0.0/31"}, CTX)


@pytest.mark.unit
class TestPrivateNetworkResponseTransformer:
    """Test cases for PrivateNetworkResponseTransformer."""

    def test_flattens_regions(self):
        """Test region objects are reduced to their names."""
        body = {
            "id": "pn-1",
            "regions": [
                {"region": "GRA7", "status": "ACTIVE", "openstackId": "x"},
                {"region": "DE1", "status": "BUILDING"},
            ],
        }

        properties = PrivateNetworkResponseTransformer().transform(body, CTX)

        assert properties == {"id": "pn-1", "regions": ["GRA7", "DE1"]}
        assert isinstance(body["regions"][0], dict)

    def test_without_regions(self):
        """Test bodies without regions pass through."""
        assert PrivateNetworkResponseTransformer().transform({"id": "pn-1"}, CTX) == {"id": "pn-1"}


@pytest.mark.unit
class TestReadinessCheckers:
    """Test cases for network readiness checkers."""

    @pytest.mark.parametrize(
        "body,ready",
        [
            ({"status": "ACTIVE"}, True),
            ({"status": "BUILDING"}, False),
            ({"status": "ERROR"}, False),
            ({}, True),
        ],
    )
    def test_gateway(self, body, ready):
        """Test gateways are ready once ACTIVE."""
        assert gateway_status_checker(body) is ready

    def test_private_network_all_regions_active(self):
        """Test a private network is ready when every region is ACTIVE."""
        body = {"regions": [{"status": "ACTIVE"}, {"status": "ACTIVE"}]}

        assert private_network_status_checker(body) is True

    def test_private_network_region_building(self):
        """Test a private network is not ready while a region builds."""
        body = {"regions": [{"status": "ACTIVE"}, {"status": "BUILDING"}]}

        assert private_network_status_checker(body) is False

    def test_private_network_without_regions(self):
        """Test a body without regions counts as ready."""
        assert private_network_status_checker({"id": "pn-1"}) is True
