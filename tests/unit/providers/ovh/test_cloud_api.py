"""Unit tests for the OVH Cloud project API configuration."""

import pytest

from resource_engine.domain.base.exceptions import OperationFailedError
from resource_engine.domain.resource.value_objects import PathContext
from resource_engine.providers.ovh.cloud_api import (
    check_operation_status,
    cloud_path_builder,
    extract_cloud_native_id,
    extract_operation_id,
    operation_url,
)


@pytest.mark.unit
class TestCloudPathBuilder:
    """Test cases for cloud_path_builder."""

    def test_project_collection(self):
        """Test a project-scoped collection path."""
        ctx = PathContext(project="p1", resource_type="instance/group")

        assert cloud_path_builder(ctx) == "/cloud/project/p1/instance/group"

    def test_regional_item(self):
        """Test a regional resource path."""
        ctx = PathContext(
            project="p1", region="GRA7", resource_type="network", resource_name="net-1"
        )

        assert cloud_path_builder(ctx) == "/cloud/project/p1/region/GRA7/network/net-1"

    def test_nested_under_parent(self):
        """Test a nested resource path under its parent."""
        ctx = PathContext(
            project="p1",
            region="GRA7",
            parent_type="network",
            parent_resource="net-1",
            resource_type="subnet",
            resource_name="sub-1",
        )

        assert cloud_path_builder(ctx) == (
            "/cloud/project/p1/region/GRA7/network/net-1/subnet/sub-1"
        )

    def test_parent_type_without_parent_id(self):
        """Test the parent segment is omitted without a parent id."""
        ctx = PathContext(project="p1", parent_type="network", resource_type="subnet")

        assert cloud_path_builder(ctx) == "/cloud/project/p1/subnet"


@pytest.mark.unit
class TestCloudOperations:
    """Test cases for cloud operation handling."""

    def test_operation_id_requires_action(self):
        """Test only bodies carrying an action are operations."""
        assert extract_operation_id({"id": "op-1", "action": "network#create"}) == "op-1"
        assert extract_operation_id({"id": "net-1", "name": "net"}) is None
        assert extract_operation_id({"action": "x"}) is None

    def test_operation_url(self):
        """Test operations are polled under the project."""
        ctx = PathContext(project="p1", region="GRA7", resource_type="network")

        assert operation_url(ctx, "op-1") == "/cloud/project/p1/operation/op-1"

    @pytest.mark.parametrize(
        "status,done", [("completed", True), ("in-progress", False), ("created", False)]
    )
    def test_status(self, status, done):
        """Test completed operations are done, others keep polling."""
        assert check_operation_status({"status": status}) is done

    def test_error_status(self):
        """Test error operations raise with the remote message."""
        with pytest.raises(OperationFailedError, match="no more IP"):
            check_operation_status({"id": "op-1", "status": "error", "message": "no more IP"})

    def test_error_status_without_message(self):
        """Test error operations without message still raise."""
        with pytest.raises(OperationFailedError) as exc_info:
            check_operation_status({"id": "op-1", "status": "error"})

        assert exc_info.value.operation_id == "op-1"


@pytest.mark.unit
class TestExtractCloudNativeId:
    """Test cases for extract_cloud_native_id."""

    def test_resource_id_preferred(self):
        """Test the operation's resourceId wins over its own id."""
        ctx = PathContext(project="p1")

        assert extract_cloud_native_id({"id": "op-1", "resourceId": "net-1"}, ctx) == "p1/net-1"

    def test_nested(self):
        """Test nested resources include their parent."""
        ctx = PathContext(project="p1", parent_resource="net-1")

        assert extract_cloud_native_id({"id": "sub-1"}, ctx) == "p1/net-1/sub-1"

    def test_without_project(self):
        """Test the bare id is returned without a project."""
        assert extract_cloud_native_id({"id": "x"}, PathContext()) == "x"

    def test_without_id(self):
        """Test an empty string is returned when no id is present."""
        assert extract_cloud_native_id({"name": "x"}, PathContext(project="p1")) == ""
