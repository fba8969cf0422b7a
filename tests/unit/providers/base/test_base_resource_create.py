"""Unit tests for BaseResource.create."""

import json
import threading
from dataclasses import replace
from unittest.mock import Mock

import pytest

from resource_engine.domain.base.exceptions import OperationCancelledError, TransformError
from resource_engine.domain.resource.requests import CreateRequest
from resource_engine.domain.resource.value_objects import (
    Operation,
    OperationErrorCode,
    OperationStatus,
    ScopeType,
)
from resource_engine.providers.base.api_config import APIConfig
from resource_engine.providers.base.base_resource import BaseResource
from resource_engine.providers.base.operation_config import OperationConfig
from resource_engine.providers.base.operation_poller import OperationPoller
from resource_engine.providers.base.resource_config import (
    CustomSegmentsConfig,
    ParentResourceConfig,
    ResourceConfig,
)
from resource_engine.providers.base.transformers import RequestTransformerFunc
from resource_engine.providers.ovh.cloud_api import CLOUD_API, CLOUD_NATIVE_ID, CLOUD_OPERATIONS
from tests.fixtures.fake_transport import FakeTransport

TARGET = json.dumps({"serviceName": "p1", "region": "GRA7"})


def _no_wait(seconds, cancel_event):
    return False


@pytest.mark.unit
class TestSynchronousCreate:
    """Test cases for create against a synchronous API."""

    def setup_method(self):
        """Set up test fixtures."""
        self.transport = FakeTransport()
        self.resource = BaseResource(
            transport=self.transport,
            api_config=CLOUD_API,
            operation_config=OperationConfig(synchronous=True),
            resource_config=ResourceConfig(resource_type="instance/group"),
            native_id_config=CLOUD_NATIVE_ID,
        )

    def _create(self, properties, target=TARGET):
        return self.resource.create(
            CreateRequest(resource_type="Test::Group", properties=properties, target_config=target)
        )

    def test_create_success(self):
        """Test a synchronous create returns the native id and properties."""
        self.transport.respond(
            "POST", "/cloud/project/p1/instance/group", body={"id": "sg-1", "name": "web"}
        )

        result = self._create(json.dumps({"name": "web", "description": None}))

        assert result.operation == Operation.CREATE
        assert result.operation_status == OperationStatus.SUCCESS
        assert result.native_id == "p1/sg-1"
        assert json.loads(result.resource_properties) == {"id": "sg-1", "name": "web"}
        assert self.transport.last("POST").body == {"name": "web"}

    def test_properties_may_be_a_mapping(self):
        """Test already decoded properties are accepted."""
        self.transport.respond("POST", "/cloud/project/p1/instance/group", body={"id": "sg-1"})

        result = self._create({"name": "web"}, target={"serviceName": "p1"})

        assert result.native_id == "p1/sg-1"

    def test_service_name_property_wins_over_target(self):
        """Test a serviceName property selects the project."""
        self.transport.respond("POST", "/cloud/project/p2/instance/group", body={"id": "sg-1"})

        result = self._create(json.dumps({"name": "web", "serviceName": "p2"}))

        assert result.native_id == "p2/sg-1"

    def test_missing_project_is_invalid_request(self):
        """Test a create without any project fails locally."""
        result = self._create(json.dumps({"name": "web"}), target="{}")

        assert result.operation_status == OperationStatus.FAILURE
        assert result.error_code == OperationErrorCode.INVALID_REQUEST
        assert "project/serviceName is required" in result.status_message
        assert self.transport.requests == []

    def test_unparsable_properties_is_invalid_request(self):
        """Test malformed properties JSON fails locally."""
        result = self._create("{not json")

        assert result.error_code == OperationErrorCode.INVALID_REQUEST
        assert result.status_message.startswith("failed to parse properties")

    def test_unparsable_target_config_is_invalid_request(self):
        """Test malformed target configuration fails locally."""
        result = self._create(json.dumps({"name": "web"}), target="[1, 2]")

        assert result.error_code == OperationErrorCode.INVALID_REQUEST

    def test_remote_conflict_maps_to_already_exists(self):
        """Test a 409 is reported as AlreadyExists."""
        self.transport.fail(
            "POST", "/cloud/project/p1/instance/group", "ALREADY_EXISTS", "duplicate", 409
        )

        result = self._create(json.dumps({"name": "web"}))

        assert result.error_code == OperationErrorCode.ALREADY_EXISTS
        assert result.status_message == "duplicate"

    def test_unmapped_remote_error_maps_to_service_error(self):
        """Test unknown transport codes are reported as ServiceInternalError."""
        self.transport.fail("POST", "/cloud/project/p1/instance/group", "UNKNOWN", "teapot", 418)

        result = self._create(json.dumps({"name": "web"}))

        assert result.error_code == OperationErrorCode.SERVICE_INTERNAL_ERROR

    def test_cancelled_call_maps_to_general_service_exception(self):
        """Test caller cancellation is reported as GeneralServiceException."""
        self.transport.raise_on(
            "POST", "/cloud/project/p1/instance/group", OperationCancelledError("cancelled")
        )

        result = self._create(json.dumps({"name": "web"}))

        assert result.error_code == OperationErrorCode.GENERAL_SERVICE_EXCEPTION

    def test_missing_id_in_response_gives_empty_native_id(self):
        """Test a response without id still succeeds with an empty native id."""
        self.transport.respond("POST", "/cloud/project/p1/instance/group", body={"name": "web"})

        result = self._create(json.dumps({"name": "web"}))

        assert result.operation_status == OperationStatus.SUCCESS
        assert result.native_id == ""

    def test_numeric_id_is_stringified(self):
        """Test numeric ids are rendered without a fractional part."""
        self.transport.respond("POST", "/cloud/project/p1/instance/group", body={"id": 42.0})

        result = self._create(json.dumps({"name": "web"}))

        assert result.native_id == "p1/42"


@pytest.mark.unit
class TestCreateOptions:
    """Test cases for optional create behaviour."""

    def setup_method(self):
        """Set up test fixtures."""
        self.transport = FakeTransport()

    def _resource(self, **overrides):
        options = {
            "transport": self.transport,
            "api_config": CLOUD_API,
            "operation_config": OperationConfig(synchronous=True),
            "resource_config": ResourceConfig(resource_type="thing"),
            "native_id_config": CLOUD_NATIVE_ID,
        }
        options.update(overrides)
        return BaseResource(**options)

    def _request(self, properties):
        return CreateRequest(
            resource_type="Test::Thing",
            properties=json.dumps(properties),
            target_config=TARGET,
        )

    def test_request_transformer_output_is_nil_filtered(self):
        """Test the transformed body is posted without nil values."""
        self.transport.respond("POST", "/cloud/project/p1/thing", body={"id": "t-1"})
        transformer = RequestTransformerFunc(
            lambda properties, ctx: {"displayName": properties["name"], "extra": None}
        )

        self._resource(request_transformer=transformer).create(self._request({"name": "x"}))

        assert self.transport.last("POST").body == {"displayName": "x"}

    def test_transformer_error_is_invalid_request(self):
        """Test a TransformError fails the create before any call."""

        def reject(properties, ctx):
            raise TransformError("bad cidr")

        result = self._resource(request_transformer=RequestTransformerFunc(reject)).create(
            self._request({"name": "x"})
        )

        assert result.error_code == OperationErrorCode.INVALID_REQUEST
        assert result.status_message == "failed to transform request: bad cidr"

    def test_custom_segments_follow_configured_order(self):
        """Test custom segments reach the path builder as a tuple in configured order."""
        seen = []

        def path_builder(ctx):
            seen.append(ctx.custom_segments)
            return "/things/" + "/".join(ctx.custom_segments)

        self.transport.respond("POST", "/things/second/first", body={"id": "t-1"})
        resource = self._resource(
            api_config=APIConfig(path_builder=path_builder),
            resource_config=ResourceConfig(
                resource_type="thing",
                custom_segments=CustomSegmentsConfig(property_names=("b", "missing", "a")),
            ),
        )

        result = resource.create(self._request({"a": "first", "b": "second", "missing": ""}))

        assert result.operation_status == OperationStatus.SUCCESS
        assert seen[0] == ("second", "first")
        assert isinstance(seen[0], tuple)
        assert self.transport.requests == []

    def test_transformer_receives_context(self):
        """Test transformers see the resolved scope and operation."""
        self.transport.respond("POST", "/cloud/project/p1/region/GRA7/thing", body={"id": "t-1"})
        seen = []

        def capture(properties, ctx):
            seen.append(ctx)
            return properties

        resource = self._resource(
            resource_config=ResourceConfig(resource_type="thing", scope=ScopeType.REGIONAL),
            request_transformer=RequestTransformerFunc(capture),
        )
        resource.create(self._request({"name": "x"}))

        assert seen[0].operation == Operation.CREATE
        assert (seen[0].project, seen[0].region, seen[0].resource_type) == ("p1", "GRA7", "thing")
        assert seen[0].transport is self.transport

    def test_request_wrapper(self):
        """Test the body is nested under the wrapper key."""
        self.transport.respond("POST", "/cloud/project/p1/thing", body={"id": "t-1"})
        resource = self._resource(
            resource_config=ResourceConfig(resource_type="thing", request_wrapper="thing")
        )

        resource.create(self._request({"name": "x"}))

        assert self.transport.last("POST").body == {"thing": {"name": "x"}}

    def test_status_checker_makes_create_in_progress(self):
        """Test types with a readiness gate report InProgress."""
        self.transport.respond("POST", "/cloud/project/p1/thing", body={"id": "t-1"})
        resource = self._resource(status_checker=lambda body: True)

        result = resource.create(self._request({"name": "x"}))

        assert result.operation_status == OperationStatus.IN_PROGRESS
        assert result.native_id == "p1/t-1"

    def test_missing_parent_is_invalid_request(self):
        """Test a nested type without its parent id fails locally."""
        resource = self._resource(
            resource_config=ResourceConfig(
                resource_type="subnet",
                parent_resource=ParentResourceConfig(
                    requires_parent=True, parent_type="network", property_name="network_id"
                ),
            )
        )

        result = resource.create(self._request({"cidr": "10.0.0.0/24"}))

        assert result.error_code == OperationErrorCode.INVALID_REQUEST
        assert "property 'network_id'" in result.status_message

    def test_parent_goes_into_path(self):
        """Test the parent id is rendered into the collection path."""
        self.transport.respond(
            "POST", "/cloud/project/p1/network/net-1/subnet", body={"id": "sub-1"}
        )
        resource = self._resource(
            resource_config=ResourceConfig(
                resource_type="subnet",
                parent_resource=ParentResourceConfig(
                    requires_parent=True, parent_type="network", property_name="network_id"
                ),
            )
        )

        result = resource.create(self._request({"network_id": "net-1"}))

        assert result.operation_status == OperationStatus.SUCCESS

    def test_missing_region_is_invalid_request(self):
        """Test a regional type without a region fails locally."""
        resource = self._resource(
            resource_config=ResourceConfig(resource_type="thing", scope=ScopeType.REGIONAL)
        )

        result = resource.create(
            CreateRequest(
                resource_type="Test::Thing",
                properties=json.dumps({"name": "x"}),
                target_config=json.dumps({"serviceName": "p1"}),
            )
        )

        assert result.error_code == OperationErrorCode.INVALID_REQUEST
        assert "region is required" in result.status_message

    def test_post_mutation_hook_runs(self):
        """Test the hook runs after a successful create."""
        self.transport.respond("POST", "/cloud/project/p1/thing", body={"id": "t-1"})
        hook = Mock()
        resource = self._resource(
            operation_config=OperationConfig(synchronous=True, post_mutation_hook=hook)
        )

        resource.create(self._request({"name": "x"}))

        hook.assert_called_once()
        ctx, transport = hook.call_args.args
        assert ctx.project == "p1"
        assert transport is self.transport

    def test_post_mutation_hook_failure_is_ignored(self):
        """Test a failing hook does not fail the create."""
        self.transport.respond("POST", "/cloud/project/p1/thing", body={"id": "t-1"})
        hook = Mock(side_effect=RuntimeError("refresh failed"))
        resource = self._resource(
            operation_config=OperationConfig(synchronous=True, post_mutation_hook=hook)
        )

        result = resource.create(self._request({"name": "x"}))

        assert result.operation_status == OperationStatus.SUCCESS
        hook.assert_called_once()


@pytest.mark.unit
class TestAsynchronousCreate:
    """Test cases for create against the polled cloud API."""

    COLLECTION = "/cloud/project/p1/region/GRA7/network"
    OPERATION = "/cloud/project/p1/operation/op-1"

    def setup_method(self):
        """Set up test fixtures."""
        self.transport = FakeTransport()
        self.wait = Mock(side_effect=_no_wait)

    def _resource(self, wait=None, operation_config=CLOUD_OPERATIONS):
        poller = OperationPoller(self.transport, operation_config, wait=wait or self.wait)
        return BaseResource(
            transport=self.transport,
            api_config=CLOUD_API,
            operation_config=operation_config,
            resource_config=ResourceConfig(resource_type="network", scope=ScopeType.REGIONAL),
            native_id_config=CLOUD_NATIVE_ID,
            poller=poller,
        )

    def _create(self, resource, cancel_event=None):
        request = CreateRequest(
            resource_type="OVH::Network::Network",
            properties=json.dumps({"name": "net"}),
            target_config=TARGET,
        )
        return resource.create(request, cancel_event)

    def _accept(self):
        self.transport.respond(
            "POST", self.COLLECTION, body={"id": "op-1", "action": "network#create"}
        )

    def test_polls_then_fetches_resource(self):
        """Test the completed operation's resource is fetched and returned."""
        self._accept()
        self.transport.respond("GET", self.OPERATION, body={"status": "in-progress"})
        self.transport.respond(
            "GET", self.OPERATION, body={"status": "completed", "resourceId": "net-1"}
        )
        self.transport.respond(
            "GET", f"{self.COLLECTION}/net-1", body={"id": "net-1", "name": "net"}
        )

        result = self._create(self._resource())

        assert result.operation_status == OperationStatus.SUCCESS
        assert result.native_id == "p1/net-1"
        assert json.loads(result.resource_properties) == {"id": "net-1", "name": "net"}
        assert self.transport.calls() == [
            ("POST", self.COLLECTION),
            ("GET", self.OPERATION),
            ("GET", self.OPERATION),
            ("GET", f"{self.COLLECTION}/net-1"),
        ]
        assert self.wait.call_count == 1

    def test_fetch_failure_falls_back_to_operation_result(self):
        """Test a failed re-fetch still returns the operation's resource id."""
        self._accept()
        self.transport.respond(
            "GET", self.OPERATION, body={"status": "completed", "resourceId": "net-1"}
        )
        self.transport.fail("GET", f"{self.COLLECTION}/net-1", "INTERNAL_ERROR", "down", 503)

        result = self._create(self._resource())

        assert result.operation_status == OperationStatus.SUCCESS
        assert result.native_id == "p1/net-1"

    def test_remote_failure_is_service_internal_error(self):
        """Test an operation ending in error fails the create."""
        self._accept()
        self.transport.respond(
            "GET", self.OPERATION, body={"status": "error", "message": "quota exceeded"}
        )

        result = self._create(self._resource())

        assert result.error_code == OperationErrorCode.SERVICE_INTERNAL_ERROR
        assert result.status_message == "operation failed: quota exceeded"

    def test_checker_exception_is_service_internal_error(self):
        """Test a status checker raising an unexpected error fails the create."""
        self._accept()
        self.transport.respond("GET", self.OPERATION, body={"status": "weird"})

        def checker(body):
            raise KeyError("state")

        result = self._create(
            self._resource(
                operation_config=replace(CLOUD_OPERATIONS, operation_status_checker=checker)
            )
        )

        assert result.operation_status == OperationStatus.FAILURE
        assert result.error_code == OperationErrorCode.SERVICE_INTERNAL_ERROR
        assert result.status_message.startswith("operation failed: ")
        assert "failed to evaluate operation op-1" in result.status_message

    def test_cancellation_is_general_service_exception(self):
        """Test cancelling during polling reports GeneralServiceException."""
        self._accept()
        self.transport.respond("GET", self.OPERATION, body={"status": "in-progress"})

        result = self._create(self._resource(wait=lambda seconds, event: True), threading.Event())

        assert result.error_code == OperationErrorCode.GENERAL_SERVICE_EXCEPTION

    def test_response_without_action_is_not_polled(self):
        """Test a synchronous-looking response skips polling."""
        self.transport.respond("POST", self.COLLECTION, body={"id": "net-1", "name": "net"})

        result = self._create(self._resource())

        assert result.native_id == "p1/net-1"
        assert self.transport.calls("GET") == []
