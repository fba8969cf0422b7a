"""
Generic provisioner driven entirely by declarative configuration.

Every concrete resource type is a set of configuration records (API, operation,
resource, native id) plus optional transformers and a readiness checker. This
module turns those records into Create, Read, Update, Delete, List and Status.

Local recoverable conditions (unparsable payloads, missing scope, invalid
native ids, remote errors) are returned as failed results. Only List surfaces
transport failures as exceptions since its result has no error channel.
"""

import threading
from typing import Any, Optional
from urllib.parse import urlencode

from resource_engine.config.schemas.engine_schema import PollingConfig
from resource_engine.config.target_config import (
    decode_json_object,
    extract_location,
    extract_project,
    extract_region,
    extract_zone,
)
from resource_engine.domain.base.exceptions import (
    InvalidIdentifierError,
    OperationCancelledError,
    OperationPollingError,
    ResourceListError,
    ScopeResolutionError,
    TransformError,
    TransportError,
)
from resource_engine.domain.base.ports.provisioner_port import Provisioner
from resource_engine.domain.base.ports.transport_port import TransportPort
from resource_engine.domain.resource.requests import (
    CreateRequest,
    DeleteRequest,
    JsonPayload,
    ListRequest,
    ReadRequest,
    StatusRequest,
    UpdateRequest,
)
from resource_engine.domain.resource.results import ListResult, ProgressResult, ReadResult
from resource_engine.domain.resource.value_objects import (
    Operation,
    OperationErrorCode,
    OperationStatus,
    PathContext,
    ScopeType,
    UpdateMethod,
)
from resource_engine.infrastructure.logging.logger import get_logger
from resource_engine.infrastructure.transport.error_mapping import (
    is_not_found,
    to_operation_error_code,
)
from resource_engine.providers.base.api_config import APIConfig, URLBuilder
from resource_engine.providers.base.native_id import (
    NativeIdConfig,
    build_native_id,
    parse_native_id,
)
from resource_engine.providers.base.operation_config import OperationConfig, StatusChecker
from resource_engine.providers.base.operation_poller import OperationPoller
from resource_engine.providers.base.payload import filter_nil_values, stringify_id, to_json
from resource_engine.providers.base.resource_config import ResourceConfig
from resource_engine.providers.base.transformers import (
    RequestTransformer,
    ResponseTransformer,
    TransformContext,
)

SERVICE_NAME_PROPERTY = "serviceName"
ZONE_PROPERTY = "zone"
REGION_PROPERTY = "region"
LOCATION_PROPERTY = "location"
RESOURCE_ID_FIELD = "resourceId"
ID_FIELD = "id"


class BaseResource(Provisioner):
    """Configuration-driven provisioner for one resource type."""

    def __init__(
        self,
        transport: TransportPort,
        api_config: APIConfig,
        operation_config: OperationConfig,
        resource_config: ResourceConfig,
        native_id_config: NativeIdConfig,
        request_transformer: Optional[RequestTransformer] = None,
        response_transformer: Optional[ResponseTransformer] = None,
        status_checker: Optional[StatusChecker] = None,
        polling: Optional[PollingConfig] = None,
        poller: Optional[OperationPoller] = None,
    ) -> None:
        """
        Initialize the provisioner.

        Args:
            transport: Transport used for every wire call
            api_config: Path building and pagination of the API family
            operation_config: Synchronous or polled mutation handling
            resource_config: Scope, parent and update behaviour
            native_id_config: Native identifier encoding
            request_transformer: Optional properties -> request body mapping
            response_transformer: Optional response body -> properties mapping
            status_checker: Optional readiness gate evaluated by Status
            polling: Backoff parameters, used when no poller is given
            poller: Pre-built operation poller
        """
        self.transport = transport
        self.api_config = api_config
        self.operation_config = operation_config
        self.resource_config = resource_config
        self.native_id_config = native_id_config
        self.request_transformer = request_transformer
        self.response_transformer = response_transformer
        self.status_checker = status_checker
        self.poller = poller or OperationPoller(transport, operation_config, polling)
        self._logger = get_logger(__name__)

    @property
    def resource_type(self) -> str:
        return self.resource_config.resource_type

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    def create(
        self, request: CreateRequest, cancel_event: Optional[threading.Event] = None
    ) -> ProgressResult:
        """
        Create a resource.

        POSTs the transformed properties to the collection URL, drives the
        remote operation to completion when the API is asynchronous, and
        returns the native id of the new resource.
        """
        op = Operation.CREATE
        try:
            properties = decode_json_object(request.properties)
            target = decode_json_object(request.target_config)
        except ValueError as e:
            return self._failure(
                op, OperationErrorCode.INVALID_REQUEST, f"failed to parse properties: {e}"
            )

        try:
            ctx = self._context_from_properties(properties, target)
        except ScopeResolutionError as e:
            return self._failure(op, OperationErrorCode.INVALID_REQUEST, e.message)

        try:
            body = self._transform_request(properties, ctx, op, cancel_event)
        except TransformError as e:
            return self._failure(
                op, OperationErrorCode.INVALID_REQUEST, f"failed to transform request: {e}"
            )

        url = URLBuilder(self.api_config, ctx).collection_url()
        self._logger.debug("Creating %s at %s", self.resource_type, url)

        try:
            response = self.transport.post(url, self._wrap(body), cancel_event)
            response_body = self._await_operation(ctx, response.body or {}, cancel_event)
        except OperationCancelledError as e:
            return self._cancelled(op, e)
        except OperationPollingError as e:
            self._logger.error("Create of %s failed: %s", self.resource_type, e.message)
            return self._failure(
                op, OperationErrorCode.SERVICE_INTERNAL_ERROR, f"operation failed: {e.message}"
            )
        except TransportError as e:
            return self._transport_failure(op, e)

        native_id = self._extract_native_id(response_body, ctx)
        if not native_id:
            self._logger.warning("Create of %s returned no identifier", self.resource_type)

        self._run_post_mutation_hook(ctx)

        try:
            properties_json = self._serialize_response(response_body, ctx, op, cancel_event)
        except TransformError as e:
            return self._failure(
                op,
                OperationErrorCode.SERVICE_INTERNAL_ERROR,
                f"failed to transform response: {e}",
                native_id=native_id,
            )

        status = OperationStatus.SUCCESS
        if self.status_checker is not None:
            status = OperationStatus.IN_PROGRESS

        self._logger.info("Created %s %s", self.resource_type, native_id)
        return ProgressResult(
            operation=op,
            operation_status=status,
            native_id=native_id,
            resource_properties=properties_json,
        )

    def _await_operation(
        self,
        ctx: PathContext,
        body: dict[str, Any],
        cancel_event: Optional[threading.Event],
    ) -> dict[str, Any]:
        """Poll an asynchronous create and fetch the resulting resource."""
        config = self.operation_config
        if config.synchronous or config.operation_id_extractor is None:
            return body

        operation_id = config.operation_id_extractor(body)
        if not operation_id:
            return body

        self._logger.debug("Polling operation %s for %s", operation_id, self.resource_type)
        completed = self.poller.poll(ctx, operation_id, cancel_event)

        resource_id = stringify_id(completed.get(RESOURCE_ID_FIELD))
        if not resource_id:
            return completed

        url = URLBuilder(self.api_config, ctx).resource_url(resource_id)
        try:
            fetched = self.transport.get(url, cancel_event)
        except TransportError as e:
            self._logger.warning(
                "Failed to fetch created %s %s, using operation result: %s",
                self.resource_type,
                resource_id,
                e,
            )
            return completed
        return fetched.body or completed

    def _extract_native_id(self, body: dict[str, Any], ctx: PathContext) -> str:
        if self.operation_config.native_id_extractor is not None:
            return self.operation_config.native_id_extractor(body, ctx)
        if body.get(ID_FIELD) is None:
            return ""
        return build_native_id(self.native_id_config, ctx.with_name(stringify_id(body[ID_FIELD])))

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def read(
        self, request: ReadRequest, cancel_event: Optional[threading.Event] = None
    ) -> ReadResult:
        """Read the current properties of a resource."""
        try:
            ctx = self._context_from_native_id(request.native_id, request.target_config)
        except ScopeResolutionError as e:
            return self._read_failure(OperationErrorCode.INVALID_REQUEST, e.message)

        url = URLBuilder(self.api_config, ctx).resource_url(ctx.resource_name)
        try:
            response = self.transport.get(url, cancel_event)
        except OperationCancelledError as e:
            return self._read_failure(OperationErrorCode.GENERAL_SERVICE_EXCEPTION, e.message)
        except TransportError as e:
            return self._read_failure(to_operation_error_code(e.code), e.message)

        try:
            properties_json = self._serialize_response(
                response.body or {}, ctx, Operation.READ, cancel_event
            )
        except TransformError as e:
            return self._read_failure(
                OperationErrorCode.SERVICE_INTERNAL_ERROR, f"failed to transform response: {e}"
            )
        return ReadResult(resource_type=self.resource_type, properties=properties_json)

    # ------------------------------------------------------------------
    # Update
    # ------------------------------------------------------------------

    def update(
        self, request: UpdateRequest, cancel_event: Optional[threading.Event] = None
    ) -> ProgressResult:
        """Update a resource in place with PUT or PATCH."""
        op = Operation.UPDATE
        native_id = request.native_id
        if not self.resource_config.supports_update:
            return self._failure(
                op,
                OperationErrorCode.NOT_UPDATABLE,
                f"{self.resource_type} does not support updates",
                native_id=native_id,
            )

        try:
            properties = decode_json_object(request.desired_properties)
        except ValueError as e:
            return self._failure(
                op,
                OperationErrorCode.INVALID_REQUEST,
                f"failed to parse properties: {e}",
                native_id=native_id,
            )

        try:
            ctx = self._context_from_native_id(native_id, request.target_config)
        except ScopeResolutionError as e:
            return self._failure(
                op, OperationErrorCode.INVALID_REQUEST, e.message, native_id=native_id
            )

        try:
            body = self._transform_request(properties, ctx, op, cancel_event)
        except TransformError as e:
            return self._failure(
                op,
                OperationErrorCode.INVALID_REQUEST,
                f"failed to transform request: {e}",
                native_id=native_id,
            )

        url, body = self._update_url_and_body(ctx, body)
        method = self.resource_config.update_method
        self._logger.debug("Updating %s via %s %s", native_id, method.value, url)

        try:
            if method == UpdateMethod.PATCH:
                response = self.transport.patch(url, self._wrap(body), cancel_event)
            else:
                response = self.transport.put(url, self._wrap(body), cancel_event)
        except OperationCancelledError as e:
            return self._cancelled(op, e, native_id=native_id)
        except TransportError as e:
            return self._transport_failure(op, e, native_id=native_id)

        self._run_post_mutation_hook(ctx)

        try:
            properties_json = self._serialize_response(response.body or {}, ctx, op, cancel_event)
        except TransformError as e:
            return self._failure(
                op,
                OperationErrorCode.SERVICE_INTERNAL_ERROR,
                f"failed to transform response: {e}",
                native_id=native_id,
            )

        self._logger.info("Updated %s %s", self.resource_type, native_id)
        return ProgressResult.success(op, native_id=native_id, resource_properties=properties_json)

    def _update_url_and_body(
        self, ctx: PathContext, body: dict[str, Any]
    ) -> tuple[str, dict[str, Any]]:
        """Apply update query parameters and URL-borne optimistic locking."""
        url = URLBuilder(self.api_config, ctx).resource_url(ctx.resource_name)
        query = dict(self.resource_config.update_query_params)

        locking = self.resource_config.optimistic_locking
        if locking is not None and locking.enabled and locking.location_in_url:
            body = dict(body)
            version = body.pop(locking.field_name, None)
            if version is not None:
                query[locking.field_name] = stringify_id(version)

        if query:
            url = f"{url}{'&' if '?' in url else '?'}{urlencode(query)}"
        return url, body

    # ------------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------------

    def delete(
        self, request: DeleteRequest, cancel_event: Optional[threading.Event] = None
    ) -> ProgressResult:
        """Delete a resource. An already absent resource counts as deleted."""
        op = Operation.DELETE
        native_id = request.native_id
        try:
            ctx = self._context_from_native_id(native_id, request.target_config)
        except ScopeResolutionError as e:
            return self._failure(
                op, OperationErrorCode.INVALID_REQUEST, e.message, native_id=native_id
            )

        url = URLBuilder(self.api_config, ctx).resource_url(ctx.resource_name)
        self._logger.debug("Deleting %s at %s", native_id, url)

        try:
            self.transport.delete(url, cancel_event)
        except OperationCancelledError as e:
            return self._cancelled(op, e, native_id=native_id)
        except TransportError as e:
            if is_not_found(e):
                self._logger.info("%s %s already deleted", self.resource_type, native_id)
                return ProgressResult.success(op, native_id=native_id)
            return self._transport_failure(op, e, native_id=native_id)

        self._run_post_mutation_hook(ctx)
        self._logger.info("Deleted %s %s", self.resource_type, native_id)
        return ProgressResult.success(op, native_id=native_id)

    # ------------------------------------------------------------------
    # List
    # ------------------------------------------------------------------

    def list(
        self, request: ListRequest, cancel_event: Optional[threading.Event] = None
    ) -> ListResult:
        """
        List native identifiers of existing resources.

        Raises:
            ResourceListError: If the scope is incomplete or the collection
                cannot be fetched
        """
        try:
            target = decode_json_object(request.target_config)
            ctx = self._context_from_additional_properties(
                request.additional_properties or {}, target
            )
        except (ValueError, ScopeResolutionError) as e:
            raise ResourceListError(f"failed to list {self.resource_type}: {e}") from e

        url = URLBuilder(self.api_config, ctx).collection_url()
        if not self.api_config.is_pagination_disabled():
            pagination = self.api_config.pagination
            url = f"{url}?{urlencode({pagination.page_size_param: pagination.page_size})}"

        try:
            response = self.transport.get(url, cancel_event)
        except (TransportError, OperationCancelledError) as e:
            raise ResourceListError(f"failed to list {self.resource_type}: {e}") from e

        native_ids = [
            build_native_id(self.native_id_config, ctx.with_name(self._list_item_id(item)))
            for item in response.body_array or []
        ]
        self._logger.debug("Listed %d %s resource(s)", len(native_ids), self.resource_type)
        return ListResult(native_ids=native_ids)

    @staticmethod
    def _list_item_id(item: Any) -> str:
        """Collections return either bare ids or objects carrying an id."""
        if isinstance(item, dict) and item.get(ID_FIELD) is not None:
            return stringify_id(item[ID_FIELD])
        return stringify_id(item)

    # ------------------------------------------------------------------
    # Status
    # ------------------------------------------------------------------

    def status(
        self, request: StatusRequest, cancel_event: Optional[threading.Event] = None
    ) -> ProgressResult:
        """Check whether a created resource has reached its ready state."""
        op = Operation.CHECK_STATUS
        native_id = request.native_id
        request_id = request.request_id

        if self.status_checker is None:
            return ProgressResult.success(op, native_id=native_id, request_id=request_id)

        try:
            ctx = self._context_from_native_id(native_id, request.target_config)
        except ScopeResolutionError as e:
            return self._failure(
                op,
                OperationErrorCode.INVALID_REQUEST,
                e.message,
                native_id=native_id,
                request_id=request_id,
            )

        urls = URLBuilder(self.api_config, ctx)
        if urls.resource_path(ctx.resource_name) in ("", "/"):
            return self._failure(
                op,
                OperationErrorCode.INVALID_REQUEST,
                f"invalid URL built from native ID '{native_id}': project='{ctx.project}', "
                f"parent='{ctx.parent_resource}', name='{ctx.resource_name}'",
                native_id=native_id,
                request_id=request_id,
            )

        url = urls.resource_url(ctx.resource_name)
        try:
            response = self.transport.get(url, cancel_event)
        except OperationCancelledError as e:
            return self._cancelled(op, e, native_id=native_id, request_id=request_id)
        except TransportError as e:
            return self._transport_failure(op, e, native_id=native_id, request_id=request_id)

        body = response.body or {}
        try:
            ready = self.status_checker(body)
        except Exception as e:
            self._logger.error("Status check of %s failed: %s", native_id, e)
            return self._failure(
                op,
                OperationErrorCode.SERVICE_INTERNAL_ERROR,
                f"status check failed: {e}",
                native_id=native_id,
                request_id=request_id,
            )

        if not ready:
            return ProgressResult(
                operation=op,
                operation_status=OperationStatus.IN_PROGRESS,
                native_id=native_id,
                request_id=request_id,
                status_message="Resource is not yet ready",
            )

        try:
            properties_json = self._serialize_response(body, ctx, op, cancel_event)
        except TransformError as e:
            return self._failure(
                op,
                OperationErrorCode.SERVICE_INTERNAL_ERROR,
                f"failed to transform response: {e}",
                native_id=native_id,
                request_id=request_id,
            )
        return ProgressResult.success(
            op, native_id=native_id, resource_properties=properties_json, request_id=request_id
        )

    # ------------------------------------------------------------------
    # Context resolution
    # ------------------------------------------------------------------

    def _base_context(self, **fields: Any) -> PathContext:
        return PathContext(
            resource_type=self.resource_config.resource_type,
            parent_type=self.resource_config.parent_type,
            **fields,
        )

    def _context_from_properties(
        self, properties: dict[str, Any], target: dict[str, Any]
    ) -> PathContext:
        """Resolve scope for Create: properties first, then target configuration."""
        scope = self.resource_config.scope
        fields: dict[str, Any] = {
            "project": (
                _string_property(properties, SERVICE_NAME_PROPERTY) or extract_project(target)
            ),
            "zone": _string_property(properties, ZONE_PROPERTY) or extract_zone(target),
        }
        if scope == ScopeType.REGIONAL:
            fields["region"] = _string_property(properties, REGION_PROPERTY) or extract_region(
                target
            )
        if scope == ScopeType.LOCATION:
            fields["location"] = _string_property(
                properties, LOCATION_PROPERTY
            ) or extract_location(target)

        if self.resource_config.parent_resource is not None:
            fields["parent_resource"] = stringify_id(
                properties.get(self.resource_config.parent_property)
            )

        if self.resource_config.custom_segments is not None:
            fields["custom_segments"] = tuple(
                properties[name]
                for name in self.resource_config.custom_segments.property_names
                if isinstance(properties.get(name), str) and properties[name]
            )

        ctx = self._base_context(**fields)
        self._validate_scope(ctx, creating=True)
        return ctx

    def _context_from_native_id(self, native_id: str, target_config: JsonPayload) -> PathContext:
        """Resolve scope for Read, Update, Delete and Status.

        Coordinates encoded in the native id win, target configuration fills
        the gaps.

        Raises:
            ScopeResolutionError: If the id or target configuration is invalid,
                or a required coordinate is missing
        """
        try:
            target = decode_json_object(target_config)
        except ValueError as e:
            raise ScopeResolutionError(f"failed to parse target config: {e}") from e
        try:
            parsed = parse_native_id(self.native_id_config, native_id)
        except InvalidIdentifierError as e:
            raise ScopeResolutionError(f"invalid native ID: {e.message}") from e
        scope = self.resource_config.scope
        updates: dict[str, Any] = {
            "resource_type": self.resource_config.resource_type,
        }
        if self.resource_config.parent_type:
            updates["parent_type"] = self.resource_config.parent_type
        if not parsed.project:
            updates["project"] = extract_project(target)
        if scope == ScopeType.REGIONAL and not parsed.region:
            updates["region"] = extract_region(target)
        if scope == ScopeType.LOCATION and not parsed.location:
            updates["location"] = extract_location(target)
        if scope == ScopeType.ZONE and not parsed.zone:
            updates["zone"] = extract_zone(target)

        ctx = parsed.model_copy(update=updates)
        self._validate_scope(ctx)
        return ctx

    def _context_from_additional_properties(
        self, additional: dict[str, str], target: dict[str, Any]
    ) -> PathContext:
        """Resolve scope for List from additional properties and target configuration."""
        scope = self.resource_config.scope
        fields: dict[str, Any] = {
            "project": additional.get(SERVICE_NAME_PROPERTY) or extract_project(target),
            "zone": additional.get(ZONE_PROPERTY) or extract_zone(target),
        }
        if scope == ScopeType.REGIONAL:
            fields["region"] = additional.get(REGION_PROPERTY) or extract_region(target)
        if scope == ScopeType.LOCATION:
            fields["location"] = additional.get(LOCATION_PROPERTY) or extract_location(target)
        parent = self.resource_config.parent_resource
        if parent is not None and not parent.create_only:
            fields["parent_resource"] = additional.get(self.resource_config.parent_property, "")

        ctx = self._base_context(**fields)
        self._validate_scope(ctx)
        return ctx

    def _validate_scope(self, ctx: PathContext, creating: bool = False) -> None:
        """Reject contexts missing a coordinate the resource type needs."""
        config = self.resource_config
        scope = config.scope
        if scope.requires_project and not ctx.project:
            raise ScopeResolutionError(
                "project/serviceName is required but not found in target config or properties"
            )
        if scope == ScopeType.ZONE and not ctx.zone:
            raise ScopeResolutionError("zone is required but not found in properties")
        if scope == ScopeType.REGIONAL and not ctx.region:
            raise ScopeResolutionError(
                "region is required but not found in target config or properties"
            )
        if scope == ScopeType.LOCATION and not ctx.location:
            raise ScopeResolutionError(
                "location is required but not found in target config or properties"
            )
        if config.requires_parent_for(creating) and not ctx.parent_resource:
            raise ScopeResolutionError(
                f"parent resource ID required: property '{config.parent_property}' "
                "is empty or not a valid ID"
            )

    # ------------------------------------------------------------------
    # Payload helpers
    # ------------------------------------------------------------------

    def _transform_context(
        self,
        ctx: PathContext,
        operation: Operation,
        cancel_event: Optional[threading.Event],
    ) -> TransformContext:
        return TransformContext(
            operation=operation,
            resource_type=ctx.resource_type,
            project=ctx.project,
            region=ctx.region,
            zone=ctx.zone,
            location=ctx.location,
            transport=self.transport,
            cancel_event=cancel_event,
        )

    def _transform_request(
        self,
        properties: dict[str, Any],
        ctx: PathContext,
        operation: Operation,
        cancel_event: Optional[threading.Event],
    ) -> dict[str, Any]:
        body = properties
        if self.request_transformer is not None:
            body = self.request_transformer.transform(
                properties, self._transform_context(ctx, operation, cancel_event)
            )
        return filter_nil_values(body)

    def _serialize_response(
        self,
        body: dict[str, Any],
        ctx: PathContext,
        operation: Operation,
        cancel_event: Optional[threading.Event],
    ) -> str:
        properties = body
        if self.response_transformer is not None:
            properties = self.response_transformer.transform(
                body, self._transform_context(ctx, operation, cancel_event)
            )
        return to_json(properties)

    def _wrap(self, body: dict[str, Any]) -> dict[str, Any]:
        wrapper = self.resource_config.request_wrapper
        return {wrapper: body} if wrapper else body

    def _run_post_mutation_hook(self, ctx: PathContext) -> None:
        """Run the post-mutation hook. Failures are logged and never fail the mutation."""
        hook = self.operation_config.post_mutation_hook
        if hook is None:
            return
        try:
            hook(ctx, self.transport)
        except Exception as e:
            self._logger.warning(
                "Post-mutation hook for %s failed: %s", self.resource_type, e, exc_info=True
            )

    # ------------------------------------------------------------------
    # Result helpers
    # ------------------------------------------------------------------

    def _failure(
        self,
        operation: Operation,
        error_code: OperationErrorCode,
        message: str,
        native_id: str = "",
        request_id: str = "",
    ) -> ProgressResult:
        self._logger.debug(
            "%s %s failed (%s): %s", operation.value, self.resource_type, error_code.value, message
        )
        return ProgressResult.failure(
            operation, error_code, message, native_id=native_id, request_id=request_id
        )

    def _transport_failure(
        self,
        operation: Operation,
        error: TransportError,
        native_id: str = "",
        request_id: str = "",
    ) -> ProgressResult:
        return self._failure(
            operation,
            to_operation_error_code(error.code),
            error.message,
            native_id=native_id,
            request_id=request_id,
        )

    def _cancelled(
        self,
        operation: Operation,
        error: OperationCancelledError,
        native_id: str = "",
        request_id: str = "",
    ) -> ProgressResult:
        return self._failure(
            operation,
            OperationErrorCode.GENERAL_SERVICE_EXCEPTION,
            error.message,
            native_id=native_id,
            request_id=request_id,
        )

    def _read_failure(self, error_code: OperationErrorCode, message: str) -> ReadResult:
        self._logger.debug("Read %s failed (%s): %s", self.resource_type, error_code.value, message)
        return ReadResult(
            resource_type=self.resource_type, error_code=error_code, status_message=message
        )


def _string_property(values: dict[str, Any], key: str) -> str:
    value = values.get(key)
    return value if isinstance(value, str) else ""
