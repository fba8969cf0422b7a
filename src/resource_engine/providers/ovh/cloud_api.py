"""Shared configuration of the OVH Cloud project API."""

from typing import Any, Optional

from resource_engine.domain.base.exceptions import OperationFailedError
from resource_engine.domain.resource.value_objects import NativeIdFormat, PathContext
from resource_engine.providers.base.api_config import APIConfig, PaginationConfig
from resource_engine.providers.base.native_id import NativeIdConfig
from resource_engine.providers.base.operation_config import OperationConfig
from resource_engine.providers.base.payload import stringify_id

API_VERSION = "1.0"


def cloud_path_builder(ctx: PathContext) -> str:
    """
    Build a cloud project path.

    /cloud/project/{project}[/region/{region}]
        [/{parentType}/{parentId}]/{resourceType}[/{resourceName}]
    """
    path = f"/cloud/project/{ctx.project}"
    if ctx.region:
        path += f"/region/{ctx.region}"
    if ctx.parent_type and ctx.parent_resource:
        path += f"/{ctx.parent_type}/{ctx.parent_resource}"
    path += f"/{ctx.resource_type}"
    if ctx.resource_name:
        path += f"/{ctx.resource_name}"
    return path


def extract_operation_id(body: dict[str, Any]) -> Optional[str]:
    """Operation responses carry an ``action`` field next to their id."""
    if "action" not in body:
        return None
    operation_id = body.get("id")
    return operation_id if isinstance(operation_id, str) and operation_id else None


def operation_url(ctx: PathContext, operation_id: str) -> str:
    return f"/cloud/project/{ctx.project}/operation/{operation_id}"


def check_operation_status(body: dict[str, Any]) -> bool:
    """
    Evaluate a cloud operation.

    Returns:
        True once the operation completed, False while it is still running

    Raises:
        OperationFailedError: If the operation ended in error
    """
    status = body.get("status")
    if status == "completed":
        return True
    if status == "error":
        message = body.get("message") or "operation ended in error"
        raise OperationFailedError(str(message), stringify_id(body.get("id")))
    return False


def extract_cloud_native_id(body: dict[str, Any], ctx: PathContext) -> str:
    """
    Build project/parent/id, project/id or id from a create response.

    Completed operations report the new resource as ``resourceId``, synchronous
    responses as ``id``.
    """
    resource_id = body.get("resourceId")
    if not isinstance(resource_id, str) or not resource_id:
        resource_id = body.get("id")
    if not isinstance(resource_id, str) or not resource_id:
        return ""

    if ctx.project and ctx.parent_resource:
        return f"{ctx.project}/{ctx.parent_resource}/{resource_id}"
    if ctx.project:
        return f"{ctx.project}/{resource_id}"
    return resource_id


CLOUD_API = APIConfig(
    api_version=API_VERSION,
    path_builder=cloud_path_builder,
    pagination=PaginationConfig(disabled=True),
)

CLOUD_OPERATIONS = OperationConfig(
    synchronous=False,
    operation_id_extractor=extract_operation_id,
    operation_url_builder=operation_url,
    operation_status_checker=check_operation_status,
    native_id_extractor=extract_cloud_native_id,
)

CLOUD_NATIVE_ID = NativeIdConfig(format=NativeIdFormat.PROJECT_HIERARCHICAL)
