"""Domain port implemented by every resource provisioner."""

import threading
from abc import ABC, abstractmethod
from typing import Optional

from resource_engine.domain.resource.requests import (
    CreateRequest,
    DeleteRequest,
    ListRequest,
    ReadRequest,
    StatusRequest,
    UpdateRequest,
)
from resource_engine.domain.resource.results import ListResult, ProgressResult, ReadResult


class Provisioner(ABC):
    """CRUD, discovery and readiness surface of one resource type."""

    @abstractmethod
    def create(
        self, request: CreateRequest, cancel_event: Optional[threading.Event] = None
    ) -> ProgressResult:
        """Create a resource from its desired properties."""

    @abstractmethod
    def read(
        self, request: ReadRequest, cancel_event: Optional[threading.Event] = None
    ) -> ReadResult:
        """Read the current properties of a resource."""

    @abstractmethod
    def update(
        self, request: UpdateRequest, cancel_event: Optional[threading.Event] = None
    ) -> ProgressResult:
        """Update a resource to its desired properties."""

    @abstractmethod
    def delete(
        self, request: DeleteRequest, cancel_event: Optional[threading.Event] = None
    ) -> ProgressResult:
        """Delete a resource. Deleting an absent resource succeeds."""

    @abstractmethod
    def status(
        self, request: StatusRequest, cancel_event: Optional[threading.Event] = None
    ) -> ProgressResult:
        """Check whether a resource has reached its ready state."""

    @abstractmethod
    def list(
        self, request: ListRequest, cancel_event: Optional[threading.Event] = None
    ) -> ListResult:
        """
        List native identifiers of existing resources.

        Raises:
            ResourceListError: If the remote collection cannot be fetched
        """
