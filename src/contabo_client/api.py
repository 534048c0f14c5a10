"""Operation-group namespaces built from the descriptor table."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable

from .descriptors import OperationDescriptor
from .operations import OPERATION_GROUPS

RequestFn = Callable[..., Any]


class BoundOperation:
    """One operation bound to a client's ``request`` entry point."""

    __slots__ = ("_request", "descriptor")

    def __init__(self, request: RequestFn, descriptor: OperationDescriptor) -> None:
        self._request = request
        self.descriptor = descriptor

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self._request(self.descriptor, *args, **kwargs)

    def __repr__(self) -> str:
        descriptor = self.descriptor
        return f"<BoundOperation {descriptor.key} {descriptor.method} {descriptor.path}>"


class OperationGroup:
    """Namespace exposing each operation of a resource group as a method, e.g. ``client.instances.list``."""

    def __init__(self, name: str, request: RequestFn, operations: Mapping[str, OperationDescriptor]) -> None:
        self._name = name
        self._actions = tuple(operations)
        for action, descriptor in operations.items():
            setattr(self, action, BoundOperation(request, descriptor))

    @property
    def actions(self) -> tuple[str, ...]:
        return self._actions

    def __repr__(self) -> str:
        return f"<OperationGroup {self._name}: {', '.join(self._actions)}>"


def _group(name: str, request: RequestFn) -> OperationGroup:
    return OperationGroup(name, request, OPERATION_GROUPS[name])


class OperationGroups:
    """Mixin attaching one :class:`OperationGroup` per resource group."""

    def _bind_groups(self, request: RequestFn) -> None:
        self.images = _group("images", request)
        self.instances = _group("instances", request)
        self.instance_actions = _group("instance_actions", request)
        self.snapshots = _group("snapshots", request)
        self.tickets = _group("tickets", request)
        self.data_centers = _group("data_centers", request)
        self.object_storages = _group("object_storages", request)
        self.private_networks = _group("private_networks", request)
        self.roles = _group("roles", request)
        self.secrets = _group("secrets", request)
        self.tags = _group("tags", request)
        self.users = _group("users", request)
        self.vips = _group("vips", request)
