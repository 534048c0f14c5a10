"""Descriptor table for every Contabo API operation."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from . import models as m
from .descriptors import (
    HttpMethod,
    OperationDescriptor,
    ResponseVariant,
    path_param,
    path_placeholders,
    query_param,
    snake_case,
)

_PAGED = ("page", "size", "orderBy")
_AUDIT = ("requestId", "changedBy", "startDate", "endDate")


def _op(
    operation_id: str,
    group: str,
    action: str,
    method: HttpMethod,
    path: str,
    *,
    query: tuple[str, ...] = (),
    request_model: type[BaseModel] | None = None,
    responses: tuple[tuple[int, Any], ...] = (),
) -> OperationDescriptor:
    return OperationDescriptor(
        key=snake_case(operation_id),
        operation_id=operation_id,
        group=group,
        action=action,
        method=method,
        path=path,
        path_params=tuple(path_param(name) for name in path_placeholders(path)),
        query_params=tuple(query_param(name) for name in query),
        body="json" if request_model is not None else "none",
        request_model=request_model,
        responses=tuple(ResponseVariant(status, model) for status, model in responses),
    )


_OPERATIONS: tuple[OperationDescriptor, ...] = (
    # images
    _op(
        "retrieveImageList", "images", "list", "GET", "/v1/compute/images",
        query=(*_PAGED, "name", "standardImage", "search"),
        responses=((200, m.ListImageResponse),),
    ),
    _op(
        "createCustomImage", "images", "create", "POST", "/v1/compute/images",
        request_model=m.CreateCustomImageRequest,
        responses=((201, m.CreateCustomImageResponse), (415, m.CreateCustomImageFailResponse)),
    ),
    _op(
        "retrieveImageAuditsList", "images", "audits", "GET", "/v1/compute/images/audits",
        query=(*_PAGED, "imageId", *_AUDIT),
        responses=((200, m.ListAuditResponse),),
    ),
    _op(
        "retrieveCustomImagesStats", "images", "stats", "GET", "/v1/compute/images/stats",
        responses=((200, m.DataResponse[m.ImageStats]),),
    ),
    _op("deleteImage", "images", "delete", "DELETE", "/v1/compute/images/{imageId}"),
    _op(
        "retrieveImage", "images", "get", "GET", "/v1/compute/images/{imageId}",
        responses=((200, m.DataResponse[m.Image]),),
    ),
    _op(
        "updateImage", "images", "update", "PATCH", "/v1/compute/images/{imageId}",
        request_model=m.UpdateCustomImageRequest,
        responses=((200, m.DataResponse[m.Image]),),
    ),
    # instances
    _op(
        "retrieveInstancesList", "instances", "list", "GET", "/v1/compute/instances",
        query=(
            *_PAGED, "name", "displayName", "dataCenter", "region", "instanceId", "instanceIds",
            "status", "productIds", "addOnIds", "productTypes", "ipConfig", "search",
        ),
        responses=((200, m.ListInstancesResponse),),
    ),
    _op(
        "createInstance", "instances", "create", "POST", "/v1/compute/instances",
        request_model=m.CreateInstanceRequest,
        responses=((201, m.CreateInstanceResponse),),
    ),
    _op(
        "retrieveInstancesActionsAuditsList", "instances", "action_audits", "GET",
        "/v1/compute/instances/actions/audits",
        query=(*_PAGED, "instanceId", *_AUDIT),
        responses=((200, m.ListAuditResponse),),
    ),
    _op(
        "retrieveInstancesAuditsList", "instances", "audits", "GET", "/v1/compute/instances/audits",
        query=(*_PAGED, "instanceId", *_AUDIT),
        responses=((200, m.ListAuditResponse),),
    ),
    _op(
        "retrieveInstance", "instances", "get", "GET", "/v1/compute/instances/{instanceId}",
        responses=((200, m.FindInstanceResponse),),
    ),
    _op(
        "patchInstance", "instances", "patch", "PATCH", "/v1/compute/instances/{instanceId}",
        request_model=m.PatchInstanceRequest,
        responses=((200, m.PatchInstanceResponse),),
    ),
    _op(
        "reinstallInstance", "instances", "reinstall", "PUT", "/v1/compute/instances/{instanceId}",
        request_model=m.ReinstallInstanceRequest,
        responses=((200, m.ReinstallInstanceResponse),),
    ),
    _op(
        "cancelInstance", "instances", "cancel", "POST", "/v1/compute/instances/{instanceId}/cancel",
        request_model=m.CancelInstanceRequest,
        responses=((200, m.DataResponse[m.Instance]),),
    ),
    _op(
        "upgradeInstance", "instances", "upgrade", "POST", "/v1/compute/instances/{instanceId}/upgrade",
        request_model=m.UpgradeInstanceRequest,
        responses=((200, m.PatchInstanceResponse),),
    ),
    # instance actions
    _op(
        "rescue", "instance_actions", "rescue", "POST", "/v1/compute/instances/{instanceId}/actions/rescue",
        request_model=m.InstancesActionsRescueRequest,
        responses=((201, m.InstanceActionResponse),),
    ),
    _op(
        "resetPasswordAction", "instance_actions", "reset_password", "POST",
        "/v1/compute/instances/{instanceId}/actions/resetPassword",
        request_model=m.InstancesResetPasswordActionsRequest,
        responses=((201, m.InstanceActionResponse),),
    ),
    _op(
        "restart", "instance_actions", "restart", "POST", "/v1/compute/instances/{instanceId}/actions/restart",
        responses=((201, m.InstanceActionResponse),),
    ),
    _op(
        "shutdown", "instance_actions", "shutdown", "POST", "/v1/compute/instances/{instanceId}/actions/shutdown",
        responses=((201, m.InstanceActionResponse),),
    ),
    _op(
        "start", "instance_actions", "start", "POST", "/v1/compute/instances/{instanceId}/actions/start",
        responses=((201, m.InstanceActionResponse),),
    ),
    _op(
        "stop", "instance_actions", "stop", "POST", "/v1/compute/instances/{instanceId}/actions/stop",
        responses=((201, m.InstanceActionResponse),),
    ),
    # snapshots
    _op(
        "retrieveSnapshotList", "snapshots", "list", "GET", "/v1/compute/instances/{instanceId}/snapshots",
        query=(*_PAGED, "name"),
        responses=((200, m.PagedResponse[m.Snapshot]),),
    ),
    _op(
        "createSnapshot", "snapshots", "create", "POST", "/v1/compute/instances/{instanceId}/snapshots",
        request_model=m.CreateSnapshotRequest,
        responses=((201, m.DataResponse[m.Snapshot]),),
    ),
    _op(
        "deleteSnapshot", "snapshots", "delete", "DELETE",
        "/v1/compute/instances/{instanceId}/snapshots/{snapshotId}",
    ),
    _op(
        "retrieveSnapshot", "snapshots", "get", "GET", "/v1/compute/instances/{instanceId}/snapshots/{snapshotId}",
        responses=((200, m.DataResponse[m.Snapshot]),),
    ),
    _op(
        "updateSnapshot", "snapshots", "update", "PATCH",
        "/v1/compute/instances/{instanceId}/snapshots/{snapshotId}",
        request_model=m.UpdateSnapshotRequest,
        responses=((200, m.DataResponse[m.Snapshot]),),
    ),
    _op(
        "rollbackSnapshot", "snapshots", "rollback", "POST",
        "/v1/compute/instances/{instanceId}/snapshots/{snapshotId}/rollback",
        request_model=m.RollbackSnapshotRequest,
        responses=((200, m.DataResponse[m.Snapshot]),),
    ),
    _op(
        "retrieveSnapshotsAuditsList", "snapshots", "audits", "GET", "/v1/compute/snapshots/audits",
        query=(*_PAGED, "instanceId", "snapshotId", *_AUDIT),
        responses=((200, m.ListAuditResponse),),
    ),
    # tickets
    _op(
        "createTicket", "tickets", "create", "POST", "/v1/create-ticket",
        request_model=m.CreateTicketRequest,
        responses=((201, m.DataResponse[m.Ticket]),),
    ),
    # data centers
    _op(
        "retrieveDataCenterList", "data_centers", "list", "GET", "/v1/data-centers",
        query=(*_PAGED, "slug", "name", "regionName", "regionSlug"),
        responses=((200, m.PagedResponse[m.DataCenter]),),
    ),
    # object storages
    _op(
        "retrieveObjectStorageList", "object_storages", "list", "GET", "/v1/object-storages",
        query=(*_PAGED, "dataCenterName", "region", "displayName"),
        responses=((200, m.PagedResponse[m.ObjectStorage]),),
    ),
    _op(
        "createObjectStorage", "object_storages", "create", "POST", "/v1/object-storages",
        request_model=m.CreateObjectStorageRequest,
        responses=((201, m.DataResponse[m.ObjectStorage]),),
    ),
    _op(
        "retrieveObjectStorageAuditsList", "object_storages", "audits", "GET", "/v1/object-storages/audits",
        query=(*_PAGED, "objectStorageId", *_AUDIT),
        responses=((200, m.ListAuditResponse),),
    ),
    _op(
        "retrieveObjectStorage", "object_storages", "get", "GET", "/v1/object-storages/{objectStorageId}",
        responses=((200, m.DataResponse[m.ObjectStorage]),),
    ),
    _op(
        "updateObjectStorage", "object_storages", "update", "PATCH", "/v1/object-storages/{objectStorageId}",
        request_model=m.PatchObjectStorageRequest,
        responses=((200, m.DataResponse[m.ObjectStorage]),),
    ),
    _op(
        "cancelObjectStorage", "object_storages", "cancel", "PATCH", "/v1/object-storages/{objectStorageId}/cancel",
        request_model=m.CancelObjectStorageRequest,
        responses=((200, m.DataResponse[m.ObjectStorage]),),
    ),
    _op(
        "upgradeObjectStorage", "object_storages", "upgrade", "POST", "/v1/object-storages/{objectStorageId}/resize",
        request_model=m.UpgradeObjectStorageRequest,
        responses=((200, m.DataResponse[m.ObjectStorage]),),
    ),
    _op(
        "retrieveObjectStoragesStats", "object_storages", "stats", "GET", "/v1/object-storages/{objectStorageId}/stats",
        responses=((200, m.DataResponse[m.ObjectStorageStats]),),
    ),
    # private networks
    _op(
        "retrievePrivateNetworkList", "private_networks", "list", "GET", "/v1/private-networks",
        query=(*_PAGED, "name", "instanceIds", "region", "dataCenter"),
        responses=((200, m.ListPrivateNetworkResponse),),
    ),
    _op(
        "createPrivateNetwork", "private_networks", "create", "POST", "/v1/private-networks",
        request_model=m.CreatePrivateNetworkRequest,
        responses=((201, m.CreatePrivateNetworkResponse),),
    ),
    _op(
        "retrievePrivateNetworkAuditsList", "private_networks", "audits", "GET", "/v1/private-networks/audits",
        query=(*_PAGED, "privateNetworkId", *_AUDIT),
        responses=((200, m.ListAuditResponse),),
    ),
    _op("deletePrivateNetwork", "private_networks", "delete", "DELETE", "/v1/private-networks/{privateNetworkId}"),
    _op(
        "retrievePrivateNetwork", "private_networks", "get", "GET", "/v1/private-networks/{privateNetworkId}",
        responses=((200, m.FindPrivateNetworkResponse),),
    ),
    _op(
        "patchPrivateNetwork", "private_networks", "patch", "PATCH", "/v1/private-networks/{privateNetworkId}",
        request_model=m.PatchPrivateNetworkRequest,
        responses=((200, m.FindPrivateNetworkResponse),),
    ),
    _op(
        "unassignInstancePrivateNetwork", "private_networks", "unassign_instance", "DELETE",
        "/v1/private-networks/{privateNetworkId}/instances/{instanceId}",
        responses=((200, m.FindPrivateNetworkResponse),),
    ),
    _op(
        "assignInstancePrivateNetwork", "private_networks", "assign_instance", "POST",
        "/v1/private-networks/{privateNetworkId}/instances/{instanceId}",
        responses=((201, m.FindPrivateNetworkResponse),),
    ),
    # roles
    _op(
        "retrieveRoleList", "roles", "list", "GET", "/v1/roles",
        query=(*_PAGED, "name", "apiName", "tagName", "type"),
        responses=((200, m.PagedResponse[m.Role]),),
    ),
    _op(
        "createRole", "roles", "create", "POST", "/v1/roles",
        request_model=m.CreateRoleRequest,
        responses=((201, m.DataResponse[m.Role]),),
    ),
    _op(
        "retrieveApiPermissionsList", "roles", "api_permissions", "GET", "/v1/roles/api-permissions",
        query=(*_PAGED, "apiName"),
        responses=((200, m.PagedResponse[m.ApiPermission]),),
    ),
    _op(
        "retrieveRoleAuditsList", "roles", "audits", "GET", "/v1/roles/audits",
        query=(*_PAGED, "roleId", *_AUDIT),
        responses=((200, m.ListAuditResponse),),
    ),
    _op("deleteRole", "roles", "delete", "DELETE", "/v1/roles/{roleId}"),
    _op(
        "retrieveRole", "roles", "get", "GET", "/v1/roles/{roleId}",
        responses=((200, m.DataResponse[m.Role]),),
    ),
    _op(
        "updateRole", "roles", "update", "PUT", "/v1/roles/{roleId}",
        request_model=m.UpdateRoleRequest,
        responses=((200, m.DataResponse[m.Role]),),
    ),
    # secrets
    _op(
        "retrieveSecretList", "secrets", "list", "GET", "/v1/secrets",
        query=(*_PAGED, "name", "type"),
        responses=((200, m.ListSecretResponse),),
    ),
    _op(
        "createSecret", "secrets", "create", "POST", "/v1/secrets",
        request_model=m.CreateSecretRequest,
        responses=((201, m.CreateSecretResponse),),
    ),
    _op(
        "retrieveSecretAuditsList", "secrets", "audits", "GET", "/v1/secrets/audits",
        query=(*_PAGED, "secretId", *_AUDIT),
        responses=((200, m.ListAuditResponse),),
    ),
    _op("deleteSecret", "secrets", "delete", "DELETE", "/v1/secrets/{secretId}"),
    _op(
        "retrieveSecret", "secrets", "get", "GET", "/v1/secrets/{secretId}",
        responses=((200, m.FindSecretResponse),),
    ),
    _op(
        "updateSecret", "secrets", "update", "PATCH", "/v1/secrets/{secretId}",
        request_model=m.UpdateSecretRequest,
        responses=((200, m.FindSecretResponse),),
    ),
    # tags
    _op(
        "retrieveTagList", "tags", "list", "GET", "/v1/tags",
        query=(*_PAGED, "name"),
        responses=((200, m.ListTagResponse),),
    ),
    _op(
        "createTag", "tags", "create", "POST", "/v1/tags",
        request_model=m.CreateTagRequest,
        responses=((201, m.DataResponse[m.Tag]),),
    ),
    _op(
        "retrieveAssignmentsAuditsList", "tags", "assignment_audits", "GET", "/v1/tags/assignments/audits",
        query=(*_PAGED, "tagId", "resourceId", *_AUDIT),
        responses=((200, m.ListAuditResponse),),
    ),
    _op(
        "retrieveTagAuditsList", "tags", "audits", "GET", "/v1/tags/audits",
        query=(*_PAGED, "tagId", *_AUDIT),
        responses=((200, m.ListAuditResponse),),
    ),
    _op("deleteTag", "tags", "delete", "DELETE", "/v1/tags/{tagId}"),
    _op(
        "retrieveTag", "tags", "get", "GET", "/v1/tags/{tagId}",
        responses=((200, m.DataResponse[m.Tag]),),
    ),
    _op(
        "updateTag", "tags", "update", "PATCH", "/v1/tags/{tagId}",
        request_model=m.UpdateTagRequest,
        responses=((200, m.DataResponse[m.Tag]),),
    ),
    _op(
        "retrieveAssignmentList", "tags", "assignments", "GET", "/v1/tags/{tagId}/assignments",
        query=(*_PAGED, "resourceType"),
        responses=((200, m.PagedResponse[m.Assignment]),),
    ),
    _op(
        "deleteAssignment", "tags", "delete_assignment", "DELETE",
        "/v1/tags/{tagId}/assignments/{resourceType}/{resourceId}",
    ),
    _op(
        "retrieveAssignment", "tags", "get_assignment", "GET",
        "/v1/tags/{tagId}/assignments/{resourceType}/{resourceId}",
        responses=((200, m.DataResponse[m.Assignment]),),
    ),
    _op(
        "createAssignment", "tags", "create_assignment", "POST",
        "/v1/tags/{tagId}/assignments/{resourceType}/{resourceId}",
        responses=((201, m.DataResponse[m.Assignment]),),
    ),
    # users
    _op(
        "retrieveUserList", "users", "list", "GET", "/v1/users",
        query=(*_PAGED, "email", "enabled", "owner"),
        responses=((200, m.PagedResponse[m.User]),),
    ),
    _op(
        "createUser", "users", "create", "POST", "/v1/users",
        request_model=m.CreateUserRequest,
        responses=((201, m.DataResponse[m.User]),),
    ),
    _op(
        "retrieveUserAuditsList", "users", "audits", "GET", "/v1/users/audits",
        query=(*_PAGED, "userId", *_AUDIT),
        responses=((200, m.ListAuditResponse),),
    ),
    _op(
        "retrieveUserClient", "users", "get_client", "GET", "/v1/users/client",
        responses=((200, m.DataResponse[m.ApiClient]),),
    ),
    _op(
        "generateClientSecret", "users", "generate_client_secret", "PUT", "/v1/users/client/secret",
        responses=((200, m.DataResponse[m.ClientSecret]),),
    ),
    _op(
        "retrieveUserIsPasswordSet", "users", "is_password_set", "GET", "/v1/users/is-password-set",
        query=("userId",),
        responses=((200, m.DataResponse[m.UserPasswordState]),),
    ),
    _op("deleteUser", "users", "delete", "DELETE", "/v1/users/{userId}"),
    _op(
        "retrieveUser", "users", "get", "GET", "/v1/users/{userId}",
        responses=((200, m.DataResponse[m.User]),),
    ),
    _op(
        "updateUser", "users", "update", "PATCH", "/v1/users/{userId}",
        request_model=m.UpdateUserRequest,
        responses=((200, m.DataResponse[m.User]),),
    ),
    _op(
        "listObjectStorageCredentials", "users", "list_credentials", "GET",
        "/v1/users/{userId}/object-storages/credentials",
        query=(*_PAGED, "objectStorageId", "regionName", "displayName"),
        responses=((200, m.PagedResponse[m.Credential]),),
    ),
    _op(
        "getObjectStorageCredentials", "users", "get_credentials", "GET",
        "/v1/users/{userId}/object-storages/{objectStorageId}/credentials/{credentialId}",
        responses=((200, m.DataResponse[m.Credential]),),
    ),
    _op(
        "regenerateObjectStorageCredentials", "users", "regenerate_credentials", "PATCH",
        "/v1/users/{userId}/object-storages/{objectStorageId}/credentials/{credentialId}",
        responses=((200, m.DataResponse[m.Credential]),),
    ),
    _op(
        "resendEmailVerification", "users", "resend_email_verification", "POST",
        "/v1/users/{userId}/resend-email-verification",
        query=("redirectUrl",),
    ),
    _op(
        "resetPassword", "users", "reset_password", "POST", "/v1/users/{userId}/reset-password",
        query=("redirectUrl",),
    ),
    # vips
    _op(
        "retrieveVipList", "vips", "list", "GET", "/v1/vips",
        query=(
            *_PAGED, "resourceId", "resourceType", "resourceName", "resourceDisplayName",
            "ipVersion", "ips", "ip", "type", "dataCenter", "region",
        ),
        responses=((200, m.PagedResponse[m.Vip]),),
    ),
    _op(
        "retrieveVipAuditsList", "vips", "audits", "GET", "/v1/vips/audits",
        query=(*_PAGED, "vipId", *_AUDIT),
        responses=((200, m.ListAuditResponse),),
    ),
    _op(
        "retrieveVip", "vips", "get", "GET", "/v1/vips/{ip}",
        responses=((200, m.DataResponse[m.Vip]),),
    ),
    _op("unassignIp", "vips", "unassign", "DELETE", "/v1/vips/{ip}/{resourceType}/{resourceId}"),
    _op(
        "assignIp", "vips", "assign", "POST", "/v1/vips/{ip}/{resourceType}/{resourceId}",
        responses=((201, m.DataResponse[m.Vip]),),
    ),
)

OPERATIONS: dict[str, OperationDescriptor] = {descriptor.key: descriptor for descriptor in _OPERATIONS}

ALL_OPERATION_IDS: set[str] = {descriptor.operation_id for descriptor in _OPERATIONS}

OPERATION_GROUPS: dict[str, dict[str, OperationDescriptor]] = {}
for _descriptor in _OPERATIONS:
    OPERATION_GROUPS.setdefault(_descriptor.group, {})[_descriptor.action] = _descriptor
del _descriptor


def get_operation(key: str) -> OperationDescriptor:
    """Look up a descriptor by snake_case key or camelCase operation id."""
    descriptor = OPERATIONS.get(key) or OPERATIONS.get(snake_case(key))
    if descriptor is None:
        raise KeyError(f"unknown operation {key!r}")
    return descriptor
