"""Request and response models for the Contabo API.

Response models are lenient: every field is optional and unknown fields are
kept, so a payload that grows new keys still decodes.
"""

from __future__ import annotations

from typing import Any, Generic, Literal, TypeAlias, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ItemT = TypeVar("ItemT")

Region: TypeAlias = Literal["EU", "US-central", "US-east", "US-west", "SIN", "UK", "AUS", "JPN", "IND"]
DefaultUser: TypeAlias = Literal["root", "admin", "administrator"]
SecretType: TypeAlias = Literal["password", "ssh"]
OsType: TypeAlias = Literal["Linux", "Windows"]


class ContaboModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


class ContaboRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")


class PaginationMeta(ContaboModel):
    page: int | None = None
    size: int | None = None
    total_elements: int | None = None
    total_pages: int | None = None


class Links(ContaboModel):
    self_: str | None = Field(default=None, alias="self")
    first: str | None = None
    last: str | None = None
    next: str | None = None
    previous: str | None = None


class DataResponse(ContaboModel, Generic[ItemT]):
    """``{"_links": ..., "data": [...]}`` envelope used by single-resource calls."""

    links: Links | None = Field(default=None, alias="_links")
    data: list[ItemT] = Field(default_factory=list)


class PagedResponse(DataResponse[ItemT], Generic[ItemT]):
    """List envelope carrying ``_pagination`` next to ``data``."""

    pagination: PaginationMeta | None = Field(default=None, alias="_pagination")


# Resources


class IpV4(ContaboModel):
    ip: str | None = None
    gateway: str | None = None
    netmask_cidr: int | None = None


class IpV6(ContaboModel):
    ip: str | None = None
    gateway: str | None = None
    netmask_cidr: int | None = None


class IpConfig(ContaboModel):
    v4: IpV4 | None = None
    v6: IpV6 | None = None


class Instance(ContaboModel):
    instance_id: int | None = None
    tenant_id: str | None = None
    customer_id: str | None = None
    name: str | None = None
    display_name: str | None = None
    status: str | None = None
    region: str | None = None
    region_name: str | None = None
    data_center: str | None = None
    product_id: str | None = None
    product_name: str | None = None
    product_type: str | None = None
    image_id: str | None = None
    ip_config: IpConfig | None = None
    mac_address: str | None = None
    ram_mb: float | None = None
    cpu_cores: int | None = None
    disk_mb: float | None = None
    os_type: str | None = None
    ssh_keys: list[int] = Field(default_factory=list)
    default_user: str | None = None
    error_message: str | None = None
    created_date: str | int | None = None
    cancel_date: str | None = None
    add_ons: list[dict[str, Any]] = Field(default_factory=list)
    additional_ips: list[dict[str, Any]] = Field(default_factory=list)


class CreatedInstance(ContaboModel):
    instance_id: int | None = None
    tenant_id: str | None = None
    customer_id: str | None = None
    image_id: str | None = None
    product_id: str | None = None
    region: str | None = None
    os_type: str | None = None
    status: str | None = None
    ssh_keys: list[int] = Field(default_factory=list)
    created_date: str | int | None = None
    add_ons: list[dict[str, Any]] = Field(default_factory=list)


class InstanceAction(ContaboModel):
    instance_id: int | None = None
    action: str | None = None
    tenant_id: str | None = None
    customer_id: str | None = None


class Image(ContaboModel):
    image_id: str | None = None
    tenant_id: str | None = None
    customer_id: str | None = None
    name: str | None = None
    description: str | None = None
    url: str | None = None
    size_mb: float | None = None
    uploaded_size_mb: float | None = None
    os_type: str | None = None
    version: str | None = None
    format: str | None = None
    status: str | None = None
    error_message: str | None = None
    standard_image: bool | None = None
    creation_date: str | int | None = None
    last_modified_date: str | int | None = None


class ImageStats(ContaboModel):
    current_images_count: int | None = None
    total_size_mb: float | None = None
    used_size_mb: float | None = None
    free_size_mb: float | None = None


class Snapshot(ContaboModel):
    snapshot_id: str | None = None
    instance_id: int | None = None
    tenant_id: str | None = None
    customer_id: str | None = None
    name: str | None = None
    description: str | None = None
    image_id: str | None = None
    image_name: str | None = None
    created_date: str | int | None = None
    auto_delete_date: str | int | None = None


class DataCenter(ContaboModel):
    slug: str | None = None
    name: str | None = None
    region_name: str | None = None
    region_slug: str | None = None
    s3_url: str | None = None
    capabilities: list[str] = Field(default_factory=list)
    tenant_id: str | None = None
    customer_id: str | None = None


class ObjectStorage(ContaboModel):
    object_storage_id: str | None = None
    tenant_id: str | None = None
    customer_id: str | None = None
    display_name: str | None = None
    data_center: str | None = None
    region: str | None = None
    s3_url: str | None = None
    s3_tenant_id: str | None = None
    status: str | None = None
    total_purchased_space_tb: float | None = Field(default=None, alias="totalPurchasedSpaceTB")
    auto_scaling: dict[str, Any] | None = None
    created_date: str | int | None = None
    cancel_date: str | None = None


class ObjectStorageStats(ContaboModel):
    used_space_tb: float | None = Field(default=None, alias="usedSpaceTB")
    used_space_percentage: float | None = None
    number_of_objects: int | None = None


class PrivateNetworkInstance(ContaboModel):
    instance_id: int | None = None
    display_name: str | None = None
    name: str | None = None
    product_id: str | None = None
    private_ip_config: dict[str, Any] | None = None
    ip_config: IpConfig | None = None
    status: str | None = None
    error_message: str | None = None


class PrivateNetwork(ContaboModel):
    private_network_id: int | None = None
    tenant_id: str | None = None
    customer_id: str | None = None
    name: str | None = None
    description: str | None = None
    cidr: str | None = None
    region: str | None = None
    region_name: str | None = None
    data_center: str | None = None
    available_ips: int | None = None
    created_date: str | int | None = None
    instances: list[PrivateNetworkInstance] = Field(default_factory=list)


class Permission(ContaboModel):
    api_name: str | None = None
    actions: list[str] = Field(default_factory=list)
    resources: list[dict[str, Any]] = Field(default_factory=list)


class Role(ContaboModel):
    role_id: int | None = None
    tenant_id: str | None = None
    customer_id: str | None = None
    name: str | None = None
    type: str | None = None
    admin: bool | None = None
    access_all_resources: bool | None = None
    permissions: list[Permission] = Field(default_factory=list)


class ApiPermission(ContaboModel):
    api_name: str | None = None
    actions: list[str] = Field(default_factory=list)


class Secret(ContaboModel):
    secret_id: int | None = None
    tenant_id: str | None = None
    customer_id: str | None = None
    name: str | None = None
    type: str | None = None
    value: str | None = None
    created_at: str | int | None = None
    updated_at: str | int | None = None


class Tag(ContaboModel):
    tag_id: int | None = None
    tenant_id: str | None = None
    customer_id: str | None = None
    name: str | None = None
    color: str | None = None
    description: str | None = None


class Assignment(ContaboModel):
    tag_id: int | None = None
    tag_name: str | None = None
    tenant_id: str | None = None
    customer_id: str | None = None
    resource_id: str | None = None
    resource_type: str | None = None
    resource_name: str | None = None


class User(ContaboModel):
    user_id: str | None = None
    tenant_id: str | None = None
    customer_id: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    email_verified: bool | None = None
    enabled: bool | None = None
    owner: bool | None = None
    totp: bool | None = None
    locale: str | None = None
    roles: list[Role] = Field(default_factory=list)


class UserPasswordState(ContaboModel):
    tenant_id: str | None = None
    customer_id: str | None = None
    is_password_set: bool | None = None


class ApiClient(ContaboModel):
    id: str | None = None
    client_id: str | None = None
    secret: str | None = None
    tenant_id: str | None = None
    customer_id: str | None = None


class ClientSecret(ContaboModel):
    secret: str | None = None


class Credential(ContaboModel):
    credential_id: int | None = None
    object_storage_id: str | None = None
    display_name: str | None = None
    region: str | None = None
    access_key: str | None = None
    secret_key: str | None = None
    tenant_id: str | None = None
    customer_id: str | None = None


class Vip(ContaboModel):
    vip_id: str | None = None
    tenant_id: str | None = None
    customer_id: str | None = None
    data_center: str | None = None
    region: str | None = None
    ip_version: str | None = None
    type: str | None = None
    resource_id: str | None = None
    resource_type: str | None = None
    resource_name: str | None = None
    resource_display_name: str | None = None
    v4: IpV4 | None = None


class Ticket(ContaboModel):
    tenant_id: str | None = None
    customer_id: str | None = None


class AuditEntry(ContaboModel):
    """Audit rows share one shape; the resource id field differs per resource."""

    id: int | None = None
    action: str | None = None
    timestamp: str | int | None = None
    tenant_id: str | None = None
    customer_id: str | None = None
    changed_by: str | None = None
    username: str | None = None
    request_id: str | None = None
    trace_id: str | None = None
    changes: dict[str, Any] | None = None


# Named envelopes


class ListInstancesResponse(PagedResponse[Instance]):
    pass


class FindInstanceResponse(DataResponse[Instance]):
    pass


class CreateInstanceResponse(DataResponse[CreatedInstance]):
    pass


class PatchInstanceResponse(DataResponse[Instance]):
    pass


class ReinstallInstanceResponse(DataResponse[CreatedInstance]):
    pass


class InstanceActionResponse(DataResponse[InstanceAction]):
    pass


class ListImageResponse(PagedResponse[Image]):
    pass


class CreateCustomImageResponse(DataResponse[Image]):
    pass


class CreateCustomImageFailResponse(ContaboModel):
    """Alternate body returned with 415 when an image URL cannot be used."""

    message: str | None = None
    status_code: int | None = None


class ListSecretResponse(PagedResponse[Secret]):
    pass


class FindSecretResponse(DataResponse[Secret]):
    pass


class CreateSecretResponse(DataResponse[Secret]):
    pass


class ListPrivateNetworkResponse(PagedResponse[PrivateNetwork]):
    pass


class FindPrivateNetworkResponse(DataResponse[PrivateNetwork]):
    pass


class CreatePrivateNetworkResponse(DataResponse[PrivateNetwork]):
    pass


class ListTagResponse(PagedResponse[Tag]):
    pass


class ListAuditResponse(PagedResponse[AuditEntry]):
    pass


# Request bodies


class CreateInstanceRequest(ContaboRequest):
    period: int
    image_id: str | None = None
    product_id: str | None = None
    region: Region | None = None
    ssh_keys: list[int] | None = None
    root_password: int | None = None
    user_data: str | None = None
    license: str | None = None
    default_user: DefaultUser | None = None
    display_name: str | None = None
    application_id: str | None = None
    add_ons: dict[str, Any] | None = None


class PatchInstanceRequest(ContaboRequest):
    display_name: str | None = None


class ReinstallInstanceRequest(ContaboRequest):
    image_id: str
    ssh_keys: list[int] | None = None
    root_password: int | None = None
    user_data: str | None = None
    default_user: DefaultUser | None = None
    application_id: str | None = None


class InstancesActionsRescueRequest(ContaboRequest):
    root_password: int | None = None
    ssh_keys: list[int] | None = None
    user_data: str | None = None


class InstancesResetPasswordActionsRequest(ContaboRequest):
    root_password: int | None = None
    ssh_keys: list[int] | None = None
    user_data: str | None = None


class CancelInstanceRequest(ContaboRequest):
    cancel_date: str | None = None


class UpgradeInstanceRequest(ContaboRequest):
    private_networking: dict[str, Any] | None = None
    backup: dict[str, Any] | None = None


class CreateSnapshotRequest(ContaboRequest):
    name: str
    description: str | None = None


class UpdateSnapshotRequest(ContaboRequest):
    name: str | None = None
    description: str | None = None


class RollbackSnapshotRequest(ContaboRequest):
    pass


class CreateCustomImageRequest(ContaboRequest):
    name: str
    url: str
    os_type: OsType
    version: str
    description: str | None = None


class UpdateCustomImageRequest(ContaboRequest):
    name: str | None = None
    description: str | None = None


class CreateTicketRequest(ContaboRequest):
    subject: str
    note: str
    sender: str


class CreateObjectStorageRequest(ContaboRequest):
    region: str
    total_purchased_space_tb: float = Field(alias="totalPurchasedSpaceTB")
    auto_scaling: dict[str, Any] | None = None
    display_name: str | None = None


class PatchObjectStorageRequest(ContaboRequest):
    display_name: str


class CancelObjectStorageRequest(ContaboRequest):
    cancel_date: str | None = None


class UpgradeObjectStorageRequest(ContaboRequest):
    auto_scaling: dict[str, Any] | None = None
    total_purchased_space_tb: float | None = Field(default=None, alias="totalPurchasedSpaceTB")


class CreatePrivateNetworkRequest(ContaboRequest):
    name: str
    region: str | None = None
    description: str | None = None


class PatchPrivateNetworkRequest(ContaboRequest):
    name: str | None = None
    description: str | None = None


class CreateRoleRequest(ContaboRequest):
    name: str
    admin: bool
    access_all_resources: bool
    permissions: list[dict[str, Any]] | None = None


class UpdateRoleRequest(ContaboRequest):
    name: str
    admin: bool
    access_all_resources: bool
    permissions: list[dict[str, Any]] | None = None


class CreateSecretRequest(ContaboRequest):
    name: str
    value: str
    type: SecretType


class UpdateSecretRequest(ContaboRequest):
    name: str | None = None
    value: str | None = None


class CreateTagRequest(ContaboRequest):
    name: str
    color: str
    description: str | None = None


class UpdateTagRequest(ContaboRequest):
    name: str | None = None
    color: str | None = None
    description: str | None = None


class CreateUserRequest(ContaboRequest):
    email: str
    enabled: bool
    totp: bool
    locale: str
    first_name: str | None = None
    last_name: str | None = None
    roles: list[int] | None = None


class UpdateUserRequest(ContaboRequest):
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    email_verified: bool | None = None
    enabled: bool | None = None
    totp: bool | None = None
    locale: str | None = None
    roles: list[int] | None = None
