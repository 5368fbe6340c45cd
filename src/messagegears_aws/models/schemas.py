"""Pydantic models for S3 access-control lists and SQS permissions."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

SEND_MESSAGE_ACTION = "SendMessage"
SEND_PERMISSION_LABEL = "MessageGears Send Permission"

PARTNER_DISPLAY_NAME = "MessageGears"
OWNER_DISPLAY_NAME = "MyAWSId"


class S3Permission(str, Enum):
    """Permissions an S3 grant can carry."""

    READ = "READ"
    WRITE = "WRITE"
    READ_ACP = "READ_ACP"
    WRITE_ACP = "WRITE_ACP"
    FULL_CONTROL = "FULL_CONTROL"


class _AwsModel(BaseModel):
    """Base model that reads and writes the PascalCase keys boto3 uses."""

    model_config = ConfigDict(populate_by_name=True)

    def to_boto(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class Owner(_AwsModel):
    """Owner of an S3 object."""

    id: str = Field(alias="ID")
    display_name: str | None = Field(default=None, alias="DisplayName")


class Grantee(_AwsModel):
    """Principal named in an access-control entry."""

    type: str = Field(default="CanonicalUser", alias="Type")
    id: str | None = Field(default=None, alias="ID")
    display_name: str | None = Field(default=None, alias="DisplayName")
    uri: str | None = Field(default=None, alias="URI")

    @classmethod
    def canonical_user(cls, canonical_id: str, display_name: str | None = None) -> "Grantee":
        return cls(type="CanonicalUser", id=canonical_id, display_name=display_name)


class Grant(_AwsModel):
    """A (grantee, permission) pair."""

    grantee: Grantee = Field(alias="Grantee")
    permission: S3Permission = Field(alias="Permission")


class AccessControlPolicy(_AwsModel):
    """Owner plus the ordered grants of an S3 object."""

    owner: Owner = Field(alias="Owner")
    grants: list[Grant] = Field(default_factory=list, alias="Grants")

    @classmethod
    def from_boto(cls, response: dict[str, Any]) -> "AccessControlPolicy":
        """Build a policy from a ``get_object_acl`` response."""
        return cls.model_validate(
            {"Owner": response["Owner"], "Grants": response.get("Grants", [])}
        )

    def add_grant(self, grantee: Grantee, permission: S3Permission) -> None:
        self.grants.append(Grant(grantee=grantee, permission=permission))


class QueuePermission(BaseModel):
    """Permission for an external account to call one action on a queue."""

    label: str
    account_id: str
    action: str = SEND_MESSAGE_ACTION

    @property
    def wire_label(self) -> str:
        """Label as SQS accepts it (alphanumerics, hyphens and underscores)."""
        return "".join(
            ch if ch.isalnum() or ch in "-_" else "-" for ch in self.label
        )[:80]
