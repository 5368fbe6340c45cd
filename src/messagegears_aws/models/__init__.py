"""Models package."""

from messagegears_aws.models.schemas import (
    OWNER_DISPLAY_NAME,
    PARTNER_DISPLAY_NAME,
    SEND_MESSAGE_ACTION,
    SEND_PERMISSION_LABEL,
    AccessControlPolicy,
    Grant,
    Grantee,
    Owner,
    QueuePermission,
    S3Permission,
)

__all__ = [
    "AccessControlPolicy",
    "Grant",
    "Grantee",
    "Owner",
    "QueuePermission",
    "S3Permission",
    "SEND_MESSAGE_ACTION",
    "SEND_PERMISSION_LABEL",
    "PARTNER_DISPLAY_NAME",
    "OWNER_DISPLAY_NAME",
]
