"""MessageGears AWS client: shares S3 files and SQS queues with MessageGears."""

import logging
from pathlib import Path

from messagegears_aws.config import MessageGearsAwsProperties
from messagegears_aws.exceptions import DuplicateObjectError
from messagegears_aws.infrastructure.dependency_injection import create_session
from messagegears_aws.infrastructure.s3_client import S3Client
from messagegears_aws.infrastructure.sqs_client import SQSClient
from messagegears_aws.models.schemas import (
    OWNER_DISPLAY_NAME,
    PARTNER_DISPLAY_NAME,
    SEND_MESSAGE_ACTION,
    SEND_PERMISSION_LABEL,
    AccessControlPolicy,
    Grantee,
    QueuePermission,
    S3Permission,
)

logger = logging.getLogger(__name__)


class MessageGearsAwsClient:
    """Main entry point for working with MessageGears through your AWS account."""

    def __init__(
        self,
        properties: MessageGearsAwsProperties,
        s3_client: S3Client | None = None,
        sqs_client: SQSClient | None = None,
    ):
        """
        Initialize the client.

        Args:
            properties: Credentials needed to access S3 and SQS, and the
                MessageGears account ids.
            s3_client: S3 wrapper. Built from the properties when omitted.
            sqs_client: SQS wrapper. Built from the properties when omitted.
        """
        self._properties = properties
        if s3_client is None or sqs_client is None:
            session = create_session(properties)
            if s3_client is None:
                s3_client = S3Client(session.client("s3"))
            if sqs_client is None:
                sqs_client = SQSClient(session.client("sqs"))
        self._s3 = s3_client
        self._sqs = sqs_client
        logger.info("MessageGears AWS client initialized")

    @property
    def properties(self) -> MessageGearsAwsProperties:
        return self._properties

    def put_s3_file(self, file_name: str | Path, bucket_name: str, key: str) -> None:
        """
        Copy a file to S3 and grant READ-ONLY access to MessageGears.

        Args:
            file_name: Path of the local file to copy.
            bucket_name: Bucket the file is copied to.
            key: Key of the object to create.

        Raises:
            DuplicateObjectError: An object already exists under ``key``.
        """
        if self._s3.list_objects(bucket_name, prefix=key):
            message = f"File {file_name} already exists."
            logger.warning("put_s3_file failed: %s", message)
            raise DuplicateObjectError(
                message, bucket=bucket_name, key=key, file_name=str(file_name)
            )

        self._s3.upload_file(file_name, bucket_name, key)

        # The ACL is the only place S3 reports the object's owner
        owner = self._s3.get_object_acl(bucket_name, key).owner

        acl = AccessControlPolicy(owner=owner)
        acl.add_grant(
            Grantee.canonical_user(
                self._properties.messagegears_aws_canonical_id, PARTNER_DISPLAY_NAME
            ),
            S3Permission.READ,
        )
        acl.add_grant(
            Grantee.canonical_user(owner.id, OWNER_DISPLAY_NAME),
            S3Permission.FULL_CONTROL,
        )
        self._s3.put_object_acl(bucket_name, key, acl)

        logger.info("put_s3_file successful: %s", file_name)

    def delete_s3_file(self, bucket_name: str, key: str) -> None:
        """
        Delete a file from S3.

        Args:
            bucket_name: Bucket where the file resides.
            key: Key of the file to delete.
        """
        self._s3.delete_object(bucket_name, key)
        logger.info("delete_s3_file successful: %s/%s", bucket_name, key)

    def create_queue(self, queue_name: str) -> str:
        """
        Create a queue in SQS and grant SendMessage-only access to MessageGears.

        The queue is not removed if granting the permission fails.

        Args:
            queue_name: Name of the queue to create.

        Returns:
            URL of the new queue.
        """
        queue_url = self._sqs.create_queue(
            queue_name,
            visibility_timeout=self._properties.sqs_visibility_timeout_secs,
        )
        self._add_queue_permission(queue_url)
        logger.info("create_queue successful: %s", queue_name)
        return queue_url

    def _add_queue_permission(self, queue_url: str) -> None:
        permission = QueuePermission(
            label=SEND_PERMISSION_LABEL,
            account_id=self._properties.messagegears_aws_account_id,
            action=SEND_MESSAGE_ACTION,
        )
        self._sqs.add_permission(queue_url, permission)
