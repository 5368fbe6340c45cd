"""S3 client wrapper for AWS operations."""

import logging
from pathlib import Path
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from messagegears_aws.models.schemas import AccessControlPolicy

logger = logging.getLogger(__name__)


class S3Client:
    """Handles S3 operations. Failures are logged and re-raised."""

    def __init__(self, client: Any):
        """
        Initialize S3 client wrapper.

        Args:
            client: boto3 S3 client instance.
        """
        self._client = client

    def list_objects(self, bucket: str, prefix: str = "", max_keys: int = 1000) -> list[dict]:
        """
        List objects whose key starts with a prefix.

        Args:
            bucket: S3 bucket name.
            prefix: Key prefix to match.
            max_keys: Maximum number of objects to return.

        Returns:
            List of object dictionaries (``Key``, ``Size``, ...).
        """
        try:
            response = self._client.list_objects_v2(
                Bucket=bucket,
                Prefix=prefix,
                MaxKeys=max_keys,
            )
        except (ClientError, BotoCoreError) as e:
            logger.error("Failed to list s3://%s/%s: %s", bucket, prefix, e)
            raise
        return response.get("Contents", [])

    def upload_file(self, local_path: str | Path, bucket: str, key: str) -> None:
        """
        Upload a local file to S3.

        Args:
            local_path: Local file path.
            bucket: S3 bucket name.
            key: S3 object key.
        """
        logger.info("Uploading %s to s3://%s/%s", local_path, bucket, key)
        try:
            self._client.upload_file(str(local_path), bucket, key)
        except Exception as e:
            logger.error("Failed to upload %s: %s", local_path, e)
            raise
        logger.info("Uploaded: s3://%s/%s", bucket, key)

    def get_object_acl(self, bucket: str, key: str) -> AccessControlPolicy:
        """Get the access-control list of an object."""
        try:
            response = self._client.get_object_acl(Bucket=bucket, Key=key)
        except (ClientError, BotoCoreError) as e:
            logger.error("Failed to get ACL of s3://%s/%s: %s", bucket, key, e)
            raise
        return AccessControlPolicy.from_boto(response)

    def put_object_acl(self, bucket: str, key: str, policy: AccessControlPolicy) -> None:
        """Replace the access-control list of an object."""
        try:
            self._client.put_object_acl(
                Bucket=bucket,
                Key=key,
                AccessControlPolicy=policy.to_boto(),
            )
        except (ClientError, BotoCoreError) as e:
            logger.error("Failed to set ACL of s3://%s/%s: %s", bucket, key, e)
            raise
        logger.info("Set ACL with %d grant(s) on s3://%s/%s", len(policy.grants), bucket, key)

    def delete_object(self, bucket: str, key: str) -> None:
        """Delete an object. S3 treats missing keys as a no-op."""
        try:
            self._client.delete_object(Bucket=bucket, Key=key)
        except (ClientError, BotoCoreError) as e:
            logger.error("Failed to delete s3://%s/%s: %s", bucket, key, e)
            raise
