"""SQS client wrapper for AWS operations."""

import logging
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from messagegears_aws.models.schemas import QueuePermission

logger = logging.getLogger(__name__)


class SQSClient:
    """Handles SQS operations. Failures are logged and re-raised."""

    def __init__(self, client: Any):
        """
        Initialize SQS client wrapper.

        Args:
            client: boto3 SQS client instance.
        """
        self._client = client

    def create_queue(self, queue_name: str, visibility_timeout: int) -> str:
        """
        Create a queue.

        Args:
            queue_name: Name of the queue.
            visibility_timeout: Default visibility timeout in seconds.

        Returns:
            URL of the queue.
        """
        try:
            response = self._client.create_queue(
                QueueName=queue_name,
                Attributes={"VisibilityTimeout": str(visibility_timeout)},
            )
        except (ClientError, BotoCoreError) as e:
            logger.error("Failed to create queue %s: %s", queue_name, e)
            raise
        queue_url = response["QueueUrl"]
        logger.info("Created queue %s: %s", queue_name, queue_url)
        return queue_url

    def add_permission(self, queue_url: str, permission: QueuePermission) -> None:
        """
        Allow an external account to call an action on a queue.

        Args:
            queue_url: SQS queue URL.
            permission: Account, action and label of the permission.
        """
        try:
            self._client.add_permission(
                QueueUrl=queue_url,
                Label=permission.wire_label,
                AWSAccountIds=[permission.account_id],
                Actions=[permission.action],
            )
        except (ClientError, BotoCoreError) as e:
            logger.error("Failed to add permission to %s: %s", queue_url, e)
            raise
        logger.info(
            "Granted %s on %s to account %s",
            permission.action,
            queue_url,
            permission.account_id,
        )
