"""Infrastructure package."""

from messagegears_aws.infrastructure.dependency_injection import (
    DependenciesContainer,
    create_session,
)
from messagegears_aws.infrastructure.s3_client import S3Client
from messagegears_aws.infrastructure.sqs_client import SQSClient

__all__ = [
    "DependenciesContainer",
    "create_session",
    "S3Client",
    "SQSClient",
]
