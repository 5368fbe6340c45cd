"""Dependency injection container for the application."""

import boto3
from dependency_injector import providers
from dependency_injector.containers import DeclarativeContainer

from messagegears_aws.config import MessageGearsAwsProperties
from messagegears_aws.infrastructure.s3_client import S3Client
from messagegears_aws.infrastructure.sqs_client import SQSClient


def create_session(properties: MessageGearsAwsProperties) -> boto3.Session:
    """Create boto3 session from the account key and secret key."""
    return boto3.Session(
        aws_access_key_id=properties.my_aws_account_key or None,
        aws_secret_access_key=properties.my_aws_secret_key or None,
        region_name=properties.aws_region,
    )


def _create_client(
    properties: MessageGearsAwsProperties,
    s3_client: S3Client,
    sqs_client: SQSClient,
):
    """Factory for MessageGearsAwsClient to avoid circular import."""
    from messagegears_aws.client import MessageGearsAwsClient

    return MessageGearsAwsClient(properties, s3_client=s3_client, sqs_client=sqs_client)


class DependenciesContainer(DeclarativeContainer):
    """DI container for the application."""

    properties = providers.Singleton(MessageGearsAwsProperties.from_env)

    # Session with the configured credentials
    session = providers.Singleton(create_session, properties=properties)

    # S3 dependency chain
    s3_boto_client = providers.Singleton(
        lambda session: session.client("s3"),
        session=session,
    )

    s3_client = providers.Singleton(
        S3Client,
        client=s3_boto_client,
    )

    # SQS dependency chain
    sqs_boto_client = providers.Singleton(
        lambda session: session.client("sqs"),
        session=session,
    )

    sqs_client = providers.Singleton(
        SQSClient,
        client=sqs_boto_client,
    )

    client = providers.Singleton(
        _create_client,
        properties=properties,
        s3_client=s3_client,
        sqs_client=sqs_client,
    )
