"""MessageGears AWS client."""

from messagegears_aws.client import MessageGearsAwsClient
from messagegears_aws.config import MessageGearsAwsProperties
from messagegears_aws.exceptions import (
    ConfigurationError,
    DuplicateObjectError,
    MessageGearsAwsError,
)

__all__ = [
    "MessageGearsAwsClient",
    "MessageGearsAwsProperties",
    "MessageGearsAwsError",
    "DuplicateObjectError",
    "ConfigurationError",
]
