"""Exceptions raised by the MessageGears AWS client.

Errors coming from S3 or SQS are not wrapped: botocore's ``ClientError`` and
``BotoCoreError`` reach the caller unchanged.
"""


class MessageGearsAwsError(Exception):
    """Base exception for errors raised locally by this package."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class DuplicateObjectError(MessageGearsAwsError):
    """Raised when an upload targets a key that already exists in S3."""

    def __init__(
        self,
        message: str,
        bucket: str | None = None,
        key: str | None = None,
        file_name: str | None = None,
    ):
        self.bucket = bucket
        self.key = key
        self.file_name = file_name
        super().__init__(message)


class ConfigurationError(MessageGearsAwsError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str, key: str | None = None):
        self.key = key
        super().__init__(message)
