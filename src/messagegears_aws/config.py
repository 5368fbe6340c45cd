"""Properties and credentials for the MessageGears AWS client."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from messagegears_aws.exceptions import ConfigurationError

REDACTED = "<hidden>"

DEFAULT_VISIBILITY_TIMEOUT_SECS = 3600
DEFAULT_AWS_REGION = "us-east-1"


@dataclass(repr=False)
class MessageGearsAwsProperties:
    """
    Properties and credentials needed to work with your AWS account.

    Attributes:
        messagegears_aws_canonical_id: Canonical id of the MessageGears AWS
            account. Used to grant S3 read access to MessageGears.
        messagegears_aws_account_id: Account id of the MessageGears AWS
            account. Used to let MessageGears send messages to a queue.
        my_aws_account_key: Your AWS access key. Never sent to MessageGears.
        my_aws_secret_key: Your AWS secret key. Never sent to MessageGears
            and never logged.
        sqs_visibility_timeout_secs: Seconds a poller has to process a batch
            of received messages before they show up on the queue again.
            Keep it large to allow for slowdowns without receiving
            duplicate messages.
        aws_region: Region used for the S3 and SQS clients.
    """

    messagegears_aws_canonical_id: str = ""
    messagegears_aws_account_id: str = ""
    my_aws_account_key: str = ""
    my_aws_secret_key: str = ""
    sqs_visibility_timeout_secs: int = DEFAULT_VISIBILITY_TIMEOUT_SECS
    aws_region: str = DEFAULT_AWS_REGION

    @classmethod
    def from_env(cls) -> "MessageGearsAwsProperties":
        """Build properties from environment variables (and a ``.env`` file)."""
        load_dotenv()

        raw_timeout = os.getenv(
            "SQS_VISIBILITY_TIMEOUT_SECS", str(DEFAULT_VISIBILITY_TIMEOUT_SECS)
        )
        try:
            visibility_timeout = int(raw_timeout)
        except ValueError:
            raise ConfigurationError(
                f"SQS_VISIBILITY_TIMEOUT_SECS must be an integer, got {raw_timeout!r}",
                key="SQS_VISIBILITY_TIMEOUT_SECS",
            ) from None

        return cls(
            messagegears_aws_canonical_id=os.getenv("MESSAGEGEARS_AWS_CANONICAL_ID", ""),
            messagegears_aws_account_id=os.getenv("MESSAGEGEARS_AWS_ACCOUNT_ID", ""),
            my_aws_account_key=os.getenv("MY_AWS_ACCOUNT_KEY", ""),
            my_aws_secret_key=os.getenv("MY_AWS_SECRET_KEY", ""),
            sqs_visibility_timeout_secs=visibility_timeout,
            aws_region=os.getenv("AWS_REGION", DEFAULT_AWS_REGION),
        )

    def validate(self) -> None:
        """Validate required configuration."""
        required = {
            "MESSAGEGEARS_AWS_CANONICAL_ID": self.messagegears_aws_canonical_id,
            "MESSAGEGEARS_AWS_ACCOUNT_ID": self.messagegears_aws_account_id,
            "MY_AWS_ACCOUNT_KEY": self.my_aws_account_key,
            "MY_AWS_SECRET_KEY": self.my_aws_secret_key,
        }
        for env_name, value in required.items():
            if not value:
                raise ConfigurationError(
                    f"{env_name} environment variable is required", key=env_name
                )

    def __str__(self) -> str:
        """Dump all properties, with the secret key hidden."""
        dump = " MessageGearsAWSCanonicalId=" + str(self.messagegears_aws_canonical_id)
        dump += " MessageGearsAWSAccountId=" + str(self.messagegears_aws_account_id)
        dump += " MyAWSAccountKey=" + str(self.my_aws_account_key)
        dump += " MyAWSSecretKey=" + REDACTED
        dump += " SQSVisibilityTimeoutSecs=" + str(self.sqs_visibility_timeout_secs)
        dump += " AWSRegion=" + str(self.aws_region)
        return dump

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self!s})"
