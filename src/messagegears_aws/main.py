"""Command line entry point for the MessageGears AWS client."""

import argparse
import logging
import sys

from botocore.exceptions import BotoCoreError, ClientError

from messagegears_aws.exceptions import MessageGearsAwsError
from messagegears_aws.infrastructure.dependency_injection import DependenciesContainer

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="messagegears-aws",
        description="Share S3 files and SQS queues with MessageGears",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    put = subparsers.add_parser("put", help="Copy a file to S3 and grant MessageGears read access")
    put.add_argument("file", help="Local file to copy")
    put.add_argument("bucket", help="Destination bucket")
    put.add_argument("key", help="Destination key")

    delete = subparsers.add_parser("delete", help="Delete a file from S3")
    delete.add_argument("bucket", help="Bucket where the file resides")
    delete.add_argument("key", help="Key of the file")

    create_queue = subparsers.add_parser(
        "create-queue", help="Create a queue MessageGears can send messages to"
    )
    create_queue.add_argument("name", help="Name of the queue")

    subparsers.add_parser("show-config", help="Print the configuration (secret hidden)")

    return parser


def run(args: argparse.Namespace, container: DependenciesContainer) -> None:
    """Run one command against the client from the container."""
    properties = container.properties()

    if args.command == "show-config":
        print(properties)
        return

    properties.validate()
    client = container.client()

    if args.command == "put":
        client.put_s3_file(args.file, args.bucket, args.key)
    elif args.command == "delete":
        client.delete_s3_file(args.bucket, args.key)
    elif args.command == "create-queue":
        print(client.create_queue(args.name))


def main(argv: list[str] | None = None, container: DependenciesContainer | None = None):
    """Entry point with CLI argument parsing."""
    _configure_logging()
    args = build_parser().parse_args(argv)
    if container is None:
        container = DependenciesContainer()

    try:
        run(args, container)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(0)
    except (MessageGearsAwsError, ClientError, BotoCoreError) as e:
        logger.error("%s failed: %s", args.command, e)
        sys.exit(1)


if __name__ == "__main__":
    main()
