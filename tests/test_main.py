"""Tests for the command line entry point."""

from unittest.mock import MagicMock

import pytest
from dependency_injector import providers

from messagegears_aws.client import MessageGearsAwsClient
from messagegears_aws.config import MessageGearsAwsProperties
from messagegears_aws.exceptions import DuplicateObjectError
from messagegears_aws.infrastructure.dependency_injection import DependenciesContainer
from messagegears_aws.main import main


@pytest.fixture
def mock_client():
    return MagicMock(spec=MessageGearsAwsClient)


def _container(properties, mock_client) -> DependenciesContainer:
    container = DependenciesContainer()
    container.properties.override(providers.Object(properties))
    container.client.override(providers.Object(mock_client))
    return container


@pytest.fixture
def properties():
    return MessageGearsAwsProperties(
        messagegears_aws_canonical_id="C1",
        messagegears_aws_account_id="A1",
        my_aws_account_key="key",
        my_aws_secret_key="super-secret-value",
    )


class TestMain:
    """Tests for main."""

    def test_create_queue_prints_url(self, properties, mock_client, capsys):
        """Test create-queue prints the new queue URL."""
        mock_client.create_queue.return_value = "https://sqs.test/123/orders"

        main(["create-queue", "orders"], container=_container(properties, mock_client))

        mock_client.create_queue.assert_called_once_with("orders")
        assert "https://sqs.test/123/orders" in capsys.readouterr().out

    def test_put(self, properties, mock_client):
        """Test put forwards its arguments."""
        main(
            ["put", "report.csv", "test-bucket", "reports/report.csv"],
            container=_container(properties, mock_client),
        )

        mock_client.put_s3_file.assert_called_once_with(
            "report.csv", "test-bucket", "reports/report.csv"
        )

    def test_delete(self, properties, mock_client):
        """Test delete forwards its arguments."""
        main(
            ["delete", "test-bucket", "reports/report.csv"],
            container=_container(properties, mock_client),
        )

        mock_client.delete_s3_file.assert_called_once_with(
            "test-bucket", "reports/report.csv"
        )

    def test_show_config_hides_secret(self, properties, mock_client, capsys):
        """Test show-config prints the redacted dump."""
        main(["show-config"], container=_container(properties, mock_client))

        out = capsys.readouterr().out
        assert "MyAWSSecretKey=<hidden>" in out
        assert "super-secret-value" not in out

    def test_error_exits_with_status_1(self, properties, mock_client):
        """Test a duplicate upload exits with status 1."""
        mock_client.put_s3_file.side_effect = DuplicateObjectError(
            "File report.csv already exists."
        )

        with pytest.raises(SystemExit) as exc_info:
            main(
                ["put", "report.csv", "test-bucket", "reports/report.csv"],
                container=_container(properties, mock_client),
            )

        assert exc_info.value.code == 1

    def test_missing_configuration_exits_with_status_1(self, mock_client):
        """Test incomplete configuration stops before any AWS call."""
        properties = MessageGearsAwsProperties()

        with pytest.raises(SystemExit) as exc_info:
            main(["create-queue", "orders"], container=_container(properties, mock_client))

        assert exc_info.value.code == 1
        mock_client.create_queue.assert_not_called()
