"""Tests for Pydantic models."""

from messagegears_aws.models.schemas import (
    AccessControlPolicy,
    Grantee,
    Owner,
    QueuePermission,
    S3Permission,
)


class TestAccessControlPolicy:
    """Tests for AccessControlPolicy model."""

    def test_from_boto_response(self):
        """Test parsing a get_object_acl response."""
        response = {
            "Owner": {"ID": "owner-id", "DisplayName": "me"},
            "Grants": [
                {
                    "Grantee": {"Type": "CanonicalUser", "ID": "owner-id"},
                    "Permission": "FULL_CONTROL",
                },
                {
                    "Grantee": {
                        "Type": "Group",
                        "URI": "http://acs.amazonaws.com/groups/global/AllUsers",
                    },
                    "Permission": "READ",
                },
            ],
            "ResponseMetadata": {"HTTPStatusCode": 200},
        }

        policy = AccessControlPolicy.from_boto(response)

        assert policy.owner.id == "owner-id"
        assert policy.owner.display_name == "me"
        assert len(policy.grants) == 2
        assert policy.grants[0].permission is S3Permission.FULL_CONTROL
        assert policy.grants[1].grantee.type == "Group"
        assert policy.grants[1].grantee.id is None

    def test_from_boto_without_grants(self):
        """Test an owner-only response gives an empty grant list."""
        policy = AccessControlPolicy.from_boto({"Owner": {"ID": "owner-id"}})

        assert policy.owner.display_name is None
        assert policy.grants == []

    def test_to_boto(self):
        """Test building the put_object_acl payload."""
        policy = AccessControlPolicy(owner=Owner(id="owner-id"))
        policy.add_grant(Grantee.canonical_user("C1", "MessageGears"), S3Permission.READ)

        assert policy.to_boto() == {
            "Owner": {"ID": "owner-id"},
            "Grants": [
                {
                    "Grantee": {
                        "Type": "CanonicalUser",
                        "ID": "C1",
                        "DisplayName": "MessageGears",
                    },
                    "Permission": "READ",
                }
            ],
        }


class TestQueuePermission:
    """Tests for QueuePermission model."""

    def test_defaults_to_send_message(self):
        """Test the default action."""
        permission = QueuePermission(label="label", account_id="A1")

        assert permission.action == "SendMessage"

    def test_wire_label_replaces_invalid_characters(self):
        """Test the label sent to SQS only has allowed characters."""
        permission = QueuePermission(
            label="MessageGears Send Permission", account_id="A1"
        )

        assert permission.wire_label == "MessageGears-Send-Permission"
