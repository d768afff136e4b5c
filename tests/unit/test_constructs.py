"""Tests for the individual website constructs."""

import pytest
from aws_cdk import Stack
from aws_cdk import aws_s3 as s3
from aws_cdk.assertions import Template

from s3_website_iac.cdk_constructs import UploadUser, WebsiteDns
from s3_website_iac.errors import DeclarationReferenceError


class TestUploadUser:
  """Test UploadUser reference handling."""

  def test_access_key_before_creation(self, stack: Stack) -> None:
    """Reading the key before it is issued is a wiring bug."""
    user = UploadUser(stack, "Uploader", user_name="ExampleUser")

    with pytest.raises(DeclarationReferenceError):
      user.access_key  # noqa: B018

  def test_single_access_key(self, stack: Stack) -> None:
    user = UploadUser(stack, "Uploader", user_name="ExampleUser")
    key = user.create_access_key()

    assert user.access_key is key
    with pytest.raises(DeclarationReferenceError):
      user.create_access_key()

    Template.from_stack(stack).resource_count_is("AWS::IAM::AccessKey", 1)

  def test_statements_are_tracked(self, stack: Stack) -> None:
    bucket = s3.Bucket(stack, "Bucket")
    user = UploadUser(stack, "Uploader", user_name="ExampleUser")

    statement = user.allow_bucket_upload(bucket)

    assert user.statements == [statement]

  def test_no_policy_without_grants(self, stack: Stack) -> None:
    UploadUser(stack, "Uploader", user_name="ExampleUser")

    Template.from_stack(stack).resource_count_is("AWS::IAM::Policy", 0)


class TestWebsiteDns:
  """Test WebsiteDns reference handling."""

  def test_alias_record_before_creation(self, stack: Stack) -> None:
    dns = WebsiteDns(stack, "Dns", domain_name="example.com")

    with pytest.raises(DeclarationReferenceError):
      dns.alias_record  # noqa: B018

  def test_imported_zone_id(self, stack: Stack) -> None:
    dns = WebsiteDns(
      stack,
      "Dns",
      domain_name="example.com",
      existing_hosted_zone_id="Z1234567890",
    )

    assert stack.resolve(dns.hosted_zone.hosted_zone_id) == "Z1234567890"

  def test_looked_up_zone_falls_back_to_dummy(self, stack: Stack) -> None:
    """Without cached context the lookup resolves to CDK's placeholder zone."""
    dns = WebsiteDns(stack, "Dns", domain_name="example.com")

    assert stack.resolve(dns.hosted_zone.hosted_zone_id) == "DUMMY"
