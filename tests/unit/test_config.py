"""Tests for the configuration loader."""

import tempfile
from pathlib import Path

import pytest
from aws_cdk import App, RemovalPolicy

from s3_website_iac.config import Config, WebsiteConfig
from s3_website_iac.errors import ValidationError


def write_yaml(content: str) -> Path:
  with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
    f.write(content)
  return Path(f.name)


class TestWebsiteConfig:
  """Test WebsiteConfig dataclass."""

  def test_default_values(self) -> None:
    """Verify default values are set correctly."""
    config = WebsiteConfig(domain_name="example.com", user_name="ExampleUser")

    assert config.domain_name == "example.com"
    assert config.user_name == "ExampleUser"
    assert config.region == "us-east-1"
    assert config.account is None
    assert config.stack_name == "MyWebsiteStack"
    assert config.removal_policy == RemovalPolicy.DESTROY
    assert config.hosted_zone_id is None
    assert config.index_document == "index.html"
    assert config.error_document == "error.html"

  def test_validate_returns_self(self) -> None:
    config = WebsiteConfig(domain_name="example.com", user_name="ExampleUser")
    assert config.validate() is config

  def test_validate_rejects_bad_account(self) -> None:
    config = WebsiteConfig(
      domain_name="example.com", user_name="ExampleUser", account="nope"
    )
    with pytest.raises(ValidationError):
      config.validate()

  def test_environment(self) -> None:
    config = WebsiteConfig(
      domain_name="example.com",
      user_name="ExampleUser",
      account="123456789012",
    )
    assert config.environment.account == "123456789012"
    assert config.environment.region == "us-east-1"

  def test_validate_rejects_non_certificate_region(self) -> None:
    """CloudFront only takes certificates issued in us-east-1."""
    config = WebsiteConfig(
      domain_name="example.com", user_name="ExampleUser", region="eu-west-1"
    )
    with pytest.raises(ValidationError, match="us-east-1"):
      config.validate()

  def test_validate_rejects_snapshot_removal_policy(self) -> None:
    config = WebsiteConfig(
      domain_name="example.com",
      user_name="ExampleUser",
      removal_policy=RemovalPolicy.SNAPSHOT,
    )
    with pytest.raises(ValidationError, match="removal policy"):
      config.validate()

  def test_from_dict_missing_keys(self) -> None:
    with pytest.raises(ValidationError, match="user_name"):
      WebsiteConfig.from_dict({"domain_name": "example.com"})

  def test_from_dict_unknown_removal_policy(self) -> None:
    with pytest.raises(ValidationError, match="removal policy"):
      WebsiteConfig.from_dict(
        {
          "domain_name": "example.com",
          "user_name": "ExampleUser",
          "removal_policy": "shred",
        }
      )

  def test_from_dict_snapshot_removal_policy(self) -> None:
    """S3 buckets cannot be snapshotted."""
    with pytest.raises(ValidationError, match="removal policy"):
      WebsiteConfig.from_dict(
        {
          "domain_name": "example.com",
          "user_name": "ExampleUser",
          "removal_policy": "snapshot",
        }
      )

  def test_from_dict_numeric_account(self) -> None:
    """Unquoted YAML account ids arrive as integers and are rejected."""
    with pytest.raises(ValidationError, match="quote the account id"):
      WebsiteConfig.from_dict(
        {
          "domain_name": "example.com",
          "user_name": "ExampleUser",
          "account": 123456789012,
        }
      )

  def test_from_context(self) -> None:
    app = App(
      context={
        "domainName": "example.com",
        "userName": "ExampleUser",
        "account": "123456789012",
        "stackName": "SiteStack",
      }
    )

    config = WebsiteConfig.from_context(app)

    assert config.domain_name == "example.com"
    assert config.user_name == "ExampleUser"
    assert config.account == "123456789012"
    assert config.stack_name == "SiteStack"
    assert config.region == "us-east-1"

  def test_from_context_requires_domain(self) -> None:
    with pytest.raises(ValidationError, match="domain_name"):
      WebsiteConfig.from_context(App(context={"userName": "ExampleUser"}))


class TestConfigFromYaml:
  """Test Config.from_yaml loading."""

  def test_load_simple_config(self) -> None:
    path = write_yaml(
      """
websites:
  - domain_name: example.com
    user_name: ExampleUser
"""
    )

    config = Config.from_yaml(path)

    assert len(config.websites) == 1
    assert config.websites[0].domain_name == "example.com"
    assert config.websites[0].user_name == "ExampleUser"
    assert config.websites[0].stack_name == "Website-example-com"

  def test_load_with_defaults(self) -> None:
    path = write_yaml(
      """
defaults:
  error_document: 404.html
  account: "012345678901"
  removal_policy: retain

websites:
  - domain_name: example.com
    user_name: ExampleUser
"""
    )

    config = Config.from_yaml(path)

    assert config.websites[0].error_document == "404.html"
    assert config.websites[0].account == "012345678901"
    assert config.websites[0].removal_policy == RemovalPolicy.RETAIN

  def test_website_overrides_defaults(self) -> None:
    path = write_yaml(
      """
defaults:
  removal_policy: retain

websites:
  - domain_name: example.com
    user_name: ExampleUser
    removal_policy: destroy
    stack_name: MyWebsiteStack
"""
    )

    config = Config.from_yaml(path)

    assert config.websites[0].removal_policy == RemovalPolicy.DESTROY
    assert config.websites[0].stack_name == "MyWebsiteStack"

  def test_load_multiple_websites(self) -> None:
    path = write_yaml(
      """
websites:
  - domain_name: site1.com
    user_name: SiteOneUploader
  - domain_name: site2.com
    user_name: SiteTwoUploader
    hosted_zone_id: Z1234567890
"""
    )

    config = Config.from_yaml(path)

    assert [w.domain_name for w in config.websites] == ["site1.com", "site2.com"]
    assert config.websites[1].hosted_zone_id == "Z1234567890"

  def test_duplicate_stack_names(self) -> None:
    path = write_yaml(
      """
defaults:
  stack_name: SharedStack

websites:
  - domain_name: site1.com
    user_name: SiteOneUploader
  - domain_name: site2.com
    user_name: SiteTwoUploader
"""
    )

    with pytest.raises(ValidationError, match="SharedStack"):
      Config.from_yaml(path)

  def test_invalid_domain(self) -> None:
    path = write_yaml(
      """
websites:
  - domain_name: not a domain
    user_name: ExampleUser
"""
    )

    with pytest.raises(ValidationError):
      Config.from_yaml(path)

  def test_empty_file(self) -> None:
    assert Config.from_yaml(write_yaml("")).websites == []

  def test_empty_sections(self) -> None:
    """Keys present with no value behave like missing keys."""
    path = write_yaml(
      """
defaults:
websites:
"""
    )

    assert Config.from_yaml(path).websites == []

  def test_empty_defaults_with_websites(self) -> None:
    path = write_yaml(
      """
defaults:

websites:
  - domain_name: example.com
    user_name: ExampleUser
"""
    )

    assert Config.from_yaml(path).websites[0].domain_name == "example.com"

  def test_non_mapping_website_entry(self) -> None:
    path = write_yaml(
      """
websites:
  - example.com
"""
    )

    with pytest.raises(ValidationError, match="mappings"):
      Config.from_yaml(path)

  def test_unquoted_account_with_leading_zero(self) -> None:
    path = write_yaml(
      """
websites:
  - domain_name: example.com
    user_name: ExampleUser
    account: 012345670123
"""
    )

    with pytest.raises(ValidationError, match="quote the account id"):
      Config.from_yaml(path)

  def test_non_certificate_region(self) -> None:
    path = write_yaml(
      """
defaults:
  region: eu-west-1

websites:
  - domain_name: example.com
    user_name: ExampleUser
"""
    )

    with pytest.raises(ValidationError, match="us-east-1"):
      Config.from_yaml(path)
