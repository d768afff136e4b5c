"""Configuration loader for website declarations."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import aws_cdk as cdk
import yaml
from aws_cdk import RemovalPolicy

from .errors import ValidationError
from .validation import (
  validate_account_id,
  validate_domain_name,
  validate_region,
  validate_user_name,
)

# S3 buckets support only Delete and Retain deletion policies
REMOVAL_POLICIES = {
  "retain": RemovalPolicy.RETAIN,
  "destroy": RemovalPolicy.DESTROY,
}

# CloudFront only accepts ACM certificates issued in us-east-1
CERTIFICATE_REGION = "us-east-1"


@dataclass
class WebsiteConfig:
  """Configuration for a single static website."""

  domain_name: str
  user_name: str
  region: str = CERTIFICATE_REGION
  account: str | None = None
  stack_name: str = "MyWebsiteStack"
  # Full teardown so dev/test environments can be re-provisioned from scratch
  removal_policy: RemovalPolicy = RemovalPolicy.DESTROY
  hosted_zone_id: str | None = None
  index_document: str = "index.html"
  error_document: str = "error.html"

  def validate(self) -> "WebsiteConfig":
    """Validate every field, raising ValidationError on the first bad one."""
    validate_domain_name(self.domain_name)
    validate_user_name(self.user_name)
    validate_region(self.region)
    if self.region != CERTIFICATE_REGION:
      raise ValidationError(
        f"Region must be {CERTIFICATE_REGION}, CloudFront cannot use a certificate "
        f"issued in {self.region}"
      )
    if self.account is not None:
      validate_account_id(self.account)
    if self.removal_policy not in REMOVAL_POLICIES.values():
      raise ValidationError(
        f"Unsupported removal policy for an S3 bucket: {self.removal_policy}"
      )
    if not self.stack_name:
      raise ValidationError("Stack name must be a non-empty string")
    if not self.index_document or not self.error_document:
      raise ValidationError("Index and error documents must be non-empty")
    return self

  @property
  def environment(self) -> cdk.Environment:
    return cdk.Environment(account=self.account, region=self.region)

  @classmethod
  def from_dict(cls, data: dict[str, Any]) -> "WebsiteConfig":
    """Build a config from a mapping using the YAML key names."""
    missing = [key for key in ("domain_name", "user_name") if not data.get(key)]
    if missing:
      raise ValidationError(f"Missing required website keys: {', '.join(missing)}")

    removal_policy = data.get("removal_policy", "destroy")
    if isinstance(removal_policy, str):
      try:
        removal_policy = REMOVAL_POLICIES[removal_policy.lower()]
      except KeyError:
        raise ValidationError(
          f"Unknown removal policy {removal_policy!r}, "
          f"expected one of {', '.join(REMOVAL_POLICIES)}"
        ) from None

    account = data.get("account")
    if account is not None and not isinstance(account, str):
      # YAML reads unquoted ids as integers and drops leading zeros
      raise ValidationError(
        f"Account id must be a string, quote the account id in the config: {account!r}"
      )
    return cls(
      domain_name=data["domain_name"],
      user_name=data["user_name"],
      region=data.get("region", CERTIFICATE_REGION),
      account=account,
      stack_name=data.get("stack_name", "MyWebsiteStack"),
      removal_policy=removal_policy,
      hosted_zone_id=data.get("hosted_zone_id"),
      index_document=data.get("index_document", "index.html"),
      error_document=data.get("error_document", "error.html"),
    ).validate()

  @classmethod
  def from_context(cls, app: cdk.App) -> "WebsiteConfig":
    """Build a config from CDK context (``cdk synth -c domainName=...``)."""
    context_keys = {
      "domain_name": "domainName",
      "user_name": "userName",
      "region": "region",
      "account": "account",
      "stack_name": "stackName",
      "removal_policy": "removalPolicy",
      "hosted_zone_id": "hostedZoneId",
    }
    data = {}
    for key, context_key in context_keys.items():
      value = app.node.try_get_context(context_key)
      if value is not None:
        data[key] = value
    return cls.from_dict(data)


@dataclass
class Config:
  """Configuration for every website managed by this app."""

  websites: list[WebsiteConfig] = field(default_factory=list)

  @classmethod
  def from_yaml(cls, path: Path | str = "website.yaml") -> "Config":
    """Load configuration from YAML file."""
    with open(path) as f:
      data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
      raise ValidationError(f"Config file {path} must contain a mapping")

    defaults = data.get("defaults") or {}
    if not isinstance(defaults, dict):
      raise ValidationError("'defaults' must be a mapping")
    websites: list[WebsiteConfig] = []

    for website_data in data.get("websites") or []:
      if not isinstance(website_data, dict):
        raise ValidationError(f"Website entries must be mappings, got {website_data!r}")
      # Website-specific values win over defaults
      merged = {**defaults, **website_data}
      if "stack_name" not in merged and merged.get("domain_name"):
        merged["stack_name"] = f"Website-{str(merged['domain_name']).replace('.', '-')}"
      websites.append(WebsiteConfig.from_dict(merged))

    stack_names = [website.stack_name for website in websites]
    duplicates = sorted({name for name in stack_names if stack_names.count(name) > 1})
    if duplicates:
      raise ValidationError(f"Duplicate stack names: {', '.join(duplicates)}")

    return cls(websites=websites)
