#!/usr/bin/env python3
"""CDK application entry point for static website infrastructure."""

import sys
from pathlib import Path

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

import aws_cdk as cdk
import boto3

from s3_website_iac.config import Config, WebsiteConfig
from s3_website_iac.stacks.site_stack import S3WebsiteStack


def get_account_id() -> str:
  """Get AWS account ID from current credentials."""
  sts = boto3.client("sts")
  return str(sts.get_caller_identity()["Account"])


def load_websites(app: cdk.App) -> list[WebsiteConfig]:
  """Load websites from the YAML config file, or from context when absent."""
  config_path = Path(app.node.try_get_context("config") or "website.yaml")
  if config_path.exists():
    return Config.from_yaml(config_path).websites
  return [WebsiteConfig.from_context(app)]


def main() -> None:
  """Create CDK app with a stack for each configured website."""
  app = cdk.App()

  websites = load_websites(app)

  # Hosted zone lookups need a concrete account
  account_id = None
  for website in websites:
    if website.account is None:
      account_id = account_id or get_account_id()
      website.account = account_id

    S3WebsiteStack(
      app,
      website.stack_name,
      website_config=website,
      env=website.environment,
      description=f"Static website infrastructure for {website.domain_name}",
    )

  app.synth()


if __name__ == "__main__":
  main()
