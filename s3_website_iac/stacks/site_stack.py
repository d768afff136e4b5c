"""CDK stack for a single static website."""

from typing import Any

import aws_cdk as cdk
from constructs import Construct

from s3_website_iac.cdk_constructs import StaticWebsiteConstruct
from s3_website_iac.config import WebsiteConfig


class S3WebsiteStack(cdk.Stack):
  """Stack for a single static website.

  Needs an explicit ``env`` with account and region: the hosted zone is
  resolved with a context lookup.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    website_config: WebsiteConfig,
    **kwargs: Any,
  ) -> None:
    website_config.validate()
    super().__init__(scope, id, **kwargs)

    self.website = StaticWebsiteConstruct(
      self,
      "Website",
      domain_name=website_config.domain_name,
      user_name=website_config.user_name,
      hosted_zone_id=website_config.hosted_zone_id,
      index_document=website_config.index_document,
      error_document=website_config.error_document,
      removal_policy=website_config.removal_policy,
    )

    cdk.Tags.of(self).add("Project", "s3-website")
    cdk.Tags.of(self).add("Domain", website_config.domain_name)
    cdk.Tags.of(self).add("ManagedBy", "cdk")
