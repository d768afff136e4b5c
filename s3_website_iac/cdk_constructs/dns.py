"""Route 53 DNS constructs."""

from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_route53 as route53
from aws_cdk import aws_route53_targets as targets
from constructs import Construct

from ..errors import DeclarationReferenceError


class WebsiteDns(Construct):
  """Existing Route 53 hosted zone and the site's alias record.

  The zone is never created here. It is looked up by domain name at synth
  time (the CDK CLI fails the synth if no zone matches), or imported directly
  when its id is already known.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    domain_name: str,
    existing_hosted_zone_id: str | None = None,
  ) -> None:
    super().__init__(scope, id)

    self.domain_name = domain_name
    self._alias_record: route53.ARecord | None = None

    if existing_hosted_zone_id:
      self.hosted_zone = route53.HostedZone.from_hosted_zone_attributes(
        self,
        "HostedZone",
        hosted_zone_id=existing_hosted_zone_id,
        zone_name=domain_name,
      )
    else:
      self.hosted_zone = route53.HostedZone.from_lookup(
        self,
        "HostedZone",
        domain_name=domain_name,
      )

  @property
  def alias_record(self) -> route53.ARecord:
    if self._alias_record is None:
      raise DeclarationReferenceError(
        f"Alias record for {self.domain_name} has not been declared yet"
      )
    return self._alias_record

  def create_alias_record(
    self, distribution: cloudfront.IDistribution
  ) -> route53.ARecord:
    """Create the apex A record aliased to the CloudFront distribution."""
    if self._alias_record is not None:
      raise DeclarationReferenceError(
        f"Alias record for {self.domain_name} is already declared"
      )

    self._alias_record = route53.ARecord(
      self,
      "AliasRecord",
      zone=self.hosted_zone,
      record_name=self.domain_name,
      target=route53.RecordTarget.from_alias(targets.CloudFrontTarget(distribution)),
    )
    return self._alias_record
