"""Main composite construct for complete static website infrastructure."""

from aws_cdk import CfnOutput, RemovalPolicy
from constructs import Construct

from ..validation import validate_domain_name, validate_user_name
from .certificate import DnsValidatedCertificate
from .distribution import WebsiteDistribution
from .dns import WebsiteDns
from .storage import WebsiteBucket
from .upload_user import UploadUser


class StaticWebsiteConstruct(Construct):
  """Complete static website infrastructure.

  Creates, in dependency order:
  - ACM certificate (DNS validated)
  - S3 bucket for static content, publicly readable
  - CloudFront distribution with HTTPS, fronting the bucket
  - Route 53 alias record in an existing hosted zone
  - IAM upload user with bucket and invalidation permissions
  - Static access key for the upload user

  Outputs BucketName, DistroId, AccessKeyId and SecretAccessKey.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    domain_name: str,
    user_name: str,
    hosted_zone_id: str | None = None,
    index_document: str = "index.html",
    error_document: str = "error.html",
    removal_policy: RemovalPolicy = RemovalPolicy.DESTROY,
  ) -> None:
    # Validate before joining the construct tree so bad input leaves no trace
    validate_domain_name(domain_name)
    validate_user_name(user_name)

    super().__init__(scope, id)

    self.domain_name = domain_name

    self.certificate = DnsValidatedCertificate(
      self,
      "Certificate",
      domain_name=domain_name,
    )

    self.bucket = WebsiteBucket(
      self,
      "Bucket",
      index_document=index_document,
      error_document=error_document,
      removal_policy=removal_policy,
    )

    self.distribution = WebsiteDistribution(
      self,
      "Distribution",
      bucket=self.bucket.bucket,
      certificate=self.certificate.certificate,
      domain_name=domain_name,
    )

    # Hosted zone must already exist
    self.dns = WebsiteDns(
      self,
      "Dns",
      domain_name=domain_name,
      existing_hosted_zone_id=hosted_zone_id,
    )
    self.dns.create_alias_record(self.distribution.distribution)

    self.upload_user = UploadUser(self, "UploadUser", user_name=user_name)
    self.upload_user.allow_bucket_upload(self.bucket.bucket)
    self.upload_user.allow_invalidation(self.distribution.distribution)
    access_key = self.upload_user.create_access_key()

    # Outputs
    self.outputs: dict[str, CfnOutput] = {}
    self._add_output(
      "BucketName",
      self.bucket.bucket.bucket_name,
      "S3 bucket name",
    )
    self._add_output(
      "DistroId",
      self.distribution.distribution.distribution_id,
      "CloudFront distribution ID",
    )
    self._add_output(
      "AccessKeyId",
      access_key.ref,
      "Upload user access key ID",
    )
    self._add_output(
      "SecretAccessKey",
      access_key.attr_secret_access_key,
      "Upload user secret access key",
    )

  def _add_output(self, name: str, value: str, description: str) -> None:
    output = CfnOutput(self, name, value=value, description=description)
    # Keep the stack output names stable regardless of construct nesting
    output.override_logical_id(name)
    self.outputs[name] = output
