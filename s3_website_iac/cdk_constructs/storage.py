"""S3 bucket for static website hosting."""

from aws_cdk import RemovalPolicy
from aws_cdk import aws_s3 as s3
from constructs import Construct


class WebsiteBucket(Construct):
  """S3 bucket configured as a public static-website origin."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    index_document: str = "index.html",
    error_document: str = "error.html",
    removal_policy: RemovalPolicy = RemovalPolicy.DESTROY,
  ) -> None:
    super().__init__(scope, id)

    # The website endpoint is plain HTTP and anonymous, so objects must be
    # publicly readable for CloudFront to fetch them.
    self.bucket = s3.Bucket(
      self,
      "Bucket",
      website_index_document=index_document,
      website_error_document=error_document,
      public_read_access=True,
      block_public_access=s3.BlockPublicAccess(
        block_public_acls=False,
        ignore_public_acls=False,
        block_public_policy=False,
        restrict_public_buckets=False,
      ),
      removal_policy=removal_policy,
      auto_delete_objects=removal_policy == RemovalPolicy.DESTROY,
    )
