"""IAM user that uploads site content and invalidates the CDN cache."""

from aws_cdk import Stack
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_iam as iam
from aws_cdk import aws_s3 as s3
from constructs import Construct

from ..errors import DeclarationReferenceError

BUCKET_UPLOAD_ACTIONS = [
  "s3:PutObject",
  "s3:GetObject",
  "s3:DeleteObject",
  "s3:ListBucket",
]
INVALIDATION_ACTIONS = ["cloudfront:CreateInvalidation"]


class UploadUser(Construct):
  """IAM user with a long-lived access key for CI/CD style deployments.

  Permissions are attached with ``allow_bucket_upload`` and
  ``allow_invalidation``; the key pair is issued with ``create_access_key``.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    user_name: str,
  ) -> None:
    super().__init__(scope, id)

    self.user = iam.User(self, "User", user_name=user_name)
    self.statements: list[iam.PolicyStatement] = []
    self._access_key: iam.CfnAccessKey | None = None

  def allow_bucket_upload(self, bucket: s3.IBucket) -> iam.PolicyStatement:
    """Grant object read/write/delete and listing on ``bucket``."""
    statement = iam.PolicyStatement(
      effect=iam.Effect.ALLOW,
      actions=list(BUCKET_UPLOAD_ACTIONS),
      resources=[bucket.bucket_arn, bucket.arn_for_objects("*")],
    )
    self._add_statement(statement)
    return statement

  def allow_invalidation(
    self, distribution: cloudfront.IDistribution
  ) -> iam.PolicyStatement:
    """Grant cache invalidation on ``distribution`` only."""
    # CloudFront is global: the ARN has an account but no region
    distribution_arn = Stack.of(self).format_arn(
      service="cloudfront",
      region="",
      resource="distribution",
      resource_name=distribution.distribution_id,
    )
    statement = iam.PolicyStatement(
      effect=iam.Effect.ALLOW,
      actions=list(INVALIDATION_ACTIONS),
      resources=[distribution_arn],
    )
    self._add_statement(statement)
    return statement

  def create_access_key(self) -> iam.CfnAccessKey:
    """Issue the user's single static access key."""
    if self._access_key is not None:
      raise DeclarationReferenceError(
        f"Access key for {self.node.path} is already declared"
      )
    self._access_key = iam.CfnAccessKey(
      self,
      "AccessKey",
      user_name=self.user.user_name,
    )
    return self._access_key

  @property
  def access_key(self) -> iam.CfnAccessKey:
    if self._access_key is None:
      raise DeclarationReferenceError(
        f"Access key for {self.node.path} has not been declared yet"
      )
    return self._access_key

  def _add_statement(self, statement: iam.PolicyStatement) -> None:
    self.user.add_to_principal_policy(statement)
    self.statements.append(statement)
