"""ACM certificate with DNS validation."""

from aws_cdk import aws_certificatemanager as acm
from constructs import Construct


class DnsValidatedCertificate(Construct):
  """ACM certificate validated through a DNS challenge (no email approval).

  No hosted zone is passed, so ACM publishes the validation CNAME and the
  certificate stays pending until that record is resolvable.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    domain_name: str,
  ) -> None:
    super().__init__(scope, id)

    self.domain_name = domain_name
    self.certificate = acm.Certificate(
      self,
      "Certificate",
      domain_name=domain_name,
      validation=acm.CertificateValidation.from_dns(),
    )
