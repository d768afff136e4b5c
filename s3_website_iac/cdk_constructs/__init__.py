"""CDK constructs for static website infrastructure."""

from .certificate import DnsValidatedCertificate
from .distribution import WebsiteDistribution
from .dns import WebsiteDns
from .static_site import StaticWebsiteConstruct
from .storage import WebsiteBucket
from .upload_user import UploadUser

__all__ = [
  "DnsValidatedCertificate",
  "StaticWebsiteConstruct",
  "UploadUser",
  "WebsiteBucket",
  "WebsiteDistribution",
  "WebsiteDns",
]
