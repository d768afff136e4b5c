"""Exceptions raised while declaring website infrastructure."""


class WebsiteIacError(Exception):
  """Base class for all website declaration errors."""


class ValidationError(WebsiteIacError, ValueError):
  """Input (domain name, user name, region, account) is malformed."""


class LookupFailure(WebsiteIacError):
  """An externally managed resource (hosted zone, stack output) was not found."""


class DeclarationReferenceError(WebsiteIacError):
  """A resource was referenced before it was declared.

  Construction order makes this impossible for correct callers, so seeing it
  means a construct was wired up out of order.
  """
