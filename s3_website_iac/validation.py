"""Input validation for website declarations."""

import re

from .errors import ValidationError

MAX_DOMAIN_LENGTH = 253
MAX_USER_NAME_LENGTH = 64

_LABEL_RE = re.compile(r"^[A-Za-z0-9]([A-Za-z0-9-]{0,61}[A-Za-z0-9])?$")
_USER_NAME_RE = re.compile(r"^[A-Za-z0-9+=,.@_-]+$")
_ACCOUNT_RE = re.compile(r"^\d{12}$")
_REGION_RE = re.compile(r"^[a-z]{2}(-gov|-iso[a-z]*)?-[a-z]+-\d$")


def validate_domain_name(domain_name: str) -> str:
  """Check that ``domain_name`` is a DNS name usable as a site apex.

  The value is returned unchanged, including its case, so callers can use it
  verbatim as a record name.
  """
  if not isinstance(domain_name, str) or not domain_name:
    raise ValidationError("Domain name must be a non-empty string")
  if len(domain_name) > MAX_DOMAIN_LENGTH:
    raise ValidationError(
      f"Domain name exceeds {MAX_DOMAIN_LENGTH} characters: {domain_name!r}"
    )

  labels = domain_name.split(".")
  if len(labels) < 2:
    raise ValidationError(f"Domain name needs at least two labels: {domain_name!r}")

  for label in labels:
    if not _LABEL_RE.match(label):
      raise ValidationError(
        f"Invalid label {label!r} in domain name {domain_name!r}"
      )

  if labels[-1].isdigit():
    raise ValidationError(f"Top-level domain cannot be numeric: {domain_name!r}")

  return domain_name


def validate_user_name(user_name: str) -> str:
  """Check that ``user_name`` is a valid IAM user name."""
  if not isinstance(user_name, str) or not user_name:
    raise ValidationError("User name must be a non-empty string")
  if len(user_name) > MAX_USER_NAME_LENGTH:
    raise ValidationError(
      f"User name exceeds {MAX_USER_NAME_LENGTH} characters: {user_name!r}"
    )
  if not _USER_NAME_RE.match(user_name):
    raise ValidationError(f"Invalid characters in user name: {user_name!r}")
  return user_name


def validate_account_id(account: str) -> str:
  if not isinstance(account, str) or not _ACCOUNT_RE.match(account):
    raise ValidationError(f"AWS account id must be 12 digits: {account!r}")
  return account


def validate_region(region: str) -> str:
  if not isinstance(region, str) or not _REGION_RE.match(region):
    raise ValidationError(f"Invalid AWS region: {region!r}")
  return region
