#!/usr/bin/env python3
"""Check that a public Route 53 hosted zone exists for a site's domain.

The stack looks the zone up at synth time and never creates it, so running
this before the first deploy gives a clearer error than a failed lookup.
"""

import argparse
import sys
from pathlib import Path
from typing import Any

import boto3

# Add the project root to the path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from s3_website_iac.errors import LookupFailure  # noqa: E402
from s3_website_iac.validation import validate_domain_name  # noqa: E402


def find_hosted_zone(domain_name: str, route53_client: Any = None) -> dict[str, str]:
  """Find the public hosted zone named exactly ``domain_name``.

  Args:
    domain_name: Site apex domain (e.g., example.com)
    route53_client: Optional boto3 Route 53 client

  Returns:
    Dictionary with the zone ``Id`` (without the /hostedzone/ prefix) and ``Name``

  Raises:
    ValidationError: If the domain name is malformed
    LookupFailure: If no matching public zone exists
  """
  validate_domain_name(domain_name)
  route53 = route53_client or boto3.client("route53")

  # Route 53 stores zone names lowercase with a trailing dot
  wanted = f"{domain_name.lower()}."
  response = route53.list_hosted_zones_by_name(DNSName=domain_name, MaxItems="10")

  matches = [
    zone
    for zone in response.get("HostedZones", [])
    if zone["Name"].lower() == wanted
    and not zone.get("Config", {}).get("PrivateZone", False)
  ]
  if not matches:
    raise LookupFailure(f"No public hosted zone found for {domain_name}")
  if len(matches) > 1:
    raise LookupFailure(
      f"Found {len(matches)} public hosted zones for {domain_name}, expected exactly 1"
    )

  zone = matches[0]
  return {
    "Id": zone["Id"].removeprefix("/hostedzone/"),
    "Name": zone["Name"],
  }


def main() -> None:
  """Main entry point."""
  parser = argparse.ArgumentParser(
    description="Check that the hosted zone for a site's domain exists"
  )
  parser.add_argument(
    "domain",
    help="Domain name (e.g., example.com)",
  )
  args = parser.parse_args()

  try:
    zone = find_hosted_zone(args.domain)
  except Exception as e:
    print(f"Error: {e}", file=sys.stderr)
    sys.exit(1)

  print(f"✓ Hosted zone found for {args.domain}")
  print(f"  Zone ID: {zone['Id']}")


if __name__ == "__main__":
  main()
