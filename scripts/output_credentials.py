#!/usr/bin/env python3
"""Print the upload credentials and site identifiers from a deployed stack."""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

import boto3  # type: ignore[import-not-found]

# Add the project root to the path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from s3_website_iac.errors import LookupFailure  # noqa: E402

# Stack output name -> environment variable name
OUTPUT_VARIABLES = {
  "BucketName": "S3_BUCKET",
  "DistroId": "CLOUDFRONT_DISTRIBUTION_ID",
  "AccessKeyId": "AWS_ACCESS_KEY_ID",
  "SecretAccessKey": "AWS_SECRET_ACCESS_KEY",
}


def get_credentials(
  stack_name: str, region: str = "us-east-1", cloudformation_client: Any = None
) -> dict[str, str]:
  """Read the website outputs from a deployed CloudFormation stack.

  Args:
    stack_name: The CDK stack name (e.g., 'MyWebsiteStack')
    region: AWS region
    cloudformation_client: Optional boto3 CloudFormation client

  Returns:
    Dictionary with S3_BUCKET, CLOUDFRONT_DISTRIBUTION_ID, AWS_ACCESS_KEY_ID
    and AWS_SECRET_ACCESS_KEY

  Raises:
    LookupFailure: If the stack or any of its outputs is missing
  """
  cloudformation = cloudformation_client or boto3.client(
    "cloudformation", region_name=region
  )

  stacks = cloudformation.describe_stacks(StackName=stack_name).get("Stacks", [])
  if not stacks:
    raise LookupFailure(f"Stack {stack_name} not found")

  outputs = {
    output["OutputKey"]: output["OutputValue"]
    for output in stacks[0].get("Outputs", [])
  }

  missing = [name for name in OUTPUT_VARIABLES if not outputs.get(name)]
  if missing:
    raise LookupFailure(
      f"Stack {stack_name} is missing outputs: {', '.join(missing)}"
    )

  return {variable: outputs[name] for name, variable in OUTPUT_VARIABLES.items()}


def format_credentials(credentials: dict[str, str], output_format: str = "env") -> str:
  """Render credentials as env lines, shell exports or JSON."""
  if output_format == "json":
    return json.dumps(credentials, indent=2)
  if output_format == "export":
    return "\n".join(f"export {key}={value}" for key, value in credentials.items())
  return "\n".join(f"{key}={value}" for key, value in credentials.items())


def main() -> None:
  """Main entry point."""
  parser = argparse.ArgumentParser(
    description="Retrieve deployment credentials for a static website stack"
  )
  parser.add_argument(
    "stack_name",
    help="CDK stack name (e.g., MyWebsiteStack)",
  )
  parser.add_argument(
    "--region",
    default="us-east-1",
    help="AWS region (default: us-east-1)",
  )
  parser.add_argument(
    "--format",
    choices=["env", "json", "export"],
    default="env",
    help="Output format (default: env)",
  )

  args = parser.parse_args()

  try:
    credentials = get_credentials(args.stack_name, args.region)
  except Exception as e:
    print(f"Error retrieving credentials: {e}", file=sys.stderr)
    sys.exit(1)

  print(format_credentials(credentials, args.format))


if __name__ == "__main__":
  main()
