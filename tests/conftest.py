"""Pytest fixtures for CDK construct tests."""

import aws_cdk as cdk
import pytest

TEST_ACCOUNT = "123456789012"


@pytest.fixture
def app() -> cdk.App:
  """Create a CDK App for testing."""
  return cdk.App()


@pytest.fixture
def stack(app: cdk.App) -> cdk.Stack:
  """Create a CDK Stack for testing.

  Hosted zone lookups need a concrete account and region; with no cached
  context CDK falls back to a dummy zone with id ``DUMMY``.
  """
  return cdk.Stack(
    app,
    "TestStack",
    env=cdk.Environment(account=TEST_ACCOUNT, region="us-east-1"),
  )
