"""CDK stacks for static website infrastructure."""

from .site_stack import S3WebsiteStack

__all__ = ["S3WebsiteStack"]
