"""Infrastructure as code for an S3 static website behind CloudFront."""
