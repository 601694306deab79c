"""
AWS boundary layer.

Exports:
  - EMRServerlessClient: job run diagnostics lookups
  - SecretsManagerClient: JSON secret retrieval

Dependencies: boto3
"""

from emr_notifier.boundary.aws.emr_serverless_client import EMRServerlessClient
from emr_notifier.boundary.aws.secrets_client import SecretsManagerClient

__all__ = ["EMRServerlessClient", "SecretsManagerClient"]
