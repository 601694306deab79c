"""
Secrets Manager client for JSON secrets.

Dependencies: boto3
System role: Database credential retrieval
"""

import json
from typing import Any

import boto3


class SecretsManagerClient:
    """Read-only Secrets Manager client."""

    def __init__(self, region: str = "us-east-1", client: Any | None = None) -> None:
        """
        Initialize Secrets Manager client.

        Args:
            region: AWS region of the secret
            client: Pre-built boto3 client (tests), created from region if None
        """
        self._client = client or boto3.client("secretsmanager", region_name=region)

    def get_json_secret(self, secret_id: str) -> dict[str, Any]:
        """
        Fetch a secret and decode its SecretString as JSON.

        Args:
            secret_id: Secret name or ARN

        Returns:
            dict: Decoded secret, empty if the secret has no SecretString

        Raises:
            ClientError: Secret missing or access denied
            json.JSONDecodeError: SecretString is not JSON
        """
        response = self._client.get_secret_value(SecretId=secret_id)
        if "SecretString" not in response:
            return {}
        return json.loads(response["SecretString"])
