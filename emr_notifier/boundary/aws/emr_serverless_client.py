"""
EMR Serverless client for job run diagnostics.

Wraps the boto3 emr-serverless client. Only GetJobRun is used: the notifier
calls it for failed runs and logs the response.

Dependencies: boto3
System role: Job Execution Service adapter
"""

from typing import Any

import boto3


class EMRServerlessClient:
    """EMR Serverless client (job run lookups only)."""

    def __init__(self, region: str = "us-east-1", client: Any | None = None) -> None:
        """
        Initialize EMR Serverless client.

        Args:
            region: AWS region of the EMR Serverless applications
            client: Pre-built boto3 client (tests), created from region if None
        """
        self._region = region
        self._client = client or boto3.client("emr-serverless", region_name=region)

    def get_job_run(self, application_id: str, job_run_id: str) -> dict[str, Any]:
        """
        Fetch the full job run description.

        Args:
            application_id: EMR Serverless application ID
            job_run_id: Job run ID

        Returns:
            dict: The jobRun object (state, stateDetails, jobDriver,
                configurationOverrides, resource utilization, ...)

        Raises:
            ClientError: API rejected the request (unknown run, access denied)
            BotoCoreError: Transport or credential failure
        """
        response = self._client.get_job_run(
            applicationId=application_id,
            jobRunId=job_run_id,
        )
        return response.get("jobRun", {})
