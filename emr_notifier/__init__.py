"""
EMR Serverless job status notifier.

Keeps the emr_job_details tracking table in step with EMR Serverless
job run state-change events.
"""
