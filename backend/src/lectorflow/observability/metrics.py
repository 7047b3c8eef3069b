"""Prometheus metrics for LectorFlow.

Defines operational counters for the upload, review and retention paths.
"""

from prometheus_client import Counter

# Upload intake
uploads_received_total = Counter(
    "lectorflow_uploads_received_total",
    "Upload events received",
    ["outcome"]  # outcome: accepted|ignored|failed
)

# Review workflow
submissions_updated_total = Counter(
    "lectorflow_submissions_updated_total",
    "Successful submission status updates",
    ["status"]
)

notifications_created_total = Counter(
    "lectorflow_notifications_created_total",
    "Notifications stored",
    ["type"]  # type: document_assigned|document_reviewed
)

side_effects_failed_total = Counter(
    "lectorflow_side_effects_failed_total",
    "Best-effort side effects that failed after the primary write committed",
    ["name"]
)

# Retention
notifications_deleted_total = Counter(
    "lectorflow_notifications_deleted_total",
    "Read notifications removed by the retention sweeper"
)

retention_batch_limit_total = Counter(
    "lectorflow_retention_batch_limit_total",
    "Retention sweeps that stopped at the batch limit"
)
