"""Submissions domain module - review status values and re-open detection"""

from .submission_status import SubmissionStatus, parse_status, is_reopening

__all__ = [
    "SubmissionStatus",
    "parse_status",
    "is_reopening",
]
