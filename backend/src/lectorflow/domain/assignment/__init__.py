"""Assignment domain module - reviewer selection"""

from .reviewer_assigner import assign_reviewer, eligible_reviewers

__all__ = ["assign_reviewer", "eligible_reviewers"]
