"""Submissions module - review lifecycle of uploaded documents

Service is imported lazily by callers:
Use: from lectorflow.submissions.service import SubmissionWorkflow
"""
