"""LectorFlow - document review assignment and notification service"""

__version__ = "0.1.0"
