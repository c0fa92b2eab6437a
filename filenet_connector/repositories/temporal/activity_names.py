"""
Activity name constants shared by the activity registrations and the
workflow proxies.

Kept in their own module so workflow code can import the names without
importing the HTTP-backed implementation.
"""

DOCUMENT_OPERATIONS_ACTIVITY_BASE = "filenet.document_operations"

__all__ = ["DOCUMENT_OPERATIONS_ACTIVITY_BASE"]
