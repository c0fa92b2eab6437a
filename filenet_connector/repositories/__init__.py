"""
Document operations protocols and their implementations.

- ``document``: the DocumentOperations protocols and capability checks
- ``ecm``: the FileNet REST implementation
- ``temporal``: Temporal activity and workflow proxy wrappers
"""

from .document import (
    ContextFreeDocumentOperations,
    DocumentOperations,
    UnsupportedOperationError,
    require_context_free,
    supports_context_free,
)

__all__ = [
    "ContextFreeDocumentOperations",
    "DocumentOperations",
    "UnsupportedOperationError",
    "require_context_free",
    "supports_context_free",
]
