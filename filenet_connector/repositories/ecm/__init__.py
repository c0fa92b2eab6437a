"""
FileNet ECM REST implementation of the document operations.
"""

from .client import (
    EcmCallContext,
    EcmClient,
    EcmResponseError,
    HttpEcmClient,
)
from .document import FileNetDocumentOperations
from .factory import filenet_document_operations_factory

__all__ = [
    "EcmCallContext",
    "EcmClient",
    "EcmResponseError",
    "HttpEcmClient",
    "FileNetDocumentOperations",
    "filenet_document_operations_factory",
]
