"""
Domain layer for the FileNet connector.

Contains the workflow-side document models, the request context carried by
workflow engine calls and the effective identity resolution. Nothing here
knows about HTTP or the ECM wire format.
"""

from .document import (
    Attribute,
    AttributeType,
    DocumentData,
    DocumentIdentity,
    DocumentStorno,
    DocumentUpdate,
    NewDocument,
)
from .request_context import RequestContext
from .identity import IdentityResolver, resolve_effective_identity

__all__ = [
    "Attribute",
    "AttributeType",
    "DocumentData",
    "DocumentIdentity",
    "DocumentStorno",
    "DocumentUpdate",
    "NewDocument",
    "RequestContext",
    "IdentityResolver",
    "resolve_effective_identity",
]
