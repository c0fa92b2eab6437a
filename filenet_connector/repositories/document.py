"""
Document operations interfaces defined as Protocols.

The workflow engine talks to a document store through two capability sets:

- **DocumentOperations** (required): the five operations that receive the
  serialized workflow variables of the calling job. Identity resolution
  needs those variables, so this is the family the FileNet connector
  implements.

- **ContextFreeDocumentOperations** (optional): the same kind of operations
  without any workflow context, plus metadata-only update and storno
  (cancellation). A store that cannot attribute calls without a workflow
  context simply does not provide this capability.

Hosts check for the optional capability with ``supports_context_free()``
instead of calling a method that fails. ``require_context_free()`` turns a
missing capability into an explicit ``UnsupportedOperationError`` that is
distinct from any transport failure.

Operation results follow the same absence convention throughout: ``None``
means the ECM returned nothing usable (not found, no content), not an error.
"""

import logging
from typing import Optional, Protocol, runtime_checkable

from filenet_connector.domain import (
    DocumentData,
    DocumentIdentity,
    DocumentStorno,
    DocumentUpdate,
    NewDocument,
)

logger = logging.getLogger(__name__)


class UnsupportedOperationError(NotImplementedError):
    """Raised when an operation is requested from a store lacking it."""

    pass


@runtime_checkable
class DocumentOperations(Protocol):
    """Workflow-context aware document operations."""

    @property
    def is_workflow_context_aware(self) -> bool:
        """Tells the host to always pass the workflow variables."""
        ...

    async def create(
        self, document: NewDocument, workflow_variables: Optional[str] = None
    ) -> Optional[DocumentIdentity]:
        """Store a new document.

        Args:
            document: The document to store
            workflow_variables: Serialized workflow variables of the job

        Returns:
            Identity of the stored document, or None if the ECM did not
            return one
        """
        ...

    async def get_info(
        self,
        identity: DocumentIdentity,
        workflow_variables: Optional[str] = None,
    ) -> Optional[DocumentIdentity]:
        """Read the metadata of a stored document.

        Returns:
            Identity with attributes, filename, MIME type and size, or None
            if the document is not found
        """
        ...

    async def get_content(
        self,
        identity: DocumentIdentity,
        workflow_variables: Optional[str] = None,
    ) -> Optional[DocumentData]:
        """Read the binary content of a stored document.

        Returns:
            DocumentData, or None if the ECM returned no body
        """
        ...

    async def update(
        self,
        identity: DocumentIdentity,
        update: DocumentUpdate,
        workflow_variables: Optional[str] = None,
    ) -> Optional[DocumentIdentity]:
        """Store a new revision of a document.

        Returns:
            Identity of the new revision, or None
        """
        ...

    async def delete(
        self,
        identity: DocumentIdentity,
        workflow_variables: Optional[str] = None,
    ) -> Optional[DocumentIdentity]:
        """Delete a stored document.

        Returns:
            Identity of the deleted document, or None
        """
        ...


@runtime_checkable
class ContextFreeDocumentOperations(Protocol):
    """Document operations invoked without any workflow context."""

    async def create_without_context(
        self, document: NewDocument
    ) -> Optional[DocumentIdentity]: ...

    async def get_without_context(
        self, identity: DocumentIdentity
    ) -> Optional[DocumentData]: ...

    async def get_info_without_context(
        self, identity: DocumentIdentity
    ) -> Optional[DocumentIdentity]: ...

    async def get_content_without_context(
        self, identity: DocumentIdentity
    ) -> Optional[DocumentData]: ...

    async def update_without_context(
        self, identity: DocumentIdentity, update: DocumentUpdate
    ) -> Optional[DocumentIdentity]: ...

    async def update_metadata_without_context(
        self, identity: DocumentIdentity
    ) -> Optional[DocumentIdentity]: ...

    async def delete_without_context(
        self, identity: DocumentIdentity
    ) -> Optional[DocumentIdentity]: ...

    async def storno(
        self, identity: DocumentIdentity, storno: DocumentStorno
    ) -> Optional[DocumentIdentity]: ...


def supports_context_free(operations: object) -> bool:
    """Check whether a store offers the context-free capability."""
    return isinstance(operations, ContextFreeDocumentOperations)


def require_context_free(
    operations: object, operation: str
) -> ContextFreeDocumentOperations:
    """Return the context-free capability of a store.

    Raises:
        UnsupportedOperationError: If the store does not provide it
    """
    if not supports_context_free(operations):
        logger.warning(
            "Context-free document operation requested but not supported",
            extra={
                "operation": operation,
                "operations_type": type(operations).__name__,
            },
        )
        raise UnsupportedOperationError(
            f"{type(operations).__name__} does not support '{operation}' "
            "without a workflow context"
        )
    return operations  # type: ignore[return-value]
