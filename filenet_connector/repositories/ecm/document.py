"""
FileNet implementation of DocumentOperations.

Every operation follows the same template:

1. Parse the workflow variables and resolve the effective identity from
   the caller header and the relevant metadata (the new document's metadata
   for create, the target document's attributes otherwise).
2. Build the ECM request body with the mapper.
3. Call the ECM with a fresh correlation id and timestamp.
4. Map a response body to the domain result; no body means None.

Input validation failures are raised before the ECM is contacted. Errors
from the HTTP client propagate unchanged. Values in an ECM response that
cannot be mapped raise EcmResponseError. The class does not
implement ContextFreeDocumentOperations.
"""

import logging
import time
from contextlib import contextmanager
from typing import Iterable, Iterator, Optional

from filenet_connector.config import FileNetSettings
from filenet_connector.domain import (
    Attribute,
    DocumentData,
    DocumentIdentity,
    DocumentUpdate,
    IdentityResolver,
    NewDocument,
    RequestContext,
)
from filenet_connector.repositories.document import DocumentOperations

from . import mapper
from .client import EcmCallContext, EcmClient, EcmResponseError

logger = logging.getLogger(__name__)


class FileNetDocumentOperations(DocumentOperations):
    """Document operations backed by the FileNet ECM REST API."""

    def __init__(self, client: EcmClient, settings: FileNetSettings):
        self.client = client
        self.namespace = settings.namespace
        self.source_system = settings.source_system
        self.identity_resolver = IdentityResolver(settings)
        logger.debug(
            "Initialized FileNetDocumentOperations",
            extra={
                "namespace": self.namespace,
                "client_type": type(client).__name__,
            },
        )

    @property
    def is_workflow_context_aware(self) -> bool:
        return True

    async def create(
        self, document: NewDocument, workflow_variables: Optional[str] = None
    ) -> Optional[DocumentIdentity]:
        """Store a new document in FileNet."""
        operation = "CreateDocument"
        start = time.perf_counter()

        call = self._call_context(
            operation, workflow_variables, document.metadata
        )
        body = mapper.to_create_document_request(document, self.namespace)
        response = await self.client.create_document(call, body)
        self._log_elapsed_time(start, operation)

        return mapper.identity_from_identificator(
            response,
            self.namespace,
            attributes=document.metadata,
            filename=document.filename,
            mime_type=document.mime_type,
        )

    async def get_info(
        self,
        identity: DocumentIdentity,
        workflow_variables: Optional[str] = None,
    ) -> Optional[DocumentIdentity]:
        """Read the metadata of a document stored in FileNet."""
        operation = "GetDocumentMetadata"
        start = time.perf_counter()

        call = self._call_context(
            operation, workflow_variables, identity.attributes
        )
        response = await self.client.get_document_metadata(
            call, identity.external_id, self.namespace, identity.version
        )
        self._log_elapsed_time(start, operation)

        if response is None:
            return None
        with _mapping_ecm_response(operation):
            return mapper.identity_from_metadata_response(
                response, self.namespace
            )

    async def get_content(
        self,
        identity: DocumentIdentity,
        workflow_variables: Optional[str] = None,
    ) -> Optional[DocumentData]:
        """Read the binary content of a document stored in FileNet."""
        operation = "GetDocument"
        start = time.perf_counter()

        call = self._call_context(
            operation, workflow_variables, identity.attributes
        )
        response = await self.client.get_document(
            call, identity.external_id, self.namespace, identity.version
        )
        self._log_elapsed_time(start, operation)

        if response is None:
            return None
        with _mapping_ecm_response(operation):
            return DocumentData(
                identity=mapper.identity_from_document_response(
                    response, self.namespace
                ),
                content=mapper.decode_content(response.content),
            )

    async def update(
        self,
        identity: DocumentIdentity,
        update: DocumentUpdate,
        workflow_variables: Optional[str] = None,
    ) -> Optional[DocumentIdentity]:
        """Store a new revision of a document in FileNet."""
        operation = "UpdateDocument"
        start = time.perf_counter()

        call = self._call_context(
            operation, workflow_variables, identity.attributes
        )
        body = mapper.to_update_document_request(update, self.namespace)
        response = await self.client.update_document(
            call, identity.external_id, body
        )
        self._log_elapsed_time(start, operation)

        return mapper.identity_from_identificator(
            response,
            self.namespace,
            attributes=update.attributes,
            filename=identity.filename,
            mime_type=update.mime_type,
        )

    async def delete(
        self,
        identity: DocumentIdentity,
        workflow_variables: Optional[str] = None,
    ) -> Optional[DocumentIdentity]:
        """Delete a document stored in FileNet."""
        operation = "DeleteDocument"
        start = time.perf_counter()

        call = self._call_context(
            operation, workflow_variables, identity.attributes
        )
        response = await self.client.delete_document(
            call, identity.external_id, self.namespace
        )
        self._log_elapsed_time(start, operation)

        return mapper.identity_from_identificator(response, self.namespace)

    def _call_context(
        self,
        operation: str,
        workflow_variables: Optional[str],
        metadata: Iterable[Attribute],
    ) -> EcmCallContext:
        context = RequestContext.from_workflow_variables(workflow_variables)
        kpjm = self.identity_resolver.resolve(context, metadata, operation)
        call = EcmCallContext.new(kpjm, self.source_system)
        logger.info(
            f"{operation}: calling ECM",
            extra={
                "operation": operation,
                "kpjm": kpjm,
                "correlation_id": call.correlation_id,
                "namespace": self.namespace,
            },
        )
        return call

    def _log_elapsed_time(self, start: float, operation: str) -> None:
        if logger.isEnabledFor(logging.DEBUG):
            elapsed_ms = int((time.perf_counter() - start) * 1000)
            logger.debug(
                f"Call {operation} endpoint - elapsed time: {elapsed_ms} ms",
                extra={"operation": operation, "elapsed_ms": elapsed_ms},
            )


@contextmanager
def _mapping_ecm_response(operation: str) -> Iterator[None]:
    """Report values the ECM sent that cannot be mapped as ECM failures."""
    try:
        yield
    except ValueError as e:
        logger.error(
            f"{operation}: ECM response cannot be mapped",
            extra={"operation": operation, "error": str(e)},
        )
        raise EcmResponseError(
            f"{operation}: ECM returned an invalid response: {e}"
        ) from e
