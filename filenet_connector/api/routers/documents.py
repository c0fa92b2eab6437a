"""
Documents API router for the FileNet connector.

The workflow engine's document operations as RPC-style endpoints. Each
request carries the document payload and, optionally, the serialized
workflow variables used for identity resolution.

Routes defined at root level:
- POST /create - store a new document
- POST /info - read document metadata
- POST /content - read document content
- POST /update - store a new document revision
- POST /delete - delete a document
- POST /storno - cancel a document (context-free capability only)

These routes are mounted with '/documents' prefix in the main app. An
absent operation result is answered with 404.
"""

import logging
from typing import NoReturn

from fastapi import APIRouter, Depends, HTTPException

from filenet_connector.api.dependencies import get_document_operations
from filenet_connector.api.requests import (
    CreateDocumentRequest,
    DocumentRequest,
    StornoDocumentRequest,
    UpdateDocumentRequest,
)
from filenet_connector.api.responses import DocumentContentResponse
from filenet_connector.domain import DocumentIdentity
from filenet_connector.repositories.document import (
    DocumentOperations,
    require_context_free,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _not_found(operation: str, identity: object = None) -> NoReturn:
    logger.info(
        "Document operation returned no result",
        extra={"operation": operation, "identity": str(identity)},
    )
    raise HTTPException(status_code=404, detail="Document not found")


@router.post("/create", response_model=DocumentIdentity)
async def create_document(
    request: CreateDocumentRequest,
    operations: DocumentOperations = Depends(get_document_operations),
) -> DocumentIdentity:
    """Store a new document and return its identity."""
    logger.info("Creating document", extra={"filename": request.filename})
    result = await operations.create(
        request.to_domain(), request.workflow_variables
    )
    if result is None:
        _not_found("create")
    return result


@router.post("/info", response_model=DocumentIdentity)
async def get_document_info(
    request: DocumentRequest,
    operations: DocumentOperations = Depends(get_document_operations),
) -> DocumentIdentity:
    """Return the metadata of a stored document."""
    result = await operations.get_info(
        request.identity, request.workflow_variables
    )
    if result is None:
        _not_found("get_info", request.identity.external_id)
    return result


@router.post("/content", response_model=DocumentContentResponse)
async def get_document_content(
    request: DocumentRequest,
    operations: DocumentOperations = Depends(get_document_operations),
) -> DocumentContentResponse:
    """Return the base64 encoded content of a stored document."""
    result = await operations.get_content(
        request.identity, request.workflow_variables
    )
    if result is None:
        _not_found("get_content", request.identity.external_id)
    return DocumentContentResponse.from_domain(result)


@router.post("/update", response_model=DocumentIdentity)
async def update_document(
    request: UpdateDocumentRequest,
    operations: DocumentOperations = Depends(get_document_operations),
) -> DocumentIdentity:
    """Store a new revision of a document."""
    result = await operations.update(
        request.identity, request.to_domain(), request.workflow_variables
    )
    if result is None:
        _not_found("update", request.identity.external_id)
    return result


@router.post("/delete", response_model=DocumentIdentity)
async def delete_document(
    request: DocumentRequest,
    operations: DocumentOperations = Depends(get_document_operations),
) -> DocumentIdentity:
    """Delete a stored document."""
    result = await operations.delete(
        request.identity, request.workflow_variables
    )
    if result is None:
        _not_found("delete", request.identity.external_id)
    return result


@router.post("/storno", response_model=DocumentIdentity)
async def storno_document(
    request: StornoDocumentRequest,
    operations: DocumentOperations = Depends(get_document_operations),
) -> DocumentIdentity:
    """Cancel a document; only stores with context-free support allow it."""
    context_free = require_context_free(operations, "storno")
    result = await context_free.storno(request.identity, request.storno)
    if result is None:
        _not_found("storno", request.identity.external_id)
    return result
