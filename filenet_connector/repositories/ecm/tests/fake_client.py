"""
In-memory EcmClient for testing the FileNet document operations.

Stores documents the way the ECM reports them (base64 content, decimal
size strings) and records every call with its call context.
"""

import base64
from typing import Any, Dict, List, Optional, Tuple

from filenet_connector.repositories.ecm.client import EcmCallContext, EcmClient
from filenet_connector.repositories.ecm.models import (
    CreateDocumentBodyRequest,
    DocumentMetadataResponse,
    FileNetIdentificator,
    GetDocumentResponse,
    UpdateDocumentBodyRequest,
)


class FakeEcmClient(EcmClient):
    def __init__(self, namespace: Optional[str] = None) -> None:
        self.namespace = namespace
        self.documents: Dict[str, Dict[str, Any]] = {}
        self.calls: List[Tuple[str, EcmCallContext, Dict[str, Any]]] = []
        self.empty_responses = False
        self._counter = 0

    def _record(
        self, method: str, call: EcmCallContext, **arguments: Any
    ) -> None:
        self.calls.append((method, call, arguments))

    def _identificator(self, document_id: str) -> FileNetIdentificator:
        return FileNetIdentificator(
            id=document_id, version=self.documents[document_id]["version"]
        )

    async def create_document(
        self, call: EcmCallContext, body: CreateDocumentBodyRequest
    ) -> Optional[FileNetIdentificator]:
        self._record("create_document", call, body=body)
        if self.empty_responses:
            return None
        self._counter += 1
        document_id = f"doc-{self._counter}"
        self.documents[document_id] = {
            "version": "1",
            "namespace": self.namespace or body.namespace,
            "filename": body.filename,
            "title": body.title,
            "mimetype": body.mimetype,
            "data": body.data,
            "attributes": list(body.attributes),
        }
        return self._identificator(document_id)

    async def get_document_metadata(
        self,
        call: EcmCallContext,
        document_id: str,
        namespace: str,
        version: Optional[str] = None,
    ) -> Optional[DocumentMetadataResponse]:
        self._record(
            "get_document_metadata",
            call,
            document_id=document_id,
            namespace=namespace,
            version=version,
        )
        stored = self.documents.get(document_id)
        if stored is None or self.empty_responses:
            return None
        size = len(base64.b64decode(stored["data"])) if stored["data"] else 0
        return DocumentMetadataResponse(
            id=self._identificator(document_id),
            namespace=stored["namespace"],
            filename=stored["filename"],
            mimetype=stored["mimetype"],
            size_in_bytes=f"{size}.0",
            attributes=stored["attributes"],
        )

    async def get_document(
        self,
        call: EcmCallContext,
        document_id: str,
        namespace: str,
        version: Optional[str] = None,
    ) -> Optional[GetDocumentResponse]:
        self._record(
            "get_document",
            call,
            document_id=document_id,
            namespace=namespace,
            version=version,
        )
        stored = self.documents.get(document_id)
        if stored is None or self.empty_responses:
            return None
        return GetDocumentResponse(
            id=self._identificator(document_id),
            file_name=stored["filename"],
            mime_type=stored["mimetype"],
            content=stored["data"],
        )

    async def update_document(
        self,
        call: EcmCallContext,
        document_id: str,
        body: UpdateDocumentBodyRequest,
    ) -> Optional[FileNetIdentificator]:
        self._record(
            "update_document", call, document_id=document_id, body=body
        )
        stored = self.documents.get(document_id)
        if stored is None or self.empty_responses:
            return None
        stored["version"] = str(int(stored["version"]) + 1)
        stored["mimetype"] = body.mimetype
        stored["data"] = body.data
        stored["attributes"] = list(body.attributes)
        return self._identificator(document_id)

    async def delete_document(
        self, call: EcmCallContext, document_id: str, namespace: str
    ) -> Optional[FileNetIdentificator]:
        self._record(
            "delete_document",
            call,
            document_id=document_id,
            namespace=namespace,
        )
        if document_id not in self.documents or self.empty_responses:
            return None
        identificator = self._identificator(document_id)
        del self.documents[document_id]
        return identificator

