"""
End-to-end tests of the factory-built operations over a mock HTTP ECM.
"""

import base64
import json

import httpx
import pytest

from filenet_connector.config import FileNetSettings
from filenet_connector.domain import DocumentIdentity, NewDocument
from filenet_connector.repositories.document import DocumentOperations
from filenet_connector.repositories.ecm import (
    filenet_document_operations_factory,
)


def ecm_handler(request: httpx.Request) -> httpx.Response:
    if request.method == "POST" and request.url.path == "/documents":
        body = json.loads(request.content)
        assert body["title"] == "invoice"
        assert request.headers["X-KPJM"] == "alice"
        return httpx.Response(201, json={"id": "doc-1", "version": "1"})
    if request.url.path == "/documents/doc-1":
        return httpx.Response(
            200,
            json={
                "id": {"id": "doc-1", "version": "1"},
                "fileName": "invoice.pdf",
                "mimeType": "application/pdf",
                "content": base64.b64encode(b"0123456789").decode("ascii"),
            },
        )
    return httpx.Response(404, json={"message": "not found"})


@pytest.fixture
def operations() -> DocumentOperations:
    """Operations talking HTTP to the mock ECM."""
    settings = FileNetSettings(
        namespace="pwf-documents", base_url="https://ecm.test"
    )
    return filenet_document_operations_factory(
        settings, transport=httpx.MockTransport(ecm_handler)
    )


class TestFactory:
    def test_returns_validated_operations(
        self, operations: DocumentOperations
    ) -> None:
        assert isinstance(operations, DocumentOperations)

    @pytest.mark.asyncio
    async def test_create_and_read_content(
        self, operations: DocumentOperations
    ) -> None:
        variables = json.dumps({"headers": {"uid": "alice"}})

        identity = await operations.create(
            NewDocument(filename="invoice.pdf", content=b"0123456789"),
            variables,
        )
        assert identity is not None

        data = await operations.get_content(identity, variables)

        assert data is not None
        assert data.content == b"0123456789"
        assert data.identity is not None
        assert data.identity.size_in_bytes == 10

    @pytest.mark.asyncio
    async def test_not_found_status_raises(
        self, operations: DocumentOperations
    ) -> None:
        missing = DocumentIdentity(namespace="pwf-documents", external_id="x")

        with pytest.raises(httpx.HTTPStatusError):
            await operations.get_info(missing)
