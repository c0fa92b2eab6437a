"""
Tests for the Temporal activity registration of the document operations.

Design decisions documented:
- Every DocumentOperations method becomes an activity named
  ``filenet.document_operations.<method>``
- Activities run the FileNet implementation unchanged
"""

import json

import pytest
from temporalio.testing import ActivityEnvironment

from filenet_connector.config import FileNetSettings
from filenet_connector.domain import DocumentIdentity, NewDocument
from filenet_connector.repositories.document import DocumentOperations
from filenet_connector.repositories.ecm.tests.fake_client import (
    FakeEcmClient,
)
from filenet_connector.repositories.temporal.activities import (
    TemporalFileNetDocumentOperations,
)
from filenet_connector.repositories.temporal.decorators import (
    _discover_protocol_methods,
)
from filenet_connector.worker import document_activities

EXPECTED_METHODS = ["create", "get_info", "get_content", "update", "delete"]


@pytest.fixture
def ecm() -> FakeEcmClient:
    return FakeEcmClient()


@pytest.fixture
def operations(ecm: FakeEcmClient) -> TemporalFileNetDocumentOperations:
    """Activity-enabled operations backed by the in-memory ECM."""
    return TemporalFileNetDocumentOperations(
        ecm, FileNetSettings(namespace="pwf-documents")
    )


class TestActivityRegistration:
    def test_discovers_protocol_methods(self) -> None:
        methods = _discover_protocol_methods(
            TemporalFileNetDocumentOperations.__mro__
        )
        assert methods == EXPECTED_METHODS

    def test_activity_names(
        self, operations: TemporalFileNetDocumentOperations
    ) -> None:
        for method_name in EXPECTED_METHODS:
            method = getattr(operations, method_name)
            definition = getattr(method, "__temporal_activity_definition")
            assert (
                definition.name
                == f"filenet.document_operations.{method_name}"
            )

    def test_worker_registers_all_activities(
        self, operations: TemporalFileNetDocumentOperations
    ) -> None:
        activities = document_activities(operations)
        assert [a.__name__ for a in activities] == EXPECTED_METHODS

    def test_still_implements_protocol(
        self, operations: TemporalFileNetDocumentOperations
    ) -> None:
        assert isinstance(operations, DocumentOperations)

    @pytest.mark.asyncio
    async def test_create_activity_runs_implementation(
        self,
        operations: TemporalFileNetDocumentOperations,
        ecm: FakeEcmClient,
    ) -> None:
        env = ActivityEnvironment()
        variables = json.dumps({"headers": {"uid": "alice"}})

        identity = await env.run(
            operations.create,
            NewDocument(filename="a.txt", content=b"abc"),
            variables,
        )

        assert isinstance(identity, DocumentIdentity)
        assert identity.external_id == "doc-1"
        assert ecm.calls[0][1].kpjm == "alice"

    @pytest.mark.asyncio
    async def test_get_info_activity_for_missing_document(
        self, operations: TemporalFileNetDocumentOperations
    ) -> None:
        env = ActivityEnvironment()

        result = await env.run(
            operations.get_info,
            DocumentIdentity(namespace="pwf-documents", external_id="nope"),
            None,
        )

        assert result is None
