"""
Tests for runtime protocol validation.
"""

import pytest

from filenet_connector.config import FileNetSettings
from filenet_connector.repositories.ecm.document import (
    FileNetDocumentOperations,
)
from filenet_connector.repositories.ecm.tests.fake_client import (
    FakeEcmClient,
)
from filenet_connector.repositories.ecm.client import EcmClient
from filenet_connector.validation import (
    DomainValidationError,
    OperationsValidationError,
    ensure_document_operations,
    validate_protocol,
)


class IncompleteOperations:
    async def create(self, document, workflow_variables=None):
        return None


class TestValidateProtocol:
    def test_valid_implementation_is_returned(self) -> None:
        client = FakeEcmClient()
        assert validate_protocol(client, EcmClient) is client

    def test_invalid_implementation_is_rejected(self) -> None:
        with pytest.raises(OperationsValidationError, match="EcmClient"):
            validate_protocol(object(), EcmClient)


class TestEnsureDocumentOperations:
    def test_filenet_operations(self) -> None:
        operations = FileNetDocumentOperations(
            FakeEcmClient(), FileNetSettings(namespace="ns")
        )
        assert ensure_document_operations(operations) is operations

    def test_incomplete_operations(self) -> None:
        with pytest.raises(OperationsValidationError):
            ensure_document_operations(IncompleteOperations())


def test_domain_validation_error_is_value_error() -> None:
    assert issubclass(DomainValidationError, ValueError)
