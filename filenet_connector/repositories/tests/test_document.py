"""
Tests for the document operation capability sets.

Design decisions documented:
- The context-free family is an optional capability, detected with
  isinstance against the runtime-checkable protocol
- Requesting it from a store without it raises UnsupportedOperationError,
  which is distinct from transport errors
"""

import logging
from typing import Optional

import pytest

from filenet_connector.domain import (
    DocumentData,
    DocumentIdentity,
    DocumentStorno,
    DocumentUpdate,
    NewDocument,
)
from filenet_connector.repositories.document import (
    ContextFreeDocumentOperations,
    DocumentOperations,
    UnsupportedOperationError,
    require_context_free,
    supports_context_free,
)


class ContextAwareStore:
    @property
    def is_workflow_context_aware(self) -> bool:
        return True

    async def create(self, document, workflow_variables=None):
        return None

    async def get_info(self, identity, workflow_variables=None):
        return None

    async def get_content(self, identity, workflow_variables=None):
        return None

    async def update(self, identity, update, workflow_variables=None):
        return None

    async def delete(self, identity, workflow_variables=None):
        return None


class FullStore(ContextAwareStore):
    async def create_without_context(
        self, document: NewDocument
    ) -> Optional[DocumentIdentity]:
        return None

    async def get_without_context(
        self, identity: DocumentIdentity
    ) -> Optional[DocumentData]:
        return None

    async def get_info_without_context(
        self, identity: DocumentIdentity
    ) -> Optional[DocumentIdentity]:
        return identity

    async def get_content_without_context(
        self, identity: DocumentIdentity
    ) -> Optional[DocumentData]:
        return None

    async def update_without_context(
        self, identity: DocumentIdentity, update: DocumentUpdate
    ) -> Optional[DocumentIdentity]:
        return identity

    async def update_metadata_without_context(
        self, identity: DocumentIdentity
    ) -> Optional[DocumentIdentity]:
        return identity

    async def delete_without_context(
        self, identity: DocumentIdentity
    ) -> Optional[DocumentIdentity]:
        return identity

    async def storno(
        self, identity: DocumentIdentity, storno: DocumentStorno
    ) -> Optional[DocumentIdentity]:
        return identity


class TestCapabilities:
    def test_context_aware_store(self) -> None:
        store = ContextAwareStore()

        assert isinstance(store, DocumentOperations)
        assert not supports_context_free(store)

    def test_full_store(self) -> None:
        store = FullStore()

        assert isinstance(store, DocumentOperations)
        assert isinstance(store, ContextFreeDocumentOperations)
        assert supports_context_free(store)

    def test_require_context_free_returns_store(self) -> None:
        store = FullStore()
        assert require_context_free(store, "storno") is store

    def test_require_context_free_rejects_store(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING):
            with pytest.raises(UnsupportedOperationError, match="storno"):
                require_context_free(ContextAwareStore(), "storno")

        assert "not supported" in caplog.text

    def test_unsupported_is_not_implemented(self) -> None:
        assert issubclass(UnsupportedOperationError, NotImplementedError)

    @pytest.mark.asyncio
    async def test_storno_through_capability(self) -> None:
        identity = DocumentIdentity(namespace="ns", external_id="doc-1")
        store = require_context_free(FullStore(), "storno")

        result = await store.storno(identity, DocumentStorno(reason="dup"))

        assert result == identity
