"""
Dependency injection for FastAPI endpoints.
"""

import logging
from typing import Optional

from filenet_connector.config import FileNetSettings
from filenet_connector.repositories.document import DocumentOperations
from filenet_connector.repositories.ecm.factory import (
    filenet_document_operations_factory,
)

logger = logging.getLogger(__name__)


class DependencyContainer:
    """
    Holds the process-wide settings and document operations.
    Always creates real clients; tests override the FastAPI dependencies.
    """

    def __init__(self) -> None:
        self._settings: Optional[FileNetSettings] = None
        self._operations: Optional[DocumentOperations] = None

    def get_settings(self) -> FileNetSettings:
        if self._settings is None:
            self._settings = FileNetSettings.from_env()
        return self._settings

    def get_document_operations(self) -> DocumentOperations:
        if self._operations is None:
            logger.debug("Creating FileNet document operations")
            self._operations = filenet_document_operations_factory(
                self.get_settings()
            )
        return self._operations


_container = DependencyContainer()


async def get_settings() -> FileNetSettings:
    """FastAPI dependency for the connector settings."""
    return _container.get_settings()


async def get_document_operations() -> DocumentOperations:
    """FastAPI dependency for the configured DocumentOperations."""
    return _container.get_document_operations()
