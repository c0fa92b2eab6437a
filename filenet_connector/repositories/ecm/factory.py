"""
Factory function for creating FileNet DocumentOperations.

Wires the HTTP client, logging hooks and identity resolution from a single
FileNetSettings value and validates the result against the
DocumentOperations protocol.
"""

import logging
from typing import Optional

import httpx

from filenet_connector.config import FileNetSettings
from filenet_connector.repositories.document import DocumentOperations
from filenet_connector.validation import ensure_document_operations

from .client import HttpEcmClient, build_http_client
from .document import FileNetDocumentOperations

logger = logging.getLogger(__name__)


def filenet_document_operations_factory(
    settings: FileNetSettings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> DocumentOperations:
    """Create DocumentOperations talking to the configured ECM.

    Args:
        settings: Connector settings
        transport: Optional httpx transport, e.g. ``httpx.MockTransport``

    Returns:
        Validated DocumentOperations implementation
    """
    if settings.debugging:
        logging.getLogger("filenet_connector").setLevel(logging.DEBUG)

    client = HttpEcmClient(
        settings, http_client=build_http_client(settings, transport)
    )
    operations = ensure_document_operations(
        FileNetDocumentOperations(client, settings)
    )

    logger.info(
        "FileNet document operations created",
        extra={
            "namespace": settings.namespace,
            "base_url": settings.base_url,
            "debugging": settings.debugging,
        },
    )
    return operations
