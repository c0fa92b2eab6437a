"""
Pydantic models for API responses.

Most endpoints return domain models directly. Content responses carry the
binary payload as base64 text.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from filenet_connector.domain import DocumentData, DocumentIdentity
from filenet_connector.repositories.ecm.mapper import encode_content


class HealthCheckResponse(BaseModel):
    """Response for health check endpoint."""

    status: str
    version: str
    timestamp: datetime


class DocumentContentResponse(BaseModel):
    identity: Optional[DocumentIdentity] = None
    content_base64: Optional[str] = None

    @classmethod
    def from_domain(cls, data: DocumentData) -> "DocumentContentResponse":
        return cls(
            identity=data.identity,
            content_base64=encode_content(data.content),
        )
