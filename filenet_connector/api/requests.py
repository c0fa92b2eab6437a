"""
Pydantic models for API requests.

Binary content travels as base64 text. Every request may carry the
serialized workflow variables of the calling job.
"""

import base64
import binascii
from typing import Annotated, List, Optional

from pydantic import AfterValidator, BaseModel, Field

from filenet_connector.domain import (
    Attribute,
    DocumentIdentity,
    DocumentStorno,
    DocumentUpdate,
    NewDocument,
)
from filenet_connector.repositories.ecm.mapper import decode_content


def _validate_base64(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    try:
        base64.b64decode(value, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Content is not valid base64: {e}") from e
    return value


Base64Text = Annotated[Optional[str], AfterValidator(_validate_base64)]


class WorkflowRequest(BaseModel):
    workflow_variables: Optional[str] = Field(
        default=None,
        description="Serialized workflow variables (JSON object)",
    )


class CreateDocumentRequest(WorkflowRequest):
    filename: str
    mime_type: Optional[str] = None
    content_base64: Base64Text = None
    metadata: List[Attribute] = Field(default_factory=list)

    def to_domain(self) -> NewDocument:
        return NewDocument(
            filename=self.filename,
            mime_type=self.mime_type,
            content=decode_content(self.content_base64) or b"",
            metadata=self.metadata,
        )


class DocumentRequest(WorkflowRequest):
    identity: DocumentIdentity


class UpdateDocumentRequest(DocumentRequest):
    mime_type: Optional[str] = None
    content_base64: Base64Text = None
    attributes: List[Attribute] = Field(default_factory=list)

    def to_domain(self) -> DocumentUpdate:
        return DocumentUpdate(
            content=decode_content(self.content_base64) or b"",
            mime_type=self.mime_type,
            attributes=self.attributes,
        )


class StornoDocumentRequest(BaseModel):
    identity: DocumentIdentity
    storno: DocumentStorno = Field(default_factory=DocumentStorno)
