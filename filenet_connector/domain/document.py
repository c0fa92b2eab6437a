"""
Document domain models for the FileNet connector.

These models describe documents the way the workflow engine sees them:
identities with generic attribute lists, new documents and updates with raw
binary content. They are independent of the ECM wire representation, which
lives in ``filenet_connector.repositories.ecm.models``.

All domain models use Pydantic BaseModel and are frozen: an update produces
a new instance, nothing is mutated in place. Binary fields serialize to JSON
as base64 so the models can cross the Temporal data converter and the HTTP
API unchanged.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AttributeType(str, Enum):
    """Kind of a document attribute.

    The wire value equals the member name and is matched case-sensitively.
    """

    TEXT = "TEXT"
    NUMBER = "NUMBER"
    DATE = "DATE"
    DATETIME = "DATETIME"
    BOOLEAN = "BOOLEAN"


class Attribute(BaseModel):
    """A single named document attribute."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: Optional[str] = None
    type: AttributeType = AttributeType.TEXT


class DocumentIdentity(BaseModel):
    """Identity of one document revision in the ECM repository.

    The triple (namespace, external_id, version) identifies a revision. The
    remaining fields carry whatever the ECM reported along with the identity.
    """

    model_config = ConfigDict(frozen=True)

    namespace: str
    external_id: str
    version: Optional[str] = None
    attributes: List[Attribute] = Field(default_factory=list)
    filename: Optional[str] = None
    mime_type: Optional[str] = None
    size_in_bytes: Optional[int] = None

    @field_validator("external_id")
    @classmethod
    def external_id_must_not_be_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("External id cannot be blank")
        return v


class NewDocument(BaseModel):
    """A document to be created, built by the caller per request."""

    model_config = ConfigDict(
        frozen=True, ser_json_bytes="base64", val_json_bytes="base64"
    )

    filename: str
    mime_type: Optional[str] = None
    content: bytes = b""
    metadata: List[Attribute] = Field(default_factory=list)


class DocumentUpdate(BaseModel):
    """New content and attributes for an existing document."""

    model_config = ConfigDict(
        frozen=True, ser_json_bytes="base64", val_json_bytes="base64"
    )

    content: bytes = b""
    mime_type: Optional[str] = None
    attributes: List[Attribute] = Field(default_factory=list)


class DocumentData(BaseModel):
    """Binary content of a stored document together with its identity.

    ``content`` is None when the ECM returned no content for the document.
    """

    model_config = ConfigDict(
        frozen=True, ser_json_bytes="base64", val_json_bytes="base64"
    )

    identity: Optional[DocumentIdentity] = None
    content: Optional[bytes] = None


class DocumentStorno(BaseModel):
    """Cancellation request for a stored document."""

    model_config = ConfigDict(frozen=True)

    reason: Optional[str] = None
