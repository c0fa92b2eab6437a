"""
Translation between the workflow domain models and the ECM wire models.

Every function here is pure and deterministic. Absence is preserved rather
than replaced by zero values: empty content encodes to None, a blank size
coerces to None, and an identity can only be built from a non-blank wire id.
"""

import base64
import math
from typing import Iterable, List, Optional

from filenet_connector.domain import (
    Attribute,
    AttributeType,
    DocumentIdentity,
    DocumentUpdate,
    NewDocument,
)
from filenet_connector.validation import DomainValidationError

from .models import (
    CreateDocumentBodyRequest,
    DocumentMetadataResponse,
    FileNetAttribute,
    FileNetIdentificator,
    GetDocumentResponse,
    UpdateDocumentBodyRequest,
)


def _has_text(value: Optional[str]) -> bool:
    return value is not None and bool(value.strip())


# --- Attributes ---


def to_domain_attribute_type(kind: str) -> AttributeType:
    """Parse a wire attribute kind, matching member names exactly."""
    member = AttributeType.__members__.get(kind)
    if member is None:
        raise DomainValidationError(f"Unknown attribute type: {kind!r}")
    return member


def to_domain_attributes(
    attributes: Optional[Iterable[FileNetAttribute]],
) -> List[Attribute]:
    """Convert wire attributes to domain attributes, keeping their order.

    Raises:
        DomainValidationError: If an attribute kind is not recognised
    """
    return [
        Attribute(
            name=attribute.name,
            value=attribute.value,
            type=to_domain_attribute_type(attribute.type),
        )
        for attribute in attributes or ()
    ]


def to_wire_attributes(
    attributes: Optional[Iterable[Attribute]],
) -> List[FileNetAttribute]:
    """Convert domain attributes to wire attributes, keeping their order."""
    return [
        FileNetAttribute(
            name=attribute.name,
            value=attribute.value,
            type=attribute.type.name,
        )
        for attribute in attributes or ()
    ]


# --- Content ---


def encode_content(data: Optional[bytes]) -> Optional[str]:
    """Base64 encode content; empty content encodes to None."""
    if not data:
        return None
    return base64.b64encode(data).decode("ascii")


def decode_content(encoded: Optional[str]) -> Optional[bytes]:
    """Decode base64 content; blank input means no content (None)."""
    if not _has_text(encoded):
        return None
    return base64.b64decode(encoded)  # type: ignore[arg-type]


def compute_size_from_encoded(encoded: Optional[str]) -> Optional[int]:
    """Size in bytes of the decoded content, None when unknown.

    The size is that of the decoded payload, not the length of the encoded
    string.
    """
    content = decode_content(encoded)
    if content is None:
        return None
    return len(content)


def coerce_size_field(value: Optional[str]) -> Optional[int]:
    """Parse the ECM's decimal size string ("1024.0"), truncating.

    Non-finite values ("NaN", "1e400") mean the size is unknown.
    """
    if not _has_text(value):
        return None
    size = float(value)  # type: ignore[arg-type]
    if not math.isfinite(size):
        return None
    return int(size)


def derive_title(filename: Optional[str]) -> str:
    """Title of a document: its filename without the last extension.

    A dot at position 0 does not start an extension, so ".gitignore" keeps
    its name.

    Raises:
        ValueError: If filename is None
    """
    if filename is None:
        raise ValueError("Attribute 'filename' can not be null.")
    extension_index = filename.rfind(".")
    if extension_index > 0:
        return filename[:extension_index]
    return filename


# --- Identities ---


def identity_from_identificator(
    identificator: Optional[FileNetIdentificator],
    namespace: str,
    attributes: Optional[Iterable[Attribute]] = None,
    filename: Optional[str] = None,
    mime_type: Optional[str] = None,
    size_in_bytes: Optional[int] = None,
) -> Optional[DocumentIdentity]:
    """Build an identity from a wire identifier, None if it has no id."""
    if identificator is None or not _has_text(identificator.id):
        return None
    return DocumentIdentity(
        namespace=namespace,
        external_id=identificator.id,  # type: ignore[arg-type]
        version=identificator.version,
        attributes=list(attributes or ()),
        filename=filename,
        mime_type=mime_type,
        size_in_bytes=size_in_bytes,
    )


def identity_from_metadata_response(
    response: DocumentMetadataResponse, default_namespace: str
) -> Optional[DocumentIdentity]:
    """Build an identity from a metadata response.

    The namespace reported by the ECM wins over ``default_namespace``.
    """
    return identity_from_identificator(
        response.id,
        response.namespace or default_namespace,
        attributes=to_domain_attributes(response.attributes),
        filename=response.filename,
        mime_type=response.mimetype,
        size_in_bytes=coerce_size_field(response.size_in_bytes),
    )


def identity_from_document_response(
    response: GetDocumentResponse, namespace: str
) -> Optional[DocumentIdentity]:
    """Build an identity from a content response; it carries no attributes."""
    return identity_from_identificator(
        response.id,
        namespace,
        filename=response.file_name,
        mime_type=response.mime_type,
        size_in_bytes=compute_size_from_encoded(response.content),
    )


# --- Requests ---


def to_create_document_request(
    document: NewDocument, namespace: str
) -> CreateDocumentBodyRequest:
    return CreateDocumentBodyRequest(
        namespace=namespace,
        filename=document.filename,
        title=derive_title(document.filename),
        mimetype=document.mime_type,
        data=encode_content(document.content),
        attributes=to_wire_attributes(document.metadata),
    )


def to_update_document_request(
    update: DocumentUpdate, namespace: str
) -> UpdateDocumentBodyRequest:
    return UpdateDocumentBodyRequest(
        namespace=namespace,
        mimetype=update.mime_type,
        data=encode_content(update.content),
        attributes=to_wire_attributes(update.attributes),
    )
