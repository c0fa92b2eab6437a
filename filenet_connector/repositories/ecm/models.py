"""
Wire models of the FileNet ECM document REST API.

Field names follow the ECM's JSON (camelCase) through aliases; Python code
uses the snake_case attribute names. Unknown fields in responses are
ignored so the connector keeps working when the ECM adds fields.
"""

from typing import Any, Dict, List, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    model_serializer,
)


class EcmModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_wire(self) -> dict:
        """Serialize with the ECM's field names, omitting unset values."""
        return self.model_dump(by_alias=True, exclude_none=True)


class FileNetIdentificator(EcmModel):
    """Identifier of a document revision as reported by the ECM."""

    id: Optional[str] = None
    version: Optional[str] = None


class FileNetAttribute(EcmModel):
    """Document attribute with its kind as a plain string.

    ``value`` is always sent, as null when the attribute has no value.
    """

    name: str
    value: Optional[str] = None
    type: str

    @model_serializer(mode="wrap")
    def _keep_null_value(
        self, handler: SerializerFunctionWrapHandler
    ) -> Dict[str, Any]:
        data = handler(self)
        data.setdefault("value", self.value)
        return data


class CreateDocumentBodyRequest(EcmModel):
    namespace: Optional[str] = None
    filename: str
    title: str
    mimetype: Optional[str] = None
    data: Optional[str] = None
    attributes: List[FileNetAttribute] = Field(default_factory=list)


class UpdateDocumentBodyRequest(EcmModel):
    namespace: str
    mimetype: Optional[str] = None
    data: Optional[str] = None
    attributes: List[FileNetAttribute] = Field(default_factory=list)


class DocumentMetadataResponse(EcmModel):
    """Metadata of a stored document.

    ``size_in_bytes`` is a decimal number encoded as a string, e.g. "1024.0".
    """

    id: Optional[FileNetIdentificator] = None
    namespace: Optional[str] = None
    filename: Optional[str] = None
    mimetype: Optional[str] = None
    size_in_bytes: Optional[str] = Field(default=None, alias="sizeInBytes")
    attributes: Optional[List[FileNetAttribute]] = None


class GetDocumentResponse(EcmModel):
    """Stored document with its base64 encoded content."""

    id: Optional[FileNetIdentificator] = None
    file_name: Optional[str] = Field(default=None, alias="fileName")
    mime_type: Optional[str] = Field(default=None, alias="mimeType")
    content: Optional[str] = None
