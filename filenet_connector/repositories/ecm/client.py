"""
HTTP client for the FileNet ECM document REST API.

``EcmClient`` is the protocol the document operations depend on;
``HttpEcmClient`` implements it with ``httpx.AsyncClient``. Tests substitute
an ``httpx.MockTransport`` or a fake client implementing the protocol.

Each call carries an ``EcmCallContext``: the effective identity plus a
correlation id and timestamp that exist only for request tracing on the ECM
side. A response without a body yields None. HTTP error statuses raise
``httpx.HTTPStatusError``; transport errors propagate as raised by httpx.
A body that does not match the expected model raises ``EcmResponseError``.
Retries and backoff are not handled here.
"""

import logging
import time
import uuid
from typing import (
    Any,
    Dict,
    Optional,
    Protocol,
    Type,
    TypeVar,
    runtime_checkable,
)
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError

from filenet_connector.config import FileNetSettings

from .logging_hooks import make_logging_hooks
from .models import (
    CreateDocumentBodyRequest,
    DocumentMetadataResponse,
    EcmModel,
    FileNetIdentificator,
    GetDocumentResponse,
    UpdateDocumentBodyRequest,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=EcmModel)

KPJM_HEADER = "X-KPJM"
CORRELATION_ID_HEADER = "X-Correlation-ID"
TIMESTAMP_HEADER = "X-Timestamp"
SOURCE_SYSTEM_HEADER = "X-Source-System"


class EcmResponseError(Exception):
    """Raised when a successful ECM response cannot be interpreted."""

    pass


class EcmCallContext(BaseModel):
    """Per-call tracing and attribution data sent with every ECM request."""

    model_config = ConfigDict(frozen=True)

    kpjm: Optional[str]
    correlation_id: str
    timestamp: str
    source_system: str

    @classmethod
    def new(cls, kpjm: Optional[str], source_system: str) -> "EcmCallContext":
        """Create a context with a fresh correlation id and current time."""
        return cls(
            kpjm=kpjm,
            correlation_id=str(uuid.uuid4()),
            timestamp=str(int(time.time() * 1000)),
            source_system=source_system,
        )

    def to_headers(self) -> Dict[str, str]:
        headers = {
            CORRELATION_ID_HEADER: self.correlation_id,
            TIMESTAMP_HEADER: self.timestamp,
            SOURCE_SYSTEM_HEADER: self.source_system,
        }
        # A missing identity is left for the ECM to reject
        if self.kpjm is not None:
            headers[KPJM_HEADER] = self.kpjm
        return headers


@runtime_checkable
class EcmClient(Protocol):
    """The ECM document endpoints used by the connector."""

    async def create_document(
        self, call: EcmCallContext, body: CreateDocumentBodyRequest
    ) -> Optional[FileNetIdentificator]: ...

    async def get_document_metadata(
        self,
        call: EcmCallContext,
        document_id: str,
        namespace: str,
        version: Optional[str] = None,
    ) -> Optional[DocumentMetadataResponse]: ...

    async def get_document(
        self,
        call: EcmCallContext,
        document_id: str,
        namespace: str,
        version: Optional[str] = None,
    ) -> Optional[GetDocumentResponse]: ...

    async def update_document(
        self,
        call: EcmCallContext,
        document_id: str,
        body: UpdateDocumentBodyRequest,
    ) -> Optional[FileNetIdentificator]: ...

    async def delete_document(
        self, call: EcmCallContext, document_id: str, namespace: str
    ) -> Optional[FileNetIdentificator]: ...


def build_http_client(
    settings: FileNetSettings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """Create the ``httpx.AsyncClient`` configured for the ECM API."""
    auth = (
        httpx.BasicAuth(settings.username, settings.password)
        if settings.username
        else None
    )
    logger.debug(
        "Creating ECM HTTP client",
        extra={
            "base_url": settings.base_url,
            "timeout_seconds": settings.request_timeout_seconds,
            "basic_auth": auth is not None,
        },
    )
    return httpx.AsyncClient(
        base_url=settings.base_url,
        auth=auth,
        timeout=settings.request_timeout_seconds,
        event_hooks=make_logging_hooks(settings.redacted_fields),
        transport=transport,
    )


class HttpEcmClient(EcmClient):
    """EcmClient implementation over HTTP."""

    def __init__(
        self,
        settings: FileNetSettings,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self._http = http_client or build_http_client(settings)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "HttpEcmClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def create_document(
        self, call: EcmCallContext, body: CreateDocumentBodyRequest
    ) -> Optional[FileNetIdentificator]:
        return await self._request(
            "POST", "/documents", call, FileNetIdentificator, body=body
        )

    async def get_document_metadata(
        self,
        call: EcmCallContext,
        document_id: str,
        namespace: str,
        version: Optional[str] = None,
    ) -> Optional[DocumentMetadataResponse]:
        return await self._request(
            "GET",
            f"{_document_path(document_id)}/metadata",
            call,
            DocumentMetadataResponse,
            params={"namespace": namespace, "version": version},
        )

    async def get_document(
        self,
        call: EcmCallContext,
        document_id: str,
        namespace: str,
        version: Optional[str] = None,
    ) -> Optional[GetDocumentResponse]:
        return await self._request(
            "GET",
            _document_path(document_id),
            call,
            GetDocumentResponse,
            params={"namespace": namespace, "version": version},
        )

    async def update_document(
        self,
        call: EcmCallContext,
        document_id: str,
        body: UpdateDocumentBodyRequest,
    ) -> Optional[FileNetIdentificator]:
        return await self._request(
            "PUT",
            _document_path(document_id),
            call,
            FileNetIdentificator,
            body=body,
        )

    async def delete_document(
        self, call: EcmCallContext, document_id: str, namespace: str
    ) -> Optional[FileNetIdentificator]:
        return await self._request(
            "DELETE",
            _document_path(document_id),
            call,
            FileNetIdentificator,
            params={"namespace": namespace},
        )

    async def _request(
        self,
        method: str,
        path: str,
        call: EcmCallContext,
        response_model: Type[M],
        body: Optional[EcmModel] = None,
        params: Optional[Dict[str, Optional[str]]] = None,
    ) -> Optional[M]:
        query = {k: v for k, v in (params or {}).items() if v is not None}
        try:
            response = await self._http.request(
                method,
                path,
                headers=call.to_headers(),
                params=query,
                json=body.to_wire() if body is not None else None,
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(
                "ECM request failed",
                extra={
                    "method": method,
                    "path": path,
                    "correlation_id": call.correlation_id,
                    "error": str(e),
                    "error_type": type(e).__name__,
                },
            )
            raise

        no_content = response.status_code == httpx.codes.NO_CONTENT
        if no_content or not response.content:
            logger.debug(
                "ECM response has no body",
                extra={
                    "method": method,
                    "path": path,
                    "status_code": response.status_code,
                    "correlation_id": call.correlation_id,
                },
            )
            return None

        try:
            return response_model.model_validate_json(response.content)
        except ValidationError as e:
            logger.error(
                "ECM response body is malformed",
                extra={
                    "method": method,
                    "path": path,
                    "correlation_id": call.correlation_id,
                    "error_count": e.error_count(),
                },
            )
            raise EcmResponseError(
                f"Malformed ECM response for {method} {path}"
            ) from e


def _document_path(document_id: str) -> str:
    return f"/documents/{quote(document_id, safe='')}"
