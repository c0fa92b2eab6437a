"""
Translation of connector errors into HTTP responses.

- DomainValidationError: 422, the caller sent invalid input
- UnsupportedOperationError: 501, the store lacks the capability
- httpx.HTTPStatusError: 502, the ECM answered with an error status
- other httpx.HTTPError: 502, the ECM could not be reached
- EcmResponseError: 502, the ECM answered with an unusable body
"""

import logging

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from filenet_connector.repositories.document import UnsupportedOperationError
from filenet_connector.repositories.ecm.client import EcmResponseError
from filenet_connector.validation import DomainValidationError

logger = logging.getLogger(__name__)


async def domain_validation_error_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    logger.info(
        "Rejected invalid request",
        extra={"path": request.url.path, "error": str(exc)},
    )
    return JSONResponse(status_code=422, content={"detail": str(exc)})


async def unsupported_operation_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    return JSONResponse(status_code=501, content={"detail": str(exc)})


async def ecm_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "ECM call failed",
        extra={
            "path": request.url.path,
            "error_type": type(exc).__name__,
            "error_message": str(exc),
        },
    )
    if isinstance(exc, httpx.HTTPStatusError):
        detail = f"ECM returned status {exc.response.status_code}"
    elif isinstance(exc, EcmResponseError):
        detail = "ECM returned an invalid response"
    else:
        detail = "ECM could not be reached"
    return JSONResponse(status_code=502, content={"detail": detail})


def add_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(
        DomainValidationError, domain_validation_error_handler
    )
    app.add_exception_handler(
        UnsupportedOperationError, unsupported_operation_handler
    )
    app.add_exception_handler(httpx.HTTPError, ecm_error_handler)
    app.add_exception_handler(EcmResponseError, ecm_error_handler)
