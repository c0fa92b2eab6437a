"""
Request/response logging for the ECM HTTP client.

The hooks plug into ``httpx.AsyncClient(event_hooks=...)``. Every exchange
is logged at INFO level. Unless DEBUG is enabled for this module's logger,
string values of the configured payload fields are replaced by ``#`` so
document content does not end up in the logs.
"""

import json
import logging
from typing import Any, Awaitable, Callable, Dict, Iterable, List, Optional

import httpx

logger = logging.getLogger(__name__)

REDACTED = "#"
SENSITIVE_HEADERS = frozenset({"authorization", "proxy-authorization"})


def redact_payload(
    payload: Dict[str, Any], fields_to_exclude: Optional[Iterable[str]]
) -> Dict[str, Any]:
    """Return a copy of payload with string values of the given fields masked.

    Only top-level string values are masked; other values are kept as is.
    """
    if not fields_to_exclude or not payload:
        return payload
    redacted = dict(payload)
    for field_name in fields_to_exclude:
        if isinstance(redacted.get(field_name), str):
            redacted[field_name] = REDACTED
    return redacted


def headers_to_string(headers: httpx.Headers) -> str:
    parts: List[str] = []
    for name in sorted(set(headers.keys())):
        if name.lower() in SENSITIVE_HEADERS:
            values = [REDACTED]
        else:
            values = headers.get_list(name)
        parts.append(f"{name}=[{','.join(values)}]")
    return ",".join(parts)


def _body_to_string(
    body: bytes, fields_to_exclude: Optional[Iterable[str]]
) -> str:
    try:
        payload = json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError):
        return f"<{len(body)} bytes of non-JSON content>"
    if isinstance(payload, dict) and not logger.isEnabledFor(logging.DEBUG):
        payload = redact_payload(payload, fields_to_exclude)
    return json.dumps(payload)


def make_logging_hooks(
    fields_to_exclude: Optional[Iterable[str]] = None,
) -> Dict[str, List[Callable[[Any], Awaitable[None]]]]:
    """Build the ``event_hooks`` mapping for an ``httpx.AsyncClient``.

    Args:
        fields_to_exclude: Payload field names masked outside DEBUG
    """
    excluded = tuple(fields_to_exclude or ())

    async def log_request(request: httpx.Request) -> None:
        logger.info(f"URI: {request.url}")
        logger.info(f"HTTP Method: {request.method}")
        logger.info(f"HTTP Headers: {headers_to_string(request.headers)}")
        body = request.content
        if body:
            logger.info(f"Request Body: {_body_to_string(body, excluded)}")
        else:
            logger.info("Request Body: No body")

    async def log_response(response: httpx.Response) -> None:
        logger.info(f"HTTP Status Code: {response.status_code}")
        logger.info(f"Status Text: {response.reason_phrase}")
        logger.info(f"HTTP Headers: {headers_to_string(response.headers)}")
        body = await response.aread()
        if body:
            logger.info(f"Response Body: {_body_to_string(body, excluded)}")

    return {"request": [log_request], "response": [log_response]}
