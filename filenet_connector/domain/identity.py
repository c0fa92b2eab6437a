"""
Effective identity ("KPJM") resolution for ECM calls.

The workflow engine runs some steps under a technical user. For those steps
the ECM call must still be attributed to the person whose process triggered
them, and the only place that person's identity survives is a reserved
``reauthorize`` attribute on the document or request metadata.

Resolution rules:

1. The candidate identity is the caller id header of the request context
   (absent when there is no context or no such header).
2. If the candidate is absent or equals the technical user
   (case-insensitive), the first metadata attribute named like the reserved
   attribute (case-insensitive) overrides it.
3. Without such an attribute the candidate is returned as is, even when it
   is absent. The ECM decides whether to accept it.
4. Any other candidate is returned unchanged; metadata is not consulted.

The resolved identity is computed on every call and never cached.
"""

import logging
from typing import Iterable, Optional

from filenet_connector.config import FileNetSettings
from filenet_connector.domain.document import Attribute
from filenet_connector.domain.request_context import RequestContext

logger = logging.getLogger(__name__)

DEFAULT_CALLER_ID_HEADER = "uid"
DEFAULT_REAUTHORIZE_ATTRIBUTE = "reauthorize"


def find_reauthorized_identity(
    metadata: Optional[Iterable[Attribute]],
    reauthorize_attribute: str = DEFAULT_REAUTHORIZE_ATTRIBUTE,
) -> Optional[Attribute]:
    """Return the first attribute carrying a reauthorized identity."""
    wanted = reauthorize_attribute.casefold()
    for attribute in metadata or ():
        if attribute.name.casefold() == wanted:
            return attribute
    return None


def resolve_effective_identity(
    context: Optional[RequestContext],
    metadata: Optional[Iterable[Attribute]],
    technical_user_id: str,
    reauthorize_attribute: str = DEFAULT_REAUTHORIZE_ATTRIBUTE,
    caller_id_header: str = DEFAULT_CALLER_ID_HEADER,
) -> Optional[str]:
    """Decide which identity an ECM call is attributed to.

    Args:
        context: Request context of the call, or None
        metadata: Attributes of the new document or the target document
        technical_user_id: Identity of the workflow engine's technical user
        reauthorize_attribute: Name of the reserved override attribute
        caller_id_header: Header key carrying the caller identity

    Returns:
        The effective identity, or None when nothing identifies the caller
    """
    candidate = context.caller_id(caller_id_header) if context else None

    if candidate is not None and (
        candidate.casefold() != technical_user_id.casefold()
    ):
        return candidate

    logger.debug(
        "Caller identity is missing or the technical user, looking for a "
        "reauthorize attribute",
        extra={
            "candidate": candidate,
            "technical_user_id": technical_user_id,
            "reauthorize_attribute": reauthorize_attribute,
        },
    )
    override = find_reauthorized_identity(metadata, reauthorize_attribute)
    if override is None:
        return candidate
    return override.value


class IdentityResolver:
    """Resolves effective identities with the configured reserved names."""

    def __init__(self, settings: FileNetSettings):
        self.technical_user_id = settings.technical_user_id
        self.reauthorize_attribute = settings.reauthorize_attribute
        self.caller_id_header = settings.caller_id_header

    def resolve(
        self,
        context: Optional[RequestContext],
        metadata: Optional[Iterable[Attribute]],
        operation: str = "",
    ) -> Optional[str]:
        """Resolve the identity for one call, logging the outcome."""
        identity = resolve_effective_identity(
            context,
            metadata,
            self.technical_user_id,
            self.reauthorize_attribute,
            self.caller_id_header,
        )

        logger.debug(
            f"{operation}: resolved effective identity",
            extra={"operation": operation, "identity": identity},
        )
        return identity
