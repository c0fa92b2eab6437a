"""
Request context carried by a workflow engine call.

The workflow engine hands every operation an optional serialized blob of
workflow variables. The only part the connector uses is the ``headers``
object, which carries the identity of the caller.
"""

import json
import logging
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict

from filenet_connector.validation import DomainValidationError

logger = logging.getLogger(__name__)

HEADERS_FIELD = "headers"


class RequestContext(BaseModel):
    """Caller headers for the duration of one operation.

    ``caller_headers`` is None when the engine supplied no context at all,
    which is distinct from an empty header map.
    """

    model_config = ConfigDict(frozen=True)

    caller_headers: Optional[Mapping[str, Any]] = None

    @classmethod
    def from_workflow_variables(
        cls, workflow_variables: Optional[str]
    ) -> "RequestContext":
        """Build a context from the serialized workflow variables.

        Args:
            workflow_variables: JSON object as a string, or None

        Returns:
            RequestContext whose headers come from the ``headers`` field;
            an object without that field yields an empty header map.

        Raises:
            DomainValidationError: If the blob is not a JSON object or its
                ``headers`` field is not an object
        """
        if workflow_variables is None or not workflow_variables.strip():
            return cls(caller_headers=None)

        try:
            variables = json.loads(workflow_variables)
        except json.JSONDecodeError as e:
            raise DomainValidationError(
                f"Workflow variables are not valid JSON: {e}"
            ) from e

        if not isinstance(variables, dict):
            raise DomainValidationError(
                "Workflow variables must be a JSON object"
            )

        headers = variables.get(HEADERS_FIELD)
        if headers is None:
            logger.debug("Workflow variables carry no headers")
            return cls(caller_headers={})
        if not isinstance(headers, dict):
            raise DomainValidationError(
                "Workflow variable 'headers' must be a JSON object"
            )

        return cls(caller_headers=headers)

    def caller_id(self, key: str) -> Optional[str]:
        """Return the header value under ``key`` as a string, if present."""
        if self.caller_headers is None:
            return None
        value = self.caller_headers.get(key)
        if value is None:
            return None
        return str(value)
