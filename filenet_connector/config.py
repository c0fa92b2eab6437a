"""
Static configuration for the FileNet connector.

Settings are read once from environment variables and then passed
explicitly to the components that need them. Nothing in the connector
reads the environment on its own after start-up.
"""

import logging
import os
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://restapidv.pwfdata.corp"


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
    value = os.environ.get(name)
    if value is None:
        return default
    return tuple(item.strip() for item in value.split(",") if item.strip())


class FileNetSettings(BaseModel):
    """Connector configuration."""

    model_config = ConfigDict(frozen=True)

    # Logical document collection used when the ECM does not report one
    namespace: str

    # ECM REST API
    base_url: str = DEFAULT_API_URL
    username: str = ""
    password: str = Field(default="", repr=False)
    debugging: bool = False
    request_timeout_seconds: float = Field(default=30.0, gt=0)
    source_system: str = "PWF"

    # Identity resolution
    technical_user_id: str = "pwfadmin"
    reauthorize_attribute: str = "reauthorize"
    caller_id_header: str = "uid"

    # Request/response logging
    redacted_fields: Tuple[str, ...] = ("data", "content")

    # Temporal worker
    temporal_endpoint: str = "temporal:7233"
    task_queue: str = "filenet-documents-queue"

    @field_validator("namespace", "base_url", "technical_user_id")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Setting cannot be blank")
        return v.strip()

    @classmethod
    def from_env(cls, namespace: Optional[str] = None) -> "FileNetSettings":
        """Build settings from environment variables.

        Args:
            namespace: Overrides FILENET_NAMESPACE when given

        Raises:
            pydantic.ValidationError: If a required setting is missing
        """
        settings = cls(
            namespace=namespace or os.environ.get("FILENET_NAMESPACE", ""),
            base_url=os.environ.get("FILENET_API_URL", DEFAULT_API_URL),
            username=os.environ.get("FILENET_API_USERNAME", ""),
            password=os.environ.get("FILENET_API_PASSWORD", ""),
            debugging=_env_flag("FILENET_API_DEBUGGING"),
            request_timeout_seconds=float(
                os.environ.get("FILENET_API_TIMEOUT_SECONDS", "30")
            ),
            source_system=os.environ.get("FILENET_SOURCE_SYSTEM", "PWF"),
            technical_user_id=os.environ.get(
                "FILENET_TECHNICAL_USER_ID", "pwfadmin"
            ),
            reauthorize_attribute=os.environ.get(
                "FILENET_REAUTHORIZE_ATTRIBUTE", "reauthorize"
            ),
            caller_id_header=os.environ.get("FILENET_CALLER_ID_HEADER", "uid"),
            redacted_fields=_env_list(
                "FILENET_REDACTED_FIELDS", ("data", "content")
            ),
            temporal_endpoint=os.environ.get(
                "TEMPORAL_ENDPOINT", "temporal:7233"
            ),
            task_queue=os.environ.get(
                "TEMPORAL_TASK_QUEUE", "filenet-documents-queue"
            ),
        )

        logger.debug(
            "Loaded connector settings",
            extra={
                "namespace": settings.namespace,
                "base_url": settings.base_url,
                "debugging": settings.debugging,
                "task_queue": settings.task_queue,
            },
        )
        return settings
