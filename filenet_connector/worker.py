"""
Temporal worker that hosts the FileNet document operation activities.
"""

import asyncio
import logging
import os
from typing import Any, List, Optional

import httpx
from temporalio.client import Client
from temporalio.contrib.pydantic import pydantic_data_converter
from temporalio.service import RPCError
from temporalio.worker import Worker

from filenet_connector.config import FileNetSettings
from filenet_connector.repositories.ecm.client import (
    HttpEcmClient,
    build_http_client,
)
from filenet_connector.repositories.temporal.activities import (
    TemporalFileNetDocumentOperations,
)

logger = logging.getLogger(__name__)


def setup_logging(debugging: bool = False) -> None:
    """Configure logging based on environment variables"""
    log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
    log_format = os.environ.get(
        "LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    numeric_level = getattr(logging, log_level, None)
    if not isinstance(numeric_level, int):
        print(f"Invalid log level: {log_level}, defaulting to INFO")
        numeric_level = logging.INFO

    logging.basicConfig(level=numeric_level, format=log_format, force=True)

    if debugging:
        logging.getLogger("filenet_connector").setLevel(logging.DEBUG)

    logger.info(
        "Logging configured",
        extra={"log_level": log_level, "debugging": debugging},
    )


async def get_temporal_client_with_retries(
    endpoint: str, attempts: int = 10, delay: int = 5
) -> Client:
    """Attempt to connect to Temporal with retries."""
    for attempt in range(attempts):
        try:
            client = await Client.connect(
                endpoint,
                data_converter=pydantic_data_converter,
                namespace="default",
            )
            logger.info(
                "Successfully connected to Temporal",
                extra={"endpoint": endpoint, "attempt": attempt + 1},
            )
            return client
        except RPCError as e:
            logger.warning(
                "Failed to connect to Temporal",
                extra={
                    "endpoint": endpoint,
                    "attempt": attempt + 1,
                    "max_attempts": attempts,
                    "error": str(e),
                    "retry_in_seconds": delay,
                },
            )
            if attempt + 1 == attempts:
                logger.error(
                    "All connection attempts to Temporal failed",
                    extra={"endpoint": endpoint, "total_attempts": attempts},
                )
                raise
            await asyncio.sleep(delay)

    raise RuntimeError("Failed to connect to Temporal after all attempts")


def document_activities(
    operations: TemporalFileNetDocumentOperations,
) -> List[Any]:
    """The activity callables a worker must register."""
    return [
        operations.create,
        operations.get_info,
        operations.get_content,
        operations.update,
        operations.delete,
    ]


async def run_worker(
    settings: Optional[FileNetSettings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> None:
    """Run the Temporal worker until it is shut down."""
    settings = settings or FileNetSettings.from_env()
    setup_logging(settings.debugging)

    logger.info(
        "Starting Temporal worker",
        extra={
            "temporal_endpoint": settings.temporal_endpoint,
            "task_queue": settings.task_queue,
            "namespace": settings.namespace,
        },
    )

    client = await get_temporal_client_with_retries(
        settings.temporal_endpoint
    )

    async with HttpEcmClient(
        settings, http_client=build_http_client(settings, transport)
    ) as ecm_client:
        operations = TemporalFileNetDocumentOperations(ecm_client, settings)
        activities = document_activities(operations)

        logger.info(
            "Creating Temporal worker",
            extra={
                "task_queue": settings.task_queue,
                "activity_count": len(activities),
            },
        )

        worker = Worker(
            client,
            task_queue=settings.task_queue,
            activities=activities,
        )
        await worker.run()


if __name__ == "__main__":
    asyncio.run(run_worker())
