"""
Runtime validation utilities for the connector's architectural contracts.

This module provides:

- The error raised for invalid caller input (fail fast, before any ECM call).
- A protocol check that makes sure an object handed to an adapter really
  implements the ``DocumentOperations`` contract.

Protocol validation relies on ``isinstance()`` against ``@runtime_checkable``
protocols.
"""

import logging
from typing import TYPE_CHECKING, Type, TypeVar

if TYPE_CHECKING:
    from filenet_connector.repositories.document import DocumentOperations

logger = logging.getLogger(__name__)

P = TypeVar("P")


class DomainValidationError(ValueError):
    """Raised when caller input fails domain validation."""

    pass


class OperationsValidationError(Exception):
    """Raised when an operations implementation violates its protocol."""

    pass


def validate_protocol(implementation: object, protocol: Type[P]) -> P:
    """
    Validate that an implementation satisfies a protocol contract.

    Args:
        implementation: The object to validate
        protocol: The runtime-checkable protocol class to validate against

    Returns:
        The implementation, typed as the protocol

    Raises:
        OperationsValidationError: If validation fails
    """
    logger.debug(
        "Validating protocol implementation",
        extra={
            "implementation_type": type(implementation).__name__,
            "protocol_name": protocol.__name__,
        },
    )

    if not isinstance(implementation, protocol):
        error_message = (
            f"{type(implementation).__name__} does not implement "
            f"{protocol.__name__} protocol. Missing or incorrect methods."
        )
        logger.error(
            "Protocol validation failed",
            extra={
                "implementation_type": type(implementation).__name__,
                "protocol_name": protocol.__name__,
            },
        )
        raise OperationsValidationError(error_message)

    return implementation


def ensure_document_operations(operations: object) -> "DocumentOperations":
    """Validate and return an object implementing DocumentOperations."""
    from filenet_connector.repositories.document import DocumentOperations

    return validate_protocol(operations, DocumentOperations)

