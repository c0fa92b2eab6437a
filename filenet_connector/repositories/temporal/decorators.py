"""
Temporal decorators for exposing document operations as activities

This module provides class decorators that:
1. Register the async protocol methods of an implementation as Temporal
   activities
2. Generate workflow proxy classes whose methods execute those activities
Both use the same method discovery so activity names always line up.
"""

import functools
import inspect
import logging
from datetime import timedelta
from typing import (
    Any,
    Callable,
    Dict,
    List,
    Optional,
    Type,
    TypeVar,
    Union,
    get_args,
    get_origin,
)

from pydantic import BaseModel
from temporalio import activity, workflow
from temporalio.common import RetryPolicy

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Activities must not retry on their own; a failed ECM call propagates
NO_RETRY_POLICY = RetryPolicy(maximum_attempts=1)


def _discover_protocol_methods(cls_hierarchy: tuple[type, ...]) -> List[str]:
    """
    Find the public async methods declared by the protocols in a class MRO.

    Args:
        cls_hierarchy: The class MRO (method resolution order)

    Returns:
        Method names in declaration order
    """
    method_names: List[str] = []
    for base_class in cls_hierarchy:
        if not base_class.__dict__.get("_is_protocol", False):
            continue
        for name, member in base_class.__dict__.items():
            if name.startswith("_") or name in method_names:
                continue
            if inspect.iscoroutinefunction(member):
                method_names.append(name)

    logger.debug(
        f"Protocol discovery found {len(method_names)} methods: "
        f"{method_names}"
    )
    return method_names


def temporal_activity_registration(
    activity_prefix: str,
) -> Callable[[Type[T]], Type[T]]:
    """
    Class decorator that registers the protocol methods of a class as
    Temporal activities named ``<activity_prefix>.<method name>``.

    The wrapped method is the concrete implementation found on the class,
    so the decorated class keeps its behaviour and only gains activity
    definitions.

    Example:
        @temporal_activity_registration("filenet.document_operations")
        class TemporalFileNetDocumentOperations(FileNetDocumentOperations):
            pass
    """

    def decorator(cls: Type[T]) -> Type[T]:
        wrapped_methods = []

        for name in _discover_protocol_methods(cls.__mro__):
            implementation = getattr(cls, name)
            activity_name = f"{activity_prefix}.{name}"

            def create_wrapper_method(
                original_method: Callable[..., Any], method_name: str
            ) -> Callable[..., Any]:
                @functools.wraps(original_method)
                async def wrapper_method(*args: Any, **kwargs: Any) -> Any:
                    return await original_method(*args, **kwargs)

                wrapper_method.__name__ = method_name
                wrapper_method.__qualname__ = f"{cls.__name__}.{method_name}"
                return wrapper_method

            wrapper = create_wrapper_method(implementation, name)
            setattr(cls, name, activity.defn(name=activity_name)(wrapper))
            wrapped_methods.append(name)

        logger.debug(
            f"Temporal activity registration applied to {cls.__name__}",
            extra={
                "wrapped_methods": wrapped_methods,
                "activity_prefix": activity_prefix,
            },
        )
        return cls

    return decorator


def temporal_workflow_proxy(
    activity_base: str,
    default_timeout_seconds: int = 60,
    timeouts: Optional[Dict[str, int]] = None,
) -> Callable[[Type[T]], Type[T]]:
    """
    Class decorator that implements the protocol methods of a class by
    executing the matching activities from workflow code.

    Args:
        activity_base: Activity name prefix used at registration
        default_timeout_seconds: start-to-close timeout for every activity
        timeouts: Per-method timeout overrides in seconds

    Pydantic return types (including Optional ones) are validated from the
    raw activity result. Keyword arguments are passed positionally in the
    order of the protocol signature.
    """

    def decorator(cls: Type[T]) -> Type[T]:
        wrapped_methods = []

        for name in _discover_protocol_methods(cls.__mro__):
            signature = inspect.signature(getattr(cls, name))
            model_type = _pydantic_return_type(signature.return_annotation)
            timeout = timedelta(
                seconds=(timeouts or {}).get(name, default_timeout_seconds)
            )

            def create_workflow_method(
                method_name: str,
                method_signature: inspect.Signature,
                result_model: Optional[Type[BaseModel]],
                activity_timeout: timedelta,
            ) -> Callable[..., Any]:
                activity_name = f"{activity_base}.{method_name}"

                async def workflow_method(
                    self: Any, *args: Any, **kwargs: Any
                ) -> Any:
                    bound = method_signature.bind(self, *args, **kwargs)
                    bound.apply_defaults()
                    activity_args = list(bound.arguments.values())[1:]

                    logger.debug(
                        f"Workflow: Calling {method_name} activity",
                        extra={
                            "activity_name": activity_name,
                            "args_count": len(activity_args),
                        },
                    )

                    raw_result = await workflow.execute_activity(
                        activity_name,
                        args=activity_args,
                        start_to_close_timeout=activity_timeout,
                        retry_policy=NO_RETRY_POLICY,
                    )

                    if raw_result is None or result_model is None:
                        return raw_result
                    if isinstance(raw_result, result_model):
                        return raw_result
                    return result_model.model_validate(raw_result)

                workflow_method.__name__ = method_name
                workflow_method.__qualname__ = f"{cls.__name__}.{method_name}"
                return workflow_method

            setattr(
                cls,
                name,
                create_workflow_method(name, signature, model_type, timeout),
            )
            wrapped_methods.append(name)

        logger.debug(
            f"Temporal workflow proxy applied to {cls.__name__}",
            extra={
                "wrapped_methods": wrapped_methods,
                "activity_base": activity_base,
                "default_timeout_seconds": default_timeout_seconds,
            },
        )
        return cls

    return decorator


def _pydantic_return_type(annotation: Any) -> Optional[Type[BaseModel]]:
    """Return the pydantic model in ``Model`` or ``Optional[Model]``."""
    if get_origin(annotation) is Union:
        candidates = [a for a in get_args(annotation) if a is not type(None)]
        annotation = candidates[0] if len(candidates) == 1 else None
    if inspect.isclass(annotation) and issubclass(annotation, BaseModel):
        return annotation
    return None
