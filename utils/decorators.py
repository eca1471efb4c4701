"""
Decorators for error translation and logging around composite AWS helpers.
"""
import functools
import inspect
import uuid
from typing import Callable, Any, Optional
from botocore.exceptions import ClientError
from logger_config import get_logger
from utils.exceptions import RemoteError

logger = get_logger(__name__)


def remote_operation(
    func: Optional[Callable[..., Any]] = None,
    *,
    identifier_arg: int = 0
) -> Callable[..., Any]:
    """
    Decorator for helper methods that chain several AWS calls.

    Provides:
    - Request correlation IDs for logging
    - Translation of botocore ClientError into RemoteError
    - Start/finish logging around the helper

    Library errors (AwsClientError subclasses) are re-raised unchanged.

    Args:
        func: The helper method to decorate
        identifier_arg: Index of the positional argument (after self) that
            identifies the resource being worked on

    Returns:
        Decorated helper method
    """
    def decorator(helper: Callable[..., Any]) -> Callable[..., Any]:
        # Parameter names after self, for identifiers passed by keyword
        param_names = list(inspect.signature(helper).parameters)[1:]
        identifier_name = (
            param_names[identifier_arg] if 0 <= identifier_arg < len(param_names) else None
        )

        @functools.wraps(helper)
        def wrapper(self, *args: Any, **kwargs: Any) -> Any:
            correlation_id = str(uuid.uuid4())
            identifier = _identifier(args, kwargs, identifier_arg, identifier_name)

            logger.info(
                f'Helper {helper.__name__} invoked for {identifier}',
                extra={
                    "correlation_id": correlation_id,
                    "helper": helper.__name__,
                }
            )

            try:
                result = helper(self, *args, **kwargs)
            except ClientError as e:
                error_code = e.response.get('Error', {}).get('Code', '')
                logger.error(
                    f'Helper {helper.__name__} failed for {identifier}: {str(e)}',
                    extra={"correlation_id": correlation_id, "error_code": error_code}
                )
                raise RemoteError(
                    f'{helper.__name__} failed for {identifier}: {str(e)}',
                    operation=helper.__name__,
                    identifier=identifier,
                    error_code=error_code
                ) from e

            logger.info(
                f'Helper {helper.__name__} completed for {identifier}',
                extra={"correlation_id": correlation_id}
            )
            return result

        return wrapper

    if func is not None:
        return decorator(func)
    return decorator


def _identifier(
    args: tuple,
    kwargs: dict,
    index: int,
    name: Optional[str]
) -> Optional[str]:
    if 0 <= index < len(args):
        value = args[index]
    elif name is not None and name in kwargs:
        value = kwargs[name]
    else:
        return None
    if isinstance(value, (list, tuple)):
        return ','.join(str(v) for v in value)
    return str(value)
