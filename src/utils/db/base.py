"""
Core database infrastructure.

This module provides:
- DynamoDB resource construction
- Decorators for cross-cutting concerns
- Error-code helpers for botocore ClientError
"""

import logging
import time
from typing import Any, Callable, Optional, TypeVar
from functools import wraps

import boto3
from botocore.exceptions import ClientError
from pydantic import ValidationError

from utils.service_config import ServiceConfig

# Configure logging
logger = logging.getLogger(__name__)

T = TypeVar('T')


# ============================================================================
# Resource construction
# ============================================================================

def create_dynamodb_resource(config: Optional[ServiceConfig] = None) -> Any:
    """
    Create the DynamoDB service resource used by the whole process.

    Call this once at startup and pass the result to the stores that need it.
    """
    config = config or ServiceConfig.from_environment()
    kwargs = {}
    if config.region_name:
        kwargs['region_name'] = config.region_name
    if config.dynamodb_endpoint_url:
        kwargs['endpoint_url'] = config.dynamodb_endpoint_url
    logger.info(
        f"Creating DynamoDB resource (region={config.region_name or 'default'}, "
        f"endpoint={config.dynamodb_endpoint_url or 'aws'})"
    )
    return boto3.resource('dynamodb', **kwargs)


def client_error_code(error: ClientError) -> str:
    """Extract the error code from a botocore ClientError."""
    return error.response.get('Error', {}).get('Code', 'Unknown')


# ============================================================================
# Decorators
# ============================================================================

def dynamodb_operation(operation_name: Optional[str] = None):
    """
    Decorator for consistent DynamoDB error handling and logging.

    ClientErrors are logged with their error code and re-raised unchanged.
    Pydantic validation errors raised while mapping items are converted to
    ValueError.

    Usage:
        @dynamodb_operation("insert_profile")
        def insert(self, record: ProfileRecord) -> ProfileRecord:
            ...
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            op_name = operation_name or func.__name__
            try:
                logger.debug(f"Starting {op_name}")
                result = func(*args, **kwargs)
                logger.info(f"Successfully completed {op_name}")
                return result
            except ClientError as e:
                error_code = client_error_code(e)
                error_msg = e.response.get('Error', {}).get('Message', str(e))
                logger.error(
                    f"DynamoDB error in {op_name}: {error_code} - {error_msg}",
                    exc_info=True,
                    extra={
                        'operation': op_name,
                        'error_code': error_code,
                        'function': func.__name__
                    }
                )
                raise
            except ValidationError as e:
                logger.error(
                    f"Validation error in {op_name}: {str(e)}",
                    exc_info=True,
                    extra={'operation': op_name}
                )
                raise ValueError(f"Invalid data in {op_name}: {str(e)}")
            except Exception as e:
                logger.error(
                    f"Unexpected error in {op_name}: {str(e)}",
                    exc_info=True,
                    extra={'operation': op_name}
                )
                raise
        return wrapper
    return decorator


def monitor_performance(
    operation_type: str = "db_operation",
    warn_threshold_ms: float = 1000,
    error_threshold_ms: float = 5000
):
    """
    Decorator to monitor and log operation performance.

    Thresholds:
    - Debug: < warn_threshold_ms (normal operation)
    - Warning: warn_threshold_ms to error_threshold_ms (slow)
    - Error: > error_threshold_ms (very slow, investigate)

    Usage:
        @monitor_performance(operation_type="scan", warn_threshold_ms=500)
        @dynamodb_operation("scan_profiles")
        def scan_all(self) -> List[ProfileRecord]:
            ...
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            start_time = time.time()

            try:
                return func(*args, **kwargs)
            finally:
                elapsed_ms = (time.time() - start_time) * 1000

                log_context = {
                    'operation': func.__name__,
                    'operation_type': operation_type,
                    'elapsed_ms': elapsed_ms
                }

                if elapsed_ms > error_threshold_ms:
                    logger.error(
                        f"SLOW OPERATION: {func.__name__} took {elapsed_ms:.2f}ms "
                        f"(threshold: {error_threshold_ms}ms)",
                        extra=log_context
                    )
                elif elapsed_ms > warn_threshold_ms:
                    logger.warning(
                        f"Slow operation: {func.__name__} took {elapsed_ms:.2f}ms "
                        f"(threshold: {warn_threshold_ms}ms)",
                        extra=log_context
                    )
                else:
                    logger.debug(
                        f"{func.__name__} completed in {elapsed_ms:.2f}ms",
                        extra=log_context
                    )
        return wrapper
    return decorator
