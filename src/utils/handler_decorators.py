"""
Handler decorators for reducing boilerplate code in Lambda handlers.

These decorators keep request logging and last-resort error handling out of
the handler bodies.
"""

import logging
import traceback
from datetime import datetime, timezone
from functools import wraps
from typing import Dict, Any, Callable

from pydantic import ValidationError

from utils.lambda_utils import create_response

logger = logging.getLogger(__name__)


def standard_error_handling(func: Callable) -> Callable:
    """
    Decorator that provides standard error handling for Lambda handlers.

    Maps exceptions that escape the handler to HTTP status codes:
    - ValidationError, ValueError, KeyError -> 400 Bad Request
    - Exception -> 500 Internal Server Error

    Handlers may return either a ready API Gateway response (a dict with
    statusCode) or a plain body, which is wrapped in a 200 response.
    """
    @wraps(func)
    def wrapper(*args, **kwargs) -> Dict[str, Any]:
        try:
            result = func(*args, **kwargs)

            if isinstance(result, dict) and "statusCode" in result:
                return result

            return create_response(200, result)

        except (ValidationError, ValueError, KeyError) as e:
            logger.error(f"Validation error in {func.__name__}: {str(e)}")
            return create_response(400, {"success": False, "message": str(e)})

        except Exception as e:
            logger.error(f"Unexpected error in {func.__name__}: {str(e)}")
            logger.error(f"Stacktrace: {traceback.format_exc()}")
            return create_response(500, {
                "success": False,
                "message": f"Error in {func.__name__.replace('_handler', '')}",
                "error": str(e),
            })

    return wrapper


def log_request_response(func: Callable) -> Callable:
    """
    Decorator that logs request and response details for debugging and monitoring.

    Logs:
    - Request ID, method, route
    - Request duration
    - Response status code
    - Error details if any
    """
    @wraps(func)
    def wrapper(event: Dict[str, Any], *args, **kwargs) -> Dict[str, Any]:
        event = event or {}
        request_context = event.get("requestContext", {})
        request_id = request_context.get("requestId", "unknown")
        method = request_context.get("http", {}).get("method", "unknown")
        route = event.get("routeKey", "unknown")

        start_time = datetime.now(timezone.utc)
        logger.info(f"[{request_id}] {method} {route} - Request started")

        try:
            result = func(event, *args, **kwargs)

            duration_ms = (datetime.now(timezone.utc) - start_time).total_seconds() * 1000
            status_code = result.get("statusCode", "unknown") if isinstance(result, dict) else "unknown"
            logger.info(f"[{request_id}] {method} {route} - Response {status_code} in {duration_ms:.1f}ms")

            return result

        except Exception as e:
            duration_ms = (datetime.now(timezone.utc) - start_time).total_seconds() * 1000
            logger.error(f"[{request_id}] {method} {route} - Error after {duration_ms:.1f}ms: {str(e)}")
            raise

    return wrapper


def api_handler(log_requests: bool = True, handle_errors: bool = True):
    """
    Convenience decorator factory that combines common handler patterns.

    Example:
        @api_handler()
        def save_profile_handler(event, context):
            return create_response(200, {"success": True})
    """
    def decorator(func: Callable) -> Callable:
        decorated_func = func

        # Apply decorators in reverse order (innermost first)
        if handle_errors:
            decorated_func = standard_error_handling(decorated_func)

        if log_requests:
            decorated_func = log_request_response(decorated_func)

        return decorated_func

    return decorator
