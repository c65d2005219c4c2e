"""
Lambda handlers for profile operations.

Routes (API Gateway HTTP API):
- POST /api/profile/save
- GET  /api/profile/all
"""
import logging
from typing import Dict, Any, Optional

from services.profile_service import ProfileService
from utils.db.base import create_dynamodb_resource
from utils.db.profiles import ProfileStore
from utils.handler_decorators import api_handler
from utils.lambda_utils import create_response, handle_error, raw_body, http_method
from utils.service_config import ServiceConfig

# Configure logging
logger = logging.getLogger(__name__)

# Built once per container and reused by every warm invocation
_service: Optional[ProfileService] = None


def get_profile_service() -> ProfileService:
    """Return the container-wide ProfileService, creating it on first use."""
    global _service
    if _service is None:
        config = ServiceConfig.from_environment()
        store = ProfileStore(create_dynamodb_resource(config), config.table_name)
        _service = ProfileService(store)
        logger.info(f"ProfileService initialized for table {config.table_name}")
    return _service


def set_profile_service(service: Optional[ProfileService]) -> None:
    """Replace the container-wide ProfileService (None resets it)."""
    global _service
    _service = service


@api_handler()
def save_profile_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Save a profile posted as JSON.

    Args:
        event: API Gateway Lambda Proxy Input Format
        context: Lambda Context runtime methods and attributes

    Returns:
        API Gateway response carrying the outcome body
    """
    logger.info("SaveProfile function triggered")
    outcome = get_profile_service().save(raw_body(event))
    return create_response(outcome.status_code, outcome.to_dict())


@api_handler()
def get_all_profiles_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """Return every stored profile."""
    logger.info("GetAllProfiles function triggered")
    outcome = get_profile_service().list_all()
    return create_response(outcome.status_code, outcome.to_dict())


def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """Main handler for profile operations."""
    if http_method(event) == "OPTIONS":
        return create_response(200, {"message": "OK"})

    route = (event or {}).get("routeKey")
    if not route:
        return handle_error(400, "Route not specified")

    route_map = {
        "POST /api/profile/save": save_profile_handler,
        "GET /api/profile/all": get_all_profiles_handler,
    }

    handler_func = route_map.get(route)
    if not handler_func:
        logger.warning(f"Unsupported route: {route}")
        return handle_error(404, f"Unsupported route: {route}")

    return handler_func(event, context)
