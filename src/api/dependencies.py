from dataclasses import dataclass
from typing import Optional

from fastapi import Request

from services.profile_service import ProfileService
from utils.db.base import create_dynamodb_resource
from utils.db.profiles import ProfileStore
from utils.service_config import ServiceConfig


@dataclass
class ApiContext:
    config: ServiceConfig
    profile_service: ProfileService


def build_context(config: ServiceConfig, store: Optional[ProfileStore] = None) -> ApiContext:
    """Create the per-process context; the store is built here unless one is injected."""
    if store is None:
        store = ProfileStore(create_dynamodb_resource(config), config.table_name)
    return ApiContext(config=config, profile_service=ProfileService(store))


def get_ctx(request: Request) -> ApiContext:
    return request.app.state.ctx


def get_profile_service(request: Request) -> ProfileService:
    return get_ctx(request).profile_service
