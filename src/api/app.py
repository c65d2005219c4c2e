"""
FastAPI application factory for the JSON API and the web form.
"""
import logging
from time import perf_counter
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from api.dependencies import build_context
from api.routes.profile_api import router as profile_api_router
from api.routes.profile_forms import router as profile_forms_router
from utils.db.profiles import ProfileStore
from utils.service_config import ServiceConfig

logger = logging.getLogger(__name__)


def create_app(config: Optional[ServiceConfig] = None, store: Optional[ProfileStore] = None) -> FastAPI:
    """
    Build the application.

    Args:
        config: service configuration (read from the environment when omitted)
        store: ProfileStore to use; a DynamoDB-backed one is created when omitted
    """
    config = config or ServiceConfig.from_environment()
    logging.basicConfig(level=config.numeric_log_level)
    logging.getLogger().setLevel(config.numeric_log_level)

    app = FastAPI(title="Profile Registration API", version="1.0.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SessionMiddleware, secret_key=config.web_secret_key)
    app.state.ctx = build_context(config, store)

    @app.middleware("http")
    async def request_log_middleware(request: Request, call_next):
        started = perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (perf_counter() - started) * 1000
            logger.error(
                f"{request.method} {request.url.path} - request failed after {duration_ms:.1f}ms",
                exc_info=True,
            )
            raise

        duration_ms = (perf_counter() - started) * 1000
        message = f"{request.method} {request.url.path} - Response {response.status_code} in {duration_ms:.1f}ms"
        if response.status_code >= 500:
            logger.error(message)
        elif response.status_code >= 400:
            logger.warning(message)
        else:
            logger.info(message)
        return response

    app.include_router(profile_api_router, prefix="/api/profile")
    app.include_router(profile_forms_router)

    logger.info(f"Profile registration app created for table {config.table_name}")
    return app


def main() -> None:
    config = ServiceConfig.from_environment()
    app = create_app(config)
    uvicorn.run(app, host="0.0.0.0", port=8000, log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
