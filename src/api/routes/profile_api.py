import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from api.dependencies import get_profile_service
from services.profile_service import ProfileService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["profile"])


@router.get("/test")
async def test() -> dict:
    return {
        "success": True,
        "message": "API is working!",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.post("/save")
async def save_profile(
    request: Request,
    service: ProfileService = Depends(get_profile_service),
) -> JSONResponse:
    logger.info("SaveProfile API called")
    # Raw body so null or malformed JSON becomes a 400 outcome, not a framework 422
    body = await request.body()
    outcome = await run_in_threadpool(service.save, body)
    return JSONResponse(status_code=outcome.status_code, content=outcome.to_dict())


@router.get("/all")
async def get_all_profiles(service: ProfileService = Depends(get_profile_service)) -> JSONResponse:
    logger.info("GetAllProfiles API called")
    outcome = await run_in_threadpool(service.list_all)
    return JSONResponse(status_code=outcome.status_code, content=outcome.to_dict())
