"""
Server-rendered registration form and profile list.
"""
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from starlette.concurrency import run_in_threadpool

from api.dependencies import get_profile_service
from models.profile import Profile
from services.profile_service import ProfileService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["profile-forms"])

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))

FLASH_SESSION_KEY = "flash_message"
REGISTER_SUCCESS_MESSAGE = "Profile registered successfully!"
REGISTER_FAILURE_MESSAGE = "An error occurred while saving the profile. Please try again."
LIST_FAILURE_MESSAGE = "An error occurred while retrieving profiles. Please try again."


def _render_register(
    request: Request,
    profile: Profile,
    errors: List[str],
    status_code: int = 200,
) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "register.html",
        {"profile": profile, "errors": errors},
        status_code=status_code,
    )


@router.get("/", response_class=HTMLResponse)
async def index(request: Request) -> HTMLResponse:
    flash: Optional[str] = request.session.pop(FLASH_SESSION_KEY, None)
    return templates.TemplateResponse(request, "index.html", {"flash_message": flash})


@router.get("/profile/register", response_class=HTMLResponse)
async def register_form(request: Request) -> HTMLResponse:
    return _render_register(request, Profile(), [])


@router.post("/profile/register")
async def register(
    request: Request,
    name: str = Form(""),
    surname: str = Form(""),
    email: str = Form(""),
    age: str = Form(""),
    service: ProfileService = Depends(get_profile_service),
):
    logger.info("Profile registration form submitted")
    form_data: Dict[str, Any] = {"name": name, "surname": surname, "email": email, "age": age}
    profile = Profile.model_validate(form_data)

    missing = profile.missing_fields()
    if missing:
        errors = [f"The {field.capitalize()} field is required." for field in missing]
        return _render_register(request, profile, errors, status_code=400)

    outcome = await run_in_threadpool(service.save, form_data)
    if outcome.success:
        request.session[FLASH_SESSION_KEY] = REGISTER_SUCCESS_MESSAGE
        return RedirectResponse(url="/", status_code=303)

    message = outcome.message if outcome.is_client_error else REGISTER_FAILURE_MESSAGE
    return _render_register(request, profile, [message], status_code=outcome.status_code)


@router.get("/profile/all", response_class=HTMLResponse)
async def all_profiles(
    request: Request,
    service: ProfileService = Depends(get_profile_service),
) -> HTMLResponse:
    logger.info("Retrieving all profiles for the profile list page")
    outcome = await run_in_threadpool(service.list_all)
    errors = [] if outcome.success else [LIST_FAILURE_MESSAGE]
    return templates.TemplateResponse(
        request,
        "all_profiles.html",
        {"profiles": outcome.profiles or [], "errors": errors},
    )
