import secrets
from typing import Optional

from fastapi import APIRouter, Request, Form
from fastapi.responses import RedirectResponse

from hr_dashboard.core.logger import get_logger
from hr_dashboard.core.rbac import user_has_role
from hr_dashboard.core.templating import templates
from hr_dashboard.forms import validate_login
from hr_dashboard.models import User
from hr_dashboard.store import DomainStateStore

router = APIRouter()
logger = get_logger(__name__)

LOGIN_FAILED = "Invalid credentials. Please try again."


def get_store(request: Request) -> DomainStateStore:
    """The store for this browser, created on first visit."""
    workspace_id = request.session.get("workspace_id")
    if not workspace_id:
        workspace_id = secrets.token_urlsafe(16)
        request.session["workspace_id"] = workspace_id
    return request.app.state.stores.get_or_create(workspace_id)


def require_login(request: Request) -> Optional[User]:
    return get_store(request).current_user


def require_role(request: Request, role: str) -> Optional[RedirectResponse]:
    """Redirect to send when the current user may not see a `role` page, else None."""
    user = require_login(request)
    if not user:
        return RedirectResponse("/login", status_code=302)
    if not user_has_role(user, role):
        return RedirectResponse("/?error=forbidden", status_code=302)
    return None


@router.get("/login")
async def login_page(request: Request):
    if require_login(request):
        return RedirectResponse("/", status_code=302)
    return templates.TemplateResponse(
        request, "login.html", {"hide_nav": True, "error": None, "email": "", "role": "employee"}
    )


@router.post("/login")
async def login_action(
    request: Request,
    email: str = Form(""),
    password: str = Form(""),
    role: str = Form("employee"),
):
    store = get_store(request)
    cleaned, errors = validate_login(email, password, role)

    if errors or not store.login(cleaned["email"], cleaned["password"], cleaned["role"]):
        return templates.TemplateResponse(
            request,
            "login.html",
            {"hide_nav": True, "error": LOGIN_FAILED, "email": cleaned["email"], "role": cleaned["role"]},
            status_code=401,
        )
    return RedirectResponse(url="/", status_code=302)


@router.get("/logout")
async def logout(request: Request):
    # Only the login is dropped; the workspace data stays for the next user.
    get_store(request).logout()
    return RedirectResponse(url="/login", status_code=302)


@router.post("/reset")
async def reset_workspace(request: Request):
    workspace_id = request.session.get("workspace_id")
    if workspace_id:
        request.app.state.stores.discard(workspace_id)
        logger.info("Workspace reset requested")
    request.session.clear()
    return RedirectResponse(url="/login", status_code=302)
