from fastapi import Request
from fastapi.templating import Jinja2Templates

from hr_dashboard.core.config import settings
from hr_dashboard.reports import format_money, round_half_up

# Query-string error codes -> banner text.
ERROR_MESSAGES = {
    "forbidden": "You do not have access to that page.",
    "not_found": "That record no longer exists.",
    "has_employees": "Cannot delete department with existing employees. Please reassign employees first.",
    "no_employee": "Your account is not linked to an employee record.",
}


def session_context(request: Request) -> dict:
    """Logged-in user and banner codes for every page."""
    user = None
    workspace_id = request.session.get("workspace_id")
    stores = getattr(request.app.state, "stores", None)
    if workspace_id and stores is not None and workspace_id in stores:
        user = stores.get_or_create(workspace_id).current_user
    return {
        "current_user": user,
        "flash_error": ERROR_MESSAGES.get(request.query_params.get("error", "")),
        "flash_success": request.query_params.get("success") == "1",
    }


templates = Jinja2Templates(directory=settings.TEMPLATES_DIR, context_processors=[session_context])
templates.env.filters["money"] = format_money
templates.env.filters["whole"] = round_half_up
templates.env.globals["app_title"] = settings.APP_TITLE
templates.env.globals["company_name"] = settings.COMPANY_NAME
