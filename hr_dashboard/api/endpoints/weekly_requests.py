from fastapi import APIRouter, Request, Form
from fastapi.responses import RedirectResponse

from hr_dashboard.api.endpoints.auth import get_store, require_role
from hr_dashboard.core.rbac import ADMIN, EMPLOYEE
from hr_dashboard.core.templating import templates
from hr_dashboard.forms import validate_weekly_request
from hr_dashboard.models import PRIORITIES, WEEKLY_STATUSES
from hr_dashboard.store import filter_by_status

router = APIRouter()


@router.get("")
async def weekly_requests_page(request: Request, status: str = ""):
    denied = require_role(request, ADMIN)
    if denied:
        return denied

    store = get_store(request)
    if status not in WEEKLY_STATUSES:
        status = ""
    return templates.TemplateResponse(
        request,
        "weekly_requests.html",
        {
            "items": filter_by_status(store.weekly_requests, status),
            "status": status,
            "statuses": WEEKLY_STATUSES,
        },
    )


def _form_page(request: Request, store, values: dict, errors: dict, status_code: int = 200):
    emp = store.current_employee()
    items = store.weekly_requests_for(emp.id) if emp else []
    return templates.TemplateResponse(
        request,
        "weekly_request_form.html",
        {"employee": emp, "items": items, "values": values, "errors": errors, "priorities": PRIORITIES},
        status_code=status_code,
    )


@router.get("/new")
async def weekly_request_form(request: Request):
    denied = require_role(request, EMPLOYEE)
    if denied:
        return denied
    return _form_page(request, get_store(request), {"priority": "medium"}, {})


@router.post("/new")
async def create_weekly_request(
    request: Request,
    title: str = Form(""),
    description: str = Form(""),
    priority: str = Form("medium"),
):
    denied = require_role(request, EMPLOYEE)
    if denied:
        return denied

    store = get_store(request)
    emp = store.current_employee()
    if not emp:
        return RedirectResponse("/requests/new?error=no_employee", status_code=302)

    raw = {"title": title, "description": description, "priority": priority}
    cleaned, errors = validate_weekly_request(raw)
    if errors:
        return _form_page(request, store, raw, errors, status_code=400)

    store.submit_weekly_request(employee_id=emp.id, employee_name=emp.name, **cleaned)
    return RedirectResponse("/requests/new?success=1", status_code=302)


@router.get("/{request_id}")
async def weekly_request_detail(request: Request, request_id: int):
    denied = require_role(request, ADMIN)
    if denied:
        return denied

    item = get_store(request).get_weekly_request(request_id)
    if not item:
        return RedirectResponse("/requests?error=not_found", status_code=302)
    return templates.TemplateResponse(request, "weekly_request_detail.html", {"item": item})


async def _set_status(request: Request, request_id: int, status: str):
    denied = require_role(request, ADMIN)
    if denied:
        return denied

    wr = get_store(request).update_weekly_request(request_id, status)
    if not wr:
        return RedirectResponse("/requests?error=not_found", status_code=302)
    return RedirectResponse("/requests?success=1", status_code=302)


@router.post("/{request_id}/review")
async def review_weekly_request(request: Request, request_id: int):
    return await _set_status(request, request_id, "reviewed")


@router.post("/{request_id}/complete")
async def complete_weekly_request(request: Request, request_id: int):
    return await _set_status(request, request_id, "completed")
