from fastapi import APIRouter, Request, Form
from fastapi.responses import RedirectResponse

from hr_dashboard.api.endpoints.auth import get_store, require_role
from hr_dashboard.core.rbac import ADMIN, EMPLOYEE
from hr_dashboard.core.templating import templates
from hr_dashboard.forms import validate_leave
from hr_dashboard.models import LEAVE_STATUSES
from hr_dashboard.store import filter_by_status

router = APIRouter()


@router.get("")
async def leaves_page(request: Request, status: str = ""):
    denied = require_role(request, ADMIN)
    if denied:
        return denied

    store = get_store(request)
    if status not in LEAVE_STATUSES:
        status = ""
    return templates.TemplateResponse(
        request,
        "leaves.html",
        {
            "items": filter_by_status(store.leave_requests, status),
            "status": status,
            "statuses": LEAVE_STATUSES,
        },
    )


def _request_page(request: Request, store, values: dict, errors: dict, status_code: int = 200):
    emp = store.current_employee()
    items = store.leave_requests_for(emp.id) if emp else []
    return templates.TemplateResponse(
        request,
        "leave_request.html",
        {"employee": emp, "items": items, "values": values, "errors": errors},
        status_code=status_code,
    )


@router.get("/request")
async def leave_request_form(request: Request):
    denied = require_role(request, EMPLOYEE)
    if denied:
        return denied
    return _request_page(request, get_store(request), {}, {})


@router.post("/request")
async def create_leave(
    request: Request,
    start_date: str = Form(""),
    end_date: str = Form(""),
    reason: str = Form(""),
):
    denied = require_role(request, EMPLOYEE)
    if denied:
        return denied

    store = get_store(request)
    emp = store.current_employee()
    if not emp:
        return RedirectResponse("/leaves/request?error=no_employee", status_code=302)

    raw = {"start_date": start_date, "end_date": end_date, "reason": reason}
    cleaned, errors = validate_leave(raw, today=store.today())
    if errors:
        return _request_page(request, store, raw, errors, status_code=400)

    store.submit_leave_request(
        employee_id=emp.id,
        employee_name=emp.name,
        start_date=cleaned["start_date"],
        end_date=cleaned["end_date"],
        reason=cleaned["reason"],
    )
    return RedirectResponse("/leaves/request?success=1", status_code=302)


async def _decide(request: Request, leave_id: int, status: str):
    denied = require_role(request, ADMIN)
    if denied:
        return denied

    lr = get_store(request).update_leave_request(leave_id, status)
    if not lr:
        return RedirectResponse("/leaves?error=not_found", status_code=302)
    return RedirectResponse("/leaves?success=1", status_code=302)


@router.post("/{leave_id}/approve")
async def approve_leave(request: Request, leave_id: int):
    return await _decide(request, leave_id, "approved")


@router.post("/{leave_id}/reject")
async def reject_leave(request: Request, leave_id: int):
    return await _decide(request, leave_id, "rejected")
