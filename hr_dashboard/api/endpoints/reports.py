from urllib.parse import quote

from fastapi import APIRouter, Request
from fastapi.responses import RedirectResponse, Response

from hr_dashboard import reports
from hr_dashboard.api.endpoints.auth import get_store, require_role
from hr_dashboard.core.config import settings
from hr_dashboard.core.rbac import ADMIN, EMPLOYEE
from hr_dashboard.core.templating import templates

router = APIRouter()

REPORT_TABS = ("overview", "payroll", "departments", "leaves", "requests")


def _content_disposition(filename: str) -> str:
    # Header values go out as latin-1; names outside ASCII use the RFC 5987 form.
    if filename.isascii() and '"' not in filename:
        return f'attachment; filename="{filename}"'
    return f"attachment; filename*=utf-8''{quote(filename)}"


def _csv_download(content: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": _content_disposition(filename)},
    )


@router.get("")
async def reports_page(request: Request, tab: str = "overview"):
    denied = require_role(request, ADMIN)
    if denied:
        return denied

    store = get_store(request)
    if tab not in REPORT_TABS:
        tab = "overview"
    return templates.TemplateResponse(
        request,
        "reports.html",
        {
            "tab": tab,
            "tabs": REPORT_TABS,
            "summary": reports.company_summary(store),
            "salary_ranges": reports.salary_ranges(store.employees),
            "leave_status": reports.leave_status_counts(store),
            "request_status": reports.request_status_counts(store),
        },
    )


@router.get("/export")
async def export_company_report(request: Request):
    denied = require_role(request, ADMIN)
    if denied:
        return denied

    store = get_store(request)
    today = store.today()
    content = reports.company_report_text(store, today, company=settings.COMPANY_NAME)
    return _csv_download(content, reports.company_report_filename(settings.COMPANY_NAME, today))


@router.get("/me")
async def my_report_page(request: Request):
    denied = require_role(request, EMPLOYEE)
    if denied:
        return denied

    store = get_store(request)
    emp = store.current_employee()
    summary = reports.employee_summary(store, emp) if emp else None
    return templates.TemplateResponse(request, "employee_reports.html", {"employee": emp, "summary": summary})


@router.get("/me/export")
async def export_my_report(request: Request):
    denied = require_role(request, EMPLOYEE)
    if denied:
        return denied

    store = get_store(request)
    emp = store.current_employee()
    if not emp:
        return RedirectResponse("/reports/me?error=no_employee", status_code=302)

    today = store.today()
    content = reports.employee_report_text(store, emp, today, company=settings.COMPANY_NAME)
    return _csv_download(content, reports.employee_report_filename(emp, today))
