from fastapi import APIRouter, Request, Form
from fastapi.responses import RedirectResponse

from hr_dashboard.api.endpoints.auth import get_store, require_role
from hr_dashboard.core.rbac import ADMIN
from hr_dashboard.core.templating import templates
from hr_dashboard.forms import validate_employee

router = APIRouter()

EMPLOYEE_FIELDS = ("name", "department", "email", "phone", "address", "role", "hourly_rate", "hours_worked")


def _form_page(request: Request, store, item, values: dict, errors: dict, status_code: int = 200):
    return templates.TemplateResponse(
        request,
        "employee_form.html",
        {"deps": store.departments, "item": item, "values": values, "errors": errors},
        status_code=status_code,
    )


@router.get("")
async def list_employees(request: Request, department: str = ""):
    denied = require_role(request, ADMIN)
    if denied:
        return denied

    store = get_store(request)
    items = store.employees_in_department(department) if department else list(store.employees)
    return templates.TemplateResponse(
        request,
        "employees.html",
        {"items": items, "deps": store.departments, "department": department},
    )


@router.get("/new")
async def new_employee_form(request: Request):
    denied = require_role(request, ADMIN)
    if denied:
        return denied
    return _form_page(request, get_store(request), None, {}, {})


@router.post("/new")
async def create_employee(
    request: Request,
    name: str = Form(""),
    department: str = Form(""),
    email: str = Form(""),
    phone: str = Form(""),
    address: str = Form(""),
    role: str = Form(""),
    hourly_rate: str = Form(""),
    hours_worked: str = Form(""),
):
    denied = require_role(request, ADMIN)
    if denied:
        return denied

    store = get_store(request)
    raw = dict(zip(EMPLOYEE_FIELDS, (name, department, email, phone, address, role, hourly_rate, hours_worked)))
    cleaned, errors = validate_employee(raw)
    if errors:
        return _form_page(request, store, None, raw, errors, status_code=400)

    store.add_employee(**cleaned)
    return RedirectResponse("/employees?success=1", status_code=302)


@router.get("/{emp_id}/edit")
async def edit_employee_form(request: Request, emp_id: int):
    denied = require_role(request, ADMIN)
    if denied:
        return denied

    store = get_store(request)
    emp = store.get_employee(emp_id)
    if not emp:
        return RedirectResponse("/employees?error=not_found", status_code=302)
    return _form_page(request, store, emp, emp.model_dump(include=set(EMPLOYEE_FIELDS)), {})


@router.post("/{emp_id}/edit")
async def update_employee(
    request: Request,
    emp_id: int,
    name: str = Form(""),
    department: str = Form(""),
    email: str = Form(""),
    phone: str = Form(""),
    address: str = Form(""),
    role: str = Form(""),
    hourly_rate: str = Form(""),
    hours_worked: str = Form(""),
):
    denied = require_role(request, ADMIN)
    if denied:
        return denied

    store = get_store(request)
    emp = store.get_employee(emp_id)
    if not emp:
        return RedirectResponse("/employees?error=not_found", status_code=302)

    raw = dict(zip(EMPLOYEE_FIELDS, (name, department, email, phone, address, role, hourly_rate, hours_worked)))
    cleaned, errors = validate_employee(raw)
    if errors:
        return _form_page(request, store, emp, raw, errors, status_code=400)

    if store.update_employee(emp_id, **cleaned) is None:
        return RedirectResponse("/employees?error=not_found", status_code=302)
    return RedirectResponse("/employees?success=1", status_code=302)


@router.post("/{emp_id}/delete")
async def delete_employee(request: Request, emp_id: int):
    denied = require_role(request, ADMIN)
    if denied:
        return denied

    if not get_store(request).delete_employee(emp_id):
        return RedirectResponse("/employees?error=not_found", status_code=302)
    return RedirectResponse("/employees", status_code=302)
