from fastapi import APIRouter, Request, Form
from fastapi.responses import RedirectResponse

from hr_dashboard.api.endpoints.auth import get_store, require_role
from hr_dashboard.core.rbac import ADMIN
from hr_dashboard.core.templating import templates
from hr_dashboard.forms import validate_department
from hr_dashboard.reports import department_stats

router = APIRouter()


@router.get("")
async def list_departments(request: Request):
    denied = require_role(request, ADMIN)
    if denied:
        return denied

    store = get_store(request)
    rows = [(d, department_stats(store, d.name)) for d in store.departments]
    top = max((stats.employees for _, stats in rows), default=0)
    return templates.TemplateResponse(request, "departments.html", {"rows": rows, "top": top})


@router.get("/new")
async def new_department_form(request: Request):
    denied = require_role(request, ADMIN)
    if denied:
        return denied
    return templates.TemplateResponse(request, "department_form.html", {"item": None, "values": {}, "errors": {}})


@router.post("/new")
async def create_department(request: Request, name: str = Form(""), description: str = Form("")):
    denied = require_role(request, ADMIN)
    if denied:
        return denied

    raw = {"name": name, "description": description}
    cleaned, errors = validate_department(raw)
    if errors:
        return templates.TemplateResponse(
            request, "department_form.html", {"item": None, "values": raw, "errors": errors}, status_code=400
        )

    get_store(request).add_department(**cleaned)
    return RedirectResponse("/departments?success=1", status_code=302)


@router.get("/{dep_id}/edit")
async def edit_department_form(request: Request, dep_id: int):
    denied = require_role(request, ADMIN)
    if denied:
        return denied

    dep = get_store(request).get_department(dep_id)
    if not dep:
        return RedirectResponse("/departments?error=not_found", status_code=302)
    return templates.TemplateResponse(
        request, "department_form.html", {"item": dep, "values": dep.model_dump(), "errors": {}}
    )


@router.post("/{dep_id}/edit")
async def update_department(request: Request, dep_id: int, name: str = Form(""), description: str = Form("")):
    denied = require_role(request, ADMIN)
    if denied:
        return denied

    store = get_store(request)
    dep = store.get_department(dep_id)
    if not dep:
        return RedirectResponse("/departments?error=not_found", status_code=302)

    raw = {"name": name, "description": description}
    cleaned, errors = validate_department(raw)
    if errors:
        return templates.TemplateResponse(
            request, "department_form.html", {"item": dep, "values": raw, "errors": errors}, status_code=400
        )

    store.update_department(dep_id, **cleaned)
    return RedirectResponse("/departments?success=1", status_code=302)


@router.post("/{dep_id}/delete")
async def delete_department(request: Request, dep_id: int):
    denied = require_role(request, ADMIN)
    if denied:
        return denied

    store = get_store(request)
    dep = store.get_department(dep_id)
    if not dep:
        return RedirectResponse("/departments?error=not_found", status_code=302)
    # The store does not guard this; employees reference departments by name.
    if store.employees_in_department(dep.name):
        return RedirectResponse("/departments?error=has_employees", status_code=302)

    store.delete_department(dep_id)
    return RedirectResponse("/departments", status_code=302)
