from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from starlette.middleware.sessions import SessionMiddleware

from hr_dashboard import reports
from hr_dashboard.api.endpoints.auth import get_store, require_login
from hr_dashboard.api.router import router
from hr_dashboard.core.config import settings
from hr_dashboard.core.logger import setup_logger
from hr_dashboard.core.rbac import is_admin
from hr_dashboard.core.templating import templates
from hr_dashboard.store import StoreRegistry

logger = setup_logger(level=settings.LOG_LEVEL.upper())

app = FastAPI(title=settings.APP_TITLE)
app.add_middleware(SessionMiddleware, secret_key=settings.APP_SECRET_KEY)
app.state.stores = StoreRegistry(idle_seconds=settings.WORKSPACE_IDLE_SECONDS)

app.mount("/static", StaticFiles(directory=settings.STATIC_DIR), name="static")
app.include_router(router)


@app.get("/health")
async def health():
    return PlainTextResponse("OK")


@app.get("/dashboard")
async def dashboard_alias():
    return RedirectResponse("/", status_code=302)


@app.get("/")
async def home(request: Request):
    user = require_login(request)
    if not user:
        return RedirectResponse("/login", status_code=302)

    store = get_store(request)
    if is_admin(user):
        return templates.TemplateResponse(
            request,
            "dashboard_admin.html",
            {"summary": reports.company_summary(store)},
        )

    emp = store.current_employee()
    summary = reports.employee_summary(store, emp) if emp else None
    return templates.TemplateResponse(
        request,
        "dashboard_employee.html",
        {
            "employee": emp,
            "summary": summary,
            "recent_leaves": summary.leaves[:3] if summary else [],
            "recent_requests": store.weekly_requests_for(emp.id)[:3] if emp else [],
        },
    )


def run():
    import uvicorn

    logger.info("%s running at http://%s:%s", settings.APP_TITLE, settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
