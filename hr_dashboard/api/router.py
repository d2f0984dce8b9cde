from fastapi import APIRouter

from hr_dashboard.api.endpoints import auth, departments, employees, leaves, reports, weekly_requests

router = APIRouter()
router.include_router(auth.router)

router.include_router(employees.router, prefix="/employees", tags=["employees"])
router.include_router(departments.router, prefix="/departments", tags=["departments"])

router.include_router(leaves.router, prefix="/leaves", tags=["leaves"])
router.include_router(weekly_requests.router, prefix="/requests", tags=["requests"])

router.include_router(reports.router, prefix="/reports", tags=["reports"])
