from hr_dashboard.models.user import User, Role
from hr_dashboard.models.employee import Employee
from hr_dashboard.models.department import Department
from hr_dashboard.models.leave_request import LeaveRequest, LeaveStatus, LEAVE_DECISIONS, LEAVE_STATUSES
from hr_dashboard.models.weekly_request import (
    WeeklyRequest,
    WeeklyStatus,
    Priority,
    WEEKLY_UPDATES,
    WEEKLY_STATUSES,
    PRIORITIES,
)

__all__ = [
    "User",
    "Role",
    "Employee",
    "Department",
    "LeaveRequest",
    "LeaveStatus",
    "LEAVE_DECISIONS",
    "LEAVE_STATUSES",
    "WeeklyRequest",
    "WeeklyStatus",
    "Priority",
    "WEEKLY_UPDATES",
    "WEEKLY_STATUSES",
    "PRIORITIES",
]
