"""Aggregate figures for the report pages and the downloadable exports."""

import math
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Optional

from hr_dashboard.models import LEAVE_STATUSES, WEEKLY_STATUSES, Employee, LeaveRequest
from hr_dashboard.store import DomainStateStore

# (label, lower bound exclusive, upper bound inclusive)
SALARY_RANGES: list[tuple[str, Optional[float], Optional[float]]] = [
    ("$0-5K", None, 5000),
    ("$5K-8K", 5000, 8000),
    ("$8K-10K", 8000, 10000),
    ("$10K-12K", 10000, 12000),
    ("$12K+", 12000, None),
]


@dataclass
class DepartmentStats:
    name: str
    employees: int
    total_salary: float
    avg_salary: float


@dataclass
class CompanySummary:
    total_employees: int
    total_departments: int
    total_salary: float
    average_salary: float
    pending_leaves: int
    pending_requests: int
    departments: list[DepartmentStats] = field(default_factory=list)


@dataclass
class EmployeeSummary:
    employee: Employee
    leaves: list[LeaveRequest]
    total_leaves: int
    approved_leaves: int
    total_requests: int
    completed_requests: int
    leave_status: dict[str, int]
    request_status: dict[str, int]


def format_money(value: float) -> str:
    """Thousands-separated amount, decimals only when there are any: 12,000 / 9,558.5"""
    value = round(value, 2)
    if value == int(value):
        return f"{int(value):,}"
    return f"{value:,.2f}".rstrip("0")


def format_plain(value: float) -> str:
    return str(int(value)) if value == int(value) else str(value)


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def display_date(d: date) -> str:
    return f"{d.month}/{d.day}/{d.year}"


def status_counts(items: Iterable, statuses: Iterable[str]) -> dict[str, int]:
    counts = {s: 0 for s in statuses}
    for item in items:
        if item.status in counts:
            counts[item.status] += 1
    return counts


def leave_status_counts(store: DomainStateStore) -> dict[str, int]:
    return status_counts(store.leave_requests, LEAVE_STATUSES)


def request_status_counts(store: DomainStateStore) -> dict[str, int]:
    return status_counts(store.weekly_requests, WEEKLY_STATUSES)


def department_stats(store: DomainStateStore, name: str) -> DepartmentStats:
    members = store.employees_in_department(name)
    total = sum(e.total_salary for e in members)
    return DepartmentStats(
        name=name,
        employees=len(members),
        total_salary=total,
        avg_salary=total / len(members) if members else 0,
    )


def department_breakdown(store: DomainStateStore) -> list[DepartmentStats]:
    return [department_stats(store, d.name) for d in store.departments]


def salary_ranges(employees: Iterable[Employee]) -> list[tuple[str, int]]:
    salaries = [e.total_salary for e in employees]
    result = []
    for label, low, high in SALARY_RANGES:
        count = sum(
            1
            for s in salaries
            if (low is None or s > low) and (high is None or s <= high)
        )
        result.append((label, count))
    return result


def company_summary(store: DomainStateStore) -> CompanySummary:
    total = sum(e.total_salary for e in store.employees)
    count = len(store.employees)
    return CompanySummary(
        total_employees=count,
        total_departments=len(store.departments),
        total_salary=total,
        average_salary=total / count if count else 0,
        pending_leaves=leave_status_counts(store)["pending"],
        pending_requests=request_status_counts(store)["pending"],
        departments=department_breakdown(store),
    )


def employee_summary(store: DomainStateStore, employee: Employee) -> EmployeeSummary:
    leaves = store.leave_requests_for(employee.id)
    requests = store.weekly_requests_for(employee.id)
    leave_status = status_counts(leaves, LEAVE_STATUSES)
    request_status = status_counts(requests, WEEKLY_STATUSES)
    return EmployeeSummary(
        employee=employee,
        leaves=leaves,
        total_leaves=len(leaves),
        approved_leaves=leave_status["approved"],
        total_requests=len(requests),
        completed_requests=request_status["completed"],
        leave_status=leave_status,
        request_status=request_status,
    )


# ---- exports ----

def company_report_filename(company: str, today: date) -> str:
    return f"{company}-Report-{today.isoformat()}.csv"


def employee_report_filename(employee: Employee, today: date) -> str:
    return f"{employee.name}-Personal-Report-{today.isoformat()}.csv"


def company_report_text(store: DomainStateStore, today: date, company: str = "SOFTWIFY") -> str:
    s = company_summary(store)
    lines = [
        f"{company} - Company Report",
        f"Generated: {display_date(today)}",
        "",
        "OVERVIEW",
        f"Total Employees: {s.total_employees}",
        f"Total Departments: {s.total_departments}",
        f"Total Monthly Salary: ${format_money(s.total_salary)}",
        f"Average Salary: ${format_money(round_half_up(s.average_salary))}",
        f"Pending Leaves: {s.pending_leaves}",
        f"Pending Requests: {s.pending_requests}",
        "",
        "DEPARTMENT BREAKDOWN",
    ]
    for d in s.departments:
        lines.append(f"{d.name}: {d.employees} employees, ${format_money(d.total_salary)} total salary")
    return "\n".join(lines) + "\n"


def employee_report_text(
    store: DomainStateStore,
    employee: Employee,
    today: date,
    company: str = "SOFTWIFY",
    history_limit: int = 5,
) -> str:
    s = employee_summary(store, employee)
    lines = [
        f"{company} - Personal Employee Report",
        f"Generated: {display_date(today)}",
        "",
        "EMPLOYEE INFORMATION",
        f"Name: {employee.name}",
        f"Department: {employee.department}",
        f"Role: {employee.role}",
        "",
        "SALARY INFORMATION",
        f"Monthly Salary: ${format_money(employee.total_salary)}",
        f"Hourly Rate: ${format_plain(employee.hourly_rate)}",
        f"Hours Worked: {format_plain(employee.hours_worked)}",
        "",
        "LEAVE SUMMARY",
        f"Total Leave Requests: {s.total_leaves}",
        f"Approved Leaves: {s.approved_leaves}",
        "",
        "REQUEST SUMMARY",
        f"Total Weekly Requests: {s.total_requests}",
        f"Completed Requests: {s.completed_requests}",
        "",
        "RECENT LEAVE HISTORY",
    ]
    for leave in s.leaves[:history_limit]:
        lines.append(
            f"{leave.start_date.isoformat()} to {leave.end_date.isoformat()} - {leave.status} - {leave.reason}"
        )
    return "\n".join(lines) + "\n"
