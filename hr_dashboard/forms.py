"""Form checks run by the web layer before calling the store.

Each validator takes the raw (string) form values and returns
``(cleaned, errors)``. ``errors`` maps a field name to the message shown
next to that field and is empty when the form is valid; ``cleaned`` holds
the stripped and converted values ready to pass to the store.
"""

import math
from datetime import date
from typing import Any, Optional

from hr_dashboard.models import PRIORITIES

Errors = dict[str, str]


def _text(raw: Optional[str]) -> str:
    return (raw or "").strip()


def _number(raw: Optional[str]) -> Optional[float]:
    try:
        value = float(_text(raw))
    except ValueError:
        return None
    # float() also accepts "inf", "nan" and overflowing exponents.
    return value if math.isfinite(value) else None


def _iso_date(raw: Optional[str]) -> Optional[date]:
    try:
        return date.fromisoformat(_text(raw))
    except ValueError:
        return None


def validate_login(email: str, password: str, role: str) -> tuple[dict[str, Any], Errors]:
    cleaned = {"email": _text(email), "password": password or "", "role": _text(role) or "employee"}
    errors: Errors = {}
    if not cleaned["email"]:
        errors["email"] = "Email is required"
    if cleaned["role"] not in ("admin", "employee"):
        errors["role"] = "Choose admin or employee"
    return cleaned, errors


def validate_employee(form: dict[str, Optional[str]]) -> tuple[dict[str, Any], Errors]:
    cleaned: dict[str, Any] = {
        k: _text(form.get(k)) for k in ("name", "department", "email", "phone", "address", "role")
    }
    errors: Errors = {}

    if not cleaned["name"]:
        errors["name"] = "Name is required"
    if not cleaned["department"]:
        errors["department"] = "Department is required"
    if not cleaned["email"]:
        errors["email"] = "Email is required"
    elif "@" not in cleaned["email"]:
        errors["email"] = "Valid email is required"
    if not cleaned["phone"]:
        errors["phone"] = "Phone is required"
    if not cleaned["address"]:
        errors["address"] = "Address is required"
    if not cleaned["role"]:
        errors["role"] = "Role is required"

    rate = _number(form.get("hourly_rate"))
    if rate is None or rate <= 0:
        errors["hourly_rate"] = "Hourly rate must be greater than 0"
    hours = _number(form.get("hours_worked"))
    if hours is None or hours < 0:
        errors["hours_worked"] = "Hours worked cannot be negative"
    elif rate is not None and not math.isfinite(rate * hours):
        errors["hours_worked"] = "Monthly salary is too large"

    cleaned["hourly_rate"] = rate
    cleaned["hours_worked"] = hours
    return cleaned, errors


def validate_department(form: dict[str, Optional[str]]) -> tuple[dict[str, Any], Errors]:
    cleaned = {"name": _text(form.get("name")), "description": _text(form.get("description"))}
    errors: Errors = {}
    if not cleaned["name"]:
        errors["name"] = "Department name is required"
    if not cleaned["description"]:
        errors["description"] = "Description is required"
    return cleaned, errors


def validate_leave(form: dict[str, Optional[str]], today: date) -> tuple[dict[str, Any], Errors]:
    start = _iso_date(form.get("start_date"))
    end = _iso_date(form.get("end_date"))
    cleaned = {"start_date": start, "end_date": end, "reason": _text(form.get("reason"))}
    errors: Errors = {}

    if start is None:
        errors["start_date"] = "Start date is required"
    if end is None:
        errors["end_date"] = "End date is required"
    if not cleaned["reason"]:
        errors["reason"] = "Reason is required"

    if start is not None and end is not None:
        if start > end:
            errors["end_date"] = "End date must be after start date"
        if start < today:
            errors["start_date"] = "Start date cannot be in the past"
    return cleaned, errors


def validate_weekly_request(form: dict[str, Optional[str]]) -> tuple[dict[str, Any], Errors]:
    cleaned = {
        "title": _text(form.get("title")),
        "description": _text(form.get("description")),
        "priority": _text(form.get("priority")) or "medium",
    }
    errors: Errors = {}
    if not cleaned["title"]:
        errors["title"] = "Title is required"
    if not cleaned["description"]:
        errors["description"] = "Description is required"
    if cleaned["priority"] not in PRIORITIES:
        errors["priority"] = "Priority must be low, medium or high"
    return cleaned, errors
