from datetime import date

import pytest

from hr_dashboard import forms

TODAY = date(2025, 2, 20)

VALID_EMPLOYEE = {
    "name": " Nora Quinn ",
    "department": "IT",
    "email": "nora@softwify.com",
    "phone": "+1-555-0199",
    "address": "1 Loop Rd",
    "role": "QA Engineer",
    "hourly_rate": "50",
    "hours_worked": "0",
}


class TestEmployeeForm:
    def test_valid(self):
        cleaned, errors = forms.validate_employee(VALID_EMPLOYEE)
        assert errors == {}
        assert cleaned["name"] == "Nora Quinn"
        assert cleaned["hourly_rate"] == 50.0
        assert cleaned["hours_worked"] == 0.0

    def test_required_fields(self):
        _, errors = forms.validate_employee({})
        assert errors == {
            "name": "Name is required",
            "department": "Department is required",
            "email": "Email is required",
            "phone": "Phone is required",
            "address": "Address is required",
            "role": "Role is required",
            "hourly_rate": "Hourly rate must be greater than 0",
            "hours_worked": "Hours worked cannot be negative",
        }

    def test_email_needs_at_sign(self):
        _, errors = forms.validate_employee({**VALID_EMPLOYEE, "email": "nora.softwify.com"})
        assert errors == {"email": "Valid email is required"}

    def test_rate_must_be_positive(self):
        _, errors = forms.validate_employee({**VALID_EMPLOYEE, "hourly_rate": "0"})
        assert "hourly_rate" in errors

    def test_hours_cannot_be_negative(self):
        _, errors = forms.validate_employee({**VALID_EMPLOYEE, "hours_worked": "-1"})
        assert errors == {"hours_worked": "Hours worked cannot be negative"}

    @pytest.mark.parametrize("raw", ["inf", "-inf", "nan", "1e400"])
    def test_non_finite_numbers_rejected(self, raw):
        cleaned, errors = forms.validate_employee({**VALID_EMPLOYEE, "hourly_rate": raw, "hours_worked": raw})
        assert set(errors) == {"hourly_rate", "hours_worked"}
        assert cleaned["hourly_rate"] is None

    def test_salary_overflow_rejected(self):
        _, errors = forms.validate_employee({**VALID_EMPLOYEE, "hourly_rate": "1e300", "hours_worked": "1e300"})
        assert errors == {"hours_worked": "Monthly salary is too large"}


class TestLeaveForm:
    def test_valid(self):
        cleaned, errors = forms.validate_leave(
            {"start_date": "2025-03-01", "end_date": "2025-03-05", "reason": "Family trip"}, TODAY
        )
        assert errors == {}
        assert cleaned["start_date"] == date(2025, 3, 1)

    def test_same_day_leave_today_is_allowed(self):
        _, errors = forms.validate_leave(
            {"start_date": "2025-02-20", "end_date": "2025-02-20", "reason": "Dentist"}, TODAY
        )
        assert errors == {}

    def test_end_before_start(self):
        _, errors = forms.validate_leave(
            {"start_date": "2025-03-05", "end_date": "2025-03-01", "reason": "x"}, TODAY
        )
        assert errors == {"end_date": "End date must be after start date"}

    def test_start_in_past(self):
        _, errors = forms.validate_leave(
            {"start_date": "2025-02-19", "end_date": "2025-03-01", "reason": "x"}, TODAY
        )
        assert errors == {"start_date": "Start date cannot be in the past"}

    def test_missing_fields(self):
        _, errors = forms.validate_leave({"start_date": "not-a-date", "reason": "  "}, TODAY)
        assert set(errors) == {"start_date", "end_date", "reason"}


def test_department_form():
    _, errors = forms.validate_department({"name": "", "description": ""})
    assert errors == {"name": "Department name is required", "description": "Description is required"}
    cleaned, errors = forms.validate_department({"name": " Legal ", "description": "Legal Affairs"})
    assert errors == {}
    assert cleaned == {"name": "Legal", "description": "Legal Affairs"}


def test_weekly_request_form():
    cleaned, errors = forms.validate_weekly_request({"title": "Laptop", "description": "Battery", "priority": ""})
    assert errors == {}
    assert cleaned["priority"] == "medium"
    _, errors = forms.validate_weekly_request({"title": "", "description": "", "priority": "urgent"})
    assert set(errors) == {"title", "description", "priority"}


def test_login_form():
    cleaned, errors = forms.validate_login(" admin@softwify.com ", "", "admin")
    assert errors == {}
    assert cleaned["email"] == "admin@softwify.com"
    _, errors = forms.validate_login("", "pw", "manager")
    assert set(errors) == {"email", "role"}
