from datetime import date

import pytest

from hr_dashboard import reports


class TestFormatting:
    @pytest.mark.parametrize(
        "value, expected",
        [(12000, "12,000"), (157568.0, "157,568"), (9558.5, "9,558.5"), (1234.25, "1,234.25"), (0, "0")],
    )
    def test_format_money(self, value, expected):
        assert reports.format_money(value) == expected

    def test_round_half_up(self):
        assert reports.round_half_up(10504.5) == 10505
        assert reports.round_half_up(2.5) == 3
        assert reports.round_half_up(2.49) == 2

    def test_display_date(self):
        assert reports.display_date(date(2025, 2, 7)) == "2/7/2025"


class TestAggregates:
    def test_company_summary(self, store):
        s = reports.company_summary(store)
        assert s.total_employees == 15
        assert s.total_departments == 7
        assert s.total_salary == 157568
        assert round(s.average_salary, 2) == 10504.53
        assert s.pending_leaves == 0
        assert s.pending_requests == 0

    def test_average_with_no_employees(self):
        from hr_dashboard.store import DomainStateStore

        assert reports.company_summary(DomainStateStore()).average_salary == 0

    def test_department_breakdown(self, store):
        by_name = {d.name: d for d in reports.department_breakdown(store)}
        assert by_name["IT"].employees == 4
        assert by_name["IT"].total_salary == 48240
        assert by_name["IT"].avg_salary == 12060
        assert by_name["Sales"].total_salary == 30788

    def test_empty_department_average_is_zero(self, store):
        store.add_department(name="Legal", description="Legal Affairs")
        stats = reports.department_stats(store, "Legal")
        assert (stats.employees, stats.total_salary, stats.avg_salary) == (0, 0, 0)

    def test_salary_ranges(self, store):
        assert reports.salary_ranges(store.employees) == [
            ("$0-5K", 0),
            ("$5K-8K", 1),
            ("$8K-10K", 5),
            ("$10K-12K", 8),
            ("$12K+", 1),
        ]

    def test_status_counts(self, store):
        a = store.submit_leave_request(1, "John Smith", date(2025, 3, 1), date(2025, 3, 2), "a")
        store.submit_leave_request(2, "Sarah Johnson", date(2025, 3, 1), date(2025, 3, 2), "b")
        store.update_leave_request(a.id, "rejected")
        store.submit_weekly_request(3, "Michael Chen", "t", "d")

        assert reports.leave_status_counts(store) == {"pending": 1, "approved": 0, "rejected": 1}
        assert reports.request_status_counts(store) == {"pending": 1, "reviewed": 0, "completed": 0}
        assert reports.company_summary(store).pending_leaves == 1

    def test_employee_summary(self, store):
        first = store.submit_leave_request(1, "John Smith", date(2025, 3, 1), date(2025, 3, 2), "a")
        store.submit_leave_request(1, "John Smith", date(2025, 4, 1), date(2025, 4, 2), "b")
        store.submit_leave_request(2, "Sarah Johnson", date(2025, 3, 1), date(2025, 3, 2), "c")
        store.update_leave_request(first.id, "approved")
        req = store.submit_weekly_request(1, "John Smith", "t", "d")
        store.update_weekly_request(req.id, "completed")

        s = reports.employee_summary(store, store.get_employee(1))
        assert s.total_leaves == 2
        assert s.approved_leaves == 1
        assert s.total_requests == 1
        assert s.completed_requests == 1


class TestExport:
    def test_company_report_text(self, store, today):
        store.submit_weekly_request(1, "John Smith", "t", "d")
        text = reports.company_report_text(store, today)
        lines = text.splitlines()

        assert lines[:12] == [
            "SOFTWIFY - Company Report",
            "Generated: 2/20/2025",
            "",
            "OVERVIEW",
            "Total Employees: 15",
            "Total Departments: 7",
            "Total Monthly Salary: $157,568",
            "Average Salary: $10,505",
            "Pending Leaves: 0",
            "Pending Requests: 1",
            "",
            "DEPARTMENT BREAKDOWN",
        ]
        assert lines[12] == "IT: 4 employees, $48,240 total salary"
        assert lines[-1] == "Design: 1 employees, $10,240 total salary"
        assert len(lines) == 19

    def test_employee_report_text(self, store, today):
        for day in range(1, 8):
            store.submit_leave_request(1, "John Smith", date(2025, 3, day), date(2025, 3, day), f"reason {day}")
        store.update_leave_request(1, "approved")

        text = reports.employee_report_text(store, store.get_employee(1), today)
        lines = text.splitlines()

        assert lines[0] == "SOFTWIFY - Personal Employee Report"
        assert "Name: John Smith" in lines
        assert "Monthly Salary: $12,000" in lines
        assert "Hourly Rate: $75" in lines
        assert "Hours Worked: 160" in lines
        assert "Total Leave Requests: 7" in lines
        assert "Approved Leaves: 1" in lines
        history = lines[lines.index("RECENT LEAVE HISTORY") + 1:]
        assert history[0] == "2025-03-01 to 2025-03-01 - approved - reason 1"
        assert len(history) == 5

    def test_filenames(self, store, today):
        assert reports.company_report_filename("SOFTWIFY", today) == "SOFTWIFY-Report-2025-02-20.csv"
        assert (
            reports.employee_report_filename(store.get_employee(1), today)
            == "John Smith-Personal-Report-2025-02-20.csv"
        )
