import pytest

from hr_dashboard import seed
from hr_dashboard.core.exceptions import SeedDataError
from hr_dashboard.models import User


def test_seed_sizes():
    employees = seed.seed_employees()
    assert len(employees) == 15
    assert len(seed.seed_departments()) == 7
    users = seed.seed_users(employees)
    assert [u.role for u in users] == ["admin", "employee", "employee", "employee"]


def test_department_snapshot_matches_roster():
    employees = seed.seed_employees()
    for dept in seed.seed_departments():
        assert dept.employees == sum(1 for e in employees if e.department == dept.name)


def test_employee_users_link_to_matching_employee():
    employees = {e.id: e for e in seed.seed_employees()}
    for user in seed.seed_users(list(employees.values())):
        if user.role == "employee":
            assert employees[user.employee_id].email == user.email


def test_duplicate_email_rejected():
    users = [
        User(id=1, name="A", email="a@x.com", role="admin"),
        User(id=2, name="B", email="a@x.com", role="admin"),
    ]
    with pytest.raises(SeedDataError):
        seed.validate_users(users, [])


def test_dangling_employee_reference_rejected():
    users = [User(id=1, name="A", email="a@x.com", role="employee", employee_id=99)]
    with pytest.raises(SeedDataError):
        seed.validate_users(users, seed.seed_employees())


def test_admin_with_employee_id_rejected():
    users = [User(id=1, name="A", email="a@x.com", role="admin", employee_id=1)]
    with pytest.raises(SeedDataError):
        seed.validate_users(users, seed.seed_employees())
