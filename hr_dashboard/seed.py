"""Initial roster loaded into every new store."""

from hr_dashboard.core.exceptions import SeedDataError
from hr_dashboard.models import Department, Employee, User

# (id, name, department, email, phone, address, role, hourly_rate, hours_worked)
EMPLOYEE_ROWS = [
    (1, "John Smith", "IT", "john.smith@softwify.com", "+1-555-0101", "123 Tech St, Silicon Valley, CA", "Senior Developer", 75, 160),
    (2, "Sarah Johnson", "HR", "sarah.johnson@softwify.com", "+1-555-0102", "456 Business Ave, New York, NY", "HR Manager", 65, 160),
    (3, "Michael Chen", "IT", "michael.chen@softwify.com", "+1-555-0103", "789 Code Lane, Austin, TX", "Full Stack Developer", 70, 168),
    (4, "Emily Davis", "Finance", "emily.davis@softwify.com", "+1-555-0104", "321 Money St, Chicago, IL", "Financial Analyst", 60, 160),
    (5, "David Wilson", "Marketing", "david.wilson@softwify.com", "+1-555-0105", "654 Brand Blvd, Los Angeles, CA", "Marketing Manager", 68, 155),
    (6, "Lisa Anderson", "Sales", "lisa.anderson@softwify.com", "+1-555-0106", "987 Sales Dr, Miami, FL", "Sales Executive", 55, 170),
    (7, "James Taylor", "IT", "james.taylor@softwify.com", "+1-555-0107", "147 DevOps Way, Seattle, WA", "DevOps Engineer", 80, 160),
    (8, "Amanda Rodriguez", "HR", "amanda.rodriguez@softwify.com", "+1-555-0108", "258 People St, Denver, CO", "HR Specialist", 50, 160),
    (9, "Robert Brown", "Finance", "robert.brown@softwify.com", "+1-555-0109", "369 Accounting Ave, Boston, MA", "Senior Accountant", 62, 160),
    (10, "Jennifer Miller", "Marketing", "jennifer.miller@softwify.com", "+1-555-0110", "741 Creative Ct, Portland, OR", "Content Manager", 58, 160),
    (11, "Christopher Lee", "Sales", "christopher.lee@softwify.com", "+1-555-0111", "852 Revenue Rd, Phoenix, AZ", "Sales Manager", 72, 165),
    (12, "Michelle Garcia", "Operations", "michelle.garcia@softwify.com", "+1-555-0112", "963 Process Pkwy, Dallas, TX", "Operations Manager", 66, 160),
    (13, "Kevin Martinez", "IT", "kevin.martinez@softwify.com", "+1-555-0113", "159 Backend Blvd, San Francisco, CA", "Backend Developer", 73, 160),
    (14, "Rachel White", "Design", "rachel.white@softwify.com", "+1-555-0114", "357 Design Dr, Nashville, TN", "UI/UX Designer", 64, 160),
    (15, "Daniel Thompson", "Sales", "daniel.thompson@softwify.com", "+1-555-0115", "468 Client Circle, Atlanta, GA", "Account Executive", 59, 162),
]

# (id, name, description, headcount snapshot)
DEPARTMENT_ROWS = [
    (1, "IT", "Information Technology Department", 4),
    (2, "HR", "Human Resources Department", 2),
    (3, "Finance", "Financial Management Department", 2),
    (4, "Marketing", "Marketing and Brand Management", 2),
    (5, "Sales", "Sales and Customer Relations", 3),
    (6, "Operations", "Business Operations Management", 1),
    (7, "Design", "Creative Design Department", 1),
]

# (id, name, email, role, employee_id)
USER_ROWS = [
    (1, "Admin User", "admin@softwify.com", "admin", None),
    (2, "John Smith", "john.smith@softwify.com", "employee", 1),
    (3, "Sarah Johnson", "sarah.johnson@softwify.com", "employee", 2),
    (4, "Michael Chen", "michael.chen@softwify.com", "employee", 3),
]


def seed_employees() -> list[Employee]:
    employees = []
    for id_, name, dept, email, phone, address, role, rate, hours in EMPLOYEE_ROWS:
        employees.append(
            Employee(
                id=id_,
                name=name,
                department=dept,
                email=email,
                phone=phone,
                address=address,
                role=role,
                hourly_rate=rate,
                hours_worked=hours,
                total_salary=Employee.salary_for(rate, hours),
            )
        )
    return employees


def seed_departments() -> list[Department]:
    return [
        Department(id=id_, name=name, description=desc, employees=count)
        for id_, name, desc, count in DEPARTMENT_ROWS
    ]


def seed_users(employees: list[Employee]) -> list[User]:
    users = [
        User(id=id_, name=name, email=email, role=role, employee_id=emp_id)
        for id_, name, email, role, emp_id in USER_ROWS
    ]
    validate_users(users, employees)
    return users


def validate_users(users: list[User], employees: list[Employee]) -> None:
    """Check the user table against the roster.

    Emails are unique, and employee_id is set exactly for employee-role
    users and points at an existing employee.
    """
    seen: set[str] = set()
    employee_ids = {e.id for e in employees}
    for u in users:
        if u.email in seen:
            raise SeedDataError(f"duplicate user email: {u.email}")
        seen.add(u.email)

        if u.role == "employee":
            if u.employee_id is None:
                raise SeedDataError(f"employee user {u.email} has no employee_id")
            if u.employee_id not in employee_ids:
                raise SeedDataError(f"user {u.email} references unknown employee {u.employee_id}")
        elif u.employee_id is not None:
            raise SeedDataError(f"{u.role} user {u.email} must not carry an employee_id")
