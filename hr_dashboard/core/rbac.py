from typing import Optional

from hr_dashboard.models.user import User

ADMIN = "admin"
EMPLOYEE = "employee"


def user_has_role(user: Optional[User], role: str) -> bool:
    return user is not None and user.role == role


def is_admin(user: Optional[User]) -> bool:
    return user_has_role(user, ADMIN)
