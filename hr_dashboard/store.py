"""In-memory application state.

`DomainStateStore` owns every collection the dashboard shows (users,
employees, departments, leave and weekly requests) plus the logged-in user,
and is the only place they are mutated. Records are pydantic models and are
replaced, never edited in place, so a reference taken before a mutation keeps
its old values.

Mutations on an id that does not exist are ignored: nothing is raised, the
call returns ``None`` (or ``False`` for deletes) and a DEBUG line is logged.
Request status updates are not checked against the current status; any of
the allowed target statuses may be set at any time.

`StoreRegistry` keeps one store per browser workspace for the web layer.
"""

import threading
import time
from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Iterable, Optional, TypeVar

from pydantic import BaseModel

from hr_dashboard.core.exceptions import InvalidStatusError
from hr_dashboard.core.logger import get_logger
from hr_dashboard.models import (
    LEAVE_DECISIONS,
    WEEKLY_UPDATES,
    Department,
    Employee,
    LeaveRequest,
    User,
    WeeklyRequest,
)
from hr_dashboard import seed

logger = get_logger(__name__)

M = TypeVar("M", bound=BaseModel)


def _next_id(items: Iterable[BaseModel]) -> int:
    return max((item.id for item in items), default=0) + 1


def _index_of(items: list[M], item_id: int) -> Optional[int]:
    for i, item in enumerate(items):
        if item.id == item_id:
            return i
    return None


def _check_fields(model: type[BaseModel], fields: dict[str, Any]) -> None:
    unknown = set(fields) - set(model.model_fields)
    if unknown:
        raise TypeError(f"unknown {model.__name__} field(s): {', '.join(sorted(unknown))}")


def _merge(record: M, changes: dict[str, Any], protected: tuple[str, ...]) -> M:
    model = type(record)
    _check_fields(model, changes)
    data = record.model_dump()
    data.update({k: v for k, v in changes.items() if k not in protected})
    return model.model_validate(data)


def _with_salary(emp: Employee) -> Employee:
    # Re-validated so an overflowing product is rejected like any bad field.
    data = emp.model_dump()
    data["total_salary"] = Employee.salary_for(emp.hourly_rate, emp.hours_worked)
    return Employee.model_validate(data)


def filter_by_status(items: Iterable[M], status: Optional[str]) -> list[M]:
    """Items whose status equals ``status``; all items when it is empty."""
    if not status:
        return list(items)
    return [item for item in items if item.status == status]


class DomainStateStore:
    def __init__(
        self,
        users: Optional[list[User]] = None,
        employees: Optional[list[Employee]] = None,
        departments: Optional[list[Department]] = None,
        leave_requests: Optional[list[LeaveRequest]] = None,
        weekly_requests: Optional[list[WeeklyRequest]] = None,
        today: Callable[[], date] = date.today,
    ):
        self.users: list[User] = list(users or [])
        self.employees: list[Employee] = list(employees or [])
        self.departments: list[Department] = list(departments or [])
        self.leave_requests: list[LeaveRequest] = list(leave_requests or [])
        self.weekly_requests: list[WeeklyRequest] = list(weekly_requests or [])
        self.current_user: Optional[User] = None
        self._today = today
        self._lock = threading.RLock()

    @classmethod
    def from_seed(cls, today: Callable[[], date] = date.today) -> "DomainStateStore":
        employees = seed.seed_employees()
        return cls(
            users=seed.seed_users(employees),
            employees=employees,
            departments=seed.seed_departments(),
            today=today,
        )

    def today(self) -> date:
        """The calendar date stamped on new requests."""
        return self._today()

    # ---- session ----

    def login(self, email: str, password: str, role: str) -> bool:
        # The password is not checked; email + role is the whole credential.
        user = next((u for u in self.users if u.email == email and u.role == role), None)
        if user is None:
            logger.info("Login failed for %s as %s", email, role)
            return False
        with self._lock:
            self.current_user = user
        logger.info("Login: %s (%s)", user.email, user.role)
        return True

    def logout(self) -> None:
        with self._lock:
            if self.current_user is not None:
                logger.info("Logout: %s", self.current_user.email)
            self.current_user = None

    def current_employee(self) -> Optional[Employee]:
        user = self.current_user
        if user is None or user.employee_id is None:
            return None
        return self.get_employee(user.employee_id)

    # ---- employees ----

    def get_employee(self, employee_id: int) -> Optional[Employee]:
        return next((e for e in self.employees if e.id == employee_id), None)

    def employees_in_department(self, name: str) -> list[Employee]:
        return [e for e in self.employees if e.department == name]

    def add_employee(self, **fields: Any) -> Employee:
        _check_fields(Employee, fields)
        fields.pop("id", None)
        fields.pop("total_salary", None)
        with self._lock:
            emp = _with_salary(Employee.model_validate({**fields, "id": _next_id(self.employees)}))
            self.employees.append(emp)
        logger.info("Added employee id=%s name=%s", emp.id, emp.name)
        return emp

    def update_employee(self, employee_id: int, **changes: Any) -> Optional[Employee]:
        with self._lock:
            idx = _index_of(self.employees, employee_id)
            if idx is None:
                logger.debug("update_employee: id=%s not found, ignored", employee_id)
                return None
            merged = _with_salary(_merge(self.employees[idx], changes, protected=("id", "total_salary")))
            self.employees[idx] = merged
        logger.info("Updated employee id=%s fields=%s", employee_id, sorted(changes))
        return merged

    def delete_employee(self, employee_id: int) -> bool:
        # Requests keep their employee_id/employee_name copies.
        with self._lock:
            idx = _index_of(self.employees, employee_id)
            if idx is None:
                logger.debug("delete_employee: id=%s not found, ignored", employee_id)
                return False
            removed = self.employees.pop(idx)
        logger.info("Deleted employee id=%s name=%s", removed.id, removed.name)
        return True

    # ---- departments ----

    def get_department(self, department_id: int) -> Optional[Department]:
        return next((d for d in self.departments if d.id == department_id), None)

    def add_department(self, **fields: Any) -> Department:
        _check_fields(Department, fields)
        fields.pop("id", None)
        with self._lock:
            dept = Department.model_validate({**fields, "id": _next_id(self.departments)})
            self.departments.append(dept)
        logger.info("Added department id=%s name=%s", dept.id, dept.name)
        return dept

    def update_department(self, department_id: int, **changes: Any) -> Optional[Department]:
        with self._lock:
            idx = _index_of(self.departments, department_id)
            if idx is None:
                logger.debug("update_department: id=%s not found, ignored", department_id)
                return None
            merged = _merge(self.departments[idx], changes, protected=("id",))
            self.departments[idx] = merged
        logger.info("Updated department id=%s fields=%s", department_id, sorted(changes))
        return merged

    def delete_department(self, department_id: int) -> bool:
        """Remove a department. Callers check `employees_in_department` first."""
        with self._lock:
            idx = _index_of(self.departments, department_id)
            if idx is None:
                logger.debug("delete_department: id=%s not found, ignored", department_id)
                return False
            removed = self.departments.pop(idx)
        logger.info("Deleted department id=%s name=%s", removed.id, removed.name)
        return True

    # ---- leave requests ----

    def get_leave_request(self, request_id: int) -> Optional[LeaveRequest]:
        return next((r for r in self.leave_requests if r.id == request_id), None)

    def leave_requests_for(self, employee_id: int) -> list[LeaveRequest]:
        return [r for r in self.leave_requests if r.employee_id == employee_id]

    def submit_leave_request(
        self,
        employee_id: int,
        employee_name: str,
        start_date: date,
        end_date: date,
        reason: str,
    ) -> LeaveRequest:
        with self._lock:
            req = LeaveRequest(
                id=_next_id(self.leave_requests),
                employee_id=employee_id,
                employee_name=employee_name,
                start_date=start_date,
                end_date=end_date,
                reason=reason,
                status="pending",
                request_date=self._today(),
            )
            self.leave_requests.append(req)
        logger.info("Leave request id=%s submitted by employee %s", req.id, employee_id)
        return req

    def update_leave_request(self, request_id: int, status: str) -> Optional[LeaveRequest]:
        if status not in LEAVE_DECISIONS:
            raise InvalidStatusError("leave request", status, LEAVE_DECISIONS)
        with self._lock:
            idx = _index_of(self.leave_requests, request_id)
            if idx is None:
                logger.debug("update_leave_request: id=%s not found, ignored", request_id)
                return None
            updated = self.leave_requests[idx].model_copy(update={"status": status})
            self.leave_requests[idx] = updated
        logger.info("Leave request id=%s -> %s", request_id, status)
        return updated

    # ---- weekly requests ----

    def get_weekly_request(self, request_id: int) -> Optional[WeeklyRequest]:
        return next((r for r in self.weekly_requests if r.id == request_id), None)

    def weekly_requests_for(self, employee_id: int) -> list[WeeklyRequest]:
        return [r for r in self.weekly_requests if r.employee_id == employee_id]

    def submit_weekly_request(
        self,
        employee_id: int,
        employee_name: str,
        title: str,
        description: str,
        priority: str = "medium",
    ) -> WeeklyRequest:
        with self._lock:
            req = WeeklyRequest(
                id=_next_id(self.weekly_requests),
                employee_id=employee_id,
                employee_name=employee_name,
                title=title,
                description=description,
                priority=priority,
                status="pending",
                request_date=self._today(),
            )
            self.weekly_requests.append(req)
        logger.info("Weekly request id=%s submitted by employee %s", req.id, employee_id)
        return req

    def update_weekly_request(self, request_id: int, status: str) -> Optional[WeeklyRequest]:
        if status not in WEEKLY_UPDATES:
            raise InvalidStatusError("weekly request", status, WEEKLY_UPDATES)
        with self._lock:
            idx = _index_of(self.weekly_requests, request_id)
            if idx is None:
                logger.debug("update_weekly_request: id=%s not found, ignored", request_id)
                return None
            updated = self.weekly_requests[idx].model_copy(update={"status": status})
            self.weekly_requests[idx] = updated
        logger.info("Weekly request id=%s -> %s", request_id, status)
        return updated


@dataclass
class _Workspace:
    store: DomainStateStore
    last_seen: float


class StoreRegistry:
    """One `DomainStateStore` per browser workspace, dropped after idling."""

    def __init__(
        self,
        factory: Callable[[], DomainStateStore] = DomainStateStore.from_seed,
        idle_seconds: float = 7200.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._factory = factory
        self._idle_seconds = idle_seconds
        self._clock = clock
        self._workspaces: dict[str, _Workspace] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._workspaces)

    def __contains__(self, workspace_id: str) -> bool:
        return workspace_id in self._workspaces

    def get_or_create(self, workspace_id: str) -> DomainStateStore:
        now = self._clock()
        with self._lock:
            self._prune(now)
            ws = self._workspaces.get(workspace_id)
            if ws is None:
                ws = _Workspace(store=self._factory(), last_seen=now)
                self._workspaces[workspace_id] = ws
                logger.info("Created workspace store (%d active)", len(self._workspaces))
            ws.last_seen = now
            return ws.store

    def discard(self, workspace_id: str) -> None:
        with self._lock:
            if self._workspaces.pop(workspace_id, None) is not None:
                logger.info("Discarded workspace store (%d active)", len(self._workspaces))

    def prune(self) -> int:
        with self._lock:
            return self._prune(self._clock())

    def _prune(self, now: float) -> int:
        expired = [k for k, ws in self._workspaces.items() if now - ws.last_seen > self._idle_seconds]
        for k in expired:
            del self._workspaces[k]
        if expired:
            logger.info("Expired %d idle workspace store(s)", len(expired))
        return len(expired)
