from datetime import date
from typing import Literal

from pydantic import BaseModel, ConfigDict

LeaveStatus = Literal["pending", "approved", "rejected"]

LEAVE_STATUSES: tuple[str, ...] = ("pending", "approved", "rejected")
# Statuses an update may set.
LEAVE_DECISIONS: tuple[str, ...] = ("approved", "rejected")


class LeaveRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    employee_id: int
    employee_name: str
    start_date: date
    end_date: date
    reason: str
    status: LeaveStatus = "pending"
    request_date: date
