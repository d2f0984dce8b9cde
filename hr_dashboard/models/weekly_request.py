from datetime import date
from typing import Literal

from pydantic import BaseModel, ConfigDict

WeeklyStatus = Literal["pending", "reviewed", "completed"]
Priority = Literal["low", "medium", "high"]

WEEKLY_STATUSES: tuple[str, ...] = ("pending", "reviewed", "completed")
WEEKLY_UPDATES: tuple[str, ...] = ("reviewed", "completed")
PRIORITIES: tuple[str, ...] = ("low", "medium", "high")


class WeeklyRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    employee_id: int
    employee_name: str
    title: str
    description: str
    priority: Priority = "medium"
    status: WeeklyStatus = "pending"
    request_date: date
