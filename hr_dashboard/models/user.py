from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Role = Literal["admin", "employee"]


class User(BaseModel):
    """A login identity. Employees link to their Employee record."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    email: str = Field(..., min_length=1)
    role: Role
    employee_id: Optional[int] = None
