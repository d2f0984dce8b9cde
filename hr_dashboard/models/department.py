from pydantic import BaseModel, ConfigDict, Field


class Department(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    description: str
    # Display snapshot only; live headcount comes from Employee.department.
    employees: int = Field(0, ge=0)
