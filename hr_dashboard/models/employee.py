from pydantic import BaseModel, ConfigDict, Field


class Employee(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    department: str = Field(..., description="Department name, not id")
    email: str
    phone: str
    address: str
    role: str = Field(..., description="Job title")
    hourly_rate: float = Field(..., ge=0, allow_inf_nan=False)
    hours_worked: float = Field(..., ge=0, allow_inf_nan=False)
    # Derived on every write: hourly_rate * hours_worked.
    total_salary: float = Field(0, allow_inf_nan=False)

    @staticmethod
    def salary_for(hourly_rate: float, hours_worked: float) -> float:
        return hourly_rate * hours_worked
