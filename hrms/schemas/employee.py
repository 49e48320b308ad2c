from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from datetime import datetime
from decimal import Decimal
from typing import Optional, List
from hrms.core.enums import AttendanceStatus
from hrms.services.performance import MAX_TASKS_COMPLETED

# Wire format is camelCase (tasksCompleted, performanceScore, daIncrement, ...)
camel_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _strip_name(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    value = value.strip()
    if not value:
        raise ValueError("name must not be empty")
    return value


class EmployeeCreate(BaseModel):
    model_config = camel_config

    name: str = Field(..., max_length=100)
    department: Optional[str] = None
    salary: Decimal = Field(Decimal("0"), ge=0, max_digits=12, decimal_places=2)
    user_id: Optional[str] = None

    @field_validator("name")
    @classmethod
    def check_name(cls, value):
        return _strip_name(value)


class EmployeeUpdate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    name: Optional[str] = Field(None, max_length=100)
    department: Optional[str] = None
    salary: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
    user_id: Optional[str] = None
    tasks_completed: Optional[int] = Field(None, ge=0, le=MAX_TASKS_COMPLETED)

    @field_validator("name")
    @classmethod
    def check_name(cls, value):
        return _strip_name(value)


class AttendanceMark(BaseModel):
    date: Optional[AwareDatetime] = None  # defaults to now
    status: AttendanceStatus


class TaskIncrement(BaseModel):
    increment: int = Field(1, ge=-MAX_TASKS_COMPLETED, le=MAX_TASKS_COMPLETED)  # may be negative for corrections


class AttendanceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    date: datetime
    status: AttendanceStatus


class EmployeeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    id: int
    user_id: Optional[str]
    name: str
    department: Optional[str]
    attendance: List[AttendanceResponse]
    tasks_completed: int
    performance_score: int
    salary: float
    da_increment: int
    created_at: datetime
    updated_at: datetime


class DaIncrementItem(BaseModel):
    model_config = camel_config

    id: int
    name: str
    da_increment: int


class DaIncrementRunResponse(BaseModel):
    updated: List[DaIncrementItem]
