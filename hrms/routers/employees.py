from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from hrms.database import get_db
from hrms.core.auth import CurrentUser
from hrms.core.permissions import Operation, require
from hrms.schemas.employee import (
    AttendanceMark,
    DaIncrementRunResponse,
    EmployeeCreate,
    EmployeeResponse,
    EmployeeUpdate,
    TaskIncrement,
)
from hrms.services import employee as employee_service

router = APIRouter(prefix="/api/employees", tags=["employees"])


@router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
async def create_employee(
    employee_in: EmployeeCreate,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require(Operation.CREATE_EMPLOYEE))
):
    return await employee_service.create_employee(db, employee_in)


@router.get("", response_model=List[EmployeeResponse])
async def list_employees(
    page: int = Query(1, ge=1),
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require(Operation.LIST_EMPLOYEES))
):
    return await employee_service.list_employees(db, page)


@router.post("/run-da-increment", response_model=DaIncrementRunResponse)
async def run_da_increment(
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require(Operation.RUN_DA_INCREMENT))
):
    updated = await employee_service.run_da_increment(db)
    return DaIncrementRunResponse(updated=updated)


@router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(
    employee_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require(Operation.GET_EMPLOYEE))
):
    return await employee_service.get_employee(db, employee_id)


@router.put("/{employee_id}", response_model=EmployeeResponse)
async def update_employee(
    employee_id: int,
    employee_in: EmployeeUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require(Operation.UPDATE_EMPLOYEE))
):
    return await employee_service.update_employee(db, employee_id, employee_in)


@router.post("/{employee_id}/attendance", response_model=EmployeeResponse)
async def mark_attendance(
    employee_id: int,
    attendance_in: AttendanceMark,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require(Operation.MARK_ATTENDANCE))
):
    return await employee_service.mark_attendance(
        db, employee_id, status=attendance_in.status, date=attendance_in.date
    )


@router.post("/{employee_id}/task", response_model=EmployeeResponse)
async def record_task_completion(
    employee_id: int,
    task_in: Optional[TaskIncrement] = None,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require(Operation.RECORD_TASK))
):
    increment = task_in.increment if task_in else 1
    return await employee_service.record_task_completion(db, employee_id, increment)
