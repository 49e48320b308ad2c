import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from hrms.config import settings
from hrms.core.enums import AttendanceStatus
from hrms.core.exceptions import NotFoundError, StorageError, ValidationError
from hrms.models.attendance import AttendanceEntry
from hrms.models.employee import Employee
from hrms.schemas.employee import EmployeeCreate, EmployeeUpdate
from hrms.services.performance import MAX_TASKS_COMPLETED, allocate_da_increments, compute_performance

logger = logging.getLogger(__name__)

# Columns that may never be null on update
REQUIRED_FIELDS = ("name", "salary", "tasks_completed")


async def _commit(db: AsyncSession, action: str) -> None:
    try:
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.exception("Storage failure during %s", action)
        raise StorageError(action) from e


async def _load(db: AsyncSession, employee_id: int) -> Optional[Employee]:
    result = await db.execute(
        select(Employee)
        .options(selectinload(Employee.attendance))
        .where(Employee.id == employee_id)
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


async def get_employee(db: AsyncSession, employee_id: int) -> Employee:
    employee = await _load(db, employee_id)
    if not employee:
        raise NotFoundError(employee_id)
    return employee


async def list_employees(db: AsyncSession, page: int = 1) -> List[Employee]:
    """One page of employees, newest first."""
    limit = settings.PAGE_SIZE
    result = await db.execute(
        select(Employee)
        .options(selectinload(Employee.attendance))
        .order_by(Employee.created_at.desc(), Employee.id.desc())
        .offset((page - 1) * limit)
        .limit(limit)
    )
    return list(result.scalars().all())


async def create_employee(db: AsyncSession, employee_in: EmployeeCreate) -> Employee:
    employee = Employee(
        name=employee_in.name,
        department=employee_in.department,
        salary=employee_in.salary,
        user_id=employee_in.user_id,
        tasks_completed=0,
        da_increment=0,
        attendance=[],
    )
    employee.performance_score = compute_performance(employee)
    db.add(employee)
    await _commit(db, "create_employee")
    logger.info("Created employee %s (%s)", employee.id, employee.name)
    return await get_employee(db, employee.id)


async def update_employee(db: AsyncSession, employee_id: int, employee_in: EmployeeUpdate) -> Employee:
    employee = await get_employee(db, employee_id)

    changes = employee_in.model_dump(exclude_unset=True)
    for field in REQUIRED_FIELDS:
        if field in changes and changes[field] is None:
            raise ValidationError(f"{field} cannot be null")

    for field, value in changes.items():
        setattr(employee, field, value)
    employee.performance_score = compute_performance(employee)

    await _commit(db, "update_employee")
    logger.info("Updated employee %s: %s", employee_id, sorted(changes))
    return await get_employee(db, employee_id)


async def mark_attendance(
    db: AsyncSession,
    employee_id: int,
    status: AttendanceStatus,
    date: Optional[datetime] = None,
) -> Employee:
    """Append one attendance entry and refresh the score in the same write."""
    try:
        status = AttendanceStatus(status)
    except ValueError:
        raise ValidationError(f"Invalid attendance status: {status!r}")
    if date is not None and date.tzinfo is None:
        raise ValidationError("Attendance date must include a timezone")

    employee = await get_employee(db, employee_id)

    employee.attendance.append(
        AttendanceEntry(
            date=date.astimezone(timezone.utc) if date else datetime.now(timezone.utc),
            status=status.value,
        )
    )
    employee.performance_score = compute_performance(employee)

    await _commit(db, "mark_attendance")
    logger.info("Marked %s for employee %s", status.value, employee_id)
    return await get_employee(db, employee_id)


async def record_task_completion(db: AsyncSession, employee_id: int, increment: int = 1) -> Employee:
    employee = await get_employee(db, employee_id)

    tasks_completed = employee.tasks_completed + increment
    if tasks_completed < 0:
        raise ValidationError("tasksCompleted cannot go below zero")
    if tasks_completed > MAX_TASKS_COMPLETED:
        raise ValidationError(f"tasksCompleted cannot exceed {MAX_TASKS_COMPLETED}")

    employee.tasks_completed = tasks_completed
    employee.performance_score = compute_performance(employee)

    await _commit(db, "record_task_completion")
    logger.info(
        "Employee %s tasks %+d -> %s (score %s)",
        employee_id, increment, tasks_completed, employee.performance_score,
    )
    return await get_employee(db, employee_id)


async def run_da_increment(db: AsyncSession) -> List[dict]:
    """Recompute every score and grant the DA increment to the top decile.

    Runs as one transaction: either every refreshed score and increment is
    stored or none is.
    """
    result = await db.execute(
        select(Employee)
        .options(selectinload(Employee.attendance))
        .order_by(Employee.id)
    )
    employees = list(result.scalars().all())

    top = allocate_da_increments(
        employees,
        fraction=settings.TOP_PERFORMER_FRACTION,
        rate=settings.DA_INCREMENT_RATE,
    )
    updated = [
        {"id": emp.id, "name": emp.name, "da_increment": emp.da_increment}
        for emp in top
    ]

    await _commit(db, "run_da_increment")
    logger.info("DA increment run: %d of %d employees updated", len(updated), len(employees))
    return updated
