"""Performance scoring and DA increment allocation.

All functions here are pure apart from ``allocate_da_increments``, which
writes the derived fields onto the employee objects it is given. Nothing in
this module touches the database.

Rounding is half-up everywhere (12.5 -> 13), computed on exact fractions so
that binary floating point never decides a boundary case.
"""
import math
from decimal import Decimal
from fractions import Fraction
from typing import List, Sequence, Union

from hrms.core.enums import AttendanceStatus

Number = Union[int, float, Decimal, Fraction]

TASK_WEIGHT = 2
ATTENDANCE_WEIGHT = 100

# Largest task count whose score still fits a 32-bit Integer column
MAX_TASKS_COMPLETED = (2**31 - 1 - ATTENDANCE_WEIGHT) // TASK_WEIGHT


def round_half_up(value: Number) -> int:
    return math.floor(Fraction(value) + Fraction(1, 2))


def attendance_rate(attendance) -> Fraction:
    """Fraction of entries marked present; 0 when there are none."""
    total = len(attendance)
    if not total:
        return Fraction(0)
    present = sum(1 for entry in attendance if entry.status == AttendanceStatus.PRESENT.value)
    return Fraction(present, total)


def compute_performance(employee) -> int:
    """Score = tasks completed x 2 + attendance rate x 100, rounded half-up.

    Only ``tasks_completed`` and ``attendance`` are read.
    """
    tasks = employee.tasks_completed or 0
    return round_half_up(tasks * TASK_WEIGHT + attendance_rate(employee.attendance) * ATTENDANCE_WEIGHT)


def top_performer_count(total: int, fraction: float = 0.10) -> int:
    """Size of the top decile: floor(total x fraction), at least one; 0 if nobody."""
    if total <= 0:
        return 0
    return max(1, math.floor(total * Fraction(str(fraction))))


def da_increment_for(salary: Number, rate: float = 0.05) -> int:
    return round_half_up(Fraction(salary) * Fraction(str(rate)))


def rank_employees(employees: Sequence) -> List:
    """Order by performance score descending; equal scores keep ascending id."""
    return sorted(employees, key=lambda emp: (-emp.performance_score, emp.id))


def allocate_da_increments(employees: Sequence, fraction: float = 0.10, rate: float = 0.05) -> List:
    """Refresh every score, then grant the DA increment to the top performers.

    Returns the selected employees in ranked order. Employees outside the
    top group keep whatever ``da_increment`` they already had.
    """
    for emp in employees:
        emp.performance_score = compute_performance(emp)

    ranked = rank_employees(employees)
    top = ranked[:top_performer_count(len(ranked), fraction)]
    for emp in top:
        emp.da_increment = da_increment_for(emp.salary or 0, rate)
    return top
