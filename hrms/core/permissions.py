"""Role policy for the employee API.

Every route declares the operation it performs and depends on
``require(operation)``; the table below is the only place that decides
which roles may perform it. ``None`` means any authenticated caller.
"""
import enum
import logging
from typing import Dict, FrozenSet, Optional

from fastapi import Depends

from hrms.core.auth import CurrentUser, get_current_user
from hrms.core.enums import Role
from hrms.core.exceptions import ForbiddenError

logger = logging.getLogger(__name__)


class Operation(str, enum.Enum):
    CREATE_EMPLOYEE = "create_employee"
    LIST_EMPLOYEES = "list_employees"
    GET_EMPLOYEE = "get_employee"
    UPDATE_EMPLOYEE = "update_employee"
    MARK_ATTENDANCE = "mark_attendance"
    RECORD_TASK = "record_task"
    RUN_DA_INCREMENT = "run_da_increment"


_MANAGERS = frozenset({Role.HR.value, Role.ADMIN.value, Role.MANAGER.value})

POLICY: Dict[Operation, Optional[FrozenSet[str]]] = {
    Operation.CREATE_EMPLOYEE: _MANAGERS,
    Operation.LIST_EMPLOYEES: None,
    Operation.GET_EMPLOYEE: None,
    Operation.UPDATE_EMPLOYEE: _MANAGERS,
    Operation.MARK_ATTENDANCE: None,
    Operation.RECORD_TASK: None,
    Operation.RUN_DA_INCREMENT: frozenset({Role.HR.value, Role.ADMIN.value}),
}


def is_allowed(operation: Operation, role: str) -> bool:
    allowed = POLICY[operation]
    return allowed is None or role in allowed


def require(operation: Operation):
    """Dependency factory: resolve the caller and check it against POLICY."""

    async def dependency(current_user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
        if not is_allowed(operation, current_user.role):
            logger.warning(
                "Forbidden: user %s with role %r attempted %s",
                current_user.id, current_user.role, operation.value,
            )
            raise ForbiddenError(operation.value)
        return current_user

    return dependency
