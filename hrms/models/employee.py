# hrms/models/employee.py
from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, Numeric, DateTime, func
from sqlalchemy.orm import relationship
from hrms.database import Base
from hrms.models.attendance import AttendanceEntry


def utcnow():
    return datetime.now(timezone.utc)


class Employee(Base):
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=True, index=True)  # external identity (token "sub")
    name = Column(String, nullable=False)
    department = Column(String, nullable=True)

    tasks_completed = Column(Integer, nullable=False, default=0)
    performance_score = Column(Integer, nullable=False, default=0)  # derived
    salary = Column(Numeric(12, 2), nullable=False, default=0)
    da_increment = Column(Numeric(12, 2), nullable=False, default=0)  # derived, last allocation run

    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, server_default=func.now(), nullable=False)

    attendance = relationship(
        AttendanceEntry,
        back_populates="employee",
        order_by=AttendanceEntry.id,
        cascade="all, delete-orphan",
        lazy="selectin",
    )
