# hrms/models/attendance.py
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from hrms.database import Base

class AttendanceEntry(Base):
    __tablename__ = "attendance_entries"

    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(Integer, ForeignKey("employees.id"), nullable=False, index=True)
    date = Column(DateTime(timezone=True), nullable=False)
    status = Column(String(16), nullable=False)  # present, absent, leave

    employee = relationship("Employee", back_populates="attendance")
