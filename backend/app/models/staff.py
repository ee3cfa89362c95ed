from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.sql import func
from app.database import Base


class Staff(Base):
    __tablename__ = "staff"

    id = Column(Integer, primary_key=True, index=True)
    staff_id = Column(String(50), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    role = Column(String(100), nullable=False)
    department = Column(String(100))
    qualification = Column(String(200))
    contact = Column(String(20))
    email = Column(String(200))
    address = Column(Text)
    date_of_joining = Column(String(20))
    shift_timing = Column(String(50))
    experience = Column(String(20))
    salary = Column(String(20))
    emergency_contact = Column(String(20))
    hospital_id = Column(Integer, ForeignKey("accounts.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
