from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.sql import func
from app.database import Base


class Worker(Base):
    __tablename__ = "workers"

    id = Column(Integer, primary_key=True, index=True)
    worker_id = Column(String(50), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    dob = Column(String(20))
    gender = Column(String(20))
    contact = Column(String(20))
    home_state = Column(String(100))
    id_type = Column(String(50))
    id_number = Column(String(50))
    registered_on = Column(String(20))
    hospital_id = Column(Integer, ForeignKey("accounts.id"), nullable=False, index=True)
    hospital_name = Column(String(200))
    created_at = Column(DateTime(timezone=True), server_default=func.now())
