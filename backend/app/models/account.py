from sqlalchemy import Column, Integer, String, DateTime, JSON
from sqlalchemy.sql import func
from app.database import Base


class Account(Base):
    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True, index=True)
    display_name = Column(String(200), nullable=False)
    email = Column(String(200), unique=True, index=True)  # hospital / gov
    mobile = Column(String(20), unique=True, index=True)  # worker
    password_hash = Column(String(200), nullable=False)
    role = Column(String(20), nullable=False)  # "worker" | "hospital" | "gov"
    role_details = Column(JSON, default=dict)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    @property
    def is_hospital(self) -> bool:
        return self.role == "hospital"
