"""
User model for the development stub backend
"""

import uuid

from sqlalchemy import Column, String, DateTime
from sqlalchemy.sql import func
from mycare.database import Base

def generate_user_id() -> str:
    return uuid.uuid4().hex[:24]

class UserRecord(Base):
    """Registered account"""
    __tablename__ = "users"

    id = Column(String(24), primary_key=True, default=generate_user_id)
    email = Column(String(100), unique=True, index=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)
    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False, default="")
    role = Column(String(20), default="patient", nullable=False)  # patient, doctor, admin
    profile_image = Column(String(255), nullable=True)
    phone_number = Column(String(20), nullable=True)
    address = Column(String(255), nullable=True)
    date_of_birth = Column(String(20), nullable=True)
    gender = Column(String(10), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<UserRecord(id='{self.id}', email='{self.email}', role='{self.role}')>"
