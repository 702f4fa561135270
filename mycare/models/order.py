"""
Order model for database-backed order storage
"""

from sqlalchemy import Column, Integer, String, DateTime, Float, JSON
from mycare.database import Base

class OrderRecord(Base):
    """Persisted order"""
    __tablename__ = "orders"

    # Not a primary key: generated ids carry no uniqueness guarantee
    row_id = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(20), index=True, nullable=False)
    amount = Column(Float, nullable=False)
    status = Column(String(20), default="completed", nullable=False)
    payment_method = Column(String(50), nullable=False)
    timestamp = Column(DateTime(timezone=True), nullable=False)
    items = Column(JSON, nullable=True)

    def __repr__(self):
        return f"<OrderRecord(id='{self.id}', amount={self.amount}, status='{self.status}')>"
