"""
Order repositories: where the order service keeps what it creates
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional, List, Callable

from sqlalchemy.orm import Session

from mycare.models.order import OrderRecord
from mycare.schemas.order import Order, OrderItem, OrderStatus
from mycare.utils.error_handler import ServiceError

logger = logging.getLogger(__name__)

class OrderRepository(ABC):
    """Storage contract used by OrderService"""

    @abstractmethod
    def add(self, order: Order) -> Order:
        ...

    @abstractmethod
    def get(self, order_id: str) -> Optional[Order]:
        ...

class InMemoryOrderRepository(OrderRepository):
    """Process-local store, lost on restart"""

    def __init__(self):
        self._orders: List[Order] = []

    def add(self, order: Order) -> Order:
        self._orders.append(order)
        return order

    def get(self, order_id: str) -> Optional[Order]:
        # First match wins, so a later colliding id never shadows an earlier order
        return next((order for order in self._orders if order.id == order_id), None)

    def __len__(self):
        return len(self._orders)

class SqlOrderRepository(OrderRepository):
    """Order store backed by SQLAlchemy"""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def add(self, order: Order) -> Order:
        db = self.session_factory()
        try:
            record = OrderRecord(
                id=order.id,
                amount=order.amount,
                status=order.status.value,
                payment_method=order.payment_method,
                timestamp=order.timestamp,
                items=[item.model_dump() for item in order.items] if order.items is not None else None
            )
            db.add(record)
            db.commit()
            logger.info(f"Stored order {order.id}")
            return order
        except Exception as e:
            db.rollback()
            logger.error(f"Failed to store order {order.id}: {e}")
            raise ServiceError(f"Failed to store order: {str(e)}", "DATABASE_ERROR", e)
        finally:
            db.close()

    def get(self, order_id: str) -> Optional[Order]:
        db = self.session_factory()
        try:
            record = db.query(OrderRecord).filter(OrderRecord.id == order_id).order_by(OrderRecord.row_id).first()
            if record is None:
                return None
            return self._to_schema(record)
        finally:
            db.close()

    @staticmethod
    def _to_schema(record: OrderRecord) -> Order:
        return Order(
            id=record.id,
            amount=record.amount,
            status=OrderStatus(record.status),
            payment_method=record.payment_method,
            timestamp=record.timestamp,
            items=[OrderItem(**item) for item in record.items] if record.items is not None else None
        )
