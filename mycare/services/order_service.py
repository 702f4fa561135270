"""
Order service: creates orders and looks them up by identifier
"""

import random
import string
import logging
from typing import Optional, List, Union, Any, Dict

from mycare.repositories.orders import OrderRepository, InMemoryOrderRepository
from mycare.schemas.order import Order, OrderItem, OrderResult, OrderStatus
from mycare.utils.error_handler import ErrorHandler

logger = logging.getLogger(__name__)

ORDER_ID_ALPHABET = string.digits + string.ascii_lowercase
ORDER_ID_LENGTH = 9
DIRECT_ORDER_PAYMENT_METHOD = "wallet"

def generate_order_id() -> str:
    """Random base-36 fragment; no collision check is made"""
    return "".join(random.choices(ORDER_ID_ALPHABET, k=ORDER_ID_LENGTH))

class OrderService:
    """Service for order creation and lookup"""

    def __init__(self, repository: Optional[OrderRepository] = None):
        self.repository = repository if repository is not None else InMemoryOrderRepository()

    async def create_order(self, amount: float, payment_method: str) -> Order:
        """Create an order that is immediately completed"""
        order = Order(
            id=generate_order_id(),
            amount=amount,
            status=OrderStatus.COMPLETED,
            payment_method=payment_method
        )
        self.repository.add(order)
        logger.info(f"Created order {order.id} for {order.amount} via {order.payment_method}")
        return order

    async def create_direct_order(self, items: List[Union[OrderItem, Dict[str, Any]]]) -> OrderResult:
        """Create a wallet-paid order totalling price x quantity over the items"""
        try:
            items = [item if isinstance(item, OrderItem) else OrderItem.model_validate(item) for item in items]
            total_amount = sum(item.price * item.quantity for item in items)

            order = Order(
                id=generate_order_id(),
                amount=total_amount,
                status=OrderStatus.COMPLETED,
                payment_method=DIRECT_ORDER_PAYMENT_METHOD,
                items=items
            )
            self.repository.add(order)

            logger.info(f"Created direct order {order.id} with {len(order.items)} item(s)")
            return OrderResult(success=True, data=order)

        except Exception as e:
            logger.error(f"Failed to create direct order: {e}")
            return OrderResult(
                success=False,
                error=ErrorHandler.get_error_message(e, "Failed to create order")
            )

    async def get_order(self, order_id: str) -> Optional[Order]:
        """Look up an order; None when it was never created"""
        return self.repository.get(order_id)
