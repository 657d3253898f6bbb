"""An online shop: products, carts, orders and a shopping service."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Dict, List, Optional, Protocol


class ProductCategory(IntEnum):
    CLOTH = 0
    SHOES = 1
    ELECTRONICS = 2


class OrderStatus(str, Enum):
    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    SHIPPED = "SHIPPED"
    CANCELLED = "CANCELLED"


class ShoppingError(Exception):
    """Raised when an order cannot be placed."""


class Payment(Protocol):
    def process_payment(self, amount: float) -> bool: ...


@dataclass
class Product:
    id: str
    name: str
    description: str
    category: ProductCategory
    count: int
    price: float

    def is_available(self) -> bool:
        return self.count > 0

    def update_quantity(self, quantity: int) -> None:
        """Change the stock by the given (possibly negative) quantity."""
        self.count += quantity


@dataclass
class OrderItem:
    product: Product
    quantity: int


@dataclass
class Order:
    id: str
    user_id: str
    items: List[OrderItem]
    status: OrderStatus = OrderStatus.PENDING
    total_price: float = field(init=False)

    def __post_init__(self) -> None:
        self.total_price = sum(item.product.price * item.quantity for item in self.items)


class Cart:
    """Products a user intends to buy, one line per product."""

    def __init__(self) -> None:
        self._items: Dict[str, OrderItem] = {}

    def add_item(self, product: Product, quantity: int) -> None:
        """Add a product, increasing the quantity if it is already in the cart."""
        existing = self._items.get(product.id)
        if existing is None:
            self._items[product.id] = OrderItem(product, quantity)
        else:
            existing.quantity += quantity

    def remove_item(self, product_id: str) -> None:
        self._items.pop(product_id, None)

    def items(self) -> List[OrderItem]:
        return list(self._items.values())

    def clear(self) -> None:
        self._items = {}

    def __len__(self) -> int:
        return len(self._items)


@dataclass
class User:
    id: str
    name: str
    orders: Dict[str, Order] = field(default_factory=dict)
    cart: Cart = field(default_factory=Cart, repr=False)

    def add_order(self, order: Order) -> None:
        self.orders[order.id] = order


class CreditCardPayment:
    """A payment method that accepts every payment and records its amount."""

    def __init__(self) -> None:
        self.processed: List[float] = []

    def process_payment(self, amount: float) -> bool:
        self.processed.append(amount)
        return True


class ShoppingService:
    """Holds users, products and orders and turns carts into orders."""

    def __init__(self) -> None:
        self.users: Dict[str, User] = {}
        self.products: Dict[str, Product] = {}
        self.orders: Dict[str, Order] = {}

    def add_user(self, user: User) -> None:
        self.users[user.id] = user

    def add_product(self, product: Product) -> None:
        self.products[product.id] = product

    def search_products(self, keyword: str) -> List[Product]:
        """Products whose name contains the keyword, ignoring case."""
        needle = keyword.lower()
        return [product for product in self.products.values() if needle in product.name.lower()]

    def place_order(self, user: User, cart: Cart, payment: Payment) -> Order:
        """Order the cart's items that are in stock, then pay for them.

        The cart is emptied. A failed payment cancels the order and returns
        the ordered quantities to stock.
        """
        items = [
            item
            for item in cart.items()
            if item.product.is_available() and item.product.count >= item.quantity
        ]
        if not items:
            raise ShoppingError("no available products in the cart")

        order = Order(id=f"order-{user.id}", user_id=user.id, items=items)
        self.orders[order.id] = order
        user.add_order(order)
        cart.clear()

        if payment.process_payment(order.total_price):
            order.status = OrderStatus.PROCESSING
        else:
            order.status = OrderStatus.CANCELLED
            for item in order.items:
                item.product.update_quantity(item.quantity)
        return order


_service: Optional[ShoppingService] = None
_service_lock = threading.Lock()


def get_shopping_service() -> ShoppingService:
    """The process-wide shopping service, created on first use."""
    global _service
    with _service_lock:
        if _service is None:
            _service = ShoppingService()
        return _service