from __future__ import annotations

import logging
import threading
from dataclasses import replace
from typing import List, Optional, Tuple

from cart_demo.discounts import DiscountPolicy
from cart_demo.models import Product

logger = logging.getLogger(__name__)


class Cart:
    """
    Корзина в памяти.

    - одинаковые товары НЕ объединяются: каждый add_product добавляет новую запись
    - remove_product удаляет все записи с тем же именем
    - скидка передаётся только в момент подсчёта суммы
    """

    def __init__(self) -> None:
        self._products: List[Product] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    @property
    def products(self) -> Tuple[Product, ...]:
        with self._lock:
            return tuple(self._products)

    def add_product(self, product: Product, quantity: int) -> None:
        with self._lock:
            self._products.append(replace(product, quantity=quantity))
        logger.info(f"cart: added {product.name} qty={quantity} price={product.price}")

    def remove_product(self, product: Product) -> None:
        with self._lock:
            before = len(self._products)
            self._products = [p for p in self._products if p.name != product.name]
            removed = before - len(self._products)
        logger.info(f"cart: removed {product.name} (entries={removed})")

    def clear(self) -> None:
        with self._lock:
            self._products.clear()
        logger.info("cart: cleared")

    def total_price(self, discount: DiscountPolicy) -> float:
        with self._lock:
            total = 0.0
            for p in self._products:
                total += p.price * p.quantity
        final = discount.apply(total)
        logger.info(f"cart: total={total} {discount.label()} -> {final}")
        return final


_shared: Optional[Cart] = None
_shared_lock = threading.Lock()


def shared_cart() -> Cart:
    """Один экземпляр на процесс, создаётся при первом обращении."""
    global _shared
    with _shared_lock:
        if _shared is None:
            _shared = Cart()
        return _shared
