from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from cart_demo.cart import Cart
from cart_demo.discounts import no_discount, percentage_discount
from cart_demo.models import Post, Product
from cart_demo.payments import PaymentProcessor, PaymentResult, attempt_payment
from cart_demo.transcript import Transcript


@dataclass(slots=True)
class DemoConfig:
    discount_percentage: float = 10.0
    credit_balance: float = 100.0
    cash_available: float = 50.0


def sample_posts() -> List[Post]:
    return [
        Post(author="Alice", content="Had a great day at the park!", likes=120),
        Post(author="Bob", content="Just played 5 hours of badminton!", likes=95),
    ]


def show_posts(transcript: Transcript) -> None:
    for post in sample_posts():
        post.display(transcript)


def exercise_cart(transcript: Transcript, cart: Cart, discount_percentage: float) -> None:
    macbook = Product(name="Macbook", price=5000.00, quantity=1)
    iphone = Product(name="iPhone", price=2000.00, quantity=2)

    cart.add_product(macbook, 4)
    cart.add_product(iphone, 2)

    plain = no_discount()
    discounted = percentage_discount(discount_percentage)

    transcript.write(f"Total price without discount: {cart.total_price(plain)}")
    transcript.write(f"Total price with {discounted.label()}: {cart.total_price(discounted)}")

    cart.remove_product(iphone)
    transcript.write(f"Total price after removing product: {cart.total_price(plain)}")

    cart.clear()
    transcript.write(f"Total price after clearing the cart: {cart.total_price(plain)}")


def exercise_payments(transcript: Transcript, config: DemoConfig) -> List[PaymentResult]:
    credit = PaymentProcessor.credit_card(transcript, available_balance=config.credit_balance)
    cash = PaymentProcessor.cash(transcript, available_cash=config.cash_available)

    # После отказа по наличным вызывающий сам пробует меньшую сумму.
    return [
        attempt_payment(credit, 75.0),
        attempt_payment(cash, 60.0),
        attempt_payment(cash, 40.0),
    ]


def run_demo(
    transcript: Transcript,
    cart: Optional[Cart] = None,
    config: Optional[DemoConfig] = None,
) -> List[PaymentResult]:
    config = config or DemoConfig()
    cart = cart if cart is not None else Cart()

    show_posts(transcript)
    exercise_cart(transcript, cart, config.discount_percentage)
    return exercise_payments(transcript, config)
