"""Pytest fixtures for the cart demo."""

import pytest

from cart_demo.cart import Cart
from cart_demo.models import Product
from cart_demo.payments import PaymentProcessor
from cart_demo.transcript import Transcript


@pytest.fixture
def transcript() -> Transcript:
    return Transcript()


@pytest.fixture
def macbook() -> Product:
    return Product(name="Macbook", price=5000.00, quantity=1)


@pytest.fixture
def iphone() -> Product:
    return Product(name="iPhone", price=2000.00, quantity=2)


@pytest.fixture
def cart(macbook, iphone) -> Cart:
    cart = Cart()
    cart.add_product(macbook, 4)
    cart.add_product(iphone, 2)
    return cart


@pytest.fixture
def credit(transcript) -> PaymentProcessor:
    return PaymentProcessor.credit_card(transcript, available_balance=100.0)


@pytest.fixture
def cash(transcript) -> PaymentProcessor:
    return PaymentProcessor.cash(transcript, available_cash=50.0)
