"""Tests for the full sample run."""
from cart_demo.cart import Cart
from cart_demo.demo import DemoConfig, run_demo
from cart_demo.transcript import Transcript

EXPECTED = [
    "Post by Alice",
    "Content: Had a great day at the park!",
    "Likes: 120",
    "--------------------------",
    "Post by Bob",
    "Content: Just played 5 hours of badminton!",
    "Likes: 95",
    "--------------------------",
    "Total price without discount: 24000.0",
    "Total price with 10% discount: 21600.0",
    "Total price after removing product: 20000.0",
    "Total price after clearing the cart: 0.0",
    "Processing credit card payment of 75.0...",
    "Credit card payment of 75.0 was successful!",
    "Processing cash payment of 60.0...",
    "Error occurred: Not enough cash available.",
    "Processing cash payment of 40.0...",
    "Cash payment of 40.0 was successful!",
]


def test_sample_run_transcript(capsys):
    transcript = Transcript()
    cart = Cart()

    results = run_demo(transcript, cart=cart)

    assert transcript.lines == EXPECTED
    assert capsys.readouterr().out.splitlines() == EXPECTED
    assert [r.ok for r in results] == [True, False, True]
    assert len(cart) == 0


def test_custom_config_changes_outcomes(transcript):
    results = run_demo(transcript, config=DemoConfig(discount_percentage=25, credit_balance=50.0, cash_available=100.0))

    assert "Total price with 25% discount: 18000.0" in transcript.lines
    assert [r.ok for r in results] == [False, True, True]
    assert "Error occurred: Insufficient funds on the credit card." in transcript.lines
