from __future__ import annotations

import argparse
import logging

from cart_demo.cart import Cart
from cart_demo.demo import DemoConfig, run_demo
from cart_demo.transcript import Transcript


def main() -> None:
    p = argparse.ArgumentParser(description="Run the shopping cart demo and print its transcript.")
    p.add_argument("--discount", type=float, default=10.0, help="Процент скидки для второго подсчёта суммы")
    p.add_argument("--credit-balance", type=float, default=100.0)
    p.add_argument("--cash", type=float, default=50.0)
    p.add_argument("--log-level", type=str, default="WARNING")
    args = p.parse_args()

    # логи идут в stderr, stdout остаётся чистым transcript
    logging.basicConfig(level=args.log_level.upper(), format="%(message)s")

    config = DemoConfig(
        discount_percentage=args.discount,
        credit_balance=args.credit_balance,
        cash_available=args.cash,
    )
    run_demo(Transcript(), cart=Cart(), config=config)


if __name__ == "__main__":
    main()
