from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from cart_demo.transcript import Transcript

logger = logging.getLogger(__name__)


class PaymentFailed(Exception):
    pass


class FundingSource(str, Enum):
    CREDIT_CARD = "credit card"
    CASH = "cash"


_FAILURE_MESSAGES: Dict[FundingSource, str] = {
    FundingSource.CREDIT_CARD: "Insufficient funds on the credit card.",
    FundingSource.CASH: "Not enough cash available.",
}


class PaymentProcessor:
    """
    Проверяет сумму платежа против фиксированного лимита.

    Лимит НЕ уменьшается после успешного платежа:
    один и тот же платёж можно провести сколько угодно раз.
    """

    def __init__(self, transcript: Transcript, source: FundingSource, available: float):
        self.transcript = transcript
        self.source = source
        self.available = available

    @classmethod
    def credit_card(cls, transcript: Transcript, available_balance: float) -> PaymentProcessor:
        return cls(transcript, FundingSource.CREDIT_CARD, available_balance)

    @classmethod
    def cash(cls, transcript: Transcript, available_cash: float) -> PaymentProcessor:
        return cls(transcript, FundingSource.CASH, available_cash)

    def process_payment(self, amount: float) -> None:
        self.transcript.write(f"Processing {self.source.value} payment of {amount}...")
        if amount > self.available:
            raise PaymentFailed(_FAILURE_MESSAGES[self.source])
        self.transcript.write(f"{self.source.value.capitalize()} payment of {amount} was successful!")
        logger.info(f"payment: {self.source.value} amount={amount} (available={self.available})")


@dataclass(frozen=True, slots=True)
class PaymentResult:
    ok: bool
    amount: float
    source: FundingSource
    error: Optional[str] = None


def attempt_payment(processor: PaymentProcessor, amount: float) -> PaymentResult:
    """Один вызов без повторов; ошибка печатается и возвращается как результат."""
    try:
        processor.process_payment(amount)
    except PaymentFailed as e:
        processor.transcript.write(f"Error occurred: {e}")
        logger.warning(f"payment rejected: {processor.source.value} amount={amount}: {e}")
        return PaymentResult(ok=False, amount=amount, source=processor.source, error=str(e))
    return PaymentResult(ok=True, amount=amount, source=processor.source)
