from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict


class DiscountKind(str, Enum):
    NONE = "none"
    PERCENTAGE = "percentage"


def _no_discount(total: float, percentage: float) -> float:
    return total


def _percentage_off(total: float, percentage: float) -> float:
    # Без ограничений: >100 даёт отрицательную сумму, <0 увеличивает её.
    return total * (100 - percentage) / 100


DISCOUNT_FUNCTIONS: Dict[DiscountKind, Callable[[float, float], float]] = {
    DiscountKind.NONE: _no_discount,
    DiscountKind.PERCENTAGE: _percentage_off,
}


@dataclass(frozen=True, slots=True)
class DiscountPolicy:
    kind: DiscountKind = DiscountKind.NONE
    percentage: float = 0.0

    def apply(self, total: float) -> float:
        return DISCOUNT_FUNCTIONS[self.kind](total, self.percentage)

    def label(self) -> str:
        if self.kind is DiscountKind.NONE:
            return "no discount"
        return f"{self.percentage:g}% discount"


def no_discount() -> DiscountPolicy:
    return DiscountPolicy(DiscountKind.NONE)


def percentage_discount(percentage: float) -> DiscountPolicy:
    return DiscountPolicy(DiscountKind.PERCENTAGE, percentage)
