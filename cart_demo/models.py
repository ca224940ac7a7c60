from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from cart_demo.transcript import Transcript

SEPARATOR = "-" * 26


@dataclass(frozen=True, slots=True)
class Post:
    author: str
    content: str
    likes: int

    def lines(self) -> List[str]:
        return [
            f"Post by {self.author}",
            f"Content: {self.content}",
            f"Likes: {self.likes}",
            SEPARATOR,
        ]

    def display(self, transcript: Transcript) -> None:
        for line in self.lines():
            transcript.write(line)


@dataclass(frozen=True, slots=True)
class Product:
    """
    Товар в корзине. Имя служит ключом при удалении.
    Цена и количество не валидируются: отрицательные значения принимаются как есть.
    """

    name: str
    price: float
    quantity: int
