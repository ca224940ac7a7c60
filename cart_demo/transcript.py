from __future__ import annotations

import logging
import sys
from typing import List, Optional, TextIO

logger = logging.getLogger(__name__)


class Transcript:
    """
    Весь наблюдаемый вывод демо.

    Каждая строка:
    - печатается в stdout (или в переданный поток)
    - сохраняется в списке lines (для тестов)
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream
        self.lines: List[str] = []

    def write(self, message: str) -> None:
        self.lines.append(message)
        logger.debug(message)
        # sys.stdout берётся в момент записи, чтобы работал capsys
        print(message, file=self.stream or sys.stdout)
