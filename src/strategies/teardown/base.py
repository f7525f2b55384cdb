# strategies/teardown/base.py
from __future__ import annotations
from typing import Protocol

from core.link import Link


class TeardownPolicy(Protocol):
    """
    Интерфейс стратегии освобождения цепочки узлов.

    Стратегия получает звено, уже отсоединённое от стека,
    и должна разорвать всю цепочку за ним.

    Используется:
        - LinkedStack.drop()
        - LinkedStack.__del__ (через drop)
    """

    def release(self, link: Link) -> int:
        """
        Освободить все узлы, достижимые из link.
        Возвращает число освобождённых узлов.
        """
        ...
