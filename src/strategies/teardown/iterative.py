from __future__ import annotations

from core.link import Link, More
from .base import TeardownPolicy


class IterativeTeardown(TeardownPolicy):
    """
    Итеративный разбор цепочки.

    На каждом шаге у текущего узла забирается преемник (take_next),
    после чего сам узел уже ни на что не ссылается и отбрасывается
    без рекурсии. Глубина стека вызовов O(1) при любой длине.
    """

    def release(self, link: Link) -> int:
        released = 0
        walker = link
        while isinstance(walker, More):
            # старое звено теряет последнюю ссылку здесь, next у него уже EMPTY
            walker = walker.node.take_next()
            released += 1
        return released
