from __future__ import annotations

from core.link import EMPTY, Link, More
from .base import TeardownPolicy


class RecursiveTeardown(TeardownPolicy):
    """
    Наивное освобождение: сначала рекурсивно хвост, потом сам узел.

    Так выглядел бы деструктор, сгенерированный "по структуре":
    один кадр стека на узел. На длинной цепочке упирается
    в sys.getrecursionlimit() и бросает RecursionError.
    Оставлен как базовая линия для тестов и бенчмарка.
    """

    def release(self, link: Link) -> int:
        if not isinstance(link, More):
            return 0
        node = link.node
        released = self.release(node.next)
        node.next = EMPTY
        return released + 1
