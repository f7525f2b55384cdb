from __future__ import annotations
import logging
from typing import Iterable, Iterator, Optional

import numpy as np
from numpy.typing import NDArray

from core.link import EMPTY, Link, More, Node
from strategies.teardown.base import TeardownPolicy
from strategies.teardown.iterative import IterativeTeardown
from utils.int32 import as_int32

logger = logging.getLogger(__name__)


class LinkedStack:
    """
    Односвязный стек (LIFO) значений int32.

    Хранит:
        _head     : Link
            Голова цепочки. Стек владеет первым узлом,
            каждый узел — своим преемником.

        _len      : int
            Счётчик узлов, обновляется в push / pop / drop.

        teardown  : TeardownPolicy
            Стратегия освобождения цепочки (по умолчанию итеративная).

    Извлечение владеемого значения всегда идёт через обмен с EMPTY
    (_take_head / Node.take_next), поэтому стек ни в какой момент
    не содержит "висящего" звена.
    """

    def __init__(self, teardown: Optional[TeardownPolicy] = None):
        self._head: Link = EMPTY
        self._len = 0
        self.teardown: TeardownPolicy = teardown if teardown is not None else IterativeTeardown()

    @classmethod
    def new(cls, teardown: Optional[TeardownPolicy] = None) -> LinkedStack:
        """Пустой стек (head = Empty)."""
        return cls(teardown=teardown)

    @classmethod
    def from_iterable(cls, values: Iterable[int], teardown: Optional[TeardownPolicy] = None) -> LinkedStack:
        """Стек, в который по порядку положены values (последний — на вершине)."""
        stack = cls(teardown=teardown)
        stack.extend(values)
        return stack

    # ------------------------------------------------------------
    # Владение головой
    # ------------------------------------------------------------
    def _take_head(self) -> Link:
        """Забрать голову, оставив на её месте EMPTY."""
        head = self._head
        self._head = EMPTY
        return head

    # ------------------------------------------------------------
    # Публичный интерфейс
    # ------------------------------------------------------------
    def push(self, value: int) -> None:
        """
        Положить значение на вершину.

        Новый узел забирает прежнюю голову себе в next,
        затем голова начинает владеть новым узлом.
        При неверном value стек не меняется.
        """
        elem = as_int32(value)
        node = Node(elem=elem, next=self._take_head())
        self._head = More(node)
        self._len += 1

    def pop(self) -> Optional[int]:
        """
        Снять значение с вершины.

        Возвращает:
            элемент вершины или None, если стек пуст.
        """
        head = self._take_head()
        if not isinstance(head, More):
            return None
        node = head.node
        self._head = node.take_next()
        self._len -= 1
        return node.elem

    def peek(self) -> Optional[int]:
        """Значение вершины без удаления, None если пусто."""
        if isinstance(self._head, More):
            return self._head.node.elem
        return None

    def extend(self, values: Iterable[int]) -> None:
        for v in values:
            self.push(v)

    def empty(self) -> bool:
        return not isinstance(self._head, More)

    def is_empty(self) -> bool:
        return self.empty()

    def drop(self) -> int:
        """
        Освободить все узлы стратегией self.teardown.

        Цепочка отсоединяется до начала разбора, поэтому стек
        остаётся пустым даже если стратегия бросила исключение.
        Возвращает число освобождённых узлов.
        """
        chain = self._take_head()
        expected = self._len
        self._len = 0
        if not isinstance(chain, More):
            return 0
        logger.debug("teardown %s: %d nodes", type(self.teardown).__name__, expected)
        released = self.teardown.release(chain)
        logger.debug("teardown done: released=%d", released)
        return released

    def to_array(self) -> NDArray[np.int32]:
        """Снимок стека (от вершины к дну) в виде массива int32."""
        return np.fromiter(iter(self), dtype=np.int32, count=self._len)

    # ------------------------------------------------------------
    # Протоколы Python
    # ------------------------------------------------------------
    def __iter__(self) -> Iterator[int]:
        link = self._head
        while isinstance(link, More):
            yield link.node.elem
            link = link.node.next

    def __len__(self) -> int:
        return self._len

    def __bool__(self) -> bool:
        return not self.empty()

    def __copy__(self) -> LinkedStack:
        """Новая цепочка с теми же значениями; узлы не разделяются."""
        return type(self).from_iterable(reversed(list(self)), teardown=self.teardown)

    def __deepcopy__(self, memo) -> LinkedStack:
        # значения — int, поэтому глубокая копия совпадает с поверхностной
        dup = self.__copy__()
        memo[id(self)] = dup
        return dup

    def __del__(self):
        # __init__ мог не дойти до _head
        if getattr(self, "_head", EMPTY) is not EMPTY:
            self.drop()

    def __repr__(self) -> str:
        return f"LinkedStack({list(self)})"
