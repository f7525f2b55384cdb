from __future__ import annotations
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Empty:
    """
    Терминальное звено цепочки (Link::Empty).

    Не несёт данных. Используется единственный экземпляр EMPTY,
    он же служит "заглушкой" при обмене (take/replace).
    """

    def __repr__(self) -> str:
        return "Empty"


EMPTY = Empty()


@dataclass(eq=False)
class Node:
    """
    Узел стека.

    Хранит:
        elem : int
            Значение (int32, проверяется в LinkedStack.push).

        next : Link
            Звено на следующий узел. Узел владеет им единолично:
            никто, кроме этого узла, не ссылается на преемника.
    """

    elem: int
    next: "Link" = EMPTY

    def take_next(self) -> "Link":
        """Забрать преемника, оставив на его месте EMPTY."""
        succ = self.next
        self.next = EMPTY
        return succ

    def __repr__(self) -> str:
        return f"Node(elem={self.elem})"


@dataclass(eq=False)
class More:
    """
    Звено, владеющее ровно одним узлом (Link::More).
    """

    node: Node

    def __post_init__(self):
        if not isinstance(self.node, Node):
            raise TypeError(f"More должен владеть Node, получено {type(self.node).__name__}")

    def __repr__(self) -> str:
        return f"More({self.node!r})"


Link = Union[Empty, More]

