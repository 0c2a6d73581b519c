"""The two stacks of the puzzle and the eleven moves that act on them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional


@dataclass(eq=False)
class Node:
    """One number on a stack, with the bookkeeping the sorter attaches to it."""

    value: int
    index: int = 0
    push_cost: int = 0
    above_median: bool = False
    cheapest: bool = False
    target_node: Optional["Node"] = field(default=None, repr=False)


class Stack:
    """A stack of nodes; the head is the top of the stack."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._nodes: deque[Node] = deque(Node(value) for value in values)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"Stack({self.values()!r})"

    def head(self) -> Optional[Node]:
        """Return the top node, or None when the stack is empty."""
        return self._nodes[0] if self._nodes else None

    def push(self, node: Node) -> None:
        """Put ``node`` on top of the stack."""
        self._nodes.appendleft(node)

    def pop(self) -> Optional[Node]:
        """Take the top node off the stack; None when the stack is empty."""
        return self._nodes.popleft() if self._nodes else None

    def swap(self) -> None:
        """Exchange the two top nodes; fewer than two nodes is left alone."""
        if len(self._nodes) >= 2:
            self._nodes[0], self._nodes[1] = self._nodes[1], self._nodes[0]

    def rotate(self) -> None:
        """Move the top node to the bottom."""
        if len(self._nodes) >= 2:
            self._nodes.rotate(-1)

    def reverse_rotate(self) -> None:
        """Move the bottom node to the top."""
        if len(self._nodes) >= 2:
            self._nodes.rotate(1)

    def is_sorted(self) -> bool:
        """True when the values never decrease from top to bottom."""
        values = self.values()
        return all(upper <= lower for upper, lower in zip(values, values[1:]))

    def min_node(self) -> Optional[Node]:
        """Return the first node holding the smallest value, or None."""
        return min(self._nodes, key=lambda node: node.value, default=None)

    def max_node(self) -> Optional[Node]:
        """Return the first node holding the largest value, or None."""
        return max(self._nodes, key=lambda node: node.value, default=None)

    def values(self) -> List[int]:
        """Return the values from top to bottom."""
        return [node.value for node in self._nodes]


class PushSwap:
    """Stacks a and b, with every move made on them recorded by name in order."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.a = Stack(values)
        self.b = Stack()
        self.moves: List[str] = []

    def _move_top(self, source: Stack, destination: Stack) -> None:
        node = source.pop()
        if node is not None:
            destination.push(node)

    def sa(self) -> None:
        """Swap the two top nodes of a."""
        self.a.swap()
        self.moves.append("sa")

    def sb(self) -> None:
        """Swap the two top nodes of b."""
        self.b.swap()
        self.moves.append("sb")

    def ss(self) -> None:
        """Swap the tops of a and b at once."""
        self.a.swap()
        self.b.swap()
        self.moves.append("ss")

    def pa(self) -> None:
        """Move the top of b onto a."""
        self._move_top(self.b, self.a)
        self.moves.append("pa")

    def pb(self) -> None:
        """Move the top of a onto b."""
        self._move_top(self.a, self.b)
        self.moves.append("pb")

    def ra(self) -> None:
        """Rotate a upwards."""
        self.a.rotate()
        self.moves.append("ra")

    def rb(self) -> None:
        """Rotate b upwards."""
        self.b.rotate()
        self.moves.append("rb")

    def rr(self) -> None:
        """Rotate a and b upwards at once."""
        self.a.rotate()
        self.b.rotate()
        self.moves.append("rr")

    def rra(self) -> None:
        """Rotate a downwards."""
        self.a.reverse_rotate()
        self.moves.append("rra")

    def rrb(self) -> None:
        """Rotate b downwards."""
        self.b.reverse_rotate()
        self.moves.append("rrb")

    def rrr(self) -> None:
        """Rotate a and b downwards at once."""
        self.a.reverse_rotate()
        self.b.reverse_rotate()
        self.moves.append("rrr")