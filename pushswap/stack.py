"""Stacks of numbered nodes and the instruction set that moves them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One element of a stack: its value plus bookkeeping marks."""

    value: int
    flag: int = 10
    path: int = 0


class Stack:
    """A stack of nodes, top first."""

    def __init__(self, nodes: Iterable[Node] = ()) -> None:
        self._nodes: deque[Node] = deque(nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"Stack({self.values()!r})"

    @property
    def head(self) -> Optional[Node]:
        """The top node, or None when empty."""
        return self._nodes[0] if self._nodes else None

    @property
    def tail(self) -> Optional[Node]:
        """The bottom node, or None when empty."""
        return self._nodes[-1] if self._nodes else None

    def values(self) -> list[int]:
        """The node values from top to bottom."""
        return [node.value for node in self._nodes]

    def push(self, node: Node) -> None:
        """Put a node on top."""
        self._nodes.appendleft(node)

    def pop(self) -> Node:
        """Remove and return the top node."""
        if not self._nodes:
            raise IndexError("pop from an empty stack")
        return self._nodes.popleft()

    def swap(self) -> None:
        """Exchange the values of the two top nodes."""
        if len(self._nodes) < 2:
            raise IndexError("swap needs at least two elements")
        first, second = self._nodes[0], self._nodes[1]
        first.value, second.value = second.value, first.value

    def rotate(self) -> bool:
        """Move the top node to the bottom; report whether anything moved."""
        if len(self._nodes) < 2:
            return False
        self._nodes.rotate(-1)
        return True

    def reverse_rotate(self) -> bool:
        """Move the bottom node to the top; report whether anything moved."""
        if len(self._nodes) < 2:
            return False
        self._nodes.rotate(1)
        return True


def _print_instruction(name: str) -> None:
    print(name)


class Machine:
    """Two stacks and the named instructions that act on them.

    Every instruction that takes effect is reported through ``emit``.
    """

    def __init__(
        self,
        a: Stack,
        b: Optional[Stack] = None,
        emit: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.a = a
        self.b = b if b is not None else Stack()
        self.emit = emit if emit is not None else _print_instruction

    def _transfer(self, source: Stack, target: Stack, name: str) -> None:
        if not len(source):
            return
        target.push(source.pop())
        self.emit(name)

    def pa(self) -> None:
        """Move the top of b onto a."""
        self._transfer(self.b, self.a, "pa")

    def pb(self) -> None:
        """Move the top of a onto b."""
        self._transfer(self.a, self.b, "pb")

    def sa(self) -> None:
        """Swap the two top values of a."""
        self.a.swap()
        self.emit("sa")

    def sb(self) -> None:
        """Swap the two top values of b."""
        self.b.swap()
        self.emit("sb")

    def ra(self) -> None:
        """Rotate a upwards."""
        if self.a.rotate():
            self.emit("ra")

    def rb(self) -> None:
        """Rotate b upwards."""
        if self.b.rotate():
            self.emit("rb")

    def rr(self) -> None:
        """Rotate both stacks upwards; nothing happens unless both can move."""
        if len(self.a) < 2 or len(self.b) < 2:
            return
        self.a.rotate()
        self.b.rotate()
        self.emit("rr")

    def rra(self) -> None:
        """Rotate a downwards."""
        if self.a.reverse_rotate():
            self.emit("rra")

    def rrb(self) -> None:
        """Rotate b downwards."""
        if self.b.reverse_rotate():
            self.emit("rrb")

    def rrr(self) -> None:
        """Rotate both stacks downwards.

        Stack a turns whenever it can; the instruction is only reported
        when both stacks turned.
        """
        if not self.a.reverse_rotate():
            return
        if not self.b.reverse_rotate():
            return
        self.emit("rrr")