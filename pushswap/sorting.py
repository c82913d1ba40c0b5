"""The chunk-based strategy that sorts stack a using the machine's instructions."""

from __future__ import annotations

from itertools import islice
from typing import Iterable

from .parsing import rank_values
from .stack import Machine, Node, Stack


def _value(node: Node) -> int:
    return node.value


def _top_two(stack: Stack) -> tuple[int, int]:
    top, below = (node.value for node in islice(stack, 2))
    return top, below


def is_sorted(machine: Machine) -> bool:
    """Tell whether a holds every value in order, up to a rotation.

    Stack b must be empty. A sequence with a single break is a rotated run;
    it is turned with ``ra`` until the value 1 is on top and counts as sorted.
    """
    if len(machine.b):
        return False
    values = machine.a.values()
    breaks = sum(1 for current, following in zip(values, values[1:]) if following != current + 1)
    if breaks > 1:
        return False
    if breaks == 1:
        for _ in range(len(values)):
            if machine.a.head.value == 1:
                break
            machine.ra()
    return True


def sort_three(machine: Machine) -> None:
    """Order the three values of a, smallest on top."""
    values = machine.a.values()
    top, middle, bottom = values[0], values[1], values[-1]
    if top > middle and top > bottom:
        if middle < bottom:
            machine.ra()
        else:
            machine.sa()
            machine.rra()
    elif top < middle and top < bottom:
        if middle > bottom:
            machine.ra()
            machine.sa()
            machine.rra()
    elif top < bottom:
        machine.sa()
    else:
        machine.rra()


def push_chunk(machine: Machine, high: int, low: int, largest: int) -> None:
    """Rotate a until a value of the current chunk is on top and move it to b.

    The three largest values never leave a. A value not above ``low`` is
    sent to the bottom of b; one not above ``high`` stays on top of b.
    """
    a = machine.a
    ceiling = largest - 3
    while len(a) > 3:
        top = a.head.value
        if top <= low and top <= ceiling:
            machine.pb()
            machine.rb()
            return
        if top <= high and top <= ceiling:
            machine.pb()
            return
        machine.ra()


def _chunk_divider(largest: int) -> int:
    if largest >= 100:
        return largest // 50 + 6
    if largest >= 50:
        return largest // (largest // 10)
    if largest >= 10:
        return largest // (largest // 2)
    return 4 if largest < 7 else 2


def _fill_b(machine: Machine) -> None:
    largest = len(machine.a)
    divider = _chunk_divider(largest)
    low = -(largest // divider)
    high = 0
    step = largest // (divider // 2)
    while len(machine.a) > 3:
        high += step
        low += step
        for _ in range(step):
            if len(machine.a) <= 3:
                break
            push_chunk(machine, high, low, largest)


def find_closest(stack: Stack, skip: int) -> int:
    """Count the turns that bring a value of at least ``skip`` to the top.

    A positive count means ``rb`` turns from the top, a negative one
    ``rrb`` turns from the bottom; the cheaper direction wins, ties going
    to the top.
    """
    nodes = list(stack)
    if not nodes:
        return 0
    from_up = next(
        (index for index, node in enumerate(nodes[:-1]) if node.value >= skip),
        len(nodes) - 1,
    )
    from_down = next(
        (1 + index for index, node in enumerate(reversed(nodes[1:])) if node.value >= skip),
        len(nodes),
    )
    if from_down < from_up:
        return -from_down
    return from_up


def bring_to_top_and_push(machine: Machine, location: int) -> None:
    """Turn b by ``location`` steps, then move its top onto a."""
    turn = machine.rrb if location < 0 else machine.rb
    for _ in range(abs(location)):
        turn()
    machine.pa()


def _fill_a(machine: Machine) -> None:
    a, b = machine.a, machine.b
    limit = len(b) - 1
    while len(b):
        bring_to_top_and_push(machine, find_closest(b, limit))
        top, below = _top_two(a)
        if top != below - 1:
            bring_to_top_and_push(machine, find_closest(b, limit))
            top, below = _top_two(a)
            if top > below:
                machine.sa()
            limit -= 2
        else:
            limit -= 1


def biggest_marked(stack: Stack) -> Node:
    """Return the largest node flagged 1, or the smallest node if none is."""
    lowest = min(stack, key=_value)
    marked = [node for node in stack if node.flag == 1 and node.value > lowest.value]
    return max(marked, key=_value, default=lowest)


def mark_last_order(stack: Stack) -> None:
    """Flag with 1 the nodes above the biggest marked one.

    The walk starts after the biggest marked node, wraps around from the
    bottom to the top, and stops at the smallest node.
    """
    nodes = list(stack)
    if not nodes:
        return
    lowest = min(nodes, key=_value)
    hold = biggest_marked(stack)
    start = next(index for index, node in enumerate(nodes) if node is hold) + 1
    for node in nodes[start:] + nodes[:start]:
        if node is lowest:
            break
        if node.flag != 1 and node.value > hold.value:
            node.flag = 1


def sort_stack(machine: Machine) -> None:
    """Sort the ranks held in a, leaving b empty."""
    a = machine.a
    if len(a) == 3:
        sort_three(machine)
        return
    if len(a) == 2:
        top, below = _top_two(a)
        if top > below:
            machine.ra()
            return
    _fill_b(machine)
    if len(a) == 3:
        sort_three(machine)
    _fill_a(machine)


def solve(values: Iterable[int]) -> list[str]:
    """Return the instructions that sort the given distinct integers."""
    numbers = list(values)
    if len(set(numbers)) != len(numbers):
        raise ValueError("values must be distinct")
    if not numbers:
        return []
    stack = Stack(Node(rank) for rank in rank_values(numbers))
    instructions: list[str] = []
    machine = Machine(stack, emit=instructions.append)
    mark_last_order(stack)
    sort_stack(machine)
    return instructions