"""The sorting strategy: three-element sort and the cost-driven general sort."""

from __future__ import annotations

from typing import Iterable, List

from pushswap.analysis import current_index, get_cheapest, init_nodes_a, init_nodes_b
from pushswap.stacks import Node, PushSwap


def sort_three(state: PushSwap) -> None:
    """Sort a stack a of three values with at most two moves."""
    biggest = state.a.max_node()
    if biggest is None:
        return
    if biggest is state.a.head():
        state.ra()
    elif len(state.a) > 1 and list(state.a)[1] is biggest:
        state.rra()
    nodes = list(state.a)
    if len(nodes) >= 2 and nodes[0].value > nodes[1].value:
        state.sa()


def prep_for_push(state: PushSwap, node: Node, stack_name: str) -> None:
    """Rotate stack ``stack_name`` ('a' or 'b') until ``node`` is on top.

    The direction follows the node's above-median mark.
    """
    if stack_name == "a":
        stack, forward, backward = state.a, state.ra, state.rra
    elif stack_name == "b":
        stack, forward, backward = state.b, state.rb, state.rrb
    else:
        raise ValueError(f"unknown stack {stack_name!r}")
    if not any(member is node for member in stack):
        raise ValueError(f"node is not on stack {stack_name}")
    while stack.head() is not node:
        if node.above_median:
            forward()
        else:
            backward()


def _rotate_both(state: PushSwap, cheapest: Node, reverse: bool) -> None:
    move = state.rrr if reverse else state.rr
    while state.b.head() is not cheapest.target_node and state.a.head() is not cheapest:
        move()
    current_index(state.a)
    current_index(state.b)


def _move_a_to_b(state: PushSwap) -> None:
    cheapest = get_cheapest(state.a)
    if cheapest is None or cheapest.target_node is None:
        raise ValueError("no node of a is ready to be pushed")
    target = cheapest.target_node
    if cheapest.above_median and target.above_median:
        _rotate_both(state, cheapest, reverse=False)
    elif not cheapest.above_median and not target.above_median:
        _rotate_both(state, cheapest, reverse=True)
    prep_for_push(state, cheapest, "a")
    prep_for_push(state, target, "b")
    state.pb()


def _min_on_top(state: PushSwap) -> None:
    smallest = state.a.min_node()
    if smallest is None:
        return
    while state.a.head().value != smallest.value:
        if smallest.above_median:
            state.ra()
        else:
            state.rra()


def turk_sort(state: PushSwap) -> None:
    """Sort stack a using stack b, choosing the cheapest node to move each time."""
    for _ in range(2):
        if len(state.a) > 3 and not state.a.is_sorted():
            state.pb()
    while len(state.a) > 3 and not state.a.is_sorted():
        init_nodes_a(state.a, state.b)
        _move_a_to_b(state)
    sort_three(state)
    while len(state.b):
        init_nodes_b(state.a, state.b)
        prep_for_push(state, state.b.head().target_node, "a")
        state.pa()
    current_index(state.a)
    _min_on_top(state)


def sort_values(values: Iterable[int]) -> List[str]:
    """Return the moves that sort ``values`` into ascending order."""
    state = PushSwap(values)
    if not state.a.is_sorted():
        if len(state.a) == 2:
            state.sa()
        elif len(state.a) == 3:
            sort_three(state)
        else:
            turk_sort(state)
    return state.moves