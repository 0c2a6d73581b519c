"""Bookkeeping the sorter keeps on each node: positions, targets and push costs."""

from __future__ import annotations

from typing import Optional

from pushswap.stacks import Node, Stack


def current_index(stack: Stack) -> None:
    """Number the nodes from the top and mark those in the upper half.

    A node is above the median when its index is at most half the stack size.
    """
    median = len(stack) // 2
    for index, node in enumerate(stack):
        node.index = index
        node.above_median = index <= median


def set_targets_a(stack_a: Stack, stack_b: Stack) -> None:
    """Give every node of a its target in b.

    The target is the largest value in b below the node's value; when there
    is none, it is the largest value in b.
    """
    for node in stack_a:
        smaller = [candidate for candidate in stack_b if candidate.value < node.value]
        if smaller:
            node.target_node = max(smaller, key=lambda candidate: candidate.value)
        else:
            node.target_node = stack_b.max_node()


def cost_analysis_a(stack_a: Stack, stack_b: Stack) -> None:
    """Count the rotations needed to bring each node of a and its target to the top."""
    size_a = len(stack_a)
    size_b = len(stack_b)
    for node in stack_a:
        target = node.target_node
        if target is None:
            raise ValueError("every node of a needs a target before costs are counted")
        cost = node.index if node.above_median else size_a - node.index
        cost += target.index if target.above_median else size_b - target.index
        node.push_cost = cost


def set_cheapest(stack: Stack) -> None:
    """Mark the first node with the lowest push cost as the cheapest."""
    cheapest = min(stack, key=lambda node: node.push_cost, default=None)
    if cheapest is None:
        return
    for node in stack:
        node.cheapest = node is cheapest


def get_cheapest(stack: Stack) -> Optional[Node]:
    """Return the first node marked as cheapest, or None."""
    return next((node for node in stack if node.cheapest), None)


def init_nodes_a(stack_a: Stack, stack_b: Stack) -> None:
    """Prepare every node of a for moving a node from a to b."""
    current_index(stack_a)
    current_index(stack_b)
    set_targets_a(stack_a, stack_b)
    cost_analysis_a(stack_a, stack_b)
    set_cheapest(stack_a)


def set_targets_b(stack_a: Stack, stack_b: Stack) -> None:
    """Give every node of b its target in a.

    The target is the smallest value in a above the node's value; when there
    is none, it is the smallest value in a.
    """
    for node in stack_b:
        larger = [candidate for candidate in stack_a if candidate.value > node.value]
        if larger:
            node.target_node = min(larger, key=lambda candidate: candidate.value)
        else:
            node.target_node = stack_a.min_node()


def init_nodes_b(stack_a: Stack, stack_b: Stack) -> None:
    """Prepare every node of b for moving a node from b back to a."""
    current_index(stack_a)
    current_index(stack_b)
    set_targets_b(stack_a, stack_b)