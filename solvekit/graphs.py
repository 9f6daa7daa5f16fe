"""Graph problems: ancestors in a DAG and XOR-on-edges value sums."""

from __future__ import annotations

from typing import Sequence


def get_ancestors(n: int, edges: Sequence[Sequence[int]]) -> list[list[int]]:
    """For each node of a DAG, return the sorted list of nodes that reach it."""
    graph: list[list[int]] = [[] for _ in range(n)]
    for source, dest in edges:
        graph[source].append(dest)

    ancestors: list[list[int]] = [[] for _ in range(n)]
    for origin in range(n):
        visited = {origin}
        stack = [origin]
        while stack:
            node = stack.pop()
            for dest in graph[node]:
                if dest not in visited:
                    visited.add(dest)
                    ancestors[dest].append(origin)
                    stack.append(dest)
    return [sorted(found) for found in ancestors]


def maximum_value_sum(
    nums: Sequence[int], k: int, edges: Sequence[Sequence[int]]
) -> int:
    """Largest node sum reachable by XOR-ing both ends of tree edges with ``k``.

    In a tree any even number of nodes can be flipped, so ``edges`` does not
    change the answer.
    """
    deltas = sorted(((value ^ k) - value for value in nums), reverse=True)
    total = sum(nums)
    for first, second in zip(deltas[::2], deltas[1::2]):
        gain = first + second
        if gain <= 0:
            break
        total += gain
    return total