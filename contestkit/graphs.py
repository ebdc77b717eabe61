"""Graph queries: multi-source shortest paths, terminal subtrees and gift thresholds."""

from __future__ import annotations

import heapq
from collections.abc import Iterable

UNREACHABLE = 10**9 + 7
NEVER = -1


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"node count must be non-negative, got {n}")


def _check_node(node: int, n: int) -> None:
    if not 1 <= node <= n:
        raise ValueError(f"node {node} is outside 1..{n}")


def _neighbours(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        _check_node(u, n)
        _check_node(v, n)
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def nearest_source_distances(
    n: int,
    edges: Iterable[tuple[int, int, int]],
    sources: Iterable[int],
) -> list[int]:
    """Return, for nodes 1..n, the distance to the nearest source.

    Edges are undirected ``(u, v, weight)`` triples. Nodes that no source
    reaches get ``UNREACHABLE``.
    """
    _check_count(n)
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for u, v, weight in edges:
        _check_node(u, n)
        _check_node(v, n)
        adjacency[u].append((v, weight))
        adjacency[v].append((u, weight))

    dist = [UNREACHABLE] * (n + 1)
    for source in sources:
        _check_node(source, n)
        dist[source] = 0

    heap = [(0, node) for node in range(1, n + 1) if dist[node] == 0]
    heapq.heapify(heap)
    settled = [False] * (n + 1)

    while heap:
        distance, node = heapq.heappop(heap)
        if settled[node]:
            continue
        settled[node] = True
        for neighbour, weight in adjacency[node]:
            candidate = distance + weight
            if dist[neighbour] > candidate:
                dist[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))

    return dist[1:]


def _terminal_subtree_size(
    start: int,
    adjacency: list[list[int]],
    is_terminal: list[bool],
    visited: list[bool],
) -> int:
    """Count the nodes hanging from ``start`` that lie on a path to a terminal."""
    stack: list[list] = [[start, iter(adjacency[start]), 0]]
    result = 0
    while stack:
        frame = stack[-1]
        node, neighbours = frame[0], frame[1]
        for neighbour in neighbours:
            if not visited[neighbour]:
                visited[neighbour] = True
                stack.append([neighbour, iter(adjacency[neighbour]), 0])
                break
        else:
            stack.pop()
            count = frame[2]
            if is_terminal[node] or count:
                count += 1
            if stack:
                stack[-1][2] += count
            else:
                result = count
    return result


def largest_terminal_component(
    n: int,
    edges: Iterable[tuple[int, int]],
    terminals: Iterable[int],
) -> int:
    """Return the size of the largest subtree that connects terminals.

    Terminals are explored in the given order, sharing one set of visited
    nodes; a terminal's subtree holds itself and every node on a path to a
    further terminal. Returns 0 when there are no terminals.
    """
    _check_count(n)
    adjacency = _neighbours(n, edges)
    order = list(terminals)
    is_terminal = [False] * (n + 1)
    for terminal in order:
        _check_node(terminal, n)
        is_terminal[terminal] = True

    visited = [False] * (n + 1)
    best = 0
    for terminal in order:
        visited[terminal] = True
        best = max(best, _terminal_subtree_size(terminal, adjacency, is_terminal, visited))
    return best


def happiness_days(
    n: int,
    k: int,
    friendships: Iterable[tuple[int, int]],
    gifts: Iterable[tuple[int, int]],
) -> list[int]:
    """Return, for people 1..n, the day each first holds at least ``k`` in rewards.

    Each gift ``(giver, amount)`` on day d (counted from 1) hands ``amount`` to
    every friend of ``giver``; repeated friendships count once per listing.
    People who never reach ``k`` get ``NEVER``.
    """
    _check_count(n)
    adjacency = _neighbours(n, friendships)
    reward = [0] * (n + 1)
    day = [NEVER] * (n + 1)

    for index, (giver, amount) in enumerate(gifts, start=1):
        _check_node(giver, n)
        for friend in adjacency[giver]:
            reward[friend] += amount
            if reward[friend] >= k and day[friend] == NEVER:
                day[friend] = index

    return day[1:]