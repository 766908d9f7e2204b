"""Counting how many cheapest distinct walks fit into an energy budget, via A*."""

import heapq
from collections import defaultdict
from itertools import count

_UNREACHABLE = 2e9


def max_paths_within_energy(n, edges, energy):
    """Return how many walks from 1 to n, cheapest first, fit into `energy` in total.

    `edges` holds directed (u, v, weight) with vertices 1..n.
    """
    if n < 2:
        raise ValueError("need at least two vertices")
    forward = defaultdict(list)
    backward = defaultdict(list)
    for u, v, w in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError("edge endpoints must lie in 1..n")
        forward[u].append((v, float(w)))
        backward[v].append((u, float(w)))

    dist = [_UNREACHABLE] * (n + 1)
    dist[n] = 0.0
    done = [False] * (n + 1)
    heap = [(0.0, n)]
    while heap:
        d, x = heapq.heappop(heap)
        if done[x]:
            continue
        done[x] = True
        dist[x] = d
        for y, w in backward[x]:
            heapq.heappush(heap, (d + w, y))

    if dist[1] == 0:
        raise ValueError("the shortest walk must have positive cost")
    limit = int(int(energy) / dist[1])
    remaining = float(energy)
    visits = [0] * (n + 1)
    found = 0
    tie = count()
    queue = [(dist[1], next(tie), 1, 0.0)]
    while queue:
        _, _, x, cost = heapq.heappop(queue)
        visits[x] += 1
        if x == n:
            remaining -= cost
            if remaining < 0:
                return found
            found += 1
        for y, w in forward[x]:
            if visits[y] <= limit and cost + w <= remaining:
                heapq.heappush(queue, (cost + w + dist[y], next(tie), y, cost + w))
    return found