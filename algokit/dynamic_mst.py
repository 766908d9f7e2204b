"""Minimum spanning tree weight under edge weight updates, solved offline."""


class _DisjointSet:
    """Union-find over arbitrary hashable labels."""

    def __init__(self):
        self._parent = {}

    def find(self, x):
        parent = self._parent
        root = x
        while parent.get(root, root) != root:
            root = parent[root]
        while x != root:
            parent[x], x = root, parent[x]
        return root

    def union(self, a, b):
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        self._parent[ra] = rb
        return True


def dynamic_mst(n, edges, updates):
    """Return the minimum spanning forest weight after each update.

    Vertices are numbered 1..n; `edges` holds (u, v, weight) and `updates`
    holds (edge_number, new_weight) with edges numbered from 1.
    """
    edges = list(edges)
    for u, v, _ in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError("edge endpoints must lie in 1..n")
    weights = [w for _, _, w in edges]
    changes = []
    for number, weight in updates:
        if not 1 <= number <= len(edges):
            raise ValueError(f"edge number {number} is out of range")
        changes.append((number - 1, weight))
    answers = [0] * len(changes)
    if not changes:
        return answers

    def weight_of(edge):
        return weights[edge[2]]

    def solve(lo, hi, active, base):
        if hi - lo == 1:
            eid, weight = changes[lo]
            weights[eid] = weight
            dsu = _DisjointSet()
            total = base
            for u, v, edge_id in sorted(active, key=weight_of):
                if dsu.union(u, v):
                    total += weights[edge_id]
            answers[lo] = total
            return

        changing = {changes[k][0] for k in range(lo, hi)}
        dynamic = [e for e in active if e[2] in changing]
        static = sorted((e for e in active if e[2] not in changing), key=weight_of)

        # Static edges chosen even when every changing edge is free are forced.
        probe = _DisjointSet()
        for u, v, _ in dynamic:
            probe.union(u, v)
        merged = _DisjointSet()
        for u, v, edge_id in static:
            if probe.union(u, v):
                merged.union(u, v)
                base += weights[edge_id]
        dynamic = [(merged.find(u), merged.find(v), e) for u, v, e in dynamic]
        static = [(merged.find(u), merged.find(v), e) for u, v, e in static]
        static = [e for e in static if e[0] != e[1]]

        # Static edges left out even when every changing edge is absent are useless.
        probe = _DisjointSet()
        static = [e for e in static if probe.union(e[0], e[1])]

        reduced = dynamic + static
        mid = (lo + hi) // 2
        solve(lo, mid, reduced, base)
        solve(mid, hi, reduced, base)

    solve(0, len(changes), [(u, v, i) for i, (u, v, _) in enumerate(edges)], 0)
    return answers