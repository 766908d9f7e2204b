"""Name lookups and maximum xor paths built on tries."""

from collections import defaultdict

OK = "OK"
REPEAT = "REPEAT"
WRONG = "WRONG"

BITS = 31


class RollCall:
    """Tracks which registered names have been called."""

    def __init__(self, names):
        self._called = {name: False for name in names}

    def call(self, name):
        """Return OK on the first call of a known name, REPEAT after, else WRONG."""
        called = self._called.get(name)
        if called is None:
            return WRONG
        if called:
            return REPEAT
        self._called[name] = True
        return OK


class _BinaryTrie:
    """Trie over the bits of non-negative integers below 2**BITS."""

    def __init__(self):
        self._children = [[0, 0]]

    def insert(self, value):
        children = self._children
        node = 0
        for bit in reversed(range(BITS)):
            b = value >> bit & 1
            nxt = children[node][b]
            if not nxt:
                nxt = len(children)
                children.append([0, 0])
                children[node][b] = nxt
            node = nxt

    def best_xor(self, value):
        children = self._children
        node = 0
        result = 0
        for bit in reversed(range(BITS)):
            b = value >> bit & 1
            other = children[node][b ^ 1]
            if other:
                node = other
                result |= 1 << bit
            else:
                node = children[node][b]
        return result


def max_xor_path(n, edges):
    """Return the largest xor of edge weights along a path in a tree on 1..n."""
    if n < 1:
        raise ValueError("n must be positive")
    adjacent = defaultdict(list)
    for u, v, w in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError("edge endpoints must lie in 1..n")
        if not 0 <= w < 1 << BITS:
            raise ValueError(f"weights must lie in [0, 2**{BITS})")
        adjacent[u].append((v, w))
        adjacent[v].append((u, w))
    distance = {1: 0}
    stack = [1]
    trie = _BinaryTrie()
    best = 0
    while stack:
        u = stack.pop()
        d = distance[u]
        trie.insert(d)
        best = max(best, trie.best_xor(d))
        for v, w in adjacent[u]:
            if v not in distance:
                distance[v] = d ^ w
                stack.append(v)
    return best