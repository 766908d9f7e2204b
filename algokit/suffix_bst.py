"""Suffix balanced tree: a scapegoat tree of suffixes with real-valued order tags."""

_ALPHA = 0.75
_UPPER = 1e18


class SuffixBalancedTree:
    """Holds the suffixes of a text ordered lexicographically.

    Suffixes are inserted from the shortest to the longest; each compares by
    its first character and then by the tag of the suffix one step shorter.
    """

    def __init__(self, text):
        self._text = [None] + list(text)
        n = len(self._text) - 1
        self._left = [0] * (n + 2)
        self._right = [0] * (n + 2)
        self._size = [0] * (n + 2)
        self._tag = [0.0] * (n + 2)
        self._root = 0
        for position in range(n, 0, -1):
            self._root = self._insert(self._root, position, 0.0, _UPPER)

    def __len__(self):
        return self._size[self._root]

    def _before(self, x, y):
        tx, ty = self._text[x], self._text[y]
        if tx != ty:
            return tx < ty
        return self._tag[x + 1] < self._tag[y + 1]

    def _update(self, node):
        self._size[node] = self._size[self._left[node]] + 1 + self._size[self._right[node]]

    def _balanced(self, node):
        heavier = max(self._size[self._left[node]], self._size[self._right[node]])
        return _ALPHA * self._size[node] > heavier

    def _insert(self, root, position, low, high):
        if not root:
            self._size[position] = 1
            self._tag[position] = (low + high) / 2
            self._left[position] = self._right[position] = 0
            return position
        if self._before(position, root):
            self._left[root] = self._insert(self._left[root], position, low, self._tag[root])
        else:
            self._right[root] = self._insert(self._right[root], position, self._tag[root], high)
        self._update(root)
        if not self._balanced(root):
            root = self._rebuild(root, low, high)
        return root

    def _inorder(self, root):
        stack = []
        node = root
        while stack or node:
            while node:
                stack.append(node)
                node = self._left[node]
            node = stack.pop()
            yield node
            node = self._right[node]

    def _rebuild(self, root, low, high):
        nodes = list(self._inorder(root))
        return self._build(nodes, 0, len(nodes) - 1, low, high)

    def _build(self, nodes, lo, hi, low, high):
        if lo > hi:
            return 0
        mid = (lo + hi) // 2
        middle = (low + high) / 2
        node = nodes[mid]
        self._tag[node] = middle
        self._left[node] = self._build(nodes, lo, mid - 1, low, middle)
        self._right[node] = self._build(nodes, mid + 1, hi, middle, high)
        self._update(node)
        return node

    def suffix_array(self):
        """Return the 0-based start positions of the suffixes in sorted order."""
        return [position - 1 for position in self._inorder(self._root)]