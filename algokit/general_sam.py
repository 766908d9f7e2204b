"""Generalised suffix automaton over several strings, built from their trie."""

from collections import deque


class GeneralSuffixAutomaton:
    """Suffix automaton recognising the substrings of every given string."""

    def __init__(self, strings):
        strings = list(strings)
        self.count = len(strings)
        nxt = [{}]
        presence = [0]
        for index, text in enumerate(strings):
            node = 0
            for ch in text:
                child = nxt[node].get(ch)
                if child is None:
                    child = len(nxt)
                    nxt.append({})
                    presence.append(0)
                    nxt[node][ch] = child
                presence[child] |= 1 << index
                node = child
        trie_edges = [list(edges.items()) for edges in nxt]
        self._next = nxt
        self._length = [0] * len(nxt)
        self._link = [0] * len(nxt)
        self._link[0] = -1
        self._presence = presence

        queue = deque((0, ch) for ch, _ in trie_edges[0])
        while queue:
            parent, ch = queue.popleft()
            cur = self._extend(parent, ch)
            queue.extend((cur, c) for c, _ in trie_edges[cur])

        link = self._link
        for state in sorted(range(1, len(nxt)), key=self._length.__getitem__, reverse=True):
            presence[link[state]] |= presence[state]

    def _extend(self, last, ch):
        nxt, length, link = self._next, self._length, self._link
        cur = nxt[last][ch]
        length[cur] = length[last] + 1
        p = link[last]
        while p != -1:
            if ch in nxt[p]:
                break
            nxt[p][ch] = cur
            p = link[p]
        if p == -1:
            link[cur] = 0
            return cur
        q = nxt[p][ch]
        if length[p] + 1 == length[q]:
            link[cur] = q
            return cur
        clone = len(nxt)
        nxt.append({c: v for c, v in nxt[q].items() if length[v]})
        length.append(length[p] + 1)
        link.append(link[q])
        self._presence.append(0)
        while p != -1 and nxt[p].get(ch) == q:
            nxt[p][ch] = clone
            p = link[p]
        link[cur] = clone
        link[q] = clone
        return cur

    def distinct_substrings(self):
        """Return the number of distinct non-empty substrings across all strings."""
        length, link = self._length, self._link
        return sum(length[s] - length[link[s]] for s in range(1, len(length)))

    def longest_common_substring(self):
        """Return the length of the longest substring shared by every string."""
        full = (1 << self.count) - 1
        return max(
            (self._length[s] for s, mask in enumerate(self._presence) if mask == full),
            default=0,
        )