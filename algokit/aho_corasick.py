"""Multi-pattern matching over lowercase text with an Aho-Corasick automaton."""

from collections import deque

ALPHABET_SIZE = 26


def _codes(text):
    codes = [ord(ch) - ord("a") for ch in text]
    if any(not 0 <= c < ALPHABET_SIZE for c in codes):
        raise ValueError("only lowercase letters a-z are supported")
    return codes


class Automaton:
    """Trie of patterns with failure links and a complete transition table."""

    def __init__(self, patterns):
        self.patterns = tuple(patterns)
        goto = [[0] * ALPHABET_SIZE]
        terminal = [0]
        self._ends = []
        for pattern in self.patterns:
            codes = _codes(pattern)
            if not codes:
                raise ValueError("patterns must be non-empty")
            node = 0
            for c in codes:
                nxt = goto[node][c]
                if not nxt:
                    nxt = len(goto)
                    goto.append([0] * ALPHABET_SIZE)
                    terminal.append(0)
                    goto[node][c] = nxt
                node = nxt
            terminal[node] += 1
            self._ends.append(node)

        fail = [0] * len(goto)
        order = []
        queue = deque(child for child in goto[0] if child)
        while queue:
            u = queue.popleft()
            order.append(u)
            for c in range(ALPHABET_SIZE):
                v = goto[u][c]
                if v:
                    fail[v] = goto[fail[u]][c]
                    queue.append(v)
                else:
                    goto[u][c] = goto[fail[u]][c]
        self._goto = goto
        self._fail = fail
        self._terminal = terminal
        self._order = order

    def count_distinct_matches(self, text):
        """Return how many patterns (duplicates counted) occur in text at least once."""
        seen = set()
        node = 0
        total = 0
        for c in _codes(text):
            node = self._goto[node][c]
            j = node
            while j and j not in seen:
                seen.add(j)
                total += self._terminal[j]
                j = self._fail[j]
        return total

    def occurrences(self, text):
        """Return the number of (possibly overlapping) occurrences of each pattern."""
        visits = [0] * len(self._goto)
        node = 0
        for c in _codes(text):
            node = self._goto[node][c]
            visits[node] += 1
        for u in reversed(self._order):
            visits[self._fail[u]] += visits[u]
        return [visits[end] for end in self._ends]


def most_frequent_patterns(patterns, text):
    """Return (highest occurrence count, patterns reaching it in input order)."""
    automaton = Automaton(patterns)
    counts = automaton.occurrences(text)
    best = max(counts, default=0)
    return best, [p for p, c in zip(automaton.patterns, counts) if c == best]