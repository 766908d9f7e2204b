"""Shortest pieces of one string that do not occur in another."""

import math


def _suffix_automaton(text):
    nxt, link, length = [{}], [-1], [0]
    last = 0
    for ch in text:
        cur = len(nxt)
        nxt.append({})
        length.append(length[last] + 1)
        link.append(0)
        p = last
        while p != -1 and ch not in nxt[p]:
            nxt[p][ch] = cur
            p = link[p]
        if p != -1:
            q = nxt[p][ch]
            if length[p] + 1 == length[q]:
                link[cur] = q
            else:
                clone = len(nxt)
                nxt.append(dict(nxt[q]))
                length.append(length[p] + 1)
                link.append(link[q])
                while p != -1 and nxt[p].get(ch) == q:
                    nxt[p][ch] = clone
                    p = link[p]
                link[q] = clone
                link[cur] = clone
        last = cur
    return nxt


def _next_table(text):
    """table[i][c] is the 1-based position of the first c after position i."""
    table = [None] * (len(text) + 1)
    following = {}
    for i in range(len(text), -1, -1):
        table[i] = dict(following)
        if i:
            following[text[i - 1]] = i
    return table


def shortest_uncommon(a, b):
    """Return four shortest lengths, or None where no such piece exists.

    In order: a substring of a that is not a substring of b; a substring of a
    that is not a subsequence of b; a subsequence of a that is not a substring
    of b; a subsequence of a that is not a subsequence of b.
    """
    n, m = len(a), len(b)
    sam = _suffix_automaton(b)
    na, nb = _next_table(a), _next_table(b)
    missing = m + 1

    substring_vs_substring = math.inf
    substring_vs_subsequence = math.inf
    for left in range(n):
        state = 0
        for right in range(left, n):
            state = sam[state].get(a[right])
            if state is None:
                substring_vs_substring = min(substring_vs_substring, right - left + 1)
                break
        position = 0
        for right in range(left, n):
            position = nb[position].get(a[right], missing)
            if position == missing:
                substring_vs_subsequence = min(substring_vs_subsequence, right - left + 1)
                break

    rows = [None] * (n + 1)
    for i in range(n, -1, -1):
        row = []
        for transitions in sam:
            best = math.inf
            for ch, u in na[i].items():
                v = transitions.get(ch)
                best = min(best, 1 + (rows[u][v] if v is not None else 0))
            row.append(best)
        rows[i] = row
    subsequence_vs_substring = rows[0][0]

    rows = [None] * (n + 1)
    for i in range(n, -1, -1):
        row = []
        for j in range(m + 1):
            best = math.inf
            for ch, u in na[i].items():
                v = nb[j].get(ch, missing)
                best = min(best, 1 + (rows[u][v] if v <= m else 0))
            row.append(best)
        rows[i] = row
    subsequence_vs_subsequence = rows[0][0]

    return tuple(
        None if value == math.inf else value
        for value in (
            substring_vs_substring,
            substring_vs_subsequence,
            subsequence_vs_substring,
            subsequence_vs_subsequence,
        )
    )