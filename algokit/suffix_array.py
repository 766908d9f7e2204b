"""Suffix arrays, LCP arrays and problems solved with them."""

from collections import deque


def suffix_array(seq):
    """Return the 0-based start positions of the suffixes of seq in sorted order."""
    seq = list(seq)
    n = len(seq)
    if n == 0:
        return []
    order = {v: i for i, v in enumerate(sorted(set(seq)))}
    rank = [order[v] for v in seq]
    sa = list(range(n))
    step = 1
    while True:
        current = rank

        def key(i):
            return current[i], current[i + step] if i + step < n else -1

        sa.sort(key=key)
        fresh = [0] * n
        for prev, cur in zip(sa, sa[1:]):
            fresh[cur] = fresh[prev] + (key(prev) != key(cur))
        rank = fresh
        if rank[sa[-1]] == n - 1:
            return sa
        step *= 2


def lcp_array(seq, sa):
    """Return lcp where lcp[i] is the common prefix length of suffixes sa[i-1] and sa[i].

    lcp[0] is 0.
    """
    seq = list(seq)
    n = len(seq)
    sa = list(sa)
    if sorted(sa) != list(range(n)):
        raise ValueError("sa must be a permutation of the suffix positions")
    rank = [0] * n
    for place, start in enumerate(sa):
        rank[start] = place
    lcp = [0] * n
    h = 0
    for i in range(n):
        if rank[i] == 0:
            h = 0
            continue
        j = sa[rank[i] - 1]
        while i + h < n and j + h < n and seq[i + h] == seq[j + h]:
            h += 1
        lcp[rank[i]] = h
        if h:
            h -= 1
    return lcp


def best_cow_line(text):
    """Return the smallest string built by repeatedly taking text's first or last character."""
    n = len(text)
    if n == 0:
        return ""
    codes = {ch: i + 1 for i, ch in enumerate(sorted(set(text)))}
    combined = [codes[ch] for ch in text] + [0] + [codes[ch] for ch in reversed(text)]
    rank = [0] * len(combined)
    for place, start in enumerate(suffix_array(combined)):
        rank[start] = place
    out = []
    left, right = 0, n - 1
    while left <= right:
        if rank[left] < rank[2 * n - right]:
            out.append(text[left])
            left += 1
        else:
            out.append(text[right])
            right -= 1
    return "".join(out)


def longest_repeat_k(values, k):
    """Return the length of the longest run occurring at least k times (overlaps allowed)."""
    values = list(values)
    n = len(values)
    if k < 1:
        raise ValueError("k must be positive")
    if k == 1:
        return n
    if k > n:
        return 0
    heights = lcp_array(values, suffix_array(values))[1:]
    width = k - 1
    window = deque()
    best = 0
    for i, h in enumerate(heights):
        while window and heights[window[-1]] >= h:
            window.pop()
        window.append(i)
        if window[0] <= i - width:
            window.popleft()
        if i >= width - 1:
            best = max(best, heights[window[0]])
    return best


def lcp_pair_sum(text):
    """Return the sum over suffix pairs i < j of len(Ti) + len(Tj) - 2 * lcp(Ti, Tj)."""
    n = len(text)
    total = n * (n - 1) * (n + 1) // 2
    heights = lcp_array(text, suffix_array(text))[1:]
    m = len(heights)
    previous = [-1] * m
    stack = []
    for i, h in enumerate(heights):
        while stack and heights[stack[-1]] >= h:
            stack.pop()
        previous[i] = stack[-1] if stack else -1
        stack.append(i)
    following = [m] * m
    stack = []
    for i in range(m - 1, -1, -1):
        while stack and heights[stack[-1]] > heights[i]:
            stack.pop()
        following[i] = stack[-1] if stack else m
        stack.append(i)
    shared = sum(
        h * (i - p) * (f - i) for i, (h, p, f) in enumerate(zip(heights, previous, following))
    )
    return total - 2 * shared