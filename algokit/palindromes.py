"""Palindromic tree (eertree) and problems solved with it."""

MOD = 1_000_000_007


class PalindromicTree:
    """Eertree over a growing string.

    Node 0 is the empty palindrome, node 1 the imaginary one of length -1.
    Per node it keeps `length`, suffix link `fail`, the number of times it was
    the longest palindromic suffix (`count`), `diff` = length - length of its
    fail node, and `series_link` to the first fail ancestor with another diff.
    """

    def __init__(self):
        self.length = [0, -1]
        self.fail = [1, 0]
        self.count = [0, 0]
        self.diff = [0, 0]
        self.series_link = [0, 0]
        self.last = 0
        self._children = [{}, {}]
        self._text = []

    def __len__(self):
        """Number of distinct non-empty palindromes seen."""
        return len(self.length) - 2

    def _suffix_before(self, node):
        pos = len(self._text) - 1
        ch = self._text[pos]
        while True:
            mirror = pos - self.length[node] - 1
            if mirror >= 0 and self._text[mirror] == ch:
                return node
            node = self.fail[node]

    def add(self, char):
        """Append a character; return the node of the longest palindromic suffix."""
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError("add takes a single character")
        self._text.append(char)
        now = self._suffix_before(self.last)
        node = self._children[now].get(char)
        if node is None:
            node = len(self.length)
            link = self._children[self._suffix_before(self.fail[now])].get(char, 0)
            size = self.length[now] + 2
            diff = size - self.length[link]
            self.length.append(size)
            self.fail.append(link)
            self.count.append(0)
            self.diff.append(diff)
            self.series_link.append(
                self.series_link[link] if diff == self.diff[link] else link
            )
            self._children.append({})
            self._children[now][char] = node
        self.last = node
        self.count[node] += 1
        return node


def palindrome_value(text):
    """Return the largest length * occurrence count over palindromic substrings."""
    tree = PalindromicTree()
    for ch in text:
        tree.add(ch)
    counts = list(tree.count)
    for node in range(len(counts) - 1, 1, -1):
        counts[tree.fail[node]] += counts[node]
    return max(
        (tree.length[node] * counts[node] for node in range(2, len(counts))),
        default=0,
    )


def count_palindromic_splits(text):
    """Count splits into t1..t2k with t_i == t_(2k+1-i), modulo 1e9+7."""
    n = len(text)
    interleaved = []
    for i in range(n):
        interleaved.append(text[i])
        interleaved.append(text[n - 1 - i])
    tree = PalindromicTree()
    dp = [0] * (n + 1)
    dp[0] = 1
    series = [0] * (n + 3)
    for i, ch in enumerate(interleaved[:n], start=1):
        x = tree.add(ch)
        while x > 1:
            link = tree.series_link[x]
            series[x] = dp[i - tree.length[link] - tree.diff[x]]
            if tree.diff[x] == tree.diff[tree.fail[x]]:
                series[x] = (series[x] + series[tree.fail[x]]) % MOD
            if i % 2 == 0:
                dp[i] = (dp[i] + series[x]) % MOD
            x = link
    return dp[n]