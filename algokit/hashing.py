"""Double polynomial string hashing and overlap-merging of words."""

HASH_BASES = (29, 31)
HASH_MODULI = (1_000_000_009, 998_244_353)


class HashedString:
    """A growable string with prefix hashes for constant-time substring hashing."""

    def __init__(self, text=""):
        self._chars = []
        self._prefix = [[0] for _ in HASH_BASES]
        self._powers = [[1] for _ in HASH_BASES]
        self.extend(text)

    def __len__(self):
        return len(self._chars)

    def __str__(self):
        return "".join(self._chars)

    def extend(self, text):
        """Append the characters of text."""
        for ch in text:
            code = ord(ch)
            self._chars.append(ch)
            for prefix, powers, base, mod in zip(
                self._prefix, self._powers, HASH_BASES, HASH_MODULI
            ):
                powers.append(powers[-1] * base % mod)
                prefix.append((prefix[-1] * base + code) % mod)

    def substring_hash(self, left, right):
        """Return the hash pair of characters left..right, 1-based and inclusive."""
        if not 1 <= left <= right <= len(self):
            raise ValueError(f"range ({left}, {right}) is outside 1..{len(self)}")
        return tuple(
            (prefix[right] - prefix[left - 1] * powers[right - left + 1]) % mod
            for prefix, powers, mod in zip(self._prefix, self._powers, HASH_MODULI)
        )


def merge_words(words):
    """Join words left to right, dropping the longest overlap each time.

    The overlap is the longest prefix of the next word that is also a suffix
    of the text merged so far.
    """
    merged = HashedString()
    for word in words:
        piece = HashedString(word)
        end = len(merged)
        overlap = 0
        for j in range(min(len(piece), end), 0, -1):
            if piece.substring_hash(1, j) == merged.substring_hash(end - j + 1, end):
                overlap = j
                break
        merged.extend(word[overlap:])
    return str(merged)