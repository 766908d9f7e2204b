"""Exact cover by dancing links, with sudoku encodings built on it."""

SUDOKU_WEIGHTS = (
    6, 6, 6, 6, 6, 6, 6, 6, 6,
    6, 7, 7, 7, 7, 7, 7, 7, 6,
    6, 7, 8, 8, 8, 8, 8, 7, 6,
    6, 7, 8, 9, 9, 9, 8, 7, 6,
    6, 7, 8, 9, 10, 9, 8, 7, 6,
    6, 7, 8, 9, 9, 9, 8, 7, 6,
    6, 7, 8, 8, 8, 8, 8, 7, 6,
    6, 7, 7, 7, 7, 7, 7, 7, 6,
    6, 6, 6, 6, 6, 6, 6, 6, 6,
)


class DancingLinks:
    """Sparse exact-cover matrix searched with Algorithm X.

    Columns are numbered 1..columns; rows carry any hashable identifier.
    """

    def __init__(self, columns):
        if columns < 0:
            raise ValueError("columns must be non-negative")
        self.columns = columns
        ids = range(columns + 1)
        self._left = [i - 1 for i in ids]
        self._right = [i + 1 for i in ids]
        self._left[0] = columns
        self._right[columns] = 0
        self._up = list(ids)
        self._down = list(ids)
        self._column = list(ids)
        self._row = [None] * (columns + 1)
        self._size = [0] * (columns + 1)
        self._rows = set()

    def add_row(self, row, columns):
        """Add a row identified by `row` that covers the given 1-based columns."""
        cols = list(columns)
        if row in self._rows:
            raise ValueError(f"row {row!r} already exists")
        if not cols:
            raise ValueError("a row must cover at least one column")
        if len(set(cols)) != len(cols):
            raise ValueError("a row may cover each column only once")
        for c in cols:
            if not 1 <= c <= self.columns:
                raise ValueError(f"column {c} is outside 1..{self.columns}")
        self._rows.add(row)
        first = None
        for c in cols:
            node = len(self._up)
            self._column.append(c)
            self._row.append(row)
            self._size[c] += 1
            below = self._down[c]
            self._down.append(below)
            self._up.append(c)
            self._up[below] = node
            self._down[c] = node
            if first is None:
                self._left.append(node)
                self._right.append(node)
                first = node
            else:
                after = self._right[first]
                self._right.append(after)
                self._left.append(first)
                self._left[after] = node
                self._right[first] = node

    def _cover(self, c):
        left, right, up, down = self._left, self._right, self._up, self._down
        left[right[c]] = left[c]
        right[left[c]] = right[c]
        i = down[c]
        while i != c:
            j = right[i]
            while j != i:
                up[down[j]] = up[j]
                down[up[j]] = down[j]
                self._size[self._column[j]] -= 1
                j = right[j]
            i = down[i]

    def _uncover(self, c):
        left, right, up, down = self._left, self._right, self._up, self._down
        i = up[c]
        while i != c:
            j = left[i]
            while j != i:
                up[down[j]] = j
                down[up[j]] = j
                self._size[self._column[j]] += 1
                j = left[j]
            i = up[i]
        left[right[c]] = c
        right[left[c]] = c

    def _search(self, chosen):
        right = self._right
        if right[0] == 0:
            yield list(chosen)
            return
        c = right[0]
        i = right[0]
        while i != 0:
            if self._size[i] < self._size[c]:
                c = i
            i = right[i]
        self._cover(c)
        try:
            i = self._down[c]
            while i != c:
                chosen.append(self._row[i])
                j = right[i]
                while j != i:
                    self._cover(self._column[j])
                    j = right[j]
                try:
                    yield from self._search(chosen)
                finally:
                    j = self._left[i]
                    while j != i:
                        self._uncover(self._column[j])
                        j = self._left[j]
                    chosen.pop()
                i = self._down[i]
        finally:
            self._uncover(c)

    def solutions(self):
        """Yield every exact cover as a list of row identifiers in selection order."""
        return self._search([])

    def solve(self):
        """Return the first exact cover found, or None if there is none."""
        search = self.solutions()
        try:
            return next(search, None)
        finally:
            search.close()


def exact_cover(matrix):
    """Return 1-based indices of rows of a 0/1 matrix forming an exact cover, or None."""
    rows = [list(r) for r in matrix]
    width = len(rows[0]) if rows else 0
    if any(len(r) != width for r in rows):
        raise ValueError("all rows must have the same length")
    links = DancingLinks(width)
    for number, row in enumerate(rows, start=1):
        cols = [j for j, v in enumerate(row, start=1) if v]
        if cols:
            links.add_row(number, cols)
    return links.solve()


def _check_grid(grid):
    cells = [[int(v) for v in row] for row in grid]
    if len(cells) != 9 or any(len(row) != 9 for row in cells):
        raise ValueError("grid must be 9 x 9")
    if any(not 0 <= v <= 9 for row in cells for v in row):
        raise ValueError("cells must hold 0..9")
    return cells


def _sudoku_links(grid):
    cells = _check_grid(grid)
    links = DancingLinks(324)
    for r in range(1, 10):
        for c in range(1, 10):
            given = cells[r - 1][c - 1]
            box = (r - 1) // 3 * 3 + (c - 1) // 3
            for v in range(1, 10):
                if given and given != v:
                    continue
                links.add_row(
                    (r, c, v),
                    [
                        (r - 1) * 9 + v,
                        81 + (c - 1) * 9 + v,
                        162 + box * 9 + v,
                        243 + (r - 1) * 9 + c,
                    ],
                )
    return links


def solve_sudoku(grid):
    """Return a completed 9 x 9 sudoku grid; 0 marks an empty cell."""
    solution = _sudoku_links(grid).solve()
    if solution is None:
        raise ValueError("puzzle has no solution")
    result = [[0] * 9 for _ in range(9)]
    for r, c, v in solution:
        result[r - 1][c - 1] = v
    return result


def best_target_sudoku(grid):
    """Return the highest weighted score over all completions, or -1 if none exist.

    Each cell scores its digit times a weight rising towards the centre.
    """
    return max(
        (
            sum(v * SUDOKU_WEIGHTS[(r - 1) * 9 + (c - 1)] for r, c, v in solution)
            for solution in _sudoku_links(grid).solutions()
        ),
        default=-1,
    )