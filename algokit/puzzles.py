"""Classic search puzzles: the eight puzzle, n queens, grid paths and permutations."""

import heapq
from itertools import count, permutations

GOAL = (1, 2, 3, 8, 0, 4, 7, 6, 5)
_MOVES = ((1, 0), (-1, 0), (0, 1), (0, -1))


def _parse_board(board):
    cells = tuple(int(ch) for ch in board.strip()) if isinstance(board, str) else tuple(
        int(v) for v in board
    )
    if sorted(cells) != list(range(9)):
        raise ValueError("board must hold the digits 0..8 exactly once")
    return cells


def _parity(cells):
    tiles = [c for c in cells if c]
    return sum(a > b for i, a in enumerate(tiles) for b in tiles[i + 1 :]) % 2


def _misplaced(cells):
    return sum(a != b for a, b in zip(cells, GOAL))


def eight_puzzle_moves(board):
    """Return the moves A* needs to bring the board to 123/804/765 (0 is the blank)."""
    start = _parse_board(board)
    if _parity(start) != _parity(GOAL):
        raise ValueError("board cannot reach the goal")
    tie = count()
    heap = [(_misplaced(start), next(tie), 0, start)]
    seen = set()
    while heap:
        _, _, moves, state = heapq.heappop(heap)
        if state == GOAL:
            return moves
        row, col = divmod(state.index(0), 3)
        for dr, dc in _MOVES:
            r, c = row + dr, col + dc
            if not (0 <= r < 3 and 0 <= c < 3):
                continue
            cells = list(state)
            blank, other = row * 3 + col, r * 3 + c
            cells[blank], cells[other] = cells[other], cells[blank]
            nxt = tuple(cells)
            if nxt not in seen:
                seen.add(nxt)
                heapq.heappush(heap, (moves + 1 + _misplaced(nxt), next(tie), moves + 1, nxt))
    raise ValueError("board cannot reach the goal")


def n_queens(n):
    """Return (first three placements, total count) for n non-attacking queens.

    A placement lists the 1-based column of the queen in each row.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    first = []
    total = 0
    placed, cols, diagonals, anti = [], set(), set(), set()

    def place(row):
        nonlocal total
        if row > n:
            total += 1
            if len(first) < 3:
                first.append(tuple(placed))
            return
        for col in range(1, n + 1):
            if col in cols or row + col in diagonals or row - col in anti:
                continue
            placed.append(col)
            cols.add(col)
            diagonals.add(row + col)
            anti.add(row - col)
            place(row + 1)
            placed.pop()
            cols.discard(col)
            diagonals.discard(row + col)
            anti.discard(row - col)

    place(1)
    return first, total


def count_paths(n, m, start, end, obstacles=()):
    """Count simple paths from start to end on an n x m grid of 1-based cells."""
    start, end = tuple(start), tuple(end)
    for x, y in (start, end):
        if not (1 <= x <= n and 1 <= y <= m):
            raise ValueError(f"cell ({x}, {y}) is outside the grid")
    blocked = {tuple(cell) for cell in obstacles}
    visited = {start}

    def walk(x, y):
        total = 0
        for dx, dy in _MOVES:
            cell = (x + dx, y + dy)
            if not (1 <= cell[0] <= n and 1 <= cell[1] <= m):
                continue
            if cell in visited or cell in blocked:
                continue
            if cell == end:
                total += 1
                continue
            visited.add(cell)
            total += walk(*cell)
            visited.discard(cell)
        return total

    return walk(*start)


def permutations_of(n):
    """Return an iterator over the permutations of 1..n in lexicographic order."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return permutations(range(1, n + 1))