"""Backtracking searches on square boards: knight's tour, N queens, rat in a maze."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

Board = list[list[int]]

_KNIGHT_MOVES = (
    (2, 1),
    (1, 2),
    (-1, 2),
    (-2, 1),
    (-2, -1),
    (-1, -2),
    (1, -2),
    (2, -1),
)

_RAT_MOVES = ((-1, 0), (1, 0), (0, -1), (0, 1))


def knights_tour(n: int) -> Board | None:
    """Find a knight's tour of an n x n board starting at the top-left corner.

    Returns the board with each cell holding its move number (starting at 1),
    or None when no tour from the corner exists.
    """
    if n < 1:
        raise ValueError("board size must be positive")
    board = [[0] * n for _ in range(n)]
    board[0][0] = 1
    total = n * n

    def solve(move: int, row: int, col: int) -> bool:
        if move == total:
            return True
        for d_row, d_col in _KNIGHT_MOVES:
            r, c = row + d_row, col + d_col
            if 0 <= r < n and 0 <= c < n and board[r][c] == 0:
                board[r][c] = move + 1
                if solve(move + 1, r, c):
                    return True
                board[r][c] = 0
        return False

    return board if solve(1, 0, 0) else None


def n_queens(n: int) -> Iterator[Board]:
    """Yield every placement of n non-attacking queens as a 0/1 board.

    Placements come in the order of a row-by-row search trying columns
    left to right.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    columns: list[int] = []
    used_cols: set[int] = set()
    used_diag: set[int] = set()
    used_anti: set[int] = set()

    def place(row: int) -> Iterator[Board]:
        if row == n:
            yield [[1 if col == c else 0 for col in range(n)] for c in columns]
            return
        for col in range(n):
            if col in used_cols or row - col in used_diag or row + col in used_anti:
                continue
            columns.append(col)
            used_cols.add(col)
            used_diag.add(row - col)
            used_anti.add(row + col)
            yield from place(row + 1)
            columns.pop()
            used_cols.discard(col)
            used_diag.discard(row - col)
            used_anti.discard(row + col)

    yield from place(0)


def rat_in_maze_paths(maze: Sequence[Sequence[int]]) -> Iterator[Board]:
    """Yield every simple path from the top-left to the bottom-right cell.

    Open cells hold 1, walls 0. Each path is given as a 0/1 matrix marking
    the cells walked through; the destination cell itself is left unmarked
    and is reached whatever it holds.
    """
    n = len(maze)
    if any(len(row) != n for row in maze):
        raise ValueError("maze must be square")
    solution = [[0] * n for _ in range(n)]

    def walk(x: int, y: int) -> Iterator[Board]:
        if x == n - 1 and y == n - 1:
            yield [row[:] for row in solution]
            return
        if not (0 <= x < n and 0 <= y < n) or maze[x][y] == 0 or solution[x][y] == 1:
            return
        if maze[x][y] == 1:
            solution[x][y] = 1
            for dx, dy in _RAT_MOVES:
                yield from walk(x + dx, y + dy)
            solution[x][y] = 0

    yield from walk(0, 0)


def format_board(board: Sequence[Sequence[int]]) -> str:
    """Render a board one row per line, each value followed by a space."""
    return "".join("".join(f"{value} " for value in row) + "\n" for row in board)