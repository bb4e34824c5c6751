"""Backtracking problems: N queens, subsets, permutations, maze paths and sudoku."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

_MOVES = (("U", -1, 0), ("D", 1, 0), ("L", 0, -1), ("R", 0, 1))
_DIGITS = "123456789"
_EMPTY = "."


def n_queens(n: int) -> list[list[str]]:
    """Return every placement of n non-attacking queens, rows as strings of 'Q' and '.'."""
    if n < 0:
        raise ValueError(f"board size must be non-negative, got {n}")
    solutions: list[list[str]] = []
    placed: list[int] = []
    columns: set[int] = set()
    falling: set[int] = set()
    rising: set[int] = set()

    def place(row: int) -> None:
        if row == n:
            solutions.append(["." * col + "Q" + "." * (n - col - 1) for col in placed])
            return
        for col in range(n):
            if col in columns or row - col in falling or row + col in rising:
                continue
            placed.append(col)
            columns.add(col)
            falling.add(row - col)
            rising.add(row + col)
            place(row + 1)
            placed.pop()
            columns.discard(col)
            falling.discard(row - col)
            rising.discard(row + col)

    place(0)
    return solutions


def subsets(values: Sequence[int]) -> Iterator[list[int]]:
    """Yield every subset, deciding to include each element before excluding it."""
    items = list(values)
    chosen: list[int] = []

    def walk(i: int) -> Iterator[list[int]]:
        if i == len(items):
            yield list(chosen)
            return
        chosen.append(items[i])
        yield from walk(i + 1)
        chosen.pop()
        yield from walk(i + 1)

    yield from walk(0)


def power_set(values: Sequence[int]) -> list[list[int]]:
    """Return all subsets as a list, in include-first order."""
    return list(subsets(values))


def unique_subsets(values: Sequence[int]) -> list[list[int]]:
    """Return the distinct subsets of a sequence that may hold duplicates, sorted."""
    distinct = {tuple(subset) for subset in subsets(sorted(values))}
    return [list(subset) for subset in sorted(distinct)]


def subsets_with_duplicates(values: Sequence[int]) -> list[list[int]]:
    """Return the distinct subsets, skipping equal values once one has been excluded."""
    items = sorted(values)
    result: list[list[int]] = []
    chosen: list[int] = []

    def walk(i: int) -> None:
        if i == len(items):
            result.append(list(chosen))
            return
        chosen.append(items[i])
        walk(i + 1)
        chosen.pop()
        following = i + 1
        while following < len(items) and items[following] == items[following - 1]:
            following += 1
        walk(following)

    walk(0)
    return result


def _swap_permutations(items: list) -> Iterator[list]:
    def walk(idx: int) -> Iterator[list]:
        if idx == len(items):
            yield list(items)
            return
        for i in range(idx, len(items)):
            items[idx], items[i] = items[i], items[idx]
            yield from walk(idx + 1)
            items[idx], items[i] = items[i], items[idx]

    return walk(0)


def permutations(values: Sequence[int]) -> list[list[int]]:
    """Return all orderings of values, generated by swapping each position in turn."""
    return list(_swap_permutations(list(values)))


def string_permutations(text: str) -> list[str]:
    """Return all orderings of the characters of text, generated by swapping."""
    return ["".join(chars) for chars in _swap_permutations(list(text))]


def _square(maze: Sequence[Sequence[int]]) -> int:
    n = len(maze)
    if any(len(row) != n for row in maze):
        raise ValueError("maze must be square")
    return n


def maze_paths_visited(maze: Sequence[Sequence[int]]) -> list[str]:
    """Return every path of U/D/L/R moves from the top-left to the bottom-right cell.

    Cells holding 0 are walls; a path never visits a cell twice. A separate
    visited set tracks the current path.
    """
    n = _square(maze)
    paths: list[str] = []
    visited: set[tuple[int, int]] = set()

    def walk(r: int, c: int, path: str) -> None:
        if not (0 <= r < n and 0 <= c < n) or maze[r][c] == 0 or (r, c) in visited:
            return
        if r == n - 1 and c == n - 1:
            paths.append(path)
            return
        visited.add((r, c))
        for step, dr, dc in _MOVES:
            walk(r + dr, c + dc, path + step)
        visited.discard((r, c))

    walk(0, 0, "")
    return paths


def maze_paths(maze: Sequence[Sequence[int]]) -> list[str]:
    """Return every path of U/D/L/R moves from the top-left to the bottom-right cell.

    Visited cells are marked as walls in a working copy of the maze.
    """
    n = _square(maze)
    grid = [list(row) for row in maze]
    paths: list[str] = []

    def walk(r: int, c: int, path: str) -> None:
        if not (0 <= r < n and 0 <= c < n) or grid[r][c] == 0:
            return
        if r == n - 1 and c == n - 1:
            paths.append(path)
            return
        grid[r][c] = 0
        for step, dr, dc in _MOVES:
            walk(r + dr, c + dc, path + step)
        grid[r][c] = 1

    walk(0, 0, "")
    return paths


def is_valid_placement(
    board: Sequence[Sequence[str]], row: int, col: int, digit: str
) -> bool:
    """Tell whether digit appears nowhere in the row, column or 3x3 box of a cell."""
    if any(board[row][j] == digit for j in range(9)):
        return False
    if any(board[i][col] == digit for i in range(9)):
        return False
    top, left = row // 3 * 3, col // 3 * 3
    return all(
        board[i][j] != digit for i in range(top, top + 3) for j in range(left, left + 3)
    )


def solve_sudoku(board: Sequence[Sequence[str]]) -> list[list[str]] | None:
    """Return a solved copy of a 9x9 board with '.' for empty cells, or None."""
    grid = [list(row) for row in board]
    if len(grid) != 9 or any(len(row) != 9 for row in grid):
        raise ValueError("sudoku board must be 9 rows of 9 cells")
    for row in grid:
        for cell in row:
            if cell != _EMPTY and cell not in _DIGITS:
                raise ValueError(f"invalid sudoku cell {cell!r}")

    def fill(index: int) -> bool:
        if index == 81:
            return True
        row, col = divmod(index, 9)
        if grid[row][col] != _EMPTY:
            return fill(index + 1)
        for digit in _DIGITS:
            if is_valid_placement(grid, row, col, digit):
                grid[row][col] = digit
                if fill(index + 1):
                    return True
                grid[row][col] = _EMPTY
        return False

    return grid if fill(0) else None