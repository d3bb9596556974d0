import enum
import numpy as np
from collections import deque


class Cell(enum.IntFlag):
    """Open passages out of a cell (or'd together)"""
    EMPTY = 0
    UP = 1
    DOWN = 2
    LEFT = 4
    RIGHT = 8


class EllerMazeGenerator:
    """
    Generate a perfect maze one row at a time using Eller's algorithm.

    Only the current row, its set labels and the previous row (needed by the
    ASCII renderer) are kept in memory. Two cells share a set label when there
    is already a path between them through the part of the maze made so far,
    which lets each row carve passages without making loops or isolations.
    """

    def __init__(self, width, seed=None):
        if width < 1:
            raise ValueError(f"Maze width must be greater than 0, got {width}")
        self.width = width
        self.rng = np.random.RandomState(seed)
        self.row = np.zeros(width, dtype=np.uint8)
        self.previous_row = np.zeros(width, dtype=np.uint8)
        # Distinct labels so the first row starts with every cell on its own
        self.labels = np.arange(width + 1, 2 * width + 1, dtype=np.int64)

    def _merge(self, keep, absorb):
        """Relabel every column in set `absorb` as set `keep`"""
        self.labels[self.labels == absorb] = keep

    def _normalize(self):
        """Step 1: carry down connected cells, give the rest fresh sets"""
        self.previous_row[:] = self.row
        carried = (self.row & Cell.DOWN) != 0
        taken = set(self.labels[carried].tolist())

        next_label = 1
        for c in range(self.width):
            if carried[c]:
                self.row[c] = Cell.UP
                continue
            while next_label in taken:
                next_label += 1
            self.row[c] = Cell.EMPTY
            self.labels[c] = next_label
            next_label += 1

    def _carve(self, is_last_row):
        """Step 2: random horizontal passages (merging sets) and random drops"""
        for c in range(self.width):
            # Both draws happen for every column so a seed replays exactly
            join = self.rng.randint(0, 2) == 1
            if join and c > 0 and self.labels[c] != self.labels[c - 1]:
                self.row[c] |= Cell.LEFT
                self.row[c - 1] |= Cell.RIGHT
                self._merge(self.labels[c], self.labels[c - 1])
            drop = self.rng.randint(0, 2) == 1
            if drop and not is_last_row:
                self.row[c] |= Cell.DOWN

    def _force_down(self):
        """Step 3: every set needs at least one passage to the next row"""
        for c in range(self.width):
            if self.row[c] & Cell.DOWN:
                continue
            members = self.labels == self.labels[c]
            if not np.any(self.row[members] & Cell.DOWN):
                self.row[c] |= Cell.DOWN

    def _close(self):
        """Step 4: join every remaining set along the last row"""
        for c in range(self.width - 1):
            if self.labels[c] == self.labels[c + 1]:
                continue
            self.row[c] |= Cell.RIGHT
            self.row[c + 1] |= Cell.LEFT
            self._merge(self.labels[c + 1], self.labels[c])

    def generate_row(self, is_last_row=False):
        """Advance the buffers to the next row of the maze"""
        self._normalize()
        self._carve(is_last_row)
        if is_last_row:
            self._close()
        else:
            self._force_down()

    def rows(self, height):
        """
        Generate `height` rows, yielding (index, is_first, is_last) after each.

        The buffers belong to the row just yielded until the loop resumes, so
        render or copy them before asking for the next row.
        """
        if height < 1:
            raise ValueError(f"Maze height must be greater than 0, got {height}")
        for i in range(height):
            is_last = i == height - 1
            self.generate_row(is_last)
            yield i, i == 0, is_last


def generate_maze(width, height, seed=None):
    """Generate a whole maze as a (height, width) array of Cell flags"""
    generator = EllerMazeGenerator(width, seed=seed)
    cells = np.zeros((height, width), dtype=np.uint8)
    for i, _, _ in generator.rows(height):
        cells[i] = generator.row
    return cells


def to_grid(cells):
    """
    Convert cell flags into an occupancy grid (1 for walls, 0 for paths).

    A maze of h x w cells becomes a (2h + 1, 2w + 1) grid with cell centres at
    odd coordinates, the same layout the plotting code draws.
    """
    height, width = cells.shape
    grid = np.ones((height * 2 + 1, width * 2 + 1), dtype=np.uint8)
    for r in range(height):
        for c in range(width):
            maze_row, maze_col = 2 * r + 1, 2 * c + 1
            grid[maze_row, maze_col] = 0
            if cells[r, c] & Cell.RIGHT:
                grid[maze_row, maze_col + 1] = 0
            if cells[r, c] & Cell.DOWN:
                grid[maze_row + 1, maze_col] = 0
    return grid


def passage_edges(cells):
    """List the passages of a maze as ((row, col), (row, col)) pairs"""
    height, width = cells.shape
    edges = []
    for r in range(height):
        for c in range(width):
            if cells[r, c] & Cell.RIGHT:
                edges.append(((r, c), (r, c + 1)))
            if cells[r, c] & Cell.DOWN:
                edges.append(((r, c), (r + 1, c)))
    return edges


def flags_mirrored(cells):
    """Check that both sides of every passage agree and nothing leaves the grid"""
    height, width = cells.shape
    for r in range(height):
        for c in range(width):
            cell = cells[r, c]
            right = bool(cell & Cell.RIGHT)
            down = bool(cell & Cell.DOWN)
            if c == width - 1:
                if right:
                    return False
            elif right != bool(cells[r, c + 1] & Cell.LEFT):
                return False
            if r == height - 1:
                if down:
                    return False
            elif down != bool(cells[r + 1, c] & Cell.UP):
                return False
            if c == 0 and cell & Cell.LEFT:
                return False
            if r == 0 and cell & Cell.UP:
                return False
    return True


def is_perfect(cells):
    """
    Check that a maze is a spanning tree of its cells: every passage is
    mirrored, there are exactly w*h - 1 of them and all cells are reachable.
    """
    height, width = cells.shape
    if not flags_mirrored(cells):
        return False

    edges = passage_edges(cells)
    if len(edges) != width * height - 1:
        return False

    neighbours = {}
    for a, b in edges:
        neighbours.setdefault(a, []).append(b)
        neighbours.setdefault(b, []).append(a)

    start = (0, 0)
    queue = deque([start])
    seen = {start}
    while queue:
        current = queue.popleft()
        for neighbour in neighbours.get(current, []):
            if neighbour not in seen:
                seen.add(neighbour)
                queue.append(neighbour)

    return len(seen) == width * height
