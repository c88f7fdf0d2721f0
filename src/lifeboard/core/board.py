"""Board data structure for Conway's Game of Life."""

from typing import Optional, Tuple
import numpy as np
import torch
import torch.nn.functional as F


# Neighbor offsets, clockwise from the top-left
OFFSETS = ((-1, -1), (0, -1), (1, -1), (1, 0), (1, 1), (0, 1), (-1, 1), (-1, 0))

ALIVE_CHAR = "X"
DEAD_CHAR = "_"

# Keep torch single-threaded
torch.set_num_threads(1)

NEIGHBOR_KERNEL = (
    torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
)


class Board:
    """Represents a fixed-size 2D grid of alive/dead cells.

    Cells live in a numpy boolean array of shape (height, width) indexed
    as [y, x]. The board is bounded: cells beyond the edges simply do not
    exist, and every neighbor lookup treats them as dead.
    """

    def __init__(self, width: int, height: int) -> None:
        """Initialize an empty board.

        Args:
            width: Number of columns
            height: Number of rows

        Raises:
            ValueError: If either dimension is not positive
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Board dimensions must be positive, got {width}x{height}")

        self.width = width
        self.height = height
        self._cells = np.zeros((height, width), dtype=bool)

    @classmethod
    def parse(cls, text: str, frozen: bool = False) -> "Board":
        """Build a board from its rendered text form.

        Blank lines and surrounding whitespace are ignored, so patterns can be
        written as indented triple-quoted strings.

        Args:
            text: Rows of 'X' (alive) and '_' (dead) characters
            frozen: Whether the resulting board should be read-only

        Returns:
            New Board instance

        Raises:
            ValueError: If the rows are empty, ragged, or contain other characters
        """
        rows = [line.strip() for line in text.splitlines() if line.strip()]
        if not rows:
            raise ValueError("Cannot parse a board from empty text")

        width = len(rows[0])
        board = cls(width, len(rows))
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"Row {y} has {len(row)} cells, expected {width}")
            for x, char in enumerate(row):
                if char == ALIVE_CHAR:
                    board.set(x, y, True)
                elif char != DEAD_CHAR:
                    raise ValueError(f"Unexpected character {char!r} in row {y}")

        if frozen:
            board.freeze()
        return board

    @property
    def cells(self) -> np.ndarray:
        """Get the cell array, shape (height, width).

        Frozen boards hand out a read-only view.
        """
        if self.frozen:
            view = self._cells.view()
            view.flags.writeable = False
            return view
        return self._cells

    @property
    def shape(self) -> Tuple[int, int]:
        """Get board dimensions as (width, height)."""
        return (self.width, self.height)

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    @property
    def frozen(self) -> bool:
        """Whether the board rejects writes."""
        return not self._cells.flags.writeable

    def freeze(self) -> None:
        """Make the board read-only. Later writes raise ValueError."""
        self._cells.flags.writeable = False

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether (x, y) lies on the board."""
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Optional[bool]:
        """Get the state of a cell.

        Args:
            x: Column coordinate
            y: Row coordinate

        Returns:
            True if alive, False if dead, None if (x, y) is off the board
        """
        if not self.in_bounds(x, y):
            return None

        return bool(self._cells[y, x])

    def set(self, x: int, y: int, alive: bool) -> bool:
        """Set the state of a cell.

        Writes outside the board are dropped without error.

        Args:
            x: Column coordinate
            y: Row coordinate
            alive: Whether the cell should be alive

        Returns:
            True if the cell was written, False if (x, y) is off the board
        """
        if not self.in_bounds(x, y):
            return False

        self._cells[y, x] = bool(alive)
        return True

    def stamp(self, origin_x: int, origin_y: int, source: "Board") -> None:
        """Copy every cell of another board onto this one.

        The source's top-left cell lands on (origin_x, origin_y). Dead source
        cells are copied too, and whatever falls off this board is clipped.

        Args:
            origin_x: Destination column of the source's left edge
            origin_y: Destination row of the source's top edge
            source: Board to copy from (left unchanged)
        """
        for sy in range(source.height):
            for sx in range(source.width):
                self.set(origin_x + sx, origin_y + sy, source.get(sx, sy))

    def clear(self) -> None:
        """Clear all cells (set all to dead)."""
        self._cells.fill(False)

    def copy(self) -> "Board":
        """Return a writable board with the same cells and its own storage."""
        board = Board(self.width, self.height)
        board._cells[:] = self._cells
        return board

    def live_neighbors(self, x: int, y: int) -> int:
        """Count living neighbors of a cell.

        Args:
            x: Column coordinate
            y: Row coordinate

        Returns:
            Number of living neighbors (0-8)
        """
        count = 0
        for dx, dy in OFFSETS:
            # Off-board neighbors count as dead
            if self.get(x + dx, y + dy):
                count += 1
        return count

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for all cells using a PyTorch convolution.

        Zero padding makes every off-board neighbor dead, matching
        live_neighbors() cell for cell.

        Returns:
            Integer array of shape (height, width) with counts 0-8
        """
        torch_input = torch.from_numpy(self._cells.astype(np.float32)).unsqueeze(0).unsqueeze(0)
        neighbors = F.conv2d(torch_input, NEIGHBOR_KERNEL, padding=1)
        return neighbors[0, 0].numpy().astype(np.int8)

    def next_generation(self) -> "Board":
        """Compute the next generation as a new board.

        Every new cell is derived from one snapshot of this board, which is
        left untouched. A cell is alive next if it has exactly 3 living
        neighbors, or is alive now and has exactly 2.

        Returns:
            New Board of the same dimensions
        """
        neighbor_counts = self.count_all_neighbors()
        if neighbor_counts.shape != self._cells.shape:
            raise AssertionError(
                f"neighbor counts {neighbor_counts.shape} must cover the board {self._cells.shape}"
            )

        survive_mask = self._cells & (neighbor_counts == 2)
        birth_mask = neighbor_counts == 3

        new = Board(self.width, self.height)
        new._cells[:] = survive_mask | birth_mask
        return new

    def render(self) -> str:
        """Render the board as text.

        Returns:
            One line per row, 'X' for alive and '_' for dead, each line
            terminated by a newline
        """
        lines = []
        for row in self._cells:
            lines.append("".join(ALIVE_CHAR if cell else DEAD_CHAR for cell in row))
            lines.append("\n")
        return "".join(lines)

    def __eq__(self, other: object) -> bool:
        """Check if two boards have the same dimensions and cells."""
        if not isinstance(other, Board):
            return False
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __str__(self) -> str:
        """String representation, same as render()."""
        return self.render()

    def __repr__(self) -> str:
        return f"Board(width={self.width}, height={self.height}, population={self.population})"
