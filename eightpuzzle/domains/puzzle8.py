from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple, List, Optional
import random

Row = Tuple[int, int, int]
Board = Tuple[Row, Row, Row]  # 3x3 grid, 0 is blank
Key = Tuple[int, ...]

N = 3
GOAL: Board = ((1, 2, 3), (4, 5, 6), (7, 8, 0))

# Longest optimal solution of any solvable 8-puzzle instance.
MAX_SOLUTION_LENGTH = 31
SCRAMBLE_MOVES = 100

# Blank moves in emission order: up, down, left, right
_MOVES: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

# Scramble draws: up, right, down, left
_SCRAMBLE_DIRS: Tuple[Tuple[int, int], ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))


def board_key(board: Board) -> Key:
    """Canonical hashable key of a board (row-major 9-tuple)."""
    return tuple(v for row in board for v in row)


def find_blank(board: Board) -> Tuple[int, int]:
    for i in range(N):
        for j in range(N):
            if board[i][j] == 0:
                return i, j
    raise ValueError("board has no blank")


def swap(board: Board, a: Tuple[int, int], b: Tuple[int, int]) -> Board:
    """Return a new board with cells a and b exchanged."""
    cells = [list(row) for row in board]
    (r1, c1), (r2, c2) = a, b
    cells[r1][c1], cells[r2][c2] = cells[r2][c2], cells[r1][c1]
    return tuple(tuple(row) for row in cells)  # type: ignore[return-value]


def validate(board) -> Board:
    """Coerce any 3x3 nested sequence to a Board, rejecting non-permutations."""
    rows = tuple(tuple(int(v) for v in row) for row in board)
    if len(rows) != N or any(len(r) != N for r in rows):
        raise ValueError(f"board must be {N}x{N}, got {board!r}")
    if sorted(v for row in rows for v in row) != list(range(N * N)):
        raise ValueError(f"board must hold each of 0..{N * N - 1} once, got {board!r}")
    return rows  # type: ignore[return-value]


def is_goal(board: Board, goal: Board = GOAL) -> bool:
    for i in range(N):
        for j in range(N):
            if board[i][j] != goal[i][j]:
                return False
    return True


def _inversions(board: Board) -> int:
    arr = [x for x in board_key(board) if x != 0]
    inv = 0
    for i in range(len(arr)):
        for j in range(i + 1, len(arr)):
            if arr[i] > arr[j]:
                inv += 1
    return inv


def is_solvable(board: Board, goal: Board = GOAL) -> bool:
    """Odd width: reachable iff inversion parity matches the goal's."""
    return (_inversions(board) % 2) == (_inversions(goal) % 2)


def scramble(moves: int = SCRAMBLE_MOVES, seed: Optional[int] = None) -> Board:
    """Apply exactly `moves` random legal blank moves to GOAL.

    Out-of-range draws are rejected and redrawn, so the walk always has the
    requested length and the result is always solvable.
    """
    rng = random.Random(seed)
    board = GOAL
    zx, zy = N - 1, N - 1
    done = 0
    while done < moves:
        dx, dy = _SCRAMBLE_DIRS[rng.randrange(4)]
        nx, ny = zx + dx, zy + dy
        if 0 <= nx < N and 0 <= ny < N:
            board = swap(board, (zx, zy), (nx, ny))
            zx, zy = nx, ny
            done += 1
    return board


def make_unsolvable_variant(board: Board) -> Board:
    """Swap the first two non-blank tiles (flips inversion parity)."""
    cells = [(i, j) for i in range(N) for j in range(N) if board[i][j] != 0]
    return swap(board, cells[0], cells[1])


# ---------------- Heuristics ----------------

def manhattan(board: Board) -> int:
    """Sum of Manhattan distances to goal positions (blank ignored)."""
    dist = 0
    for i in range(N):
        for j in range(N):
            value = board[i][j]
            if value == 0:
                continue
            gr, gc = divmod(value - 1, N)
            dist += abs(i - gr) + abs(j - gc)
    return dist


# ---------------- Search node ----------------

@dataclass(eq=False)
class PuzzleState:
    board: Board
    zero_x: int
    zero_y: int
    parent: Optional["PuzzleState"] = field(default=None, repr=False)
    cost: int = 0
    estimated_cost: int = 0

    @classmethod
    def start(cls, board) -> "PuzzleState":
        """Root state for `board`: no parent, g = f = 0, blank located by scan."""
        b = validate(board)
        zx, zy = find_blank(b)
        return cls(board=b, zero_x=zx, zero_y=zy)

    def manhattan_distance(self) -> int:
        return manhattan(self.board)

    def is_goal(self, goal: Board = GOAL) -> bool:
        return is_goal(self.board, goal)

    def generate_successors(self) -> List["PuzzleState"]:
        """Slide the blank up, down, left, right (in that order) where legal."""
        out: List[PuzzleState] = []
        for dx, dy in _MOVES:
            nx, ny = self.zero_x + dx, self.zero_y + dy
            if 0 <= nx < N and 0 <= ny < N:
                out.append(PuzzleState(
                    board=swap(self.board, (self.zero_x, self.zero_y), (nx, ny)),
                    zero_x=nx,
                    zero_y=ny,
                    parent=self,
                    cost=self.cost + 1,
                ))
        return out

    def path(self) -> List["PuzzleState"]:
        """States from the root to self."""
        path: List[PuzzleState] = []
        node: Optional[PuzzleState] = self
        while node is not None:
            path.append(node)
            node = node.parent
        path.reverse()
        return path
