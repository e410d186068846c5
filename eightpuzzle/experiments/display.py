from typing import List, Sequence

from eightpuzzle.domains.puzzle8 import Board, PuzzleState


def format_board(board: Board) -> str:
    return "\n".join(" ".join(str(v) for v in row) for row in board)


def print_board(board: Board):
    print(format_board(board))
    print()


def print_path(path: Sequence[PuzzleState]):
    for state in path:
        print_board(state.board)


def print_outcome(name: str, res: dict):
    """Report one solver result; callers pass the dict returned by bfs/rbfs."""
    path: List[PuzzleState] = res.get("path")
    if path is None:
        print(f"{name}: no solution found.")
        return
    print(f"{name}: solution found! ({res['g']} moves)")
    print_path(path)
