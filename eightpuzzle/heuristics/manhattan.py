from eightpuzzle.domains.puzzle8 import PuzzleState, manhattan as _manhattan


def manhattan(state: PuzzleState) -> int:
    """h(state) for RBFS: Manhattan distance of the state's board."""
    return _manhattan(state.board)
