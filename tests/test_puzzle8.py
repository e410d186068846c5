import pytest

from eightpuzzle.domains.puzzle8 import (
    GOAL,
    PuzzleState,
    board_key,
    find_blank,
    is_goal,
    is_solvable,
    make_unsolvable_variant,
    manhattan,
    scramble,
)

ONE_MOVE = ((1, 2, 3), (4, 5, 0), (7, 8, 6))
TWO_MOVES = ((1, 2, 3), (4, 0, 5), (7, 8, 6))
BLANK_TOP_LEFT = ((0, 1, 2), (3, 4, 5), (6, 7, 8))


def cells(board):
    return [v for row in board for v in row]


def test_manhattan_goal_is_zero():
    assert manhattan(GOAL) == 0
    assert PuzzleState.start(GOAL).manhattan_distance() == 0


def test_manhattan_counts_each_tile():
    assert manhattan(ONE_MOVE) == 1
    assert manhattan(TWO_MOVES) == 2
    # every tile one column right of home except 3, 6 which wrap a row
    assert manhattan(BLANK_TOP_LEFT) == 12


@pytest.mark.parametrize("board", [GOAL, ONE_MOVE, TWO_MOVES, BLANK_TOP_LEFT])
def test_is_goal_reflexive(board):
    assert is_goal(board, board)
    assert PuzzleState.start(board).is_goal(board)


def test_is_goal_detects_difference():
    assert not is_goal(ONE_MOVE, GOAL)
    assert PuzzleState.start(GOAL).is_goal()


@pytest.mark.parametrize("board,expected", [
    (GOAL, 2),
    (BLANK_TOP_LEFT, 2),
    (ONE_MOVE, 3),
    (TWO_MOVES, 4),
])
def test_successor_count_depends_on_blank(board, expected):
    assert len(PuzzleState.start(board).generate_successors()) == expected


@pytest.mark.parametrize("board", [GOAL, ONE_MOVE, TWO_MOVES, BLANK_TOP_LEFT, scramble(40, 3)])
def test_successors_are_single_slides(board):
    parent = PuzzleState.start(board)
    for succ in parent.generate_successors():
        assert sorted(cells(succ.board)) == list(range(9))
        diff = [i for i, (a, b) in enumerate(zip(cells(board), cells(succ.board))) if a != b]
        assert len(diff) == 2
        assert find_blank(succ.board) == (succ.zero_x, succ.zero_y)
        assert abs(succ.zero_x - parent.zero_x) + abs(succ.zero_y - parent.zero_y) == 1
        assert succ.parent is parent
        assert succ.cost == parent.cost + 1
    assert parent.board == board


def test_successor_order_is_up_down_left_right():
    succs = PuzzleState.start(TWO_MOVES).generate_successors()
    assert [(s.zero_x, s.zero_y) for s in succs] == [(0, 1), (2, 1), (1, 0), (1, 2)]

    succs = PuzzleState.start(GOAL).generate_successors()
    assert [s.board for s in succs] == [ONE_MOVE, ((1, 2, 3), (4, 5, 6), (7, 0, 8))]


def test_start_state_locates_blank():
    s = PuzzleState.start([[1, 2, 3], [4, 0, 5], [7, 8, 6]])
    assert (s.zero_x, s.zero_y) == (1, 1)
    assert s.board == TWO_MOVES
    assert s.parent is None and s.cost == 0 and s.estimated_cost == 0
    assert s.path() == [s]


@pytest.mark.parametrize("bad", [
    ((1, 2, 3), (4, 5, 6)),
    ((1, 2, 3), (4, 5, 6), (7, 8)),
    ((1, 2, 3), (4, 5, 6), (7, 8, 8)),
    ((1, 2, 3), (4, 5, 6), (7, 8, 9)),
])
def test_start_rejects_malformed_boards(bad):
    with pytest.raises(ValueError):
        PuzzleState.start(bad)


def test_path_walks_parents_in_order():
    root = PuzzleState.start(GOAL)
    child = root.generate_successors()[0]
    grandchild = child.generate_successors()[0]
    assert grandchild.path() == [root, child, grandchild]


def test_board_key_is_canonical():
    assert board_key(GOAL) == (1, 2, 3, 4, 5, 6, 7, 8, 0)
    assert board_key(ONE_MOVE) != board_key(GOAL)
    assert board_key(tuple(tuple(r) for r in GOAL)) == board_key(GOAL)


def test_scramble_is_seeded_and_solvable():
    assert scramble(100, 7) == scramble(100, 7)
    for seed in range(20):
        b = scramble(100, seed)
        assert sorted(cells(b)) == list(range(9))
        assert is_solvable(b)


def test_scramble_applies_exactly_n_moves():
    assert scramble(0, 1) == GOAL
    # from the goal corner only up and left are legal
    for seed in range(10):
        assert scramble(1, seed) in (ONE_MOVE, ((1, 2, 3), (4, 5, 6), (7, 0, 8)))


def test_unsolvable_variant_flips_parity():
    u = make_unsolvable_variant(GOAL)
    assert u == ((2, 1, 3), (4, 5, 6), (7, 8, 0))
    assert is_solvable(GOAL)
    assert not is_solvable(u)
