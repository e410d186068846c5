#!/usr/bin/env python3
from eightpuzzle.domains.puzzle8 import GOAL, SCRAMBLE_MOVES, PuzzleState, scramble
from eightpuzzle.experiments.display import print_board, print_outcome
from eightpuzzle.search.bfs import bfs
from eightpuzzle.search.rbfs import rbfs


def main():
    board = scramble(SCRAMBLE_MOVES)

    print("Initial state:")
    print_board(board)

    # each solver gets its own root so neither sees the other's f-values
    print("Solution using BFS:")
    print_outcome("BFS", bfs(PuzzleState.start(board), GOAL))

    print("\nSolution using RBFS:")
    print_outcome("RBFS", rbfs(PuzzleState.start(board), GOAL))

if __name__ == "__main__":
    main()
