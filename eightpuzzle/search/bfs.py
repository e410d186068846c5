from collections import deque
from time import perf_counter
from typing import Deque, Set

from eightpuzzle.domains.puzzle8 import GOAL, Board, Key, PuzzleState, board_key


def bfs(start: PuzzleState, goal: Board = GOAL):
    """Level-order search with a visited set of board keys.

    The first goal dequeued is a minimum-move solution. Returns a result dict;
    "path" is None when the frontier empties without reaching the goal.
    """
    t0 = perf_counter()
    q: Deque[PuzzleState] = deque([start])
    visited: Set[Key] = {board_key(start.board)}
    expanded = generated = 0
    peak = 1
    while q:
        peak = max(peak, len(q))
        current = q.popleft()
        if current.is_goal(goal):
            return {"path": current.path(), "g": current.cost, "expanded": expanded, "generated": generated,
                    "peak_frontier": peak, "visited": len(visited),
                    "time": perf_counter()-t0, "algorithm": "BFS", "termination": "ok"}
        expanded += 1
        for nxt in current.generate_successors():
            generated += 1
            key = board_key(nxt.board)
            if key in visited: continue
            visited.add(key); q.append(nxt)
    return {"path": None, "g": None, "expanded": expanded, "generated": generated,
            "peak_frontier": peak, "visited": len(visited),
            "time": perf_counter()-t0, "algorithm": "BFS", "termination": "exhausted"}
