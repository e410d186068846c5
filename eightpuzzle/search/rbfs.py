from __future__ import annotations
from typing import Callable, List, Optional, Tuple
from time import perf_counter
import math

from eightpuzzle.domains.puzzle8 import GOAL, MAX_SOLUTION_LENGTH, Board, PuzzleState, is_solvable
from eightpuzzle.heuristics.manhattan import manhattan

Cost = float  # int f-values, or math.inf for "unbounded / dead end"


def rbfs(
    start: PuzzleState,
    goal: Board = GOAL,
    hfun: Callable[[PuzzleState], int] = manhattan,
    max_cost: Optional[int] = MAX_SOLUTION_LENGTH,
):
    """
    Recursive Best-First Search with backed-up f-values.

    - each successor gets f = max(g + h, f(parent)) once per expansion
    - the best successor is explored with limit min(f_limit, second-best f)
    - on failure its f is raised to the value reported by the subtree
    - successors with f > max_cost are never expanded (None disables the cut)
    - boards of the wrong parity are reported "unsolvable" without searching

    Memory is the recursion stack plus one successor list per level; there is
    no visited set, so states may be re-expanded.
    """
    t0 = perf_counter()

    expanded = 0
    generated = 0
    max_depth = 0

    def result(node: Optional[PuzzleState], f_final: Cost, termination: str):
        return {
            "path": node.path() if node is not None else None,
            "g": node.cost if node is not None else None,
            "expanded": expanded,
            "generated": generated,
            "peak_recursion": max_depth,
            "f_final": f_final,
            "time": perf_counter() - t0,
            "algorithm": "RBFS",
            "termination": termination,
        }

    if not is_solvable(start.board, goal):
        return result(None, math.inf, "unsolvable")

    def search(node: PuzzleState, f_limit: Cost, depth: int) -> Tuple[Optional[PuzzleState], Cost]:
        """
        Returns (goal_node, 0) on success, otherwise (None, backed_up_f)
        where backed_up_f is the lowest f that exceeded f_limit below node.
        """
        nonlocal expanded, generated, max_depth
        max_depth = max(max_depth, depth)

        if node.is_goal(goal):
            return node, 0

        expanded += 1
        successors: List[PuzzleState] = node.generate_successors()
        generated += len(successors)
        if not successors:
            return None, math.inf

        for succ in successors:
            f = max(succ.cost + hfun(succ), node.estimated_cost)
            if max_cost is not None and f > max_cost:
                f = math.inf
            succ.estimated_cost = f

        while True:
            # stable: equal f keeps up/down/left/right order
            successors.sort(key=lambda s: s.estimated_cost)
            best = successors[0]
            if best.estimated_cost > f_limit or best.estimated_cost == math.inf:
                return None, best.estimated_cost

            alternative = successors[1].estimated_cost if len(successors) > 1 else math.inf

            found, backed_up = search(best, min(f_limit, alternative), depth + 1)
            if found is not None:
                return found, backed_up

            best.estimated_cost = backed_up

    found, f_final = search(start, math.inf, 0)
    if found is None:
        return result(None, f_final, "exhausted")
    return result(found, f_final, "ok")
