"""Frontier search: breadth-first generation expansion over joint turns.

Each generation expands every ongoing turn in the fixed direction order and
drops failed children. Success is checked only once a whole generation
exists, so the first succeeding turn in generation order wins regardless of
whether the generation was expanded sequentially or on a thread pool.

Pruning is per lineage only: two branches may reach the same joint position
independently. The search is therefore exponential in path length before
the lineage check cuts cycles, which is acceptable for the small boards this
solver targets.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from concurrent.futures import Executor, ThreadPoolExecutor

from tile_escape.analysis.reachability import can_reach_exit
from tile_escape.config.constants import DEFAULT_PUZZLE_ID, MAX_BOARDS
from tile_escape.config.types import SolveResult, SolverConfig, TerminationReason
from tile_escape.domain.board import Puzzle
from tile_escape.domain.geometry import Direction
from tile_escape.domain.turn import Turn, TurnStatus
from tile_escape.io.parser import parse_puzzles
from tile_escape.simulation.observers import NullObserver, SearchObserver

PuzzleSource = str | Puzzle | Sequence[Puzzle]


def _surviving_children(turn: Turn) -> list[Turn]:
    """Expand *turn* in every direction, keeping non-failed children."""
    return [child for child in turn.children() if child.status is not TurnStatus.FAILED]


def _expand_generation(frontier: list[Turn], executor: Executor | None) -> list[Turn]:
    """Build the next frontier; order follows the current frontier then direction."""
    ongoing = [turn for turn in frontier if turn.is_ongoing]
    batches: Iterable[list[Turn]]
    if executor is None:
        batches = map(_surviving_children, ongoing)
    else:
        # Executor.map yields in submission order, not completion order.
        batches = executor.map(_surviving_children, ongoing)
    return [child for batch in batches for child in batch]


def _run_frontier(
    initial: Turn,
    config: SolverConfig,
    observer: SearchObserver,
) -> tuple[Turn | None, int, int, TerminationReason]:
    """Run the generation loop; return winner, generations, expanded count, reason."""
    frontier = [initial]
    generation = 0
    turns_expanded = 0
    executor = ThreadPoolExecutor(max_workers=config.max_workers) if config.parallel else None
    try:
        while True:
            if not frontier:
                return None, generation, turns_expanded, TerminationReason.EXHAUSTED
            winner = next((t for t in frontier if t.status is TurnStatus.SUCCEEDED), None)
            if winner is not None:
                return winner, generation, turns_expanded, TerminationReason.SOLVED
            if config.max_generations is not None and generation >= config.max_generations:
                return None, generation, turns_expanded, TerminationReason.GENERATION_LIMIT
            if config.max_turns is not None and turns_expanded >= config.max_turns:
                return None, generation, turns_expanded, TerminationReason.TURN_LIMIT

            turns_expanded += sum(1 for turn in frontier if turn.is_ongoing)
            frontier = _expand_generation(frontier, executor)
            generation += 1
            observer.on_generation(generation, len(frontier), turns_expanded)
    finally:
        if executor is not None:
            executor.shutdown(wait=True)


def solve(
    initial: Turn,
    config: SolverConfig | None = None,
    observer: SearchObserver | None = None,
) -> tuple[Direction, ...] | None:
    """Return the first winning move sequence reachable from *initial*, if any."""
    winner, _, _, _ = _run_frontier(initial, config or SolverConfig(), observer or NullObserver())
    return winner.history if winner is not None else None


def _as_puzzles(source: PuzzleSource) -> tuple[Puzzle, ...]:
    if isinstance(source, str):
        return parse_puzzles(source)
    if isinstance(source, Puzzle):
        return (source,)
    puzzles = tuple(source)
    if not 1 <= len(puzzles) <= MAX_BOARDS:
        raise ValueError(f"expected 1 to {MAX_BOARDS} puzzles, got {len(puzzles)}")
    return puzzles


def run_search(
    puzzles: Puzzle | Sequence[Puzzle],
    config: SolverConfig | None = None,
    observer: SearchObserver | None = None,
    puzzle_id: str = DEFAULT_PUZZLE_ID,
) -> SolveResult:
    """Search one board, or two boards in lockstep, and summarise the run.

    With ``config.precheck_reachability`` set, a puzzle where some token
    cannot reach its exit even on its own is reported as ``UNREACHABLE``
    without running the frontier search.
    """
    search_config = config or SolverConfig()
    search_observer = observer or NullObserver()
    resolved = _as_puzzles(puzzles)

    if search_config.precheck_reachability and not all(
        can_reach_exit(p.board, p.start) for p in resolved
    ):
        result = SolveResult(
            puzzle_id=puzzle_id,
            solved=False,
            moves=None,
            generations=0,
            turns_expanded=0,
            termination_reason=TerminationReason.UNREACHABLE,
        )
        search_observer.on_finish(result)
        return result

    winner, generations, turns_expanded, reason = _run_frontier(
        Turn.initial(resolved), search_config, search_observer
    )
    result = SolveResult(
        puzzle_id=puzzle_id,
        solved=winner is not None,
        moves=winner.history if winner is not None else None,
        generations=generations,
        turns_expanded=turns_expanded,
        termination_reason=reason,
    )
    search_observer.on_finish(result)
    return result


def solve_puzzle(
    source: PuzzleSource,
    config: SolverConfig | None = None,
    observer: SearchObserver | None = None,
) -> tuple[Direction, ...] | None:
    """Solve raw board text, a ``Puzzle``, or a pair of puzzles.

    Malformed text raises ``BoardParseError``; an unsolvable puzzle returns
    ``None``.
    """
    return run_search(_as_puzzles(source), config=config, observer=observer).moves
