"""CLI entrypoint for solving board files.

This module owns argument parsing, config-file merging and output. All
domain logic lives in the extracted modules:

- ``tile_escape.io.parser``            – board grammar
- ``tile_escape.config``               – configuration dataclasses
- ``tile_escape.simulation.engine``    – ``run_search`` frontier search
- ``tile_escape.simulation.observers`` – logging and Parquet trace observers
- ``tile_escape.viz.render``           – optional PNG rendering
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from tile_escape.config.constants import MAX_BOARDS
from tile_escape.config.types import SolverConfig
from tile_escape.domain.board import Puzzle
from tile_escape.domain.errors import BoardParseError
from tile_escape.io.format import result_payload
from tile_escape.io.parser import parse_puzzles
from tile_escape.io.paths import puzzle_id_for, search_trace_path, solution_path
from tile_escape.simulation.engine import run_search
from tile_escape.simulation.observers import (
    CompositeObserver,
    LoggingObserver,
    SearchObserver,
    TraceRecorder,
)

logger = logging.getLogger(__name__)

EXIT_SOLVED = 0
EXIT_UNSOLVED = 1

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# ---------------------------------------------------------------------------
# Config coercion helpers
# ---------------------------------------------------------------------------


def _coerce_bool(raw: object, key: str) -> bool:
    """Coerce raw value to bool with strict string-check."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{key} must be a boolean value")


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        try:
            return int(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be an integer value, got {raw!r}") from exc
    raise ValueError(f"{key} must be an integer value")


def _coerce_str(raw: object, key: str) -> str:
    """Coerce raw value to str; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a string-coercible value")
    if isinstance(raw, (str, Path, int, float)):
        return str(raw)
    raise ValueError(f"{key} must be a string-coercible value")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _get_bool(cli_val: bool | None, key: str, file_cfg: dict[str, object], default: bool) -> bool:
    return _coerce_bool(_get_val(cli_val, key, file_cfg, default), key)


def _get_int(cli_val: int | None, key: str, file_cfg: dict[str, object], default: int) -> int:
    return _coerce_int(_get_val(cli_val, key, file_cfg, default), key)


def _get_optional_int(
    cli_val: int | None, key: str, file_cfg: dict[str, object]
) -> int | None:
    """Like ``_get_int`` but a missing or null value stays ``None``."""
    raw = _get_val(cli_val, key, file_cfg, None)
    return None if raw is None else _coerce_int(raw, key)


def _get_optional_str(
    cli_val: str | None, key: str, file_cfg: dict[str, object]
) -> str | None:
    raw = _get_val(cli_val, key, file_cfg, None)
    return None if raw is None else _coerce_str(raw, key)


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="tile-escape",
        description="Search for a move sequence that drives every token to its exit",
    )
    parser.add_argument(
        "boards",
        type=Path,
        nargs="+",
        help=f"Board file(s); up to {MAX_BOARDS} boards in total across all files",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--max-generations", type=int, default=None)
    parser.add_argument("--max-turns", type=int, default=None)
    parser.add_argument("--workers", type=int, default=None)
    parser.add_argument("--precheck", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument("--out-dir", type=Path, default=None)
    parser.add_argument("--render", type=Path, default=None, help="Write a PNG of the solution")
    parser.add_argument(
        "--log-level",
        type=str,
        choices=LOG_LEVELS,
        default=None,
    )
    return parser


def _load_puzzles(paths: list[Path]) -> tuple[Puzzle, ...]:
    puzzles: list[Puzzle] = []
    for path in paths:
        puzzles.extend(parse_puzzles(Path(path).read_text()))
    if len(puzzles) > MAX_BOARDS:
        raise ValueError(f"found {len(puzzles)} boards, at most {MAX_BOARDS} are supported")
    return tuple(puzzles)


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint.

    Supports ``--config path/to/config.json``. CLI arguments override
    config-file values; config-file values override built-in defaults.
    Returns 0 when a solution was found and 1 otherwise; malformed input and
    bad arguments exit with status 2.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")
        if not isinstance(file_cfg, dict):
            parser.error(f"Config file must hold a JSON object: {args.config}")

    try:
        log_level = _coerce_str(
            _get_val(args.log_level, "log_level", file_cfg, "WARNING"), "log_level"
        )
        if log_level.upper() not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}"
            )
        config = SolverConfig(
            max_generations=_get_optional_int(args.max_generations, "max_generations", file_cfg),
            max_turns=_get_optional_int(args.max_turns, "max_turns", file_cfg),
            max_workers=_get_int(args.workers, "workers", file_cfg, 1),
            precheck_reachability=_get_bool(args.precheck, "precheck", file_cfg, True),
        )
        out_dir_raw = _get_optional_str(args.out_dir, "out_dir", file_cfg)
        render_raw = _get_optional_str(args.render, "render", file_cfg)
    except ValueError as exc:
        parser.error(str(exc))

    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        puzzles = _load_puzzles(args.boards)
    except FileNotFoundError as exc:
        parser.error(f"Board file not found: {exc.filename}")
    except OSError as exc:
        parser.error(f"Cannot read board file: {exc.filename}: {exc.strerror}")
    except BoardParseError as exc:
        parser.error(f"Malformed board: {exc}")
    except ValueError as exc:
        parser.error(str(exc))

    puzzle_id = puzzle_id_for(args.boards)
    out_dir = Path(out_dir_raw) if out_dir_raw is not None else None
    recorder = (
        TraceRecorder(search_trace_path(out_dir), puzzle_id=puzzle_id)
        if out_dir is not None
        else None
    )
    observer: SearchObserver = LoggingObserver()
    if recorder is not None:
        observer = CompositeObserver(observer, recorder)

    try:
        result = run_search(puzzles, config=config, observer=observer, puzzle_id=puzzle_id)
    finally:
        if recorder is not None:
            recorder.close()

    payload = result_payload(result)
    if out_dir is not None:
        target = solution_path(out_dir, puzzle_id)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(json.dumps(payload, ensure_ascii=False, indent=2))
        logger.info("wrote %s", target)

    if render_raw is not None:
        from tile_escape.viz.render import render_solution

        image_path = render_solution(puzzles, result.moves, Path(render_raw), title=puzzle_id)
        logger.info("rendered %s", image_path)

    print(json.dumps(payload, ensure_ascii=False, indent=2))
    return EXIT_SOLVED if result.solved else EXIT_UNSOLVED


if __name__ == "__main__":
    raise SystemExit(main())
