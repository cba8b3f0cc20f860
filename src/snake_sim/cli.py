"""Command-line driver for headless snake simulation."""

from __future__ import annotations

import argparse
import logging
import sys
import time

import numpy as np

logger = logging.getLogger(__name__)

_MOVE_NAMES = ("up", "down", "left", "right", "none")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snake-sim",
        description="Headless snake simulation and benchmarking tools.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- run ---
    run_p = sub.add_parser("run", help="Run a headless session.")
    run_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (other flags override it).",
    )
    run_p.add_argument("--ticks", type=int, default=50)
    run_p.add_argument("--width", type=int, default=None)
    run_p.add_argument("--height", type=int, default=None)
    run_p.add_argument("--max-food", type=int, default=None)
    run_p.add_argument("--food-spawn-every", type=int, default=None)
    run_p.add_argument("--tick-interval", type=float, default=None)
    run_p.add_argument("--seed", type=int, default=None)
    run_p.add_argument(
        "--moves", type=str, default=None,
        help=(
            "Comma-separated scripted input, one entry per tick "
            f"({', '.join(_MOVE_NAMES)}). Random input when omitted."
        ),
    )
    run_p.add_argument(
        "--render", action="store_true",
        help="Print the board after every tick.",
    )
    run_p.add_argument(
        "--realtime", action="store_true",
        help="Sleep one tick interval between ticks.",
    )

    # --- benchmark ---
    bench_p = sub.add_parser(
        "benchmark", help="Measure simulation throughput.",
    )
    bench_p.add_argument("--ticks", type=int, default=10_000)
    bench_p.add_argument("--width", type=int, default=10)
    bench_p.add_argument("--height", type=int, default=10)
    bench_p.add_argument("--seed", type=int, default=42)

    return parser


def _parse_moves(raw: str) -> list[list[str]]:
    """Turn ``"up,,left"`` into per-tick pressed-key lists."""
    moves: list[list[str]] = []
    for token in raw.split(","):
        name = token.strip().lower() or "none"
        if name not in _MOVE_NAMES:
            raise ValueError(f"Unknown move '{token}'.")
        moves.append([] if name == "none" else [name])
    return moves


def _run_session(args: argparse.Namespace) -> int:
    from snake_sim.config import SimulationConfig
    from snake_sim.engine import GameEngine
    from snake_sim.loop import GameLoop
    from snake_sim.render import render_text

    config = (
        SimulationConfig.load(args.config)
        if args.config else SimulationConfig()
    )

    overrides: dict = {}
    flag_map = {
        "width": "width",
        "height": "height",
        "max_food": "max_food",
        "food_spawn_every": "food_spawn_every",
        "tick_interval": "tick_interval",
        "seed": "seed",
    }
    for cli_name, cfg_name in flag_map.items():
        val = getattr(args, cli_name, None)
        if val is not None:
            overrides[cfg_name] = val

    if overrides:
        d = config.to_dict()
        d.update(overrides)
        d["spawn"] = tuple(d["spawn"])
        config = SimulationConfig(**d)

    scripted = _parse_moves(args.moves) if args.moves else None
    rng = np.random.default_rng(config.seed)
    keys = ("up", "down", "left", "right")

    engine = GameEngine(config)
    loop = GameLoop(engine)
    best_length = engine.snapshot().length

    for i in range(args.ticks):
        if scripted is not None:
            pressed = scripted[i] if i < len(scripted) else []
        else:
            pressed = [keys[int(rng.integers(len(keys)))]]

        frame = loop.frame(loop.tick_interval, pressed)
        assert frame is not None  # noqa: S101
        best_length = max(best_length, frame.length)

        if args.render:
            print(f"tick {frame.tick} length {frame.length}")  # noqa: T201
            print(render_text(frame, engine.grid))  # noqa: T201
            print()  # noqa: T201
        if args.realtime:
            time.sleep(loop.tick_interval)

    print(  # noqa: T201
        f"Ran {args.ticks} ticks: {engine.state.resets} resets, "
        f"final length {loop.latest_frame.length}, best length {best_length}"
    )
    return 0


def _run_benchmark(args: argparse.Namespace) -> int:
    from snake_sim.benchmark import benchmark_throughput

    result = benchmark_throughput(
        num_ticks=args.ticks,
        width=args.width,
        height=args.height,
        seed=args.seed,
    )
    print(result.summary())  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``snake-sim`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "run": _run_session,
        "benchmark": _run_benchmark,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
