"""Drive the inventory application against a simulated noisy scale.

Purpose:
  - Exercise the tick loop, verification retry and alarm escalation end to end.
Inputs:
  - --profile or --config, true object counts, tick count, noise and drift.
Outputs:
  - DISPLAY/ALARM lines from the console ports, one CYCLE line per executed
    cycle and a SUMMARY line.
Example:
  - python -m autoinventory.cli.run_simulation --profile single_class_default --count 3 --ticks 5
Debug:
  - --debug also prints verification engine retry/abort diagnostics.
"""

from __future__ import annotations

import argparse
from collections import Counter

from autoinventory.app_api.factories import build_inventory_app
from autoinventory.app_api.providers.console_display import ConsoleAlarm, ConsoleDisplay
from autoinventory.app_api.providers.simulated_scale import SimulatedScale
from autoinventory.app_api.providers.stepping_clock import SteppingClock
from autoinventory.cli._debug_utils import _dbg, add_config_args, format_cycle, load_config_from_args
from autoinventory.core.engine.verification import set_verification_debug


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run verification cycles against a simulated scale")
    add_config_args(parser)
    parser.add_argument("--count", type=int, action="append", required=True, help="True objects per class (repeatable, in class order)")
    parser.add_argument("--ticks", type=int, default=5, help="Number of ticks to run")
    parser.add_argument("--tick-ms", type=int, default=None, help="Clock step per tick (default: config interval)")
    parser.add_argument("--noise-std", type=float, default=0.0, help="Gaussian noise std in scale units")
    parser.add_argument("--drift", type=float, default=0.0, help="Zero offset drift per read in scale units")
    parser.add_argument("--seed", type=int, default=1)
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    if args.ticks < 1:
        raise SystemExit("ERROR: --ticks must be >= 1")
    try:
        config = load_config_from_args(args)
        scale = SimulatedScale(
            unit_weights=config.table.unit_weights,
            counts=args.count,
            noise_std=args.noise_std,
            drift_per_read=args.drift,
            seed=args.seed,
        )
    except ValueError as exc:
        print(f"SUMMARY status=ERROR message={exc}")
        raise SystemExit(2)

    labels = config.table.labels()
    tick_ms = args.tick_ms if args.tick_ms is not None else config.interval_ms
    _dbg(args, f"profile={config.profile_id} true_load={scale.true_load} tick_ms={tick_ms}")
    if args.debug:
        set_verification_debug(lambda msg: print(f"[debug] {msg}"))

    app = build_inventory_app(
        config,
        source=scale,
        display=ConsoleDisplay(),
        alarm=ConsoleAlarm(),
        tare=scale,
        clock=SteppingClock(tick_ms),
    )

    outcomes: Counter[str] = Counter()
    try:
        for tick in range(args.ticks):
            result = app.tick()
            if result is None:
                _dbg(args, f"tick={tick} skipped")
                continue
            outcomes[result.outcome.value] += 1
            print(f"CYCLE tick={tick} {format_cycle(result, labels)}")
    finally:
        set_verification_debug(None)

    parts = " ".join(f"{k.lower()}={v}" for k, v in sorted(outcomes.items()))
    print(
        f"SUMMARY status=OK profile={config.profile_id} cycles={sum(outcomes.values())} "
        f"escalation={int(app.escalation)} tares={scale.tare_calls} {parts}".rstrip()
    )


if __name__ == "__main__":
    main()
