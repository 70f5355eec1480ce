"""Resolve one or more raw readings against a deployment profile.

Purpose:
  - Show which count(s) a reading maps to without running the verification cycle.
Inputs:
  - --profile or --config, and one --reading per sample.
Outputs:
  - One RESULT line per reading and a SUMMARY line on stdout.
Example:
  - python -m autoinventory.cli.resolve_readings --profile dual_class_default --reading 155
"""

from __future__ import annotations

import argparse

from autoinventory.cli._debug_utils import _dbg, add_config_args, format_counts, load_config_from_args
from autoinventory.core.resolvers.factory import build_resolver


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Resolve raw scale readings to object counts")
    add_config_args(parser)
    parser.add_argument("--reading", type=int, action="append", required=True, help="Raw reading (repeatable)")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    try:
        config = load_config_from_args(args)
    except ValueError as exc:
        print(f"SUMMARY status=ERROR message={exc}")
        raise SystemExit(2)

    table = config.table
    labels = table.labels()
    _dbg(
        args,
        f"profile={config.profile_id} resolver={table.resolver} "
        f"unit_weights={list(table.unit_weights)} tolerance={table.tolerance}",
    )
    resolver = build_resolver(table)

    resolved = 0
    unresolved = 0
    negative = 0
    for reading in args.reading:
        if reading < 0:
            negative += 1
            print(f"RESULT reading={reading} status=NEGATIVE_READING")
            continue
        result = resolver(reading)
        if result.resolved:
            resolved += 1
            print(
                f"RESULT reading={reading} status=RESOLVED counts={format_counts(result.counts, labels)} "
                f"total={result.total} deviation={result.deviation}"
            )
        else:
            unresolved += 1
            print(f"RESULT reading={reading} status=UNRESOLVED")

    print(
        f"SUMMARY status=OK profile={config.profile_id} resolved={resolved} "
        f"unresolved={unresolved} negative={negative}"
    )


if __name__ == "__main__":
    main()
