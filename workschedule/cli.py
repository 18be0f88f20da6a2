from __future__ import annotations

import argparse
import logging

from .config import load_config
from .data_io import read_restrictions, read_schedule_json, read_template, read_workers, write_schedule_json
from .domain.models import RestrictionMaps
from .engine.orchestrator import build_week_schedule
from .services.restrictions import merge_restrictions, rest_day_exclusions
from .services.timeplan import is_valid_time_range
from .validator import summarize_schedule, validate_schedule

EXIT_UNFILLED = 2


def _load_inputs(args: argparse.Namespace):
    cfg = load_config(args.config)
    workers = read_workers(args.workers)
    template = read_template(args.template)
    if args.restrictions:
        cannot_work, can_only_work = read_restrictions(args.restrictions)
    else:
        cannot_work, can_only_work = {}, {}
    return cfg, workers, template, cannot_work, can_only_work


def _cmd_generate(args: argparse.Namespace) -> None:
    try:
        cfg, workers, template, cannot_work, can_only_work = _load_inputs(args)
    except (OSError, ValueError) as e:
        raise SystemExit(f"[ERROR] Could not load inputs: {e}")

    for row in template.shift_rows:
        if not is_valid_time_range(row.time_range_text):
            print(
                f"[WARN] Shift '{row.shift_name}' has unparseable hours "
                f"'{row.time_range_text}', treated as {cfg.default_shift.start}-{cfg.default_shift.end}"
            )

    if not args.no_rest_day_blocks:
        auto_blocks = rest_day_exclusions(workers, template, cfg)
        if auto_blocks:
            print(f"[INFO] Added {len(auto_blocks)} rest-day exclusions")
        cannot_work = merge_restrictions(cannot_work, auto_blocks)

    restrictions = RestrictionMaps(cannot_work=cannot_work, can_only_work=can_only_work)
    print(f"[INFO] Scheduling {len(workers)} workers over {len(template.slot_keys())} slots")
    result = build_week_schedule(workers, restrictions, template, cfg)
    try:
        validate_schedule(result.schedule, result.unfilled, workers, restrictions, template, cfg)
    except ValueError as e:
        raise SystemExit(f"[ERROR] Generated schedule failed validation: {e}")

    if args.out:
        write_schedule_json(args.out, result)
        print("[OK] Schedule written to", args.out)
    print(summarize_schedule(result.schedule, result.unfilled, template, cfg))
    print()
    print(result.message)

    if result.unfilled and args.strict:
        raise SystemExit(EXIT_UNFILLED)


def _cmd_validate(args: argparse.Namespace) -> None:
    try:
        cfg, workers, template, cannot_work, can_only_work = _load_inputs(args)
        result = read_schedule_json(args.schedule)
    except (OSError, ValueError) as e:
        raise SystemExit(f"[ERROR] Could not load inputs: {e}")
    restrictions = RestrictionMaps(cannot_work=cannot_work, can_only_work=can_only_work)
    try:
        validate_schedule(result.schedule, result.unfilled, workers, restrictions, template, cfg)
    except ValueError as e:
        raise SystemExit(f"[ERROR] Validation failed: {e}")
    print("[OK] Validation passed.")


def _cmd_summarize(args: argparse.Namespace) -> None:
    cfg = load_config(args.config)
    template = read_template(args.template)
    result = read_schedule_json(args.schedule)
    print(summarize_schedule(result.schedule, result.unfilled, template, cfg))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="workschedule")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    g = sub.add_parser("generate", help="Generate a weekly schedule")
    g.add_argument("--workers", required=True)
    g.add_argument("--template", required=True)
    g.add_argument("--restrictions")
    g.add_argument("--config")
    g.add_argument("--out")
    g.add_argument("--strict", action="store_true", help="Exit with status 2 if any slot is unfilled")
    g.add_argument("--no-rest-day-blocks", action="store_true", help="Do not derive rest-day exclusions")
    g.set_defaults(func=_cmd_generate)

    v = sub.add_parser("validate", help="Validate a saved schedule JSON")
    v.add_argument("--workers", required=True)
    v.add_argument("--template", required=True)
    v.add_argument("--schedule", required=True)
    v.add_argument("--restrictions")
    v.add_argument("--config")
    v.set_defaults(func=_cmd_validate)

    s = sub.add_parser("summarize", help="Summarize a saved schedule JSON")
    s.add_argument("--template", required=True)
    s.add_argument("--schedule", required=True)
    s.add_argument("--config")
    s.set_defaults(func=_cmd_summarize)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    args.func(args)


if __name__ == "__main__":
    main()
