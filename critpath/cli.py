import argparse
import sys

from critpath import config
from critpath.errors import ScheduleError
from critpath.export import format_table, write_export
from critpath.input_parser import load_file, parse_df, sample_records
from critpath.logger import setup_logging
from critpath.schedule import compute_schedule


def build_parser():
    ap = argparse.ArgumentParser(prog='critpath', description='Critical path schedule for a task table')
    ap.add_argument('file', nargs='?', help='csv, json or excel task table (default: built-in demo project)')
    ap.add_argument('--export', metavar='PATH', help='also write the schedule to PATH (.json or .dot)')
    ap.add_argument('--on-duplicate', choices=config.DUPLICATE_POLICIES, default=config.ON_DUPLICATE)
    ap.add_argument('--delimiters', default=config.DELIMITERS, help='characters separating predecessor ids')
    ap.add_argument('--chain', action='store_true', help='also print one connected critical chain')
    ap.add_argument('--log-level', default=config.LOG_LEVEL)
    return ap


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    try:
        records = parse_df(load_file(args.file)) if args.file else sample_records()
        schedule = compute_schedule(records, delimiters=args.delimiters, on_duplicate=args.on_duplicate)
        print(format_table(schedule))
        if args.chain:
            print(f"Critical chain: {' -> '.join(schedule.critical_chain)}")
        if args.export:
            write_export(schedule, args.export)
    except (ScheduleError, ValueError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
