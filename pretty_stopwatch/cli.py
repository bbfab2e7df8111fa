"""CLI for timing commands and scaling nanosecond counts."""

import argparse
import json
import subprocess
import sys
from dataclasses import replace
from pathlib import Path

from .config import FormatConfig
from .errors import NoMatchingUnitError
from .formatter import get_unit, scale_nanos_with_unit
from .stopwatch import Stopwatch


def format_table(rows: list[dict], columns: list[str]) -> str:
    """Format rows as a simple table."""
    if not rows:
        return "(no results)"

    widths = {col: len(col) for col in columns}
    for row in rows:
        for col in columns:
            widths[col] = max(widths[col], len(str(row.get(col, ""))))

    header = " | ".join(col.ljust(widths[col]) for col in columns)
    separator = "-+-".join("-" * widths[col] for col in columns)

    lines = [header, separator]
    for row in rows:
        lines.append(" | ".join(str(row.get(col, "")).ljust(widths[col]) for col in columns))
    return "\n".join(lines)


def output(data: list[dict], fmt: str, columns: list[str]):
    """Output data in the requested format."""
    if fmt == "json":
        print(json.dumps(data, indent=2, ensure_ascii=False))
    elif fmt == "csv":
        print(",".join(columns))
        for row in data:
            print(",".join(str(row.get(c, "")) for c in columns))
    else:  # table
        print(format_table(data, columns))


def parse_nanos(s: str) -> int | float:
    """Parse a nanosecond count; accepts ints with underscores and floats like 'inf'."""
    try:
        return int(s)
    except ValueError:
        pass
    try:
        return float(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {s!r}")


def cmd_run(args) -> int:
    """Time a command and report how long it took."""
    command = args.command
    if command and command[0] == "--":
        command = command[1:]
    if not command:
        print("Error: no command given", file=sys.stderr)
        return 2

    config = FormatConfig.load(args.config)
    completed = {}

    def _run():
        completed["exit_code"] = subprocess.run(command).returncode

    try:
        stopwatch = Stopwatch.time(_run, name=args.name)
    except FileNotFoundError:
        print(f"Error: command not found: {command[0]}", file=sys.stderr)
        return 127
    except OSError as e:
        print(f"Error: cannot run {command[0]}: {e}", file=sys.stderr)
        return 126

    exit_code = completed["exit_code"]
    if args.format == "json":
        data = {
            "name": stopwatch.name,
            "command": command,
            "exit_code": exit_code,
            "elapsed_nanos": stopwatch.elapsed_nanos(),
            "elapsed_millis": stopwatch.elapsed_millis(),
            "pretty": stopwatch.format(config),
        }
        print(json.dumps(data, indent=2, ensure_ascii=False))
    else:
        print(stopwatch.format(config))
    return exit_code


def cmd_format(args) -> int:
    """Scale raw nanosecond counts."""
    config = FormatConfig.load(args.config)
    if args.precision is not None:
        config = replace(config, precision=args.precision)

    data = []
    for nanos in args.nanos:
        try:
            unit = "ns" if 0 <= nanos < 1 else get_unit(nanos).name
        except NoMatchingUnitError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        data.append({
            "nanos": nanos,
            "unit": unit,
            "pretty": scale_nanos_with_unit(nanos, config.precision),
        })

    output(data, args.format, ["nanos", "unit", "pretty"])
    return 0


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        prog="pretty-stopwatch",
        description="Time commands and print durations in readable units"
    )
    parser.add_argument("--config", type=Path, help="YAML file with formatting options")
    subparsers = parser.add_subparsers(dest="subcommand", required=True)

    # run
    p_run = subparsers.add_parser("run", help="Time a command")
    p_run.add_argument("--name", help="Label printed with the elapsed time")
    p_run.add_argument("--format", choices=["table", "json"], default="table",
                       help="Output format")
    p_run.add_argument("command", nargs=argparse.REMAINDER, help="Command to run")
    p_run.set_defaults(func=cmd_run)

    # format
    p_format = subparsers.add_parser("format", help="Scale nanosecond counts")
    p_format.add_argument("nanos", nargs="+", type=parse_nanos,
                          help="Nanosecond counts")
    p_format.add_argument("--precision", type=int,
                          help="Decimal places to keep (default from config, else 3)")
    p_format.add_argument("--format", choices=["table", "json", "csv"],
                          default="table", help="Output format")
    p_format.set_defaults(func=cmd_format)

    args = parser.parse_args(argv)
    try:
        code = args.func(args)
    except (ValueError, TypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        code = 1
    sys.exit(code)


if __name__ == "__main__":
    main()
