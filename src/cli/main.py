"""
Interactive redemption desk - looks up staff passes and records one
redemption per team.

Usage:
    redemption-desk <mapping_csv_file>
    python -m src.cli.main <mapping_csv_file>
"""

import argparse
import sys

from src.core import config
from src.core.desk import ALREADY_REDEEMED, NOT_FOUND, RedemptionDesk
from src.core.errors import MappingLoadError
from src.core.mapping import build_lookup, load_mapping_report
from src.core.redemption import RedemptionGuard
from util.logging import logger

PROG = "redemption-desk"
PROMPT = "Enter staff pass ID (or type '{exit}' to quit): "


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Look up a staff pass and redeem the team's gift once",
    )
    parser.add_argument(
        "mapping_file",
        nargs="?",
        help="CSV file with staff_pass_id,team_name,created_at columns",
    )
    parser.add_argument(
        "--delimiter",
        default=None,
        help="CSV field delimiter (default: CSV_DELIMITER or ',')",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {config.VERSION}",
    )
    return parser


def read_staff_id(prompt: str) -> str:
    """Prompt for a staff pass id and return the first token of the line."""
    line = input(prompt)
    tokens = line.split()
    return tokens[0] if tokens else ""


def format_outcome(outcome) -> list:
    """Render a DeskOutcome as console lines."""
    if outcome.status == NOT_FOUND:
        return ["Staff pass ID not found."]

    lines = [f"Staff pass belongs to team: {outcome.team_name}"]
    if outcome.status == ALREADY_REDEEMED:
        lines.append("Team has already redeemed their gift. Please send the representative away.")
    else:
        lines.append(
            f"Redemption successful for team {outcome.redemption.team_name} "
            f"at timestamp {outcome.redemption.redeemed_at}"
        )
    return lines


def run_loop(desk: RedemptionDesk, exit_command: str = "exit") -> None:
    """Prompt for staff pass ids until the exit command or end of input."""
    prompt = PROMPT.format(exit=exit_command)
    while True:
        try:
            staff_id = read_staff_id(prompt)
        except (EOFError, KeyboardInterrupt):
            print()
            staff_id = exit_command

        if staff_id == exit_command:
            print("Exiting the program.")
            break

        outcome = desk.process(staff_id)
        for line in format_outcome(outcome):
            print(line)


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.mapping_file:
        print(f"Usage: {PROG} <mapping_csv_file>")
        return 0

    issues = config.validate_config()
    if args.delimiter is not None:
        issues += config.delimiter_issues(args.delimiter, name="--delimiter")
    if issues:
        for issue in issues:
            print(f"Configuration error: {issue}")
        return 1

    logger.set_level(config.get_log_level())
    delimiter = args.delimiter if args.delimiter is not None else config.get_csv_delimiter()

    try:
        report = load_mapping_report(args.mapping_file, delimiter=delimiter)
    except MappingLoadError as e:
        logger.log_mapping_load(args.mapping_file, 0, status="failed")
        print(f"Error loading mapping file: {e}")
        return 1

    logger.log_mapping_load(
        report.source,
        report.loaded_rows,
        report.skipped_rows if config.REPORT_SKIPPED_ROWS else 0,
    )

    desk = RedemptionDesk(build_lookup(report.records), RedemptionGuard())
    run_loop(desk, config.get_exit_command())
    return 0


if __name__ == "__main__":
    sys.exit(main())
