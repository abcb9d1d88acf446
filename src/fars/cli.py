"""
FARS Unified Command-Line Interface

Exposes five subcommands over the FARS accident files:

    fars filename  YEAR [YEAR ...]                 Print canonical file names
    fars years     [--data-dir DIR]                List years with a data file
    fars summarize --years Y [Y ...] [...]         Month x year accident counts
    fars map       --state N --year Y [...]        Accident map for one state
    fars report    --years Y [Y ...] --output-dir  Summary CSV + state maps

Global flags (before the subcommand):

    --verbose    DEBUG logging
    --log-json   one JSON object per log line on stderr

The package must be installed (``pip install -e .``) for the ``fars`` entry
point to be available.

Package Location: src/fars/cli.py
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Default directory for data files is the working directory, resolved at
# call time so the module can be imported from anywhere.
_DATA_DIR_HELP = "Directory holding accident_<year>.csv.bz2 files (default: cwd)."


# ===========================================================================
# Shared helpers
# ===========================================================================

def _die(message: str) -> None:
    """Print an error message and exit with status 1.

    Args:
        message: Human-readable error text.
    """
    print(f"\n❌  Error: {message}", file=sys.stderr)
    sys.exit(1)


def _data_dir(args: argparse.Namespace) -> Optional[Path]:
    """Return ``--data-dir`` as a Path, exiting if it is not a directory."""
    if args.data_dir is None:
        return None
    data_dir = Path(args.data_dir)
    if not data_dir.is_dir():
        _die(f"Data directory not found: {data_dir}")
    return data_dir


# ===========================================================================
# Subcommand handlers
# ===========================================================================

def handle_filename(args: argparse.Namespace) -> None:
    """Print the canonical file name for each requested year.

    Args:
        args: Parsed CLI arguments.  Required field: ``args.years``.
    """
    from fars.analysis import make_filename

    for year in args.years:
        try:
            print(make_filename(year))
        except ValueError as exc:
            _die(str(exc))


def handle_years(args: argparse.Namespace) -> None:
    """List the years that have a data file in the data directory.

    Args:
        args: Parsed CLI arguments.
    """
    from fars.data import available_years

    data_dir = _data_dir(args)
    years = available_years(data_dir)
    if not years:
        print(f"No accident files found in {data_dir or Path.cwd()}")
        return
    for year in years:
        print(year)


def handle_summarize(args: argparse.Namespace) -> None:
    """Print or save the month x year accident count table.

    Years that fail to load are reported as warnings on stderr and left
    out of the table; they do not change the exit status.

    Args:
        args: Parsed CLI arguments.
    """
    from fars.data import fars_summarize_years

    data_dir = _data_dir(args)
    fill_value = 0 if args.fill_zero else None
    summary = fars_summarize_years(args.years, data_dir, fill_value=fill_value)

    if summary.empty:
        print("⚠️   No data loaded for the requested years.")
        return

    if args.output:
        out_path = Path(args.output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        summary.to_csv(out_path, index=False)
        print(f"✅  Summary saved → {out_path}")
    else:
        print(summary.to_string(index=False))


def handle_map(args: argparse.Namespace) -> None:
    """Render the accident map for one state and year to HTML.

    Args:
        args: Parsed CLI arguments.
    """
    from fars.analysis import InvalidStateError, as_int
    from fars.data import FarsParseError
    from fars.reports import fars_map_state

    data_dir = _data_dir(args)
    try:
        output = args.output or f"State_{as_int(args.state):02d}_{as_int(args.year)}.html"
        fig = fars_map_state(
            args.state,
            args.year,
            data_dir=data_dir,
            output_path=output,
            show=args.show,
        )
    except FileNotFoundError as exc:
        _die(f"{exc.strerror}")
    except (InvalidStateError, FarsParseError, ValueError) as exc:
        _die(str(exc))

    if fig is None:
        print(f"⏭️   No accidents to plot for state {args.state} in {args.year}.")
    else:
        print(f"✅  Map saved → {output}")


def handle_report(args: argparse.Namespace) -> None:
    """Write the summary CSV and per-state HTML maps for several years.

    Args:
        args: Parsed CLI arguments.
    """
    from fars.reports import ReportGenerator

    data_dir = _data_dir(args)
    gen = ReportGenerator(data_dir=data_dir, output_dir=Path(args.output_dir))

    print(f"\n📊  Generating FARS reports for {', '.join(args.years)}")
    print(f"    Output: {gen.output_dir}")

    written = gen.generate(args.years, states=args.states)

    print(f"\n✅  Done.  {len(written)} files written.")


# ===========================================================================
# Argument parser construction
# ===========================================================================

def _build_parser() -> argparse.ArgumentParser:
    """Construct and return the top-level argument parser.

    Returns:
        Configured ``ArgumentParser`` with all subcommands attached.
    """
    parser = argparse.ArgumentParser(
        prog="fars",
        description=(
            "FARS – Fatality Analysis Reporting System toolkit\n"
            "Load yearly accident files, count accidents by month, map states."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=False,
        help="Enable DEBUG logging.",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        default=False,
        help="Emit log records as single-line JSON objects.",
    )
    subs = parser.add_subparsers(dest="command", metavar="<command>")
    subs.required = True

    # ------------------------------------------------------------------
    # filename
    # ------------------------------------------------------------------
    p_name = subs.add_parser(
        "filename",
        help="Print the canonical accident file name for one or more years.",
    )
    p_name.add_argument("years", nargs="+", metavar="YEAR")
    p_name.set_defaults(func=handle_filename)

    # ------------------------------------------------------------------
    # years
    # ------------------------------------------------------------------
    p_years = subs.add_parser(
        "years",
        help="List the years that have an accident file.",
    )
    p_years.add_argument("--data-dir", default=None, metavar="DIR", help=_DATA_DIR_HELP)
    p_years.set_defaults(func=handle_years)

    # ------------------------------------------------------------------
    # summarize
    # ------------------------------------------------------------------
    p_sum = subs.add_parser(
        "summarize",
        help="Count accidents per month for one or more years.",
        description=(
            "Count accidents per month and year.\n\n"
            "Years whose file is missing or unreadable are skipped with a\n"
            "warning; the remaining years are still summarized."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p_sum.add_argument(
        "--years",
        required=True,
        nargs="+",
        metavar="YYYY",
        help="Years to summarize, e.g. --years 2013 2014 2015",
    )
    p_sum.add_argument("--data-dir", default=None, metavar="DIR", help=_DATA_DIR_HELP)
    p_sum.add_argument(
        "--fill-zero",
        action="store_true",
        default=False,
        help="Show 0 instead of a blank for months without accidents.",
    )
    p_sum.add_argument(
        "--output",
        default=None,
        metavar="CSV",
        help="Write the table to this CSV file instead of printing it.",
    )
    p_sum.set_defaults(func=handle_summarize)

    # ------------------------------------------------------------------
    # map
    # ------------------------------------------------------------------
    p_map = subs.add_parser(
        "map",
        help="Plot accident locations for one state and year.",
    )
    p_map.add_argument("--state", required=True, metavar="N", help="State number.")
    p_map.add_argument("--year", required=True, metavar="YYYY", help="Data year.")
    p_map.add_argument("--data-dir", default=None, metavar="DIR", help=_DATA_DIR_HELP)
    p_map.add_argument(
        "--output",
        default=None,
        metavar="HTML",
        help="Output HTML file (default: State_<NN>_<year>.html).",
    )
    p_map.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Also open the map in the default browser.",
    )
    p_map.set_defaults(func=handle_map)

    # ------------------------------------------------------------------
    # report
    # ------------------------------------------------------------------
    p_rep = subs.add_parser(
        "report",
        help="Write the summary CSV and per-state maps for several years.",
        description=(
            "Write monthly_counts.csv and one HTML map per state and year.\n\n"
            "Output files are written to:\n"
            "  <output-dir>/monthly_counts.csv\n"
            "  <output-dir>/<year>/State_<NN>.html"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p_rep.add_argument(
        "--years",
        required=True,
        nargs="+",
        metavar="YYYY",
        help="Years to report on.",
    )
    p_rep.add_argument(
        "--states",
        nargs="+",
        default=None,
        metavar="N",
        help="State numbers to map (default: every state in each file).",
    )
    p_rep.add_argument(
        "--output-dir",
        required=True,
        metavar="DIR",
        help="Root directory for report output.",
    )
    p_rep.add_argument("--data-dir", default=None, metavar="DIR", help=_DATA_DIR_HELP)
    p_rep.set_defaults(func=handle_report)

    return parser


# ===========================================================================
# Entry point
# ===========================================================================

def main(argv: Optional[List[str]] = None) -> None:
    """Parse CLI arguments and dispatch to the appropriate handler.

    This function is registered as the ``fars`` console script entry point
    in ``pyproject.toml``.

    Args:
        argv: Argument list; defaults to ``sys.argv[1:]``.
    """
    from fars.utils.logging import configure_logging

    parser = _build_parser()
    args   = parser.parse_args(argv)

    configure_logging(
        level=logging.DEBUG if args.verbose else logging.INFO,
        json_format=args.log_json,
    )
    args.func(args)


if __name__ == "__main__":
    main()
