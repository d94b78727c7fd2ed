# slotstats/cli.py
"""
Command-line summariser.

– Each FILE (or stdin, for none / '-') is loaded and summarised on its own
– Output is the rendered summary, JSON (--json) or one table (--table)
– Empty inputs exit 1, unreadable numbers exit 2
"""
import sys
import json
import argparse
import signal
from pathlib import Path

import pandas as pd

from .config import PRECISION, VERBOSE
from .loader import SampleParseError, load_samples, parse_samples
from .metrics import summary_dataframe
from .stats import EmptyInput, compute_summary, render_summary

EXIT_EMPTY = 1
EXIT_PARSE = 2


def _log(msg: str):
    print(f"[slotstats] {msg}", file=sys.stderr, flush=True)


def _handle_sigint(signum, frame):
    print("\nInterrupted by user. Exiting.", file=sys.stderr, flush=True)
    sys.exit(130)


def _read(source: str, column: str | None) -> list[float]:
    if source == "-":
        return parse_samples(sys.stdin.read(), source="<stdin>")
    return load_samples(Path(source), column=column)


def _non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="slotstats",
        description="Descriptive statistics for numeric samples.",
    )
    ap.add_argument(
        "files",
        nargs="*",
        default=["-"],
        help="Text or .csv files with samples ('-' = stdin, the default)",
    )
    ap.add_argument(
        "--column",
        default=None,
        help="CSV column to read (default SLOTSTATS_CSV_COLUMN or first numeric)",
    )
    ap.add_argument(
        "--precision",
        type=_non_negative_int,
        default=PRECISION,
        help=f"Decimal places in text output (default {PRECISION})",
    )
    out = ap.add_mutually_exclusive_group()
    out.add_argument("--json", action="store_true", help="Emit JSON")
    out.add_argument("--table", action="store_true", help="Emit one table for all inputs")
    ap.add_argument("-v", "--verbose", action="store_true", help="Diagnostics on stderr")
    return ap


def main(argv=None) -> int:
    signal.signal(signal.SIGINT, _handle_sigint)

    args = build_parser().parse_args(argv)
    verbose = VERBOSE or args.verbose

    loaded: dict[str, list[float]] = {}
    for source in args.files:
        name = "<stdin>" if source == "-" else source
        try:
            samples = _read(source, args.column)
        except SampleParseError as exc:
            _log(str(exc))
            return EXIT_PARSE
        except OSError as exc:
            _log(f"{name}: {exc.strerror or exc}")
            return EXIT_PARSE
        if verbose:
            _log(f"{name}: {len(samples)} samples")
        loaded[name] = samples

    try:
        if args.table:
            df = summary_dataframe(loaded)
            with pd.option_context("display.float_format", f"{{:.{args.precision}f}}".format):
                print(df.to_string())
            return 0

        summaries = {name: compute_summary(s) for name, s in loaded.items()}
    except EmptyInput:
        empty = next(name for name, s in loaded.items() if not s)
        _log(f"{empty}: no samples")
        return EXIT_EMPTY

    if args.json:
        payload = {name: s.as_dict() for name, s in summaries.items()}
        print(json.dumps(payload, indent=2))
        return 0

    blocks = []
    for name, summary in summaries.items():
        text = render_summary(summary, precision=args.precision)
        if len(summaries) > 1:
            text = f"== {name}\n{text}"
        blocks.append(text)
    print("\n\n".join(blocks))
    return 0


if __name__ == "__main__":
    sys.exit(main())
