#!/usr/bin/env python3
"""Auth Log Analyzer - Entry point"""

import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from authlog import VERSION, LogAnalyzer, build_report, print_report, render_json
from authlog.patterns import DEFAULT_ALERT_THRESHOLD, DEFAULT_OUTPUT_FORMAT, DEFAULT_TOP

console = Console()
err_console = Console(stderr=True)

EPILOG = """\
examples:
  %(prog)s sample-logs/auth_sample.log
  %(prog)s sample-logs/auth_sample.log --alert 3
  %(prog)s sample-logs/auth_sample.log --json --alert 2
  %(prog)s sample-logs/auth_sample.log --json --alert 2 --out report.json
"""


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be > 0, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Auth Log Analyzer - SSH login and sudo failure summary",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument("logfile", help="Auth log to analyze (e.g. /var/log/auth.log)")
    parser.add_argument("-j", "--json", dest="output_format", action="store_const", const="json",
                        default=DEFAULT_OUTPUT_FORMAT, help="Machine-readable JSON output")
    parser.add_argument("--pretty", dest="output_format", action="store_const", const="pretty",
                        help="Human-readable output (default)")
    parser.add_argument("-t", "--top", type=positive_int, default=DEFAULT_TOP, metavar="N",
                        help=f"Entries per ranking (default: {DEFAULT_TOP})")
    parser.add_argument("-a", "--alert", type=positive_int, default=DEFAULT_ALERT_THRESHOLD, metavar="N",
                        help="Alert on keys seen at least N times (default: off)")
    parser.add_argument("-o", "--out", metavar="PATH", help="Write the report to PATH instead of stdout")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    parser.add_argument("--version", action="version", version=f"AuthLogAnalyzer v{VERSION}")
    return parser


def setup_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True
    )


def write_report(report, output_format: str, source: str, out_path=None):
    if out_path is None:
        if output_format == 'json':
            print(render_json(report))
        else:
            print_report(report, console, source=source)
        return

    with open(out_path, 'w', encoding='utf-8') as f:
        if output_format == 'json':
            f.write(render_json(report) + "\n")
        else:
            print_report(report, Console(file=f, width=100), source=source)
    err_console.print(f"[green]Report saved to:[/] {escape(out_path)}")


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    show_progress = args.output_format == 'pretty' and err_console.is_terminal
    analyzer = LogAnalyzer(console=err_console if show_progress else None)

    try:
        findings = analyzer.analyze_file(args.logfile)
        report = build_report(findings, top=args.top, alert_threshold=args.alert)
        write_report(report, args.output_format, args.logfile, args.out)
    except OSError as e:
        err_console.print(f"[red]Error:[/] {escape(str(e))}")
        sys.exit(1)


if __name__ == "__main__":
    main()
