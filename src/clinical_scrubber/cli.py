"""CLI interface for clinical-scrubber.

Usage:
    # Scrub a note from stdin to stdout, summary on stderr
    cat note.txt | clinical-scrubber

    # Files in and out, extra dictionary terms, keep dates
    clinical-scrubber -i note.txt -o note.scrubbed.txt \
        --config scrubber.json --skip date --skip relative-date

    # Machine-readable stats
    clinical-scrubber -i note.txt --stats-json 2> stats.json
"""

from __future__ import annotations
import argparse
import json
import logging
import sys
from pathlib import Path

from .config import ScrubberConfig, load_from_file
from .errors import ScrubberError
from .scrubber import Scrubber
from .types import Category, ScrubStats

logger = logging.getLogger(__name__)

# Summary labels, in report order
_SUMMARY_LABELS: list[tuple[str, str]] = [
    ("emails", "emails"),
    ("phones", "phones"),
    ("dates", "dates"),
    ("ssn", "ssn"),
    ("mrn", "mrn"),
    ("zip_codes", "zip codes"),
    ("persons", "persons"),
    ("facilities", "facilities"),
    ("addresses", "addresses"),
    ("coordinates", "coordinates"),
    ("relative_dates", "relative dates"),
]


def read_input(path: str | None) -> str:
    if path is None or path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def write_output(path: str | None, contents: str) -> None:
    if path is None or path == "-":
        sys.stdout.write(contents)
        return
    Path(path).write_text(contents, encoding="utf-8")


def load_scrubber_config(path: str | None) -> ScrubberConfig:
    if path is None:
        return ScrubberConfig()
    return load_from_file(path)


def format_summary(stats: ScrubStats) -> str:
    """Human-readable summary: total, then one line per non-zero category."""
    lines = [f"Redactions applied: {stats.total}"]
    width = max(len(label) for _, label in _SUMMARY_LABELS)
    for attr, label in _SUMMARY_LABELS:
        value = getattr(stats, attr)
        if value > 0:
            lines.append(f"  {label:<{width}} : {value}")
    return "\n".join(lines)


def format_stats_json(stats: ScrubStats) -> str:
    payload = stats.as_dict()
    payload["total"] = stats.total
    return json.dumps(payload, indent=2)


def report_stats(stats: ScrubStats, as_json: bool) -> None:
    out = format_stats_json(stats) if as_json else format_summary(stats)
    sys.stderr.write(out + "\n")


def _category(value: str) -> Category:
    try:
        return Category.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clinical-scrubber",
        description="Redact common PHI elements from clinical notes.",
    )
    parser.add_argument("-i", "--input", help="Input file ('-' or omitted for stdin)")
    parser.add_argument("-o", "--output", help="Output file ('-' or omitted for stdout)")
    parser.add_argument("-c", "--config", help="JSON or YAML config that augments the default dictionaries")
    parser.add_argument(
        "--skip",
        type=_category,
        action="append",
        default=[],
        metavar="CATEGORY",
        help="Category to leave unredacted; repeatable ("
        + ", ".join(c.value for c in Category) + ")",
    )
    parser.add_argument("--quiet", action="store_true", help="Suppress the redaction summary")
    parser.add_argument("--stats-json", action="store_true", help="Emit redaction stats as JSON to stderr")
    parser.add_argument(
        "--safe-harbor",
        action="store_true",
        help="Request the extended HIPAA Safe Harbor categories (URLs, IDs, licenses, IPs...)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    skip = set(args.skip)
    if args.safe_harbor:
        missing = [c.value for c in Category if not c.implemented]
        logger.warning("safe harbor categories have no detectors yet: %s", ", ".join(missing))

    try:
        scrubber = Scrubber(load_scrubber_config(args.config))
        text = read_input(args.input)
        scrubbed, stats = scrubber.scrub(text, skip)
        write_output(args.output, scrubbed)
    except (ScrubberError, OSError) as e:
        sys.stderr.write(f"clinical-scrubber: {e}\n")
        return 1

    if not args.quiet:
        report_stats(stats, args.stats_json)
    return 0


if __name__ == "__main__":
    sys.exit(main())
